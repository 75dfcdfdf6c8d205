"""
User models - directory accounts, organizations and transient contributors.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Organization(BaseModel):
    """Tenant an account or theme belongs to."""
    id: str
    name: str = ""


class User(BaseModel):
    """An account as returned by the user directory."""
    username: str = Field(description="Login name")
    name: Optional[str] = Field(default=None, description="Display name")
    provider: Optional[str] = Field(default=None, description="Tag of the backing user provider")
    organization: Optional[str] = None
    email: Optional[str] = None

    @property
    def label(self) -> str:
        """Display name if it is not blank, the login name otherwise."""
        if self.name and self.name.strip():
            return self.name
        return self.username


class Contributor(BaseModel):
    """Key/label pair built while aggregating a contributors list."""
    model_config = ConfigDict(frozen=True)

    key: str
    label: str

    def __str__(self) -> str:
        return f"{self.key}:{self.label}"
