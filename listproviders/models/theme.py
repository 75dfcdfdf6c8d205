"""
Theme models - themes as stored in the search index.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Theme(BaseModel):
    """A theme document read from the search index."""
    identifier: int
    name: str
    description: Optional[str] = None
    organization: Optional[str] = None
    creator: Optional[str] = None
    default: bool = Field(default=False, description="Whether this is the organization default theme")
