"""
Excluded user providers - immutable snapshot of the provider tags to skip.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

ALL_USER_PROVIDERS = "*"


class ExcludedUserProviders(BaseModel):
    """
    Provider tags whose users never show up in contributor lists.

    Instances are frozen: a configuration change builds a new snapshot
    and replaces the old one as a whole.
    """
    model_config = ConfigDict(frozen=True)

    providers: frozenset[str] = Field(default_factory=frozenset)

    @classmethod
    def parse(cls, value: Optional[Any]) -> "ExcludedUserProviders":
        """
        Build a snapshot from a comma separated list of provider tags.

        Args:
            value: Raw configuration value, e.g. "ldap, jpa" or "*"

        Returns:
            Snapshot with trimmed, non-blank entries
        """
        if value is None:
            return cls()
        entries = (part.strip() for part in str(value).split(","))
        return cls(providers=frozenset(entry for entry in entries if entry))

    @property
    def excludes_all(self) -> bool:
        return ALL_USER_PROVIDERS in self.providers

    def excludes(self, provider: Optional[str]) -> bool:
        """Whether users from the given provider are excluded."""
        return provider in self.providers

    def __str__(self) -> str:
        return ",".join(sorted(self.providers))
