"""
User directory - lookup of accounts across user providers.
"""
import json
import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Protocol

from ..models.user import User


logger = logging.getLogger(__name__)


class UserDirectoryService(Protocol):
    """
    Account lookup the contributors list reads from.
    """
    def find_users(self, query: str, offset: int, limit: int) -> Iterator[User]:
        ...


def _like_to_regex(pattern: str) -> re.Pattern:
    """Translate a SQL LIKE pattern ('%' and '_' wildcards) into a regex."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


class InMemoryUserDirectory:
    """
    User directory holding its accounts in memory.
    A limit of 0 means no limit.
    """

    def __init__(self, users: Iterable[User] = ()):
        self._users: list[User] = list(users)
        logger.info(f"InMemoryUserDirectory initialized with {len(self._users)} users")

    @classmethod
    def from_json(cls, path: Path) -> "InMemoryUserDirectory":
        """
        Load accounts from a JSON file holding a list of user objects.

        Args:
            path: JSON file path

        Returns:
            Directory populated with the file's users
        """
        with Path(path).open("r", encoding="utf-8") as f:
            raw = json.load(f)
        return cls(User.model_validate(item) for item in raw)

    def add_user(self, user: User) -> None:
        self._users.append(user)

    def find_users(self, query: str, offset: int = 0, limit: int = 0) -> Iterator[User]:
        """
        Find users whose username or display name matches a LIKE pattern.

        Args:
            query: Pattern, "%" matches everything
            offset: Matches to skip
            limit: Maximum matches to return, 0 for all

        Returns:
            Iterator over matching users in directory order
        """
        regex = _like_to_regex(query)
        matches = [
            user for user in self._users
            if regex.fullmatch(user.username) or (user.name and regex.fullmatch(user.name))
        ]
        end = offset + limit if limit > 0 else None
        return iter(matches[offset:end])
