"""
Resource list provider contract.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..models.query import ResourceListQuery


class ResourceListProvider(ABC):
    """
    A source of key/label lists for the UI, addressed by list name.
    """

    @abstractmethod
    def get_list_names(self) -> list[str]:
        """Names of the lists this provider answers."""

    @abstractmethod
    def get_list(self, list_name: str, query: Optional[ResourceListQuery] = None) -> dict[str, str]:
        """
        Build the list for a list name.

        Args:
            list_name: One of get_list_names()
            query: Optional offset/limit window

        Returns:
            Ordered mapping of key to label
        """

    def is_translatable(self, list_name: str) -> bool:
        """Whether labels are translation keys rather than display text."""
        return False

    def get_default(self) -> Optional[str]:
        """Key selected by default, if any."""
        return None
