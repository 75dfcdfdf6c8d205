"""
Exceptions raised by list providers and their collaborators.
"""
from typing import Optional


class ListProviderException(Exception):
    """Base exception for resource list failures."""


class ListingUnavailable(ListProviderException):
    """The backing search index could not answer a list request."""

    def __init__(self, list_name: str, message: Optional[str] = None):
        super().__init__(message or f"No themes list for list name {list_name} found!")
        self.list_name = list_name


class ListProviderNotFoundException(ListProviderException):
    """No provider is registered for the requested list name."""

    def __init__(self, list_name: str):
        super().__init__(f"No resource list provider for list name {list_name} found")
        self.list_name = list_name


class SearchIndexException(Exception):
    """A search index query failed."""
