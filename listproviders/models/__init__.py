"""
Pydantic models for the list providers.
All data contracts are defined here for strict validation.
"""

from .query import ResourceListQuery
from .theme import Theme
from .user import Contributor, Organization, User
from .search import SearchResult, SearchResultItem
from .exclusion import ALL_USER_PROVIDERS, ExcludedUserProviders

__all__ = [
    # Query
    "ResourceListQuery",
    # Themes
    "Theme",
    # Users
    "Contributor",
    "Organization",
    "User",
    # Search
    "SearchResult",
    "SearchResultItem",
    # Configuration snapshots
    "ALL_USER_PROVIDERS",
    "ExcludedUserProviders",
]
