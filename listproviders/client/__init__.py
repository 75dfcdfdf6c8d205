"""Clients for the search index, user directory and security context."""

from .search_index import (
    ElasticsearchIndex,
    EventIndexSchema,
    SearchIndex,
    SeriesIndexSchema,
    SortOrder,
    ThemeSearchQuery,
)
from .user_directory import InMemoryUserDirectory, UserDirectoryService
from .security import SecurityService, StaticSecurityService

__all__ = [
    "ElasticsearchIndex",
    "EventIndexSchema",
    "SearchIndex",
    "SeriesIndexSchema",
    "SortOrder",
    "ThemeSearchQuery",
    "InMemoryUserDirectory",
    "UserDirectoryService",
    "SecurityService",
    "StaticSecurityService",
]
