"""
Resource list providers for themes and contributors.
"""

from .config import Config, configure_logging, get_config, reload_config
from .exceptions import (
    ListingUnavailable,
    ListProviderException,
    ListProviderNotFoundException,
    SearchIndexException,
)
from .models import ExcludedUserProviders, ResourceListQuery
from .providers import (
    ContributorsListName,
    ContributorsListProvider,
    ResourceListProvider,
    ThemesListName,
    ThemesListProvider,
    filter_map,
)
from .service import ListProvidersService, build_service

__all__ = [
    # Config
    "Config",
    "configure_logging",
    "get_config",
    "reload_config",
    # Errors
    "ListingUnavailable",
    "ListProviderException",
    "ListProviderNotFoundException",
    "SearchIndexException",
    # Models
    "ExcludedUserProviders",
    "ResourceListQuery",
    # Providers
    "ContributorsListName",
    "ContributorsListProvider",
    "ResourceListProvider",
    "ThemesListName",
    "ThemesListProvider",
    "filter_map",
    # Service
    "ListProvidersService",
    "build_service",
]
