"""
List providers service - registry that routes list names to providers.
"""
import logging
from typing import Optional

from .client.search_index import SearchIndex
from .client.security import SecurityService
from .client.user_directory import UserDirectoryService
from .config import Config, get_config
from .exceptions import ListProviderNotFoundException
from .models.query import ResourceListQuery
from .providers.base import ResourceListProvider
from .providers.contributors import ContributorsListProvider
from .providers.themes import ThemesListProvider


logger = logging.getLogger(__name__)


class ListProvidersService:
    """
    Keeps the registered providers and answers list requests by name.
    """

    def __init__(self):
        self._providers: dict[str, ResourceListProvider] = {}

    def add_provider(self, provider: ResourceListProvider) -> None:
        """Register a provider under each of its list names."""
        for list_name in provider.get_list_names():
            if list_name in self._providers:
                logger.warning(f"Replacing provider for list name {list_name}")
            self._providers[list_name] = provider
        logger.info(f"Registered {type(provider).__name__} for {provider.get_list_names()}")

    def remove_provider(self, provider: ResourceListProvider) -> None:
        for list_name in provider.get_list_names():
            if self._providers.get(list_name) is provider:
                del self._providers[list_name]

    def has_provider(self, list_name: str) -> bool:
        return list_name in self._providers

    def get_available_list_names(self) -> list[str]:
        return sorted(self._providers)

    def _get_provider(self, list_name: str) -> ResourceListProvider:
        provider = self._providers.get(list_name)
        if provider is None:
            raise ListProviderNotFoundException(list_name)
        return provider

    def get_list(self, list_name: str, query: Optional[ResourceListQuery] = None) -> dict[str, str]:
        """
        Build a list through the provider registered for its name.

        Raises:
            ListProviderNotFoundException: If no provider serves the name
            ListProviderException: If the provider fails
        """
        return self._get_provider(list_name).get_list(list_name, query)

    def is_translatable(self, list_name: str) -> bool:
        return self._get_provider(list_name).is_translatable(list_name)

    def get_default(self, list_name: str) -> Optional[str]:
        return self._get_provider(list_name).get_default()


def build_service(
    search_index: SearchIndex,
    user_directory: UserDirectoryService,
    security_service: SecurityService,
    config: Optional[Config] = None,
) -> ListProvidersService:
    """
    Wire the themes and contributors providers into a service.

    Args:
        search_index: Index answering theme and term queries
        user_directory: Directory of user accounts
        security_service: Caller context for theme queries
        config: Configuration (uses the singleton if None)

    Returns:
        ListProvidersService with both providers registered
    """
    config = config or get_config()
    service = ListProvidersService()
    service.add_provider(ThemesListProvider(search_index, security_service))
    service.add_provider(
        ContributorsListProvider(
            search_index,
            user_directory,
            config.contributors.excluded_user_providers(),
        )
    )
    return service
