"""
Themes list provider - theme identifiers mapped to names or descriptions.
"""
import logging
from enum import Enum
from typing import Optional

from ..client.search_index import SearchIndex, SortOrder, ThemeSearchQuery
from ..client.security import SecurityService
from ..exceptions import ListingUnavailable, SearchIndexException
from ..models.query import ResourceListQuery
from ..models.search import SearchResult
from ..models.theme import Theme
from .base import ResourceListProvider


logger = logging.getLogger(__name__)

MAX_INT = 2**31 - 1


class ThemesListName(str, Enum):
    PROVIDER_PREFIX = "THEMES"
    NAME = "THEMES.NAME"
    DESCRIPTION = "THEMES.DESCRIPTION"

    @classmethod
    def lookup(cls, list_name: str) -> Optional["ThemesListName"]:
        """Resolve a list name, case-sensitively."""
        for member in cls:
            if member.value == list_name:
                return member
        return None


class ThemesListProvider(ResourceListProvider):
    """
    Lists the themes visible to the current organization, sorted by name.
    """

    def __init__(self, search_index: SearchIndex, security_service: SecurityService):
        self.search_index = search_index
        self.security_service = security_service
        logger.info("Themes list provider activated")

    def get_list_names(self) -> list[str]:
        return [name.value for name in ThemesListName]

    def get_list(self, list_name: str, query: Optional[ResourceListQuery] = None) -> dict[str, str]:
        """
        Map theme identifiers to their names or descriptions.

        Args:
            list_name: THEMES.NAME or THEMES.DESCRIPTION
            query: Optional offset/limit window, applied by the index

        Returns:
            Mapping in ascending theme name order; empty for other list names

        Raises:
            ListingUnavailable: If the search index fails the query
        """
        name = ThemesListName.lookup(list_name)
        if name not in (ThemesListName.NAME, ThemesListName.DESCRIPTION):
            return {}

        results = self._query_themes(list_name, query or ResourceListQuery())

        themes: dict[str, str] = {}
        for item in results.items:
            theme = item.source
            if name is ThemesListName.NAME:
                themes[str(theme.identifier)] = theme.name
            else:
                themes[str(theme.identifier)] = theme.description or ""
        return themes

    def _query_themes(self, list_name: str, query: ResourceListQuery) -> SearchResult[Theme]:
        """Run the organization scoped theme query."""
        theme_query = ThemeSearchQuery(
            self.security_service.get_organization().id,
            self.security_service.get_user(),
        )
        theme_query.with_offset(query.offset if query.offset is not None else 0)
        limit = query.limit if query.limit is not None else MAX_INT - theme_query.offset
        theme_query.with_limit(limit)
        theme_query.sort_by_name_order(SortOrder.ASCENDING)

        try:
            return self.search_index.get_by_query(theme_query)
        except SearchIndexException as e:
            logger.error(f"The search index was not able to get the themes: {e}")
            raise ListingUnavailable(list_name) from e
