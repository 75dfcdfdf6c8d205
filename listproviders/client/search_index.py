"""
Search index client - theme queries and term lookups against Elasticsearch.
"""
import logging
from enum import Enum
from typing import Any, Optional, Protocol

import requests

from ..exceptions import SearchIndexException
from ..models.search import SearchResult, SearchResultItem
from ..models.theme import Theme
from ..models.user import User


logger = logging.getLogger(__name__)


class EventIndexSchema:
    """Field names of event documents."""
    DOCUMENT_TYPE = "event"
    CONTRIBUTOR = "contributor"
    PRESENTER = "presenter"
    PUBLISHER = "publisher"


class SeriesIndexSchema:
    """Field names of series documents."""
    DOCUMENT_TYPE = "series"
    CONTRIBUTORS = "contributors"
    ORGANIZERS = "organizers"
    PUBLISHERS = "publishers"


class ThemeIndexSchema:
    DOCUMENT_TYPE = "theme"
    ORGANIZATION = "organization"
    NAME = "name"


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class ThemeSearchQuery:
    """
    Query for the themes of one organization, as seen by one caller.
    """

    def __init__(self, organization_id: str, user: Optional[User] = None):
        self.organization_id = organization_id
        self.user = user
        self.offset = 0
        self.limit = 0
        self.sort_by_name: Optional[SortOrder] = None

    def with_offset(self, offset: int) -> "ThemeSearchQuery":
        self.offset = offset
        return self

    def with_limit(self, limit: int) -> "ThemeSearchQuery":
        self.limit = limit
        return self

    def sort_by_name_order(self, order: SortOrder) -> "ThemeSearchQuery":
        self.sort_by_name = order
        return self

    def __repr__(self) -> str:
        username = self.user.username if self.user else None
        return (
            f"ThemeSearchQuery(organization={self.organization_id!r}, user={username!r}, "
            f"offset={self.offset}, limit={self.limit}, sort={self.sort_by_name})"
        )


class SearchIndex(Protocol):
    """
    Read operations the list providers need from the search index.
    """
    def get_by_query(self, query: ThemeSearchQuery) -> SearchResult[Theme]:
        ...

    def get_terms_for_field(self, field: str, document_type: str) -> list[str]:
        ...


class ElasticsearchIndex:
    """
    Search index backed by an Elasticsearch cluster over its REST API.
    Every document type lives in its own index named "<index_name>_<type>".
    """

    # Upper bound of distinct terms collected per field
    MAX_TERMS = 10000

    def __init__(
        self,
        url: str,
        index_name: str,
        timeout: float = 10.0,
        max_result_window: int = 10000,
        session: Optional[requests.Session] = None,
    ):
        self.url = url.rstrip("/")
        self.index_name = index_name
        self.timeout = timeout
        self.max_result_window = max_result_window
        self.session = session or requests.Session()
        logger.info(f"ElasticsearchIndex initialized for {self.url}/{self.index_name}")

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> "ElasticsearchIndex":
        """Create an index client from a SearchIndexConfig."""
        return cls(
            url=config.url,
            index_name=config.index_name,
            timeout=config.timeout,
            max_result_window=config.max_result_window,
            session=session,
        )

    def _index_url(self, document_type: str) -> str:
        return f"{self.url}/{self.index_name}_{document_type}/_search"

    def _search(self, document_type: str, body: dict[str, Any]) -> dict[str, Any]:
        """Run a search request and return the decoded response body."""
        try:
            response = self.session.post(
                self._index_url(document_type),
                json=body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise SearchIndexException(f"Search on {document_type} index failed: {e}") from e
        except ValueError as e:
            raise SearchIndexException(f"Malformed response from {document_type} index: {e}") from e

        if not isinstance(payload, dict):
            raise SearchIndexException(f"Unexpected response from {document_type} index")
        return payload

    def get_by_query(self, query: ThemeSearchQuery) -> SearchResult[Theme]:
        """
        Fetch one page of themes.

        Themes are scoped by organization only; the caller carried by the
        query is not part of the request body.

        Args:
            query: Organization scoped theme query

        Returns:
            SearchResult with themes in index order

        Raises:
            SearchIndexException: If the index cannot answer the query
        """
        offset = max(0, query.offset)
        size = max(0, min(query.limit, self.max_result_window - offset))
        body: dict[str, Any] = {
            "from": offset,
            "size": size,
            "query": {
                "bool": {
                    "filter": [
                        {"term": {ThemeIndexSchema.ORGANIZATION: query.organization_id}},
                    ],
                },
            },
        }
        if query.sort_by_name is not None:
            body["sort"] = [{f"{ThemeIndexSchema.NAME}.sort": {"order": query.sort_by_name.value}}]

        logger.debug(f"Querying themes: {query!r}")
        payload = self._search(ThemeIndexSchema.DOCUMENT_TYPE, body)
        try:
            result = self._parse_theme_hits(payload, offset, size)
        except (TypeError, AttributeError, KeyError, ValueError) as e:
            raise SearchIndexException(f"Malformed response from theme index: {e}") from e

        # Themes beyond the result window cannot be paged to
        if size < query.limit and result.hit_count > offset + size:
            logger.warning(
                f"Theme page cut to {size} of {result.hit_count - offset} remaining themes "
                f"(max result window {self.max_result_window})"
            )
        return result

    def _parse_theme_hits(self, payload: dict[str, Any], offset: int, size: int) -> SearchResult[Theme]:
        """Build a SearchResult from a raw theme search response."""
        hits = payload.get("hits") or {}
        items: list[SearchResultItem[Theme]] = []
        for hit in hits.get("hits", []):
            theme = self._normalize_raw_theme(hit)
            if theme is None:
                raise SearchIndexException(f"Unreadable theme document: {hit.get('_id')}")
            items.append(SearchResultItem[Theme](source=theme, score=hit.get("_score") or 0.0))

        total = hits.get("total", len(items))
        if isinstance(total, dict):
            total = total.get("value", len(items))

        return SearchResult[Theme](items=items, hit_count=total, offset=offset, limit=size)

    def _normalize_raw_theme(self, hit: dict[str, Any]) -> Optional[Theme]:
        """Turn a raw hit into a Theme model."""
        source = hit.get("_source") or {}
        identifier = source.get("identifier", source.get("id", hit.get("_id")))
        name = source.get("name")
        if identifier is None or name is None:
            return None
        try:
            return Theme(
                identifier=identifier,
                name=name,
                description=source.get("description"),
                organization=source.get("organization"),
                creator=source.get("creator"),
                default=bool(source.get("default", False)),
            )
        except ValueError as e:
            logger.warning(f"Failed to normalize theme {identifier}: {e}")
            return None

    def get_terms_for_field(self, field: str, document_type: str) -> list[str]:
        """
        Get the distinct values of a field across all documents of a type.

        Args:
            field: Indexed field name
            document_type: Document type, e.g. "event" or "series"

        Returns:
            Distinct term values, unordered

        Raises:
            SearchIndexException: If the index cannot answer the query
        """
        body = {
            "size": 0,
            "aggs": {
                field: {"terms": {"field": field, "size": self.MAX_TERMS}},
            },
        }
        payload = self._search(document_type, body)
        try:
            buckets = (payload.get("aggregations") or {}).get(field, {}).get("buckets", [])
            terms = [str(bucket["key"]) for bucket in buckets if bucket.get("key") is not None]
        except (TypeError, AttributeError, KeyError) as e:
            raise SearchIndexException(f"Malformed terms response from {document_type} index: {e}") from e

        if len(buckets) >= self.MAX_TERMS:
            logger.warning(f"Terms for {document_type}.{field} truncated at {self.MAX_TERMS}")
        logger.debug(f"Found {len(terms)} terms for {document_type}.{field}")
        return terms
