"""
Tests for the Elasticsearch search index client.
"""
import logging
from unittest.mock import MagicMock

import pytest
import requests

from listproviders.client.search_index import (
    ElasticsearchIndex,
    SortOrder,
    ThemeSearchQuery,
)
from listproviders.client.security import StaticSecurityService
from listproviders.config import SearchIndexConfig
from listproviders.exceptions import ListingUnavailable, SearchIndexException
from listproviders.models.user import Organization, User
from listproviders.providers.themes import ThemesListProvider


def _response(payload, status_code=200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


class TestElasticsearchIndex:
    """Tests for ElasticsearchIndex."""

    @pytest.fixture
    def session(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def index(self, session) -> ElasticsearchIndex:
        return ElasticsearchIndex("http://es:9200/", "opencast", timeout=5, max_result_window=100, session=session)

    def test_theme_query_body(self, index, session):
        """Test the request sent for a theme query."""
        session.post.return_value = _response({"hits": {"total": {"value": 0}, "hits": []}})
        query = ThemeSearchQuery("org1", User(username="admin"))
        query.with_offset(10).with_limit(20).sort_by_name_order(SortOrder.ASCENDING)

        index.get_by_query(query)

        args, kwargs = session.post.call_args
        assert args[0] == "http://es:9200/opencast_theme/_search"
        assert kwargs["timeout"] == 5
        body = kwargs["json"]
        assert body["from"] == 10
        assert body["size"] == 20
        assert body["query"]["bool"]["filter"] == [{"term": {"organization": "org1"}}]
        assert body["sort"] == [{"name.sort": {"order": "asc"}}]

    def test_theme_query_size_clamped_to_window(self, index, session):
        """Test that huge limits stay inside the result window."""
        session.post.return_value = _response({"hits": {"hits": []}})
        query = ThemeSearchQuery("org1").with_offset(30).with_limit(2**31 - 31)

        index.get_by_query(query)

        assert session.post.call_args.kwargs["json"]["size"] == 70

    def test_theme_hits_parsed_in_order(self, index, session):
        session.post.return_value = _response({
            "hits": {
                "total": {"value": 2},
                "hits": [
                    {"_id": "5", "_score": 1.0, "_source": {"identifier": 5, "name": "Alpha"}},
                    {"_id": "2", "_source": {"identifier": "2", "name": "Beta", "description": "b"}},
                ],
            },
        })

        result = index.get_by_query(ThemeSearchQuery("org1"))

        assert result.hit_count == 2
        assert [(item.source.identifier, item.source.name) for item in result.items] == [(5, "Alpha"), (2, "Beta")]
        assert result.items[1].source.description == "b"

    def test_unreadable_theme_raises(self, index, session):
        session.post.return_value = _response({"hits": {"hits": [{"_id": "x", "_source": {"identifier": 1}}]}})

        with pytest.raises(SearchIndexException):
            index.get_by_query(ThemeSearchQuery("org1"))

    def test_http_error_raises(self, index, session):
        session.post.return_value = _response({}, status_code=503)

        with pytest.raises(SearchIndexException):
            index.get_by_query(ThemeSearchQuery("org1"))

    def test_connection_error_raises(self, index, session):
        session.post.side_effect = requests.ConnectionError("refused")

        with pytest.raises(SearchIndexException):
            index.get_terms_for_field("presenter", "event")

    def test_malformed_json_raises(self, index, session):
        response = _response(None)
        response.json.side_effect = ValueError("not json")
        session.post.return_value = response

        with pytest.raises(SearchIndexException):
            index.get_terms_for_field("presenter", "event")

    def test_terms_for_field(self, index, session):
        """Test the terms aggregation request and bucket parsing."""
        session.post.return_value = _response({
            "aggregations": {
                "organizers": {"buckets": [{"key": "Olga", "doc_count": 3}, {"key": "Oscar", "doc_count": 1}]},
            },
        })

        terms = index.get_terms_for_field("organizers", "series")

        assert terms == ["Olga", "Oscar"]
        args, kwargs = session.post.call_args
        assert args[0] == "http://es:9200/opencast_series/_search"
        assert kwargs["json"]["size"] == 0
        assert kwargs["json"]["aggs"]["organizers"]["terms"]["field"] == "organizers"

    def test_terms_without_aggregations(self, index, session):
        session.post.return_value = _response({})

        assert index.get_terms_for_field("presenter", "event") == []

    def test_from_config(self, session):
        config = SearchIndexConfig(url="http://search:9200", index_name="mh", timeout=3, max_result_window=500)

        index = ElasticsearchIndex.from_config(config, session=session)

        assert index.url == "http://search:9200"
        assert index.index_name == "mh"
        assert index.max_result_window == 500

    @pytest.mark.parametrize("payload", [
        {"hits": {"hits": None}},
        {"hits": {"hits": ["oops"]}},
        {"hits": {"hits": [], "total": "many"}},
        {"hits": "oops"},
    ])
    def test_malformed_theme_hits_raise(self, index, session, payload):
        """Test that well-formed JSON with the wrong shape is reported as an index error."""
        session.post.return_value = _response(payload)

        with pytest.raises(SearchIndexException):
            index.get_by_query(ThemeSearchQuery("org1"))

    @pytest.mark.parametrize("payload", [
        {"hits": {"hits": None}},
        {"hits": {"hits": ["oops"]}},
        {"hits": {"hits": [], "total": "many"}},
    ])
    def test_malformed_theme_hits_make_listing_unavailable(self, index, session, payload):
        """Test that the themes provider never leaks a raw parsing error."""
        session.post.return_value = _response(payload)
        security = StaticSecurityService(Organization(id="org1"), User(username="admin"))
        provider = ThemesListProvider(index, security)

        with pytest.raises(ListingUnavailable):
            provider.get_list("THEMES.NAME")

    @pytest.mark.parametrize("payload", [
        {"aggregations": {"presenter": {"buckets": ["oops"]}}},
        {"aggregations": {"presenter": {"buckets": None}}},
        {"aggregations": {"presenter": None}},
    ])
    def test_malformed_terms_raise(self, index, session, payload):
        session.post.return_value = _response(payload)

        with pytest.raises(SearchIndexException):
            index.get_terms_for_field("presenter", "event")

    def test_terms_at_cap_logs_warning(self, index, session, caplog):
        """Test that hitting the bucket cap is reported."""
        buckets = [{"key": f"name{i}"} for i in range(ElasticsearchIndex.MAX_TERMS)]
        session.post.return_value = _response({"aggregations": {"presenter": {"buckets": buckets}}})

        with caplog.at_level(logging.WARNING, logger="listproviders.client.search_index"):
            terms = index.get_terms_for_field("presenter", "event")

        assert len(terms) == ElasticsearchIndex.MAX_TERMS
        assert "truncated" in caplog.text

    def test_theme_page_cut_by_window_logs_warning(self, index, session, caplog):
        """Test that themes past the result window are reported."""
        session.post.return_value = _response({"hits": {"total": {"value": 500}, "hits": []}})
        query = ThemeSearchQuery("org1").with_offset(0).with_limit(2**31 - 1)

        with caplog.at_level(logging.WARNING, logger="listproviders.client.search_index"):
            index.get_by_query(query)

        assert "max result window 100" in caplog.text

    def test_unbounded_theme_page_within_window_is_quiet(self, index, session, caplog):
        session.post.return_value = _response({"hits": {"total": {"value": 3}, "hits": []}})
        query = ThemeSearchQuery("org1").with_offset(0).with_limit(2**31 - 1)

        with caplog.at_level(logging.WARNING, logger="listproviders.client.search_index"):
            index.get_by_query(query)

        assert "max result window" not in caplog.text
