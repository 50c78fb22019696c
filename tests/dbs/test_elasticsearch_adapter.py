"""
Adapter tests: request shaping and error translation with a mocked Elasticsearch client.
"""

from unittest.mock import MagicMock, patch

import pytest
from elasticsearch import ApiError

from esquery.dbs.elasticsearch import ElasticsearchAdapter
from esquery.exceptions import MissingConfigError, SearchError
from esquery.querydsl.builder import QueryBuilder
from esquery.settings import settings


@pytest.fixture
def es_client():
    client = MagicMock()
    client.search.return_value = {"hits": {"hits": [{"_id": "1"}]}}
    return client


@pytest.fixture
def adapter(es_client):
    return ElasticsearchAdapter(client=es_client)


def test_build_request_folds_envelope_into_body():
    document = {
        "index": "books",
        "_source": ["title"],
        "from": 20,
        "size": 10,
        "body": {"sort": [{"year": "desc"}], "query": {"bool": {"filter": [{"term": {"x": 1}}]}}},
    }
    assert ElasticsearchAdapter.build_request(document) == {
        "index": "books",
        "body": {
            "sort": [{"year": "desc"}],
            "query": {"bool": {"filter": [{"term": {"x": 1}}]}},
            "_source": ["title"],
            "from": 20,
            "size": 10,
        },
    }


def test_build_request_without_body():
    assert ElasticsearchAdapter.build_request({"index": "books"}) == {"index": "books", "body": {}}


def test_build_request_does_not_mutate_document():
    document = {"index": "books", "size": 1, "body": {"sort": [{"a": "asc"}]}}
    ElasticsearchAdapter.build_request(document)
    assert document["body"] == {"sort": [{"a": "asc"}]}


def test_execute_calls_search(adapter, es_client):
    result = adapter.execute({"index": "books", "size": 1})
    es_client.search.assert_called_once_with(index="books", body={"size": 1})
    assert result == {"hits": {"hits": [{"_id": "1"}]}}


def test_execute_from_builder(adapter, es_client):
    QueryBuilder(client=adapter, index="books").where_in("status", ["a"]).for_page(2, 10).get()
    es_client.search.assert_called_once_with(
        index="books",
        body={"query": {"bool": {"filter": [{"terms": {"status": ["a"]}}]}}, "from": 10, "size": 10},
    )


def test_execute_wraps_api_error(adapter, es_client):
    meta = MagicMock(status=400)
    es_client.search.side_effect = ApiError("search_phase_execution_exception", meta=meta, body={})
    with pytest.raises(SearchError) as exc:
        adapter.execute({"index": "books"})
    assert exc.value.details["index"] == "books"
    assert isinstance(exc.value.__cause__, ApiError)


def test_execute_propagates_unexpected_errors(adapter, es_client):
    es_client.search.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        adapter.execute({"index": "books"})


def test_client_missing_hosts():
    with patch.object(settings, "ELASTICSEARCH_HOSTS", None):
        with pytest.raises(MissingConfigError) as exc:
            ElasticsearchAdapter().client
    assert exc.value.details["config_key"] == "ELASTICSEARCH_HOSTS"


def test_client_built_lazily_from_settings():
    with patch.object(settings, "ELASTICSEARCH_HOSTS", "http://es1:9200, http://es2:9200"), patch.object(
        settings, "ELASTICSEARCH_API_KEY", "secret"
    ), patch("esquery.dbs.elasticsearch.Elasticsearch") as es_cls:
        adapter = ElasticsearchAdapter()
        es_cls.assert_not_called()
        client = adapter.client
        assert adapter.client is client
    es_cls.assert_called_once_with(
        ["http://es1:9200", "http://es2:9200"],
        request_timeout=settings.ELASTICSEARCH_REQUEST_TIMEOUT,
        api_key="secret",
    )


def test_client_basic_auth():
    with patch.object(settings, "ELASTICSEARCH_API_KEY", None), patch.object(
        settings, "ELASTICSEARCH_USERNAME", "elastic"
    ), patch.object(settings, "ELASTICSEARCH_PASSWORD", "changeme"), patch(
        "esquery.dbs.elasticsearch.Elasticsearch"
    ) as es_cls:
        ElasticsearchAdapter().client
    _, kwargs = es_cls.call_args
    assert kwargs["basic_auth"] == ("elastic", "changeme")
    assert "api_key" not in kwargs
