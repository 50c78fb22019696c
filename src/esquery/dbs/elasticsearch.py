"""Concrete search client for Elasticsearch.

Sends documents produced by `QueryBuilder.to_params()` to an Elasticsearch
cluster through the official `elasticsearch` client.

Key Features:
    - Lazy client initialization from settings (hosts, API key or basic auth)
    - Envelope keys (`_source`, `from`, `size`) folded into the request body
    - Backend failures surfaced as `SearchError`
"""

from typing import Any, Dict, Optional

from elasticsearch import ApiError, Elasticsearch, TransportError

from esquery.abc import SearchClient
from esquery.exceptions import MissingConfigError, SearchError
from esquery.settings import settings as api_settings
from esquery.types import QueryDocument

__all__ = ("ElasticsearchAdapter",)

# Envelope keys that Elasticsearch accepts inside the search body
_BODY_KEYS = ("_source", "from", "size")


class ElasticsearchAdapter(SearchClient):
    """Search client backed by `elasticsearch.Elasticsearch`.

    Attributes:
        client: Lazily created Elasticsearch client
    """

    def __init__(self, client: Optional[Elasticsearch] = None) -> None:
        """Initialize the adapter.

        Args:
            client: Pre-built Elasticsearch client; built from settings on first use when omitted
        """
        super().__init__()
        self._client = client

    @property
    def client(self) -> Elasticsearch:
        """Lazily initialize and return the Elasticsearch client.

        Raises:
            MissingConfigError: If ELASTICSEARCH_HOSTS is not configured
        """
        if self._client is None:
            hosts = api_settings.hosts
            if not hosts:
                raise MissingConfigError(
                    "ELASTICSEARCH_HOSTS is not set. Please configure it in your .env file.",
                    config_key="ELASTICSEARCH_HOSTS",
                    env_file=".env",
                )
            kwargs: Dict[str, Any] = {"request_timeout": api_settings.ELASTICSEARCH_REQUEST_TIMEOUT}
            if api_settings.ELASTICSEARCH_API_KEY:
                kwargs["api_key"] = api_settings.ELASTICSEARCH_API_KEY
            elif api_settings.ELASTICSEARCH_USERNAME:
                kwargs["basic_auth"] = (api_settings.ELASTICSEARCH_USERNAME, api_settings.ELASTICSEARCH_PASSWORD or "")
            self._client = Elasticsearch(hosts, **kwargs)
            self.logger.message("Elasticsearch client initialized for %s", ", ".join(hosts))
        return self._client

    @staticmethod
    def build_request(document: QueryDocument) -> Dict[str, Any]:
        """Split a compiled document into `search()` keyword arguments."""
        body: Dict[str, Any] = dict(document.get("body") or {})
        for key in _BODY_KEYS:
            if key in document:
                body[key] = document[key]
        return {"index": document.get("index"), "body": body}

    def execute(self, document: QueryDocument) -> Any:
        request = self.build_request(document)
        index = request["index"]
        try:
            response = self.client.search(**request)
        except (ApiError, TransportError) as e:
            self.logger.error(f"Search on index {index!r} failed: {e}", exc_info=True)
            raise SearchError(f"Elasticsearch search failed: {e}", index=index) from e
        self.logger.debug("Search on index %r completed", index)
        return response
