"""Pytest configuration and fixtures for query builder tests."""

from typing import Any, Dict, List

import pytest
from dotenv import load_dotenv

from esquery.abc import SearchClient
from esquery.querydsl.builder import QueryBuilder

# Load environment variables
load_dotenv()


class RecordingClient(SearchClient):
    """In-memory search client that records every executed document."""

    def __init__(self, response: Any = None) -> None:
        super().__init__()
        self.executed: List[Dict[str, Any]] = []
        self.response = response if response is not None else {"hits": {"total": {"value": 0}, "hits": []}}

    def execute(self, document: Dict[str, Any]) -> Any:
        self.executed.append(document)
        return self.response


@pytest.fixture
def recording_client():
    return RecordingClient()


@pytest.fixture
def builder():
    """Fresh builder targeting the "books" index."""
    return QueryBuilder(index="books")


@pytest.fixture
def bound_builder(recording_client):
    """Builder wired to a recording client."""
    return QueryBuilder(client=recording_client, index="books")
