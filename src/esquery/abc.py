"""Abstract collaborator interfaces."""

from abc import ABC, abstractmethod
from typing import Any

from esquery.logger import Logger
from esquery.types import QueryDocument

__all__ = ("SearchClient",)


class SearchClient(ABC):
    """Executes compiled query documents against a search service.

    Implementations own transport, auth and response handling; the query DSL
    only hands them finished documents.
    """

    def __init__(self) -> None:
        self.logger = Logger(self.__class__.__name__)

    @abstractmethod
    def execute(self, document: QueryDocument) -> Any:
        """Run a compiled query document and return the backend response.

        Args:
            document: Output of `QueryBuilder.to_params()`

        Raises:
            SearchError: If the backend rejects or fails the request
        """
        raise NotImplementedError
