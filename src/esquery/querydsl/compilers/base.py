"""Base compiler interface.

Defines the contract backend compilers follow to turn a `ConditionSet` into a
request document.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from esquery.types import ClauseDocument, CompiledBool, QueryDocument

if TYPE_CHECKING:
    from ..conditions import ConditionSet

__all__ = ("BaseCompiler",)


class BaseCompiler(ABC):
    """Abstract base class for query compilers.

    Compilers are stateless: every method is a pure read of its input, so a
    single module-level instance can be shared.
    """

    @abstractmethod
    def compile(self, conditions: "ConditionSet") -> QueryDocument:
        """Compile the full request document (envelope and body)."""
        raise NotImplementedError

    @abstractmethod
    def compile_body(self, conditions: "ConditionSet") -> QueryDocument:
        """Compile the request body (sort and query) without the envelope."""
        raise NotImplementedError

    @abstractmethod
    def compile_bool(self, conditions: "ConditionSet") -> CompiledBool:
        """Compile only the boolean groups; used when folding nested groups."""
        raise NotImplementedError

    @abstractmethod
    def compile_clause(self, clause: Any) -> ClauseDocument:
        """Compile one stored clause into its document form."""
        raise NotImplementedError
