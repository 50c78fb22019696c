"""Query DSL module.

Exports the fluent `QueryBuilder`, the `ConditionSet` it accumulates into and the
typed clause variants. Compilation to request documents lives in `compilers`.
"""

from .builder import QueryBuilder
from .clauses import Bool, Clause, Match, Range, Term, Terms
from .conditions import ConditionSet

__all__ = (
    "QueryBuilder",
    "ConditionSet",
    "Clause",
    "Term",
    "Terms",
    "Range",
    "Match",
    "Bool",
)
