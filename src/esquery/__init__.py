"""
esquery: a fluent condition builder that compiles filter/must/must_not/should
predicates into Elasticsearch bool query documents.
"""

from .abc import SearchClient
from .constants import GroupKind
from .querydsl import Bool, ConditionSet, Match, QueryBuilder, Range, Term, Terms
from .querydsl.compilers import elasticsearch_compiler
from .types import CompiledBool, QueryDocument

__version__ = "0.1.0"

__all__ = [
    "QueryBuilder",
    "ConditionSet",
    "GroupKind",
    "SearchClient",
    "Term",
    "Terms",
    "Range",
    "Match",
    "Bool",
    "CompiledBool",
    "QueryDocument",
    "elasticsearch_compiler",
]
