"""Elasticsearch compiler.

Transforms a `ConditionSet` into a search request document:

    {
        "index": "books",
        "_source": ["title"],          # only when fields were selected
        "from": 0, "size": 15,         # only when set
        "body": {
            "sort": [{"year": "desc"}],
            "query": {"bool": {"filter": [...], "must": [...], "must_not": [...], "should": [...]}},
        },
    }

Groups are emitted in canonical order (filter, must, must_not, should) and only
when they hold at least one clause. When every group is empty the `query` key is
left out, and when the body is empty the `body` key is left out.
"""

from copy import deepcopy
from typing import Any, Dict

from esquery.constants import GROUP_ORDER
from esquery.types import ClauseDocument, CompiledBool, QueryDocument

from ..clauses import Bool, Match, Range, Term, Terms
from ..conditions import ConditionSet
from .base import BaseCompiler

__all__ = (
    "ElasticsearchCompiler",
    "elasticsearch_compiler",
)


class ElasticsearchCompiler(BaseCompiler):
    """Compile condition sets into Elasticsearch `bool` query requests.

    Values are deep-copied into the output, so callers may mutate a compiled
    document without affecting the condition set or later compilations.
    """

    def compile(self, conditions: ConditionSet) -> QueryDocument:
        params: Dict[str, Any] = {"index": conditions.index}

        if conditions.source is not None:
            params["_source"] = list(conditions.source)

        if conditions.offset is not None:
            params["from"] = conditions.offset

        if conditions.limit is not None:
            params["size"] = conditions.limit

        body = self.compile_body(conditions)
        if body:
            params["body"] = body

        return params

    def compile_body(self, conditions: ConditionSet) -> Dict[str, Any]:
        body: Dict[str, Any] = {}

        if conditions.sort:
            body["sort"] = [{field: direction} for field, direction in conditions.sort]

        compiled = self.compile_bool(conditions)
        if compiled:
            body["query"] = {"bool": compiled}

        return body

    def compile_bool(self, conditions: ConditionSet) -> CompiledBool:
        compiled: CompiledBool = {}
        for kind in GROUP_ORDER:
            clauses = conditions.groups.get(kind)
            if clauses:
                compiled[kind.value] = [self.compile_clause(clause) for clause in clauses]
        return compiled

    def compile_clause(self, clause: Any) -> ClauseDocument:
        if isinstance(clause, Term):
            return {"term": {clause.field: deepcopy(clause.value)}}
        if isinstance(clause, Terms):
            return {"terms": {clause.field: deepcopy(list(clause.values))}}
        if isinstance(clause, Match):
            return {"match": {clause.field: deepcopy(clause.value)}}
        if isinstance(clause, Range):
            return {"range": {clause.field: deepcopy(dict(clause.bounds))}}
        if isinstance(clause, Bool):
            # Nested groups were compiled when they were folded in
            return {"bool": deepcopy(clause.compiled)}
        raise TypeError(f"Cannot compile clause of type {type(clause).__name__}")


elasticsearch_compiler = ElasticsearchCompiler()
