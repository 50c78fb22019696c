"""Typed predicate clauses.

A clause is one atomic search predicate. The five variants form a closed,
discriminated union so compilers can dispatch on the variant instead of
inspecting dict shapes:

- `Term(field, value)`: exact match
- `Terms(field, values)`: set membership
- `Range(field, bounds)`: one or more of gt/gte/lt/lte
- `Match(field, value)`: analyzed full-text match
- `Bool(compiled)`: an already-compiled nested boolean group

Clauses are frozen once built.
"""

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from esquery.constants import RANGE_BOUNDS, RANGE_OPERATOR_MAP
from esquery.exceptions import InvalidOperatorError
from esquery.types import CompiledBool

__all__ = (
    "Term",
    "Terms",
    "Range",
    "Match",
    "Bool",
    "Clause",
    "CLAUSE_TYPES",
)


class _BaseClause(BaseModel):
    model_config = ConfigDict(frozen=True)


class Term(_BaseClause):
    kind: Literal["term"] = "term"
    field: str
    value: Any = None


class Terms(_BaseClause):
    kind: Literal["terms"] = "terms"
    field: str
    values: List[Any] = Field(default_factory=list)


class Match(_BaseClause):
    kind: Literal["match"] = "match"
    field: str
    value: Any = None


class Range(_BaseClause):
    kind: Literal["range"] = "range"
    field: str
    bounds: Dict[str, Any]

    @model_validator(mode="after")
    def check_bounds(self) -> "Range":
        if not self.bounds:
            raise InvalidOperatorError("Range clause needs at least one bound", field=self.field)
        for bound in self.bounds:
            if bound not in RANGE_BOUNDS:
                raise InvalidOperatorError(f"Invalid range bound: {bound}", field=self.field, bound=bound)
        return self

    @classmethod
    def from_operator(cls, field: str, operator: str, value: Any) -> "Range":
        """Build a single-bound range from a comparison operator (``>``, ``>=``, ``<``, ``<=``)."""
        bound = RANGE_OPERATOR_MAP.get(operator) if isinstance(operator, str) else None
        if bound is None:
            raise InvalidOperatorError(f"Invalid operator: {operator}.", field=field, operator=operator)
        return cls(field=field, bounds={bound: value})

    @classmethod
    def between(cls, field: str, low: Any, high: Any) -> "Range":
        """Inclusive range on both ends."""
        return cls(field=field, bounds={"gte": low, "lte": high})


class Bool(_BaseClause):
    kind: Literal["bool"] = "bool"
    compiled: CompiledBool


Clause = Annotated[Union[Term, Terms, Range, Match, Bool], Field(discriminator="kind")]

CLAUSE_TYPES = (Term, Terms, Range, Match, Bool)
