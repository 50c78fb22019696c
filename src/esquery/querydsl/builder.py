"""Fluent query builder.

`QueryBuilder` is the user-facing surface for accumulating clauses and query
modifiers into a `ConditionSet`. Every mutating call returns the builder so
calls can be chained:

    query = (
        QueryBuilder(index="books")
        .where("year", ">=", 2000)
        .where_in("status", ["published", "draft"])
        .where_nested(lambda q: q.where_term("lang", "en").where_term("lang", "fr", "should"), "or")
        .order_by("year", "desc")
        .for_page(2, 20)
    )
    query.to_params()

Invalid groups, range operators and null/operator pairs raise at the offending
call. Negative offsets/limits and unknown `where` operators are accepted
silently (see `where` for the operator rule).
"""

from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Optional, Union

from esquery.constants import (
    NEGATED_OPERATORS,
    NULLABLE_OPERATORS,
    OPERATORS,
    RANGE_OPERATOR_MAP,
    GroupKind,
    SortDirection,
)
from esquery.exceptions import InvalidValueOperatorError, MissingConfigError, ValidationError
from esquery.logger import Logger
from esquery.settings import settings
from esquery.types import CompiledBool, QueryDocument

from .clauses import Bool, Match, Range, Term, Terms
from .compilers import BaseCompiler, elasticsearch_compiler
from .conditions import ConditionSet

if TYPE_CHECKING:
    from esquery.abc import SearchClient

__all__ = ("QueryBuilder",)

_MISSING = object()

Group = Union[GroupKind, str]


class QueryBuilder:
    """Chainable builder over a single `ConditionSet`.

    Attributes:
        compiler: Compiler used for nested folds and `to_params()`
        logger: Logger named after the class
    """

    compiler: BaseCompiler = elasticsearch_compiler

    def __init__(
        self,
        client: Optional["SearchClient"] = None,
        index: Optional[str] = None,
        compiler: Optional[BaseCompiler] = None,
    ) -> None:
        """Create an empty builder.

        Args:
            client: Search client used by `get()`; optional for compile-only use
            index: Target index (defaults to ELASTICSEARCH_INDEX)
            compiler: Compiler override (defaults to the Elasticsearch compiler)
        """
        self._client = client
        if compiler is not None:
            self.compiler = compiler
        self._conditions = ConditionSet(index=index if index is not None else settings.ELASTICSEARCH_INDEX)
        self.logger = Logger(self.__class__.__name__)

    @property
    def conditions(self) -> ConditionSet:
        """The underlying condition set."""
        return self._conditions

    @property
    def client(self) -> Optional["SearchClient"]:
        return self._client

    def __repr__(self) -> str:
        return f"<QueryBuilder: {self.to_params()}>"

    # ------------------------------------------------------------------
    # Query modifiers
    # ------------------------------------------------------------------

    def set_index(self, name: str) -> "QueryBuilder":
        self._conditions.index = name
        return self

    index = set_index

    def select_fields(self, fields: Optional[Iterable[str]]) -> "QueryBuilder":
        """Restrict returned fields; `None` returns every field."""
        if fields is None:
            self._conditions.source = None
        elif isinstance(fields, str):
            self._conditions.source = [fields]
        else:
            self._conditions.source = list(fields)
        return self

    def select(self, *fields: Any) -> "QueryBuilder":
        """Varargs form of `select_fields`: `select("a", "b")` or `select(["a", "b"])`."""
        if not fields:
            return self.select_fields(["*"])
        if len(fields) == 1 and not isinstance(fields[0], str):
            return self.select_fields(fields[0])
        return self.select_fields(fields)

    def order_by(self, field: str, direction: str = SortDirection.ASC) -> "QueryBuilder":
        """Append a sort key. Anything other than "asc" (any case) sorts descending."""
        normalized = SortDirection.ASC if str(direction).lower() == SortDirection.ASC else SortDirection.DESC
        self._conditions.sort.append((field, normalized))
        return self

    def skip(self, value: int) -> "QueryBuilder":
        return self.offset(value)

    def offset(self, value: int) -> "QueryBuilder":
        if value >= 0:
            self._conditions.offset = value
        return self

    def take(self, value: int) -> "QueryBuilder":
        return self.limit(value)

    def limit(self, value: int) -> "QueryBuilder":
        if value >= 0:
            self._conditions.limit = value
        return self

    def for_page(self, page: int, per_page: Optional[int] = None) -> "QueryBuilder":
        """Set offset/limit for a 1-indexed page.

        Pages below 1 produce a negative offset, which `skip` ignores.
        """
        if per_page is None:
            per_page = settings.DEFAULT_PER_PAGE
        return self.skip((page - 1) * per_page).take(per_page)

    # ------------------------------------------------------------------
    # Clause helpers
    # ------------------------------------------------------------------

    def add_condition(self, clause: Any, group: Group = GroupKind.FILTER) -> "QueryBuilder":
        """Store a clause under a boolean group.

        Raises:
            InvalidGroupError: If `group` is not filter, must, must_not or should
        """
        self._conditions.add(clause, group)
        return self

    def where_term(self, field: str, value: Any, group: Group = GroupKind.FILTER) -> "QueryBuilder":
        return self.add_condition(Term(field=field, value=value), group)

    def where_match(self, field: str, value: Any, group: Group = GroupKind.FILTER) -> "QueryBuilder":
        return self.add_condition(Match(field=field, value=value), group)

    def where_range(self, field: str, operator: str, value: Any, group: Group = GroupKind.FILTER) -> "QueryBuilder":
        """Add a single-bound range clause.

        Raises:
            InvalidOperatorError: If `operator` is not one of ``>``, ``>=``, ``<``, ``<=``
        """
        return self.add_condition(Range.from_operator(field, operator, value), group)

    def where_in(self, field: str, values: Iterable[Any] = ()) -> "QueryBuilder":
        return self.add_condition(Terms(field=field, values=list(values)), GroupKind.FILTER)

    def where_not_in(self, field: str, values: Iterable[Any] = ()) -> "QueryBuilder":
        return self.add_condition(Terms(field=field, values=list(values)), GroupKind.MUST_NOT)

    def where_between(self, field: str, values: Iterable[Any]) -> "QueryBuilder":
        """Add an inclusive range from `[low, high]`; extra items are ignored.

        Raises:
            ValidationError: If fewer than two values are given
        """
        bounds = list(values)
        if len(bounds) < 2:
            raise ValidationError("Between needs a low and a high value.", field=field, values=bounds)
        low, high = bounds[:2]
        return self.add_condition(Range.between(field, low, high), GroupKind.FILTER)

    # ------------------------------------------------------------------
    # General where
    # ------------------------------------------------------------------

    def where(self, field: Any, operator: Any = _MISSING, value: Any = _MISSING, boolean: str = "and") -> "QueryBuilder":
        """Add a condition using SQL-like operators.

        Call shapes:
            where({"a": 1, "b": 2}, "or")   nested group of equalities
            where(lambda q: ..., "or")      nested group built by the callback
            where("a", 1)                   equality
            where("a", ">=", 1)             explicit operator

        An operator that is not in the known operator set is taken to be the
        value and the operator becomes ``=``, so ``where("status", "active", None)``
        is an equality on "active". Known operators without a clause mapping
        (like, regexp, ...) add nothing.

        Raises:
            InvalidValueOperatorError: If `value` is None and the operator is a
                known comparison other than ``=``, ``<>``, ``!=``
        """
        if isinstance(field, Mapping):
            return self._add_mapping_of_wheres(field, self._positional_boolean(operator, boolean))

        if callable(field):
            return self.where_nested(field, self._positional_boolean(operator, boolean))

        if operator is _MISSING:
            value, operator = (None if value is _MISSING else value), "="
        elif value is _MISSING:
            value, operator = operator, "="
        elif self._invalid_operator_and_value(operator, value):
            raise InvalidValueOperatorError("Illegal operator and value combination.", field=field, operator=operator)

        if self._invalid_operator(operator):
            value, operator = operator, "="

        self._perform_where(field, value, operator.lower())
        return self

    def _perform_where(self, field: str, value: Any, operator: str) -> None:
        if operator == "=":
            self.add_condition(Term(field=field, value=value), GroupKind.FILTER)
        elif operator in RANGE_OPERATOR_MAP:
            self.add_condition(Range.from_operator(field, operator, value), GroupKind.FILTER)
        elif operator in NEGATED_OPERATORS:
            self.add_condition(Term(field=field, value=value), GroupKind.MUST_NOT)
        else:
            self.logger.debug("Operator %r on field %r has no clause mapping; ignored", operator, field)

    def _add_mapping_of_wheres(self, mapping: Mapping[str, Any], boolean: str) -> "QueryBuilder":
        def add_all(query: "QueryBuilder") -> None:
            for key, val in mapping.items():
                query.where(key, "=", val, boolean)

        return self.where_nested(add_all, boolean)

    @staticmethod
    def _positional_boolean(operator: Any, boolean: str) -> str:
        # where(mapping_or_callback, "or") passes the boolean in the operator slot
        return operator if isinstance(operator, str) else boolean

    @staticmethod
    def _invalid_operator_and_value(operator: Any, value: Any) -> bool:
        return value is None and operator in OPERATORS and operator not in NULLABLE_OPERATORS

    @staticmethod
    def _invalid_operator(operator: Any) -> bool:
        return not isinstance(operator, str) or operator.lower() not in OPERATORS

    # ------------------------------------------------------------------
    # Nested groups
    # ------------------------------------------------------------------

    def new_query(self) -> "QueryBuilder":
        """Return a fresh builder sharing this builder's client and compiler."""
        return self.__class__(client=self._client, compiler=self.compiler)

    def for_nested_where(self) -> "QueryBuilder":
        return self.new_query()

    def where_nested(self, callback: Callable[["QueryBuilder"], Any], boolean: str = "and") -> "QueryBuilder":
        """Build a nested group with `callback` and fold it into this query.

        The child is compiled immediately; a non-empty result is added as a
        `bool` clause under ``filter`` when `boolean` is "and", otherwise under
        ``should``. An empty child adds nothing.
        """
        query = self.for_nested_where()
        callback(query)
        return self.add_nested_where_query(query, boolean)

    def add_nested_where_query(self, query: "QueryBuilder", boolean: str = "and") -> "QueryBuilder":
        compiled: CompiledBool = self.compiler.compile_bool(query.conditions)
        if compiled:
            group = GroupKind.FILTER if boolean == "and" else GroupKind.SHOULD
            self.add_condition(Bool(compiled=compiled), group)
            self.logger.debug("Folded nested group into %s: %s", group.value, compiled)
        return self

    # ------------------------------------------------------------------
    # Compilation and execution
    # ------------------------------------------------------------------

    def to_params(self) -> QueryDocument:
        """Compile the full request document."""
        return self.compiler.compile(self._conditions)

    def to_body(self) -> QueryDocument:
        """Compile only the request body (sort and query)."""
        return self.compiler.compile_body(self._conditions)

    def get(self) -> Any:
        """Execute the compiled query through the configured search client.

        Raises:
            MissingConfigError: If the builder was created without a client
        """
        if self._client is None:
            raise MissingConfigError("No search client configured for this query", operation="get")
        params = self.to_params()
        self.logger.message("Executing search on index=%s", params.get("index"))
        return self._client.execute(params)
