"""
Boolean group kinds, sort directions and operator tables shared by the query DSL.
"""

from enum import Enum


class GroupKind(str, Enum):
    FILTER = "filter"
    MUST = "must"
    MUST_NOT = "must_not"
    SHOULD = "should"


# Canonical compile order
GROUP_ORDER = (GroupKind.FILTER, GroupKind.MUST, GroupKind.MUST_NOT, GroupKind.SHOULD)


class SortDirection:
    ASC = "asc"
    DESC = "desc"


RANGE_BOUNDS = ("gt", "gte", "lt", "lte")

# Range-style operators accepted by where_range()
RANGE_OPERATOR_MAP = {
    ">": "gt",
    ">=": "gte",
    "<": "lt",
    "<=": "lte",
}

# Every operator where() recognizes; only some of them emit a clause
OPERATORS = (
    "=", "<", ">", "<=", ">=", "<>", "!=", "<=>",
    "like", "like binary", "not like", "ilike",
    "&", "|", "^", "<<", ">>",
    "rlike", "regexp", "not regexp",
)

# Operators that may be paired with a None value
NULLABLE_OPERATORS = ("=", "<>", "!=")

NEGATED_OPERATORS = ("!=", "<>")
