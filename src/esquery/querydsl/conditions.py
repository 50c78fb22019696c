"""In-progress state of one query (or one nested group).

A `ConditionSet` holds clauses in four ordered boolean groups plus the query
modifiers (index, selected fields, sort, offset, limit). It is mutated only
through `add()` and the builder; compilers read it without modifying it.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from esquery.constants import GROUP_ORDER, GroupKind
from esquery.exceptions import InvalidGroupError

from .clauses import CLAUSE_TYPES, Clause

__all__ = ("ConditionSet", "resolve_group")


def resolve_group(group: Union[GroupKind, str]) -> GroupKind:
    """Return the `GroupKind` for a group name.

    Raises:
        InvalidGroupError: If `group` is not one of filter/must/must_not/should
    """
    if isinstance(group, GroupKind):
        return group
    try:
        return GroupKind(group)
    except ValueError:
        raise InvalidGroupError(f"Invalid where type: {group}.", group=group) from None


def _empty_groups() -> Dict[GroupKind, List[Clause]]:
    return {kind: [] for kind in GROUP_ORDER}


class ConditionSet(BaseModel):
    index: Optional[str] = Field(None, description="Target index name.")
    groups: Dict[GroupKind, List[Clause]] = Field(default_factory=_empty_groups)
    sort: List[Tuple[str, str]] = Field(default_factory=list, description="(field, direction) pairs.")
    source: Optional[List[str]] = Field(None, description="Selected fields; None returns all fields.")
    offset: Optional[int] = Field(None, description="Number of hits to skip.")
    limit: Optional[int] = Field(None, description="Maximum number of hits.")

    def add(self, clause: Any, group: Union[GroupKind, str] = GroupKind.FILTER) -> "ConditionSet":
        """Append a clause to a group, validating both before storing anything."""
        kind = resolve_group(group)
        if not isinstance(clause, CLAUSE_TYPES):
            raise TypeError(f"clause must be a Term, Terms, Range, Match or Bool, got {type(clause).__name__}")
        self.groups[kind].append(clause)
        return self

    def clauses(self, group: Union[GroupKind, str]) -> List[Clause]:
        return list(self.groups[resolve_group(group)])

    @property
    def is_empty(self) -> bool:
        """True when no group holds a clause."""
        return not any(self.groups[kind] for kind in GROUP_ORDER)
