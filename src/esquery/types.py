"""Type aliases for the esquery package.

Compiled query structures are plain dicts so they can be handed straight to a
search client or serialized to JSON.
"""

from typing import Any, Dict, List

# One compiled clause, e.g. {"term": {"status": "active"}}
ClauseDocument = Dict[str, Any]

# Compiled bool groups keyed by group name, empty groups omitted
CompiledBool = Dict[str, List[ClauseDocument]]

# Full request document: index, _source, from, size, body
QueryDocument = Dict[str, Any]
