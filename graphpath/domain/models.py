"""Immutable domain models for graphpath.

All models are frozen dataclasses with slots. They have no external
dependencies and describe what flows in and out of a path query.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Hashable, Optional, Tuple

Node = Hashable


class SearchState(Enum):
    """Lifecycle of a single path query.

    SEEDED moves to ITERATING on the first extraction. FOUND and
    EXHAUSTED are terminal and are the only states a PathResult carries.
    """

    SEEDED = auto()
    ITERATING = auto()
    FOUND = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True, slots=True)
class FrontierEntry:
    """A node in the open set tagged with its best known cost.

    Attributes:
        node: The node identifier
        priority: Tentative cost from the start node
    """

    node: Node
    priority: float


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path search.

    Attributes:
        path: Nodes from start to goal (inclusive), or None if unreachable
        cost: Total cost of the path, 0 when no path was found
        state: Terminal state the search ended in
    """

    path: Optional[Tuple[Node, ...]]
    cost: float = 0.0
    state: SearchState = SearchState.EXHAUSTED

    @property
    def found(self) -> bool:
        """Check if the goal was reached."""
        return self.path is not None

    @property
    def hops(self) -> int:
        """Return the number of edges along the path."""
        if self.path is None:
            return 0
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": list(self.path) if self.path is not None else None,
            "cost": self.cost,
        }
