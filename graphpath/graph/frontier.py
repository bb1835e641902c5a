"""Priority frontier driving the shortest-path search.

The frontier holds the nodes that have been discovered but not yet
finalized, each with its best known cost. It is a binary heap with lazy
invalidation: updating a node pushes a fresh record and marks the old
one stale, and stale records are dropped when they reach the top.
An index keyed by node keeps membership and lookup O(1).
"""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Any, Dict, List, Optional

from ..domain.errors import EmptyFrontierError, InvalidPriorityError
from ..domain.models import FrontierEntry, Node

# Heap record layout: [priority, sequence, node, live]
_PRIORITY, _SEQUENCE, _NODE, _LIVE = range(4)


def parse_priority(node: Node, priority: Any) -> float:
    """Read a priority as a float, rejecting anything that is not a number."""
    if isinstance(priority, bool):
        raise InvalidPriorityError(
            f"Priority for {node!r} must be a number, got a boolean",
            node=node,
            value=priority,
        )
    try:
        value = float(priority)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidPriorityError(
            f"Priority for {node!r} must be a number, got {priority!r}",
            node=node,
            value=priority,
            cause=e,
        )
    if math.isnan(value):
        raise InvalidPriorityError(
            f"Priority for {node!r} must be a number, got NaN",
            node=node,
            value=priority,
        )
    return value


class Frontier:
    """Open set of a Dijkstra search.

    Ties between equal priorities are broken by the order in which the
    live entries were inserted or last updated, so a fixed insertion
    history always extracts in the same order.
    """

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._index: Dict[Node, list] = {}
        self._counter = itertools.count()

    def insert_or_update(self, node: Node, priority: Any) -> int:
        """Insert ``node`` or overwrite its priority.

        Monotonicity is not enforced; the caller only passes improving
        costs.

        Returns:
            The number of entries in the frontier.

        Raises:
            InvalidPriorityError: If ``priority`` is not numeric.
        """
        value = parse_priority(node, priority)

        stale = self._index.pop(node, None)
        if stale is not None:
            stale[_LIVE] = False

        record = [value, next(self._counter), node, True]
        self._index[node] = record
        heapq.heappush(self._heap, record)
        return len(self._index)

    def extract_min(self) -> FrontierEntry:
        """Remove and return the entry with the lowest priority.

        Raises:
            EmptyFrontierError: If the frontier holds no entries.
        """
        while self._heap:
            record = heapq.heappop(self._heap)
            if not record[_LIVE]:
                continue
            del self._index[record[_NODE]]
            return FrontierEntry(node=record[_NODE], priority=record[_PRIORITY])
        raise EmptyFrontierError("Cannot extract from an empty frontier")

    def is_empty(self) -> bool:
        return not self._index

    def contains(self, node: Node) -> bool:
        return node in self._index

    def peek(self, node: Node) -> Optional[float]:
        """Return the current priority of ``node``, or None if absent."""
        record = self._index.get(node)
        if record is None:
            return None
        return record[_PRIORITY]

    def __contains__(self, node: object) -> bool:
        return node in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Frontier(size={len(self._index)})"
