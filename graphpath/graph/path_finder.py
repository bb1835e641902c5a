"""Shortest-path computation using Dijkstra's algorithm.

PathFinder owns a directed graph with non-negative edge costs and
answers single-pair shortest-path queries against it. Each query runs
from scratch on the current graph; search state never outlives the
call.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Tuple, Union

from ..domain.models import Node, PathResult, SearchState
from ..ports.graph import FrontierPort, GraphRepositoryPort
from .frontier import Frontier
from .normalize import build_adjacency, flatten_neighbors, validate_node
from .options import PathOptions, resolve_options

PathOutput = Union[None, List[Node], Dict[str, Any]]


class PathFinder:
    """Directed weighted graph with shortest-path queries.

    Usage:
        finder = PathFinder({"A": {"B": 1, "C": 4}, "B": {"C": 1}})
        finder.path("A", "C")               # ['A', 'B', 'C']
        finder.path("A", "C", cost=True)    # {'path': [...], 'cost': 2.0}

    Nodes that only appear as edge targets are valid endpoints with no
    outgoing edges. Queries must not run concurrently with add_node on
    the same instance.
    """

    def __init__(
        self,
        data: Optional[Mapping[Node, Mapping[Node, Any]]] = None,
        frontier_factory: Callable[[], FrontierPort] = Frontier,
    ) -> None:
        """Create a path finder.

        Args:
            data: Optional nested mapping ``{node: {neighbor: cost}}``.
            frontier_factory: Builds the open set used by each query.

        Raises:
            InvalidArgumentTypeError: If ``data`` is not nested mappings.
            InvalidCostError: If any edge cost is invalid.
        """
        self._logger = logging.getLogger(__name__)
        self._frontier_factory = frontier_factory
        self._graph: Dict[Node, Dict[Node, float]] = (
            build_adjacency(data) if data is not None else {}
        )
        if self._graph:
            self._logger.debug("Graph initialized", extra={"nodes": len(self._graph)})

    @classmethod
    def from_repository(
        cls,
        repository: GraphRepositoryPort,
        frontier_factory: Callable[[], FrontierPort] = Frontier,
    ) -> "PathFinder":
        """Build a path finder from the data a repository loads."""
        return cls(repository.load(), frontier_factory=frontier_factory)

    def add_node(self, node: Node, neighbors: Mapping[Node, Any]) -> "PathFinder":
        """Register a node, replacing any outgoing edges it already had.

        Nested neighbour groups are flattened into the node's adjacency.
        The graph is left untouched when validation fails.

        Returns:
            The path finder itself, for chaining.

        Raises:
            InvalidArgumentTypeError: If ``node`` is unusable as an
                identifier or ``neighbors`` is not a mapping.
            InvalidCostError: If any edge cost is invalid.
        """
        validate_node(node)
        edges = flatten_neighbors(node, neighbors)
        self._graph[node] = edges
        self._logger.debug(
            "Node added",
            extra={"node": node, "edges": len(edges)},
        )
        return self

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Nodes with an adjacency entry, in insertion order."""
        return tuple(self._graph)

    def neighbors(self, node: Node) -> Mapping[Node, float]:
        """Read-only view of a node's outgoing edges."""
        return MappingProxyType(self._graph.get(node, {}))

    def search(self, start: Node, goal: Node) -> PathResult:
        """Run Dijkstra from ``start`` until ``goal`` is finalized.

        Returns:
            PathResult ordered from start to goal, or an empty result in
            the EXHAUSTED state when the goal is unreachable. Only the
            terminal states FOUND and EXHAUSTED are ever reported.
        """
        if not self._graph:
            self._logger.debug(
                "Empty graph, no path",
                extra={"start": start, "goal": goal},
            )
            return PathResult(path=None, cost=0.0, state=SearchState.EXHAUSTED)

        frontier = self._frontier_factory()
        explored: Set[Node] = set()
        previous: Dict[Node, Node] = {}

        frontier.insert_or_update(start, 0)

        while not frontier.is_empty():
            entry = frontier.extract_min()

            if entry.node == goal:
                path = self._reconstruct(previous, start, goal)
                self._logger.debug(
                    "Path found",
                    extra={
                        "start": start,
                        "goal": goal,
                        "cost": entry.priority,
                        "explored": len(explored),
                    },
                )
                return PathResult(path=path, cost=entry.priority, state=SearchState.FOUND)

            explored.add(entry.node)

            for neighbor, cost in self._graph.get(entry.node, {}).items():
                if neighbor in explored:
                    continue

                candidate = entry.priority + cost
                if not frontier.contains(neighbor):
                    previous[neighbor] = entry.node
                    frontier.insert_or_update(neighbor, candidate)
                elif candidate < frontier.peek(neighbor):
                    previous[neighbor] = entry.node
                    frontier.insert_or_update(neighbor, candidate)

        self._logger.debug(
            "No path",
            extra={"start": start, "goal": goal, "explored": len(explored)},
        )
        return PathResult(path=None, cost=0.0, state=SearchState.EXHAUSTED)

    def path(
        self,
        start: Node,
        goal: Node,
        options: Optional[Union[PathOptions, Mapping[str, Any]]] = None,
        **flags: Any,
    ) -> PathOutput:
        """Compute the cheapest path between two nodes.

        Args:
            start: Node to start from.
            goal: Node to reach.
            options: PathOptions or a mapping with ``trim``, ``reverse``
                and ``cost`` flags.
            **flags: The same flags given as keywords; they override
                ``options``.

        Returns:
            The list of nodes from start to goal, or None when no path
            exists. With ``cost`` set, a ``{"path": ..., "cost": ...}``
            dict where ``path`` is None and ``cost`` is 0 when no path
            exists.

        Raises:
            InvalidOptionsError: If the options are malformed.
        """
        opts = resolve_options(options, **flags)
        result = self.search(start, goal)

        if not result.found:
            return result.to_dict() if opts.cost else None

        nodes = list(result.path)
        if opts.trim:
            nodes = nodes[1:-1]
        if opts.reverse:
            nodes.reverse()

        if opts.cost:
            return {"path": nodes, "cost": result.cost}
        return nodes

    @staticmethod
    def _reconstruct(previous: Mapping[Node, Node], start: Node, goal: Node) -> Tuple[Node, ...]:
        chain = [goal]
        node = goal
        while node != start:
            node = previous[node]
            chain.append(node)
        chain.reverse()
        return tuple(chain)

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __len__(self) -> int:
        return len(self._graph)

    def __repr__(self) -> str:
        return f"PathFinder(nodes={len(self._graph)})"
