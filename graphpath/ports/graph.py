"""Graph ports - Abstractions for graph loading and path search.

These protocols define the contracts the path finder relies on: a
priority frontier to drive the search and a repository to load raw
graph data from.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..domain.models import FrontierEntry, Node


class FrontierPort(Protocol):
    """Port for the open set of a shortest-path search.

    Implementation: graph/frontier.py (Frontier)
    """

    def insert_or_update(self, node: Node, priority: Any) -> int:
        """Insert a node or overwrite its priority.

        Returns:
            The frontier size after the operation.
        """
        ...

    def extract_min(self) -> FrontierEntry:
        """Remove and return the entry with the lowest priority."""
        ...

    def is_empty(self) -> bool:
        ...

    def contains(self, node: Node) -> bool:
        ...

    def peek(self, node: Node) -> Optional[float]:
        """Return the current priority of a node, or None if absent."""
        ...

    def __len__(self) -> int:
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading raw graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository returns nested mapping data; validation of costs is
    left to PathFinder.
    """

    def load(self) -> Mapping[str, Mapping[str, Any]]:
        """Load the graph as a mapping of node to neighbours and costs."""
        ...

    def list_nodes(self) -> Sequence[str]:
        """List every node known to the repository."""
        ...
