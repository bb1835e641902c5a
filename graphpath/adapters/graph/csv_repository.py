"""CSV Graph Repository adapter.

Reads a directed graph from two CSV files:

- ``edges.csv`` with ``source,target,cost`` columns (required)
- ``nodes.csv`` with a ``node_id`` column (optional), used to register
  nodes that have no outgoing edges

Costs are returned as the raw strings found in the file; PathFinder
validates them when the data is loaded into a graph.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError

RawGraph = Dict[str, Dict[str, str]]


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[RawGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> RawGraph:
        """Load the graph from CSV files.

        Returns:
            Mapping of node id to ``{target: cost}``.

        Raises:
            GraphError: If a file cannot be read or lacks required columns.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "edges_path": str(self.config.edges_path),
                "nodes_path": str(self.config.nodes_path),
            },
        )

        graph: RawGraph = {}
        if self.config.nodes_path.exists():
            for node in self._read_nodes():
                graph.setdefault(node, {})
        self._read_edges(graph)

        self._graph = graph
        self._logger.info("Graph loaded", extra={"nodes": len(graph)})
        return graph

    def _read_nodes(self) -> List[str]:
        path = self.config.nodes_path
        nodes: List[str] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._require_columns(reader, ("node_id",), str(path))
                for row in reader:
                    node = (row.get("node_id") or "").strip()
                    if node:
                        nodes.append(node)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Failed to read nodes: {e}",
                file_path=str(path),
                cause=e,
            )
        return nodes

    def _read_edges(self, graph: RawGraph) -> None:
        path = self.config.edges_path
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._require_columns(reader, ("source", "target", "cost"), str(path))
                for row in reader:
                    source = (row.get("source") or "").strip()
                    target = (row.get("target") or "").strip()
                    cost = (row.get("cost") or "").strip()

                    if not source or not target:
                        continue

                    # Later rows overwrite earlier ones for the same edge
                    graph.setdefault(source, {})[target] = cost
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Failed to read edges: {e}",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _require_columns(reader: csv.DictReader, columns: Sequence[str], file_path: str) -> None:
        missing = [name for name in columns if name not in (reader.fieldnames or ())]
        if missing:
            raise GraphError(
                f"Missing columns: {', '.join(missing)}",
                file_path=file_path,
            )

    def list_nodes(self) -> Sequence[str]:
        """List every node, including nodes only seen as edge targets."""
        graph = self.load()
        nodes: Dict[str, None] = dict.fromkeys(graph)
        for neighbors in graph.values():
            nodes.update(dict.fromkeys(neighbors))
        return list(nodes)

    def clear_cache(self) -> None:
        """Clear cached graph data."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
