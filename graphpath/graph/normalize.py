"""Normalization of raw graph data into adjacency mappings.

Raw input is nested mapping data such as parsed JSON or YAML::

    {"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}}

Neighbour mappings may contain nested groups; the groups are flattened
so every node ends up with a single ``{target: cost}`` mapping. Every
leaf must be a finite number greater than or equal to zero.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional

from ..domain.errors import InvalidArgumentTypeError, InvalidCostError
from ..domain.models import Node


def parse_cost(value: Any, node: Optional[Node] = None, target: Optional[Node] = None) -> float:
    """Parse an edge cost.

    Numeric strings are accepted so data read from text files can be
    passed through unchanged.

    Raises:
        InvalidCostError: If the value is not a finite number >= 0.
    """
    if isinstance(value, bool):
        raise InvalidCostError(
            f"Cost of {node!r} -> {target!r} must be a number, got a boolean",
            node=node,
            target=target,
            value=value,
        )
    try:
        cost = float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidCostError(
            f"Cost of {node!r} -> {target!r} must be a number, got {value!r}",
            node=node,
            target=target,
            value=value,
            cause=e,
        )
    if not math.isfinite(cost):
        raise InvalidCostError(
            f"Cost of {node!r} -> {target!r} must be finite, got {value!r}",
            node=node,
            target=target,
            value=value,
        )
    if cost < 0:
        raise InvalidCostError(
            f"Cost of {node!r} -> {target!r} must be >= 0, got {value!r}",
            node=node,
            target=target,
            value=value,
        )
    return cost


def validate_node(node: Any, argument: str = "node") -> Node:
    cause: Optional[Exception] = None
    if node is not None:
        try:
            hash(node)
            return node
        except TypeError as e:
            cause = e
    raise InvalidArgumentTypeError(
        f"{argument} must be a hashable, non-None identifier",
        argument=argument,
        received_type=type(node).__name__,
        cause=cause,
    )


def flatten_neighbors(node: Node, neighbors: Any) -> Dict[Node, float]:
    """Flatten a neighbour mapping into ``{target: cost}``.

    Nested mappings are groups of further targets for the same node.
    When a target appears more than once the last value wins.

    Raises:
        InvalidArgumentTypeError: If ``neighbors`` is not a mapping.
        InvalidCostError: If any leaf is not a valid cost.
    """
    if not isinstance(neighbors, Mapping):
        raise InvalidArgumentTypeError(
            f"Neighbours of {node!r} must be a mapping",
            argument="neighbors",
            received_type=type(neighbors).__name__,
        )

    flat: Dict[Node, float] = {}
    _collect(node, neighbors, flat)
    return flat


def _collect(node: Node, group: Mapping, into: Dict[Node, float]) -> None:
    for target, value in group.items():
        if isinstance(value, Mapping):
            _collect(node, value, into)
        else:
            into[target] = parse_cost(value, node=node, target=target)


def build_adjacency(data: Any) -> Dict[Node, Dict[Node, float]]:
    """Normalize construction data into a fresh adjacency mapping.

    Nothing is returned unless every node and every cost validates.

    Raises:
        InvalidArgumentTypeError: If ``data`` or one of its values is not
            a mapping.
        InvalidCostError: If any cost is invalid.
    """
    if not isinstance(data, Mapping):
        raise InvalidArgumentTypeError(
            "Graph data must be a mapping of node to neighbours",
            argument="data",
            received_type=type(data).__name__,
        )

    adjacency: Dict[Node, Dict[Node, float]] = {}
    for node, neighbors in data.items():
        validate_node(node)
        adjacency[node] = flatten_neighbors(node, neighbors)
    return adjacency
