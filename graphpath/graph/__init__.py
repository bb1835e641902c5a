"""Graph core: the priority frontier and the Dijkstra path finder.

This subpackage contains the in-memory graph, the normalization of raw
nested data into it, and the shortest-path search on top of it.
"""

from .frontier import Frontier
from .normalize import build_adjacency, flatten_neighbors, parse_cost
from .options import PathOptions, resolve_options
from .path_finder import PathFinder

__all__ = [
    "Frontier",
    "PathFinder",
    "PathOptions",
    "resolve_options",
    "build_adjacency",
    "flatten_neighbors",
    "parse_cost",
]
