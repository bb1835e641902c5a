"""Weighted-graph shortest paths.

Build a directed graph of named nodes joined by non-negative edge costs
and query the cheapest path between any two of them:

    from graphpath import PathFinder

    finder = PathFinder({"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}})
    finder.path("A", "C")              # ['A', 'B', 'C']
    finder.path("A", "C", cost=True)   # {'path': ['A', 'B', 'C'], 'cost': 2.0}
"""

from .adapters.graph import CSVGraphRepository
from .config import get_config, reset_config
from .domain import (
    ConfigurationError,
    EmptyFrontierError,
    FrontierEntry,
    GraphError,
    GraphPathError,
    InvalidArgumentTypeError,
    InvalidCostError,
    InvalidOptionsError,
    InvalidPriorityError,
    PathResult,
    SearchState,
)
from .graph import Frontier, PathFinder, PathOptions
from .logging_setup import configure_logging

__version__ = "0.1.0"

__all__ = [
    "PathFinder",
    "Frontier",
    "PathOptions",
    "PathResult",
    "FrontierEntry",
    "SearchState",
    "CSVGraphRepository",
    "get_config",
    "reset_config",
    "configure_logging",
    "GraphPathError",
    "InvalidArgumentTypeError",
    "InvalidCostError",
    "InvalidPriorityError",
    "EmptyFrontierError",
    "InvalidOptionsError",
    "GraphError",
    "ConfigurationError",
]
