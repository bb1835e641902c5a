"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the library. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EmptyFrontierError,
    GraphError,
    GraphPathError,
    InvalidArgumentTypeError,
    InvalidCostError,
    InvalidOptionsError,
    InvalidPriorityError,
)
from .models import FrontierEntry, Node, PathResult, SearchState

__all__ = [
    # Models
    "Node",
    "FrontierEntry",
    "PathResult",
    "SearchState",
    # Errors
    "GraphPathError",
    "InvalidArgumentTypeError",
    "InvalidCostError",
    "InvalidPriorityError",
    "EmptyFrontierError",
    "InvalidOptionsError",
    "GraphError",
    "ConfigurationError",
]
