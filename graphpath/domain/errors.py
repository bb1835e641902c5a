"""Typed domain errors for graphpath.

Every validation failure is raised synchronously at the point of input
and carries enough context to tell which value was rejected.

All errors inherit from GraphPathError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class GraphPathError(Exception):
    """Base error for the graphpath library.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentTypeError(GraphPathError):
    """Construction data, neighbours or node name has the wrong type.

    Attributes:
        argument: Name of the offending argument
        received_type: Type name of the rejected value
    """

    argument: str = ""
    received_type: str = ""


@dataclass
class InvalidCostError(GraphPathError):
    """An edge cost is not a finite number greater than or equal to zero.

    Attributes:
        node: Source node of the edge, if known
        target: Target node of the edge, if known
        value: The rejected raw value
    """

    node: Any = None
    target: Any = None
    value: Any = None


@dataclass
class InvalidPriorityError(GraphPathError):
    """A frontier priority could not be read as a number.

    Attributes:
        node: The node whose priority was being set
        value: The rejected raw value
    """

    node: Any = None
    value: Any = None


@dataclass
class EmptyFrontierError(GraphPathError):
    """Extraction was attempted on an empty frontier."""


@dataclass
class InvalidOptionsError(GraphPathError):
    """Path options are not a recognized configuration object.

    Attributes:
        options: The rejected options value
    """

    options: Any = None


@dataclass
class GraphError(GraphPathError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(GraphPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
