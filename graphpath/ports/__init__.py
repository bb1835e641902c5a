"""Ports layer - Abstract interfaces (Protocols) for the library.

Ports define the contracts between the path-finding core and the
pieces that can be swapped out around it.
"""

from .graph import FrontierPort, GraphRepositoryPort

__all__ = [
    "FrontierPort",
    "GraphRepositoryPort",
]
