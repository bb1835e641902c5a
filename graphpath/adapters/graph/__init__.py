"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads graph data from CSV files
"""

from .csv_repository import CSVGraphRepository

__all__ = ["CSVGraphRepository"]
