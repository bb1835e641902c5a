"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the path-finding core to external data sources like
CSV files.
"""
