"""Shortest paths across hexagonal grids with obstacles."""

__version__ = "0.1.0"
