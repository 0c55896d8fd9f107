"""Explosive percolation simulations on union-find random graphs, with plotting tools."""

__version__ = "0.1.0"