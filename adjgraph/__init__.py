"""Undirected weighted graphs on adjacency lists, with traversal, shortest-path and spanning-tree algorithms."""

__version__ = "0.1.0"

__all__ = ["algorithms", "cli", "graph", "structures"]