"""Command that builds a small sample graph and runs traversals on it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from adjgraph.algorithms import bfs, dfs
from adjgraph.graph import Graph


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="adjgraph",
        description="Build a sample graph, edit it and print its DFS and BFS orders.",
    )


def _print_order(label: str, order: list[int]) -> None:
    print(f"{label}: " + ", ".join(str(vertex) for vertex in order))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sample session and return the exit status."""
    _build_parser().parse_args(argv)

    graph = Graph(5)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3, 5)
    graph.add_edge(2, 3, 2)
    graph.add_edge(3, 4, 1)

    print("Graph representation:")
    graph.print_graph()

    print("\nRemoving edge (1, 3)...")
    graph.remove_edge(1, 3)
    graph.print_graph()

    graph.add_edge(1, 3, 4)
    _print_order("DFS", dfs(graph, 0).order)
    _print_order("BFS", bfs(graph, 0).order)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())