"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Edge:
    """One entry of an adjacency list: the far vertex and the edge weight."""

    dest: int
    weight: int


class Graph:
    """Undirected graph with a fixed number of vertices.

    Each vertex keeps its neighbours with the most recently added edge first.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("Number of vertices must not be negative")
        # Stored in insertion order; read back newest first.
        self._adj: list[list[Edge]] = [[] for _ in range(vertices)]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < len(self._adj):
                raise IndexError("Invalid vertex index")

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Connect src and dest with an edge of the given weight."""
        self._check(src, dest)
        self._adj[src].append(Edge(dest, weight))
        self._adj[dest].append(Edge(src, weight))

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the most recently added edge between src and dest, if any."""
        self._check(src, dest)
        self._remove_newest(src, dest)
        self._remove_newest(dest, src)

    def _remove_newest(self, vertex: int, dest: int) -> None:
        entries = self._adj[vertex]
        for index in range(len(entries) - 1, -1, -1):
            if entries[index].dest == dest:
                del entries[index]
                return

    def neighbors(self, vertex: int) -> Iterator[Edge]:
        """Yield the edges leaving vertex, newest first."""
        self._check(vertex)
        return reversed(self._adj[vertex])

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield each undirected edge once as (src, dest, weight) with src <= dest."""
        for src in range(len(self._adj)):
            loop_seen = False
            for edge in self.neighbors(src):
                if src < edge.dest:
                    yield src, edge.dest, edge.weight
                elif src == edge.dest:
                    # A self-loop appears twice in its own list.
                    if not loop_seen:
                        yield src, src, edge.weight
                    loop_seen = not loop_seen

    def total_weight(self) -> int:
        """Sum of the weights of all adjacency entries (each edge counts twice)."""
        return sum(edge.weight for entries in self._adj for edge in entries)

    def _lines(self) -> Iterator[str]:
        for vertex in range(len(self._adj)):
            pairs = "".join(f"({e.dest}, {e.weight}) " for e in self.neighbors(vertex))
            yield f"{vertex}: {pairs}\n"

    def format(self) -> str:
        """Render the adjacency lists, one line per vertex."""
        return "".join(self._lines())

    def print_graph(self) -> None:
        """Write the adjacency lists to standard output, one line per vertex."""
        out = sys.stdout
        for line in self._lines():
            out.write(line)
        out.flush()

    def __len__(self) -> int:
        return len(self._adj)