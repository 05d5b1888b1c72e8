"""Traversals, shortest paths and spanning trees over adjgraph graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from adjgraph.graph import Graph
from adjgraph.structures import PriorityQueue, Queue, Stack, UnionFind

_NEGATIVE_EDGE = (
    "Error: Negative edge weight detected. "
    "Dijkstra's algorithm cannot handle negative edges."
)


@dataclass
class Traversal:
    """Result of a graph traversal: the tree it built and the visiting order."""

    tree: Graph
    order: list[int] = field(default_factory=list)


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError("Invalid vertex index")


def _traverse(graph: Graph, start: int, frontier: Union[Queue, Stack]) -> Traversal:
    _check_start(graph, start)
    result = Traversal(Graph(len(graph)))
    visited = [False] * len(graph)

    visited[start] = True
    frontier.push(start)
    while not frontier.is_empty():
        vertex = frontier.pop()
        result.order.append(vertex)
        for edge in graph.neighbors(vertex):
            if not visited[edge.dest]:
                visited[edge.dest] = True
                result.tree.add_edge(vertex, edge.dest, edge.weight)
                frontier.push(edge.dest)
    return result


def bfs(graph: Graph, start: int) -> Traversal:
    """Breadth-first traversal from start; raises ValueError on an empty graph."""
    return _traverse(graph, start, Queue(len(graph)))


def dfs(graph: Graph, start: int) -> Traversal:
    """Depth-first traversal from start using an explicit stack."""
    return _traverse(graph, start, Stack(len(graph)))


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the graph of every edge that improved a distance from start.

    Raises ValueError if any edge weight is negative or the graph is empty.
    """
    if any(weight < 0 for _, _, weight in graph.edges()):
        raise ValueError(_NEGATIVE_EDGE)

    size = len(graph)
    tree = Graph(size)
    queue = PriorityQueue(size)
    _check_start(graph, start)

    dist: list[Optional[int]] = [None] * size
    visited = [False] * size
    dist[start] = 0
    queue.push(start, 0)

    while not queue.is_empty():
        u = queue.pop()
        if visited[u]:
            continue
        visited[u] = True
        base = dist[u]
        for edge in graph.neighbors(u):
            candidate = base + edge.weight
            current = dist[edge.dest]
            if current is None or candidate < current:
                dist[edge.dest] = candidate
                queue.push(edge.dest, candidate)
                tree.add_edge(u, edge.dest, edge.weight)
    return tree


def prim(graph: Graph) -> Graph:
    """Minimum spanning tree grown from vertex 0.

    Vertices not reachable from vertex 0 are left without edges.
    """
    size = len(graph)
    mst = Graph(size)
    queue = PriorityQueue(size)

    key: list[Optional[int]] = [None] * size
    parent: list[Optional[int]] = [None] * size
    in_mst = [False] * size

    key[0] = 0
    queue.push(0, 0)
    while not queue.is_empty():
        u = queue.pop()
        in_mst[u] = True
        for edge in graph.neighbors(u):
            v = edge.dest
            if not in_mst[v] and (key[v] is None or edge.weight < key[v]):
                key[v] = edge.weight
                parent[v] = u
                queue.push(v, edge.weight)

    for vertex in range(1, size):
        if parent[vertex] is not None:
            mst.add_edge(parent[vertex], vertex, key[vertex])
    return mst


def kruskal(graph: Graph) -> Graph:
    """Minimum spanning forest built by joining the lightest edges first."""
    size = len(graph)
    mst = Graph(size)
    sets = UnionFind(size)

    candidates = sorted(
        (edge for edge in graph.edges() if edge[0] != edge[1]),
        key=lambda edge: edge[2],
    )
    for u, v, weight in candidates:
        if sets.find(u) != sets.find(v):
            sets.unite(u, v)
            mst.add_edge(u, v, weight)
    return mst