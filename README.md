# adjgraph

A small library for undirected, weighted graphs held as adjacency lists, with
breadth-first and depth-first traversal, Dijkstra's shortest paths, and Prim's
and Kruskal's minimum spanning trees.

## Installing

```
pip install .
```

## Building a graph

```python
from adjgraph.graph import Graph

g = Graph(5)
g.add_edge(0, 1)         # weight defaults to 1
g.add_edge(0, 2)
g.add_edge(1, 3, 5)
g.add_edge(2, 3, 2)
g.add_edge(3, 4, 1)

g.print_graph()          # one line per vertex, e.g. "0: (2, 1) (1, 1) "
text = g.format()        # the same listing as a string
len(g)                   # number of vertices
g.total_weight()         # sum over all adjacency entries: each edge counts twice

list(g.neighbors(3))     # Edge(dest, weight) items, newest first
list(g.edges())          # each edge once as (src, dest, weight), src <= dest

g.remove_edge(1, 3)      # removes the newest edge between 1 and 3, if any
```

Every edge is stored at both of its ends, and the newest edge comes first in a
vertex's list. A vertex index outside `0 .. len(g) - 1` raises `IndexError`;
a negative vertex count raises `ValueError`.

## Algorithms

```python
from adjgraph.algorithms import bfs, dfs, dijkstra, prim, kruskal

walk = bfs(g, 0)   # Traversal: walk.tree (Graph) and walk.order (visited vertices)
walk = dfs(g, 0)   # same, depth-first with an explicit stack
dijkstra(g, 0)     # Graph of every edge that improved a distance from vertex 0
prim(g)            # minimum spanning tree grown from vertex 0
kruskal(g)         # minimum spanning forest, lightest edges first
```

- `bfs` and `dfs` return a `Traversal` holding the tree of edges used to reach
  each vertex and the order in which vertices were visited.
- `dijkstra` raises `ValueError` if any edge weight is negative.
- `prim` leaves vertices that cannot be reached from vertex 0 without edges.
- `kruskal` ignores self-loops.
- A start vertex out of range raises `IndexError`. On a graph with no vertices,
  `bfs`, `dfs`, `dijkstra` and `prim` raise `ValueError`.

## Supporting structures

`adjgraph.structures` holds the containers the algorithms use: `Queue`,
`Stack`, `PriorityQueue` (lowest priority first, ties in insertion order) and
`UnionFind` (path compression, union by rank). The capacity is optional;
a capacity that is not positive raises `ValueError`, pushing onto a full
container raises `OverflowError`, and popping from an empty one raises
`IndexError`.

## Command line

```
adjgraph
```

Builds a five-vertex sample graph, prints it, removes edge (1, 3) and prints
it again, adds the edge back with weight 4, and prints the DFS and BFS visiting
orders from vertex 0. It takes no options besides `--help`.

## What it does not do

Graphs are built in code only: there is no reading or writing of graph files,
and no directed graphs. The command runs a fixed sample and does not accept a
graph of your own.