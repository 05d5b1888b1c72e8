import pytest

from adjgraph.algorithms import Traversal, bfs, dfs, dijkstra, kruskal, prim
from adjgraph.graph import Graph
from adjgraph.structures import UnionFind


def _tree_graph():
    g = Graph(5)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(1, 3, 1)
    g.add_edge(1, 4, 1)
    return g


def _dijkstra_graph():
    g = Graph(5)
    g.add_edge(0, 1, 10)
    g.add_edge(0, 2, 5)
    g.add_edge(1, 2, 2)
    g.add_edge(1, 3, 1)
    g.add_edge(2, 3, 9)
    g.add_edge(2, 4, 2)
    g.add_edge(3, 4, 4)
    return g


def _prim_graph():
    g = Graph(5)
    g.add_edge(0, 1, 2)
    g.add_edge(0, 3, 6)
    g.add_edge(1, 2, 3)
    g.add_edge(1, 3, 8)
    g.add_edge(1, 4, 5)
    return g


def _kruskal_graph():
    g = Graph(5)
    g.add_edge(0, 1, 10)
    g.add_edge(0, 2, 6)
    g.add_edge(0, 3, 5)
    g.add_edge(1, 3, 15)
    g.add_edge(2, 3, 4)
    return g


def _weight(g):
    return sum(weight for _, _, weight in g.edges())


def _is_forest(g):
    sets = UnionFind(len(g))
    for u, v, _ in g.edges():
        if sets.find(u) == sets.find(v):
            return False
        sets.unite(u, v)
    return True


def test_bfs_order():
    result = bfs(_tree_graph(), 0)
    assert isinstance(result, Traversal)
    assert result.order == [0, 2, 1, 4, 3]


def test_dfs_order():
    result = dfs(_tree_graph(), 0)
    assert result.order == [0, 1, 3, 4, 2]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversal_tree_spans_connected_graph(traverse):
    g = _dijkstra_graph()
    result = traverse(g, 0)
    assert sorted(result.order) == list(range(5))
    assert result.order[0] == 0
    assert len(list(result.tree.edges())) == 4
    assert _is_forest(result.tree)


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversal_of_tree_keeps_all_edges(traverse):
    g = _tree_graph()
    tree = traverse(g, 0).tree
    assert sorted(tree.edges()) == sorted(g.edges())


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversal_skips_unreachable(traverse):
    g = Graph(4)
    g.add_edge(0, 1)
    result = traverse(g, 1)
    assert sorted(result.order) == [0, 1]
    assert list(result.tree.neighbors(2)) == []


@pytest.mark.parametrize("algorithm", [bfs, dfs, dijkstra])
def test_empty_graph_raises(algorithm):
    with pytest.raises(ValueError):
        algorithm(Graph(0), 0)


@pytest.mark.parametrize("algorithm", [bfs, dfs, dijkstra])
def test_start_out_of_range(algorithm):
    with pytest.raises(IndexError):
        algorithm(Graph(3), 5)


def test_dijkstra_tree_edges_come_from_graph():
    g = _dijkstra_graph()
    tree = dijkstra(g, 0)
    assert len(tree) == 5
    assert set(tree.edges()) <= set(g.edges())
    assert (1, 3, 1) in set(tree.edges())
    reached = bfs(tree, 0).order
    assert sorted(reached) == list(range(5))


def test_dijkstra_negative_edge():
    g = Graph(3)
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, -5)
    with pytest.raises(ValueError, match="Negative edge weight detected"):
        dijkstra(g, 0)


def test_prim_weight():
    mst = prim(_prim_graph())
    assert _weight(mst) == 16
    assert len(list(mst.edges())) == 4
    assert _is_forest(mst)


def test_prim_and_kruskal_agree():
    for g in (_prim_graph(), _dijkstra_graph(), _kruskal_graph()):
        assert _weight(prim(g)) == _weight(kruskal(g))


def test_kruskal_on_disconnected_graph():
    g = _kruskal_graph()
    mst = kruskal(g)
    assert len(list(mst.edges())) == 3
    assert _is_forest(mst)
    assert set(mst.edges()) <= set(g.edges())
    assert list(mst.neighbors(4)) == []


def test_prim_leaves_unreachable_vertex_alone():
    mst = prim(_kruskal_graph())
    assert list(mst.neighbors(4)) == []
    assert len(list(mst.edges())) == 3


def test_kruskal_ignores_self_loops():
    g = Graph(2)
    g.add_edge(0, 0, 1)
    g.add_edge(0, 1, 7)
    mst = kruskal(g)
    assert list(mst.edges()) == [(0, 1, 7)]


def test_kruskal_empty_graph():
    assert len(kruskal(Graph(0))) == 0


def test_prim_empty_graph_raises():
    with pytest.raises(ValueError):
        prim(Graph(0))