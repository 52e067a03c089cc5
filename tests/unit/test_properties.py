"""Property-based tests for normalization."""

from hypothesis import given, settings
from hypothesis.strategies import integers, lists, tuples

from pathgraph.core.normalizer import normalize, prune_dangling
from pathgraph.domain import Graph, Node

points = lists(tuples(integers(0, 10), integers(0, 10)), min_size=3, max_size=7)
index_pairs = lists(tuples(integers(0, 6), integers(0, 6)), max_size=12)


def _graph(coordinates: list[tuple[int, int]], pairs: list[tuple[int, int]]) -> Graph:
    nodes = [Node(f"n{i}", x, y) for i, (x, y) in enumerate(coordinates)]
    graph = Graph()
    for i, j in pairs:
        i %= len(nodes)
        j %= len(nodes)
        if i != j:
            graph.add_edge(nodes[i], nodes[j])
    return graph


def _snapshot(graph: Graph):
    nodes = sorted((node.id, node.x, node.y) for node in graph.get_nodes())
    edges = sorted((node1.id, node2.id) for node1, node2 in graph.get_edges())
    return nodes, edges


@settings(deadline=None)
@given(points, index_pairs)
def test_normalize_leaves_input_untouched(coordinates, pairs):
    graph = _graph(coordinates, pairs)
    before = _snapshot(graph)

    normalize(graph)

    assert _snapshot(graph) == before
    assert not graph.normalized


@settings(deadline=None)
@given(points, index_pairs)
def test_normalized_adjacency_is_symmetric(coordinates, pairs):
    result = normalize(_graph(coordinates, pairs))

    for node in result.get_nodes():
        neighbors = result.get_neighbors(node.id)
        assert node.id not in neighbors
        assert len(neighbors) == len(set(neighbors))
        for next_id in neighbors:
            assert next_id in result
            assert node.id in result.get_neighbors(next_id)


@settings(deadline=None)
@given(points, index_pairs)
def test_normalized_has_no_open_ends(coordinates, pairs):
    result = normalize(_graph(coordinates, pairs))

    assert result.normalized
    assert all(result.degree(node.id) >= 2 for node in result.get_nodes())


@settings(deadline=None)
@given(points, index_pairs)
def test_normalized_nodes_come_from_input_or_crossings(coordinates, pairs):
    graph = _graph(coordinates, pairs)
    result = normalize(graph)

    for node in result.get_nodes():
        if node.is_crossing:
            assert all(endpoint in graph for endpoint in node.crossing_of)
        else:
            assert graph.get_node(node.id) == node


@given(points, index_pairs)
def test_prune_dangling_is_idempotent(coordinates, pairs):
    graph = prune_dangling(_graph(coordinates, pairs))
    before = _snapshot(graph)
    assert _snapshot(prune_dangling(graph)) == before
