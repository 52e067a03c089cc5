"""Normalization of path graphs into planar subdivisions.

Normalization is a pure transformation that:
1. Inserts a crossing node wherever two edges properly intersect and splits
   both edges there (``split_crossings``)
2. Repeatedly removes nodes with at most one remaining neighbor until none
   are left (``prune_dangling``)

The result has no crossing edges and no open ends, which is what face and
outline extraction require.

The crossing test is pairwise over all edges, O(E²).
"""

import logging
import math

from pathgraph.core.geometry import get_cross_point, is_cross, point_on_segment
from pathgraph.domain import Graph, Node

logger = logging.getLogger(__name__)

DEFAULT_MERGE_TOLERANCE = 1e-6


def split_crossings(graph: Graph) -> Graph:
    """Materialize every edge crossing as a node, in place.

    Each pair of edges that share no endpoint and properly cross gets one
    crossing node, recorded against both edges. Every edge with crossings is
    then replaced by a chain of sub-edges through its crossing nodes, sorted
    along the edge.

    Collinear overlapping edges do not cross under the strict orientation
    test, so they are left as they are.

    Args:
        graph: Graph to modify

    Returns:
        The same graph
    """
    edges = graph.get_edges()
    new_nodes: dict[tuple[str, str], list[Node]] = {}
    endpoints: dict[tuple[str, str], tuple[Node, Node]] = {}

    for i, (p00, p01) in enumerate(edges):
        for p10, p11 in edges[i + 1 :]:
            if p00.id in (p10.id, p11.id) or p01.id in (p10.id, p11.id):
                continue
            if not is_cross(p00, p01, p10, p11):
                continue

            x, y = get_cross_point(p00, p01, p10, p11)
            cross_point = Node.crossing(p00.id, p01.id, p10.id, p11.id, x, y)

            key1 = (p00.id, p01.id)
            key2 = (p10.id, p11.id)
            new_nodes.setdefault(key1, []).append(cross_point)
            new_nodes.setdefault(key2, []).append(cross_point)
            endpoints[key1] = (p00, p01)
            endpoints[key2] = (p10, p11)

    for key, crossings in new_nodes.items():
        start, end = endpoints[key]
        chain = sorted(crossings, key=lambda node: (node.x, node.y))
        if (start.x, start.y) < (end.x, end.y):
            chain = [start, *chain, end]
        else:
            chain = [end, *chain, start]

        graph.delete_edge(start.id, end.id)
        for node1, node2 in zip(chain, chain[1:]):
            graph.add_edge(node1, node2)

    if new_nodes:
        logger.debug(
            "Split %d edges at crossings (%d edges tested)", len(new_nodes), len(edges)
        )
    return graph


def prune_dangling(graph: Graph) -> Graph:
    """Remove open ends, in place, until every node has degree two or more.

    A single pass is not enough: removing the tip of a dangling chain leaves
    the next node of the chain dangling. Degrees are counted among nodes not
    yet marked for removal, and nodes are deleted once the marking reaches a
    fixpoint.

    Args:
        graph: Graph to modify

    Returns:
        The same graph
    """
    to_be_deleted: set[str] = set()
    dirty = True
    while dirty:
        dirty = False
        for node in graph.get_nodes():
            if node.id in to_be_deleted:
                continue

            alive = [
                next_id
                for next_id in graph.get_neighbors(node.id)
                if next_id not in to_be_deleted
            ]
            if len(alive) <= 1:
                to_be_deleted.add(node.id)
                dirty = True

    for node_id in to_be_deleted:
        # Deleting a node also drops neighbors left without edges
        if node_id in graph:
            graph.delete_node(node_id)

    if to_be_deleted:
        logger.debug("Pruned %d dangling nodes", len(to_be_deleted))
    return graph


def normalize(graph: Graph) -> Graph:
    """Produce the planar subdivision of a graph.

    The input graph is not modified. The result is a new graph with an
    empty angle cache, flagged as normalized. Normalizing an already
    normalized graph returns a flagged copy of it.

    Args:
        graph: Any graph, possibly self-intersecting and with open ends

    Returns:
        New graph without crossing edges and without nodes of degree < 2
    """
    clone = graph.clone()
    if graph.normalized:
        clone.mark_normalized()
        return clone

    split_crossings(clone)
    prune_dangling(clone)

    clone.mark_normalized()
    return clone


def canonicalize(graph: Graph, tolerance: float = DEFAULT_MERGE_TOLERANCE) -> Graph:
    """Clean up edited geometry, in place.

    - Nodes closer than ``tolerance`` to each other are merged.
    - A node lying on the interior of an edge splits that edge.
    - Crossing edges and open ends are left as they are.

    Args:
        graph: Graph to modify
        tolerance: Distance below which two nodes are the same point

    Returns:
        The same graph
    """
    merged = 0
    nodes = graph.get_nodes()
    for i, node1 in enumerate(nodes):
        if node1.id not in graph:
            continue
        for node2 in nodes[i + 1 :]:
            if node2.id not in graph:
                continue
            if math.hypot(node1.x - node2.x, node1.y - node2.y) < tolerance:
                graph.merge_nodes(node1.id, node2.id)
                merged += 1
                break

    split = 0
    for node in graph.get_nodes():
        if node.id not in graph:
            continue
        for start, end in graph.get_edges():
            if node.id in (start.id, end.id):
                continue
            if point_on_segment(node, start, end, tolerance):
                graph.split_edge(start.id, end.id, node)
                split += 1

    logger.debug("Canonicalized graph: %d nodes merged, %d edges split", merged, split)
    return graph
