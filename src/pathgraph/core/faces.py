"""Face and outline extraction from normalized path graphs.

Both walks use the same turning rule: arriving at a node, leave along the
edge with the smallest angle measured from the edge just travelled (in the
reverse direction). Going straight back is always the last choice. On a
planar subdivision this rule traces each face boundary exactly once per
direction.

Functions accept any graph; a graph that is not flagged as normalized is
normalized first and the caller's graph is left untouched.
"""

import logging
import math

from pathgraph.core.geometry import get_edge_id, normalize_radian, signed_area
from pathgraph.core.normalizer import normalize
from pathgraph.domain import Graph, Node
from pathgraph.exceptions import IsolatedNodeError

logger = logging.getLogger(__name__)

Face = list[Node]


def _ensure_normalized(graph: Graph) -> Graph:
    if graph.normalized:
        return graph
    return normalize(graph)


def get_node_by_smallest_angle(graph: Graph, node_id: str, start_angle: float) -> Node:
    """Pick the neighbor reached by the smallest turn from ``start_angle``.

    Angles are measured as ``(edge_angle - start_angle) mod 2π``; a result of
    exactly 0 counts as 2π. When two neighbors have the same angle the first
    one in adjacency order wins.

    Args:
        graph: Graph to walk
        node_id: Id of the current node
        start_angle: Reference direction in radians

    Returns:
        The chosen neighbor
    """
    next_ids = graph.get_neighbors(node_id)
    if not next_ids:
        graph.get_node(node_id)
        raise IsolatedNodeError(node_id)

    best_node = graph.get_node(next_ids[0])
    best_angle = math.inf

    for next_id in next_ids:
        angle = normalize_radian(graph.get_argument(node_id, next_id) - start_angle)
        if angle == 0:
            angle = 2 * math.pi

        if angle < best_angle:
            best_node = graph.get_node(next_id)
            best_angle = angle

    return best_node


def canonicalize_face(face: Face) -> Face:
    """Rotate a face so it starts at its lowest-y node.

    On ties the last lowest node in the current order is used.
    """
    if not face:
        return []
    min_y = min(node.y for node in face)
    start_index = max(i for i, node in enumerate(face) if node.y == min_y)
    return face[start_index:] + face[:start_index]


def is_same_face(face1: Face, face2: Face) -> bool:
    """Check whether two canonicalized faces visit the same node ids in order."""
    return len(face1) == len(face2) and all(
        node1.id == node2.id for node1, node2 in zip(face1, face2)
    )


def get_outline(graph: Graph) -> Face:
    """Trace the outer boundary of a graph.

    Starts at the rightmost of the lowest-y nodes and follows the smallest-angle rule until it
    gets back to the start.

    Args:
        graph: Any graph

    Returns:
        Boundary nodes in walk order, canonicalized. Graphs with fewer than
        three nodes after normalization return their nodes as they are.
    """
    graph = _ensure_normalized(graph)

    if len(graph) < 3:
        return graph.get_nodes()

    # Rightmost of the lowest nodes: no neighbor lies at angle 0 from it
    start_node = min(graph.get_nodes(), key=lambda node: (node.y, -node.x))
    nodes: Face = [start_node]

    while True:
        start_angle = 0.0 if len(nodes) < 2 else graph.get_argument(nodes[-1].id, nodes[-2].id)
        node = get_node_by_smallest_angle(graph, nodes[-1].id, start_angle)
        if node.id == start_node.id:
            break
        nodes.append(node)

    return canonicalize_face(nodes)


def get_faces(graph: Graph) -> list[Face]:
    """Extract every bounded face of a graph.

    Faces are traced from a stack of directed edges, seeded with the first
    node and its first neighbor. Each undirected edge borders at most two
    faces, so an edge is not explored again once it has been walked twice.
    After tracing a face, the reverse of each of its edges leads into the
    neighboring face and is pushed for exploration.

    The boundary around the unbounded region is walked in the opposite
    rotational sense from bounded faces; it is traversed for bookkeeping but
    not returned.

    Only the connected component of the seed edge is explored.

    Args:
        graph: Any graph

    Returns:
        Canonicalized faces
    """
    graph = _ensure_normalized(graph)

    faces: list[Face] = []
    if len(graph) < 3:
        return faces

    first = graph.get_nodes()[0]
    second = graph.get_node(graph.get_neighbors(first.id)[0])

    edge_visit_count: dict[str, int] = {}
    stack: list[tuple[Node, Node]] = [(first, second)]

    while stack:
        node1, node2 = stack.pop()
        if edge_visit_count.get(get_edge_id(node1.id, node2.id), 0) >= 2:
            continue

        face_nodes: Face = [node1, node2]
        while True:
            next_node = get_node_by_smallest_angle(
                graph,
                face_nodes[-1].id,
                graph.get_argument(face_nodes[-1].id, face_nodes[-2].id),
            )
            if next_node.id == face_nodes[0].id:
                break
            face_nodes.append(next_node)

        if len(face_nodes) < 3:
            continue

        if signed_area(face_nodes) < 0:
            faces.append(canonicalize_face(face_nodes))

        for i, start in enumerate(face_nodes):
            end = face_nodes[(i + 1) % len(face_nodes)]
            edge_id = get_edge_id(start.id, end.id)
            visit_count = edge_visit_count.get(edge_id, 0) + 1
            edge_visit_count[edge_id] = visit_count

            if visit_count < 2:
                stack.append((end, start))

    logger.debug("Extracted %d faces from %d nodes", len(faces), len(graph))
    return faces
