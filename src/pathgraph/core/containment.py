"""Point containment against the outline of a path graph."""

from pathgraph.core.faces import get_outline
from pathgraph.core.geometry import PointLike
from pathgraph.domain import Graph


def contains(graph: Graph, point: PointLike) -> bool:
    """Determine if a point is inside the outline of a graph.

    Casts a horizontal ray from the point to the right and counts crossings
    with outline edges. Odd count means inside. Horizontal edges are
    skipped, and an edge only counts when the point's y lies in
    [min(y1, y2), max(y1, y2)).

    Args:
        graph: Any graph; it is normalized if needed
        point: The point to test

    Returns:
        True if the point is inside the outline
    """
    outline = get_outline(graph)

    count = 0
    for i, p1 in enumerate(outline):
        p2 = outline[(i + 1) % len(outline)]
        if p1.y == p2.y:
            continue
        if point.y < p1.y and point.y < p2.y:
            continue
        if point.y >= p1.y and point.y >= p2.y:
            continue

        x = (p2.x - p1.x) * (point.y - p1.y) / (p2.y - p1.y) + p1.x
        if x > point.x:
            count += 1

    return count % 2 == 1
