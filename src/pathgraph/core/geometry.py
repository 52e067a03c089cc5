"""Geometric primitives for the path graph engine.

This module provides the pure math the normalizer and face extractor build on:
- Radian normalization into [0, 2π)
- Strict segment crossing test (orientation determinants)
- Crossing point computation (weighted barycentric form)
- Signed area calculation (shoelace formula)
- Point-on-segment test
- Canonical edge ids

All functions are pure and stateless. Points are anything with ``x`` and
``y`` attributes, which includes graph nodes.
"""

import math
from typing import Protocol

TAU = 2 * math.pi


class PointLike(Protocol):
    """Anything carrying planar coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


def normalize_radian(value: float) -> float:
    """Wrap an angle into the range [0, 2π).

    Args:
        value: Angle in radians, any sign or magnitude

    Returns:
        Equivalent angle in [0, 2π)

    Examples:
        >>> normalize_radian(-math.pi / 2) == 3 * math.pi / 2
        True
        >>> normalize_radian(2 * math.pi)
        0.0
    """
    return value % TAU


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


def is_cross(p00: PointLike, p01: PointLike, p10: PointLike, p11: PointLike) -> bool:
    """Check if two line segments properly cross each other.

    The segments cross only when the endpoints of each lie strictly on
    opposite sides of the other. Collinear overlaps and touching endpoints
    are not crossings.

    Args:
        p00: Start point of the first segment
        p01: End point of the first segment
        p10: Start point of the second segment
        p11: End point of the second segment

    Returns:
        True if the open segments intersect in exactly one point
    """
    dx0001 = p01.x - p00.x
    dy0001 = p01.y - p00.y
    dx1011 = p11.x - p10.x
    dy1011 = p11.y - p10.y

    cross_00010010 = _cross(dx0001, dy0001, p10.x - p00.x, p10.y - p00.y)
    cross_00010011 = _cross(dx0001, dy0001, p11.x - p00.x, p11.y - p00.y)
    cross_10111000 = _cross(dx1011, dy1011, p00.x - p10.x, p00.y - p10.y)
    cross_10111001 = _cross(dx1011, dy1011, p01.x - p10.x, p01.y - p10.y)

    return cross_00010010 * cross_00010011 < 0 and cross_10111000 * cross_10111001 < 0


def get_cross_point(
    p00: PointLike, p01: PointLike, p10: PointLike, p11: PointLike
) -> tuple[float, float]:
    """Compute where segment p00-p01 crosses segment p10-p11.

    The distances of p00 and p01 from the line through the second segment
    (as orientation determinant magnitudes) weight an interpolation between
    p00 and p01. Only call this for segments where ``is_cross`` holds.

    Args:
        p00: Start point of the first segment
        p01: End point of the first segment
        p10: Start point of the second segment
        p11: End point of the second segment

    Returns:
        Tuple of (x, y) of the crossing

    Examples:
        >>> from pathgraph.domain import Node
        >>> get_cross_point(Node("a", 0, 0), Node("b", 2, 2), Node("c", 0, 2), Node("d", 2, 0))
        (1.0, 1.0)
    """
    dx1011 = p11.x - p10.x
    dy1011 = p11.y - p10.y

    dx1000 = p00.x - p10.x
    dy1000 = p00.y - p10.y
    weight_00 = abs(_cross(dx1000, dy1000, dx1011, dy1011))

    dx1001 = p01.x - p10.x
    dy1001 = p01.y - p10.y
    weight_01 = abs(_cross(dx1001, dy1001, dx1011, dy1011))

    total = weight_00 + weight_01
    x = p10.x + (weight_01 * dx1000 + weight_00 * dx1001) / total
    y = p10.y + (weight_01 * dy1000 + weight_00 * dy1001) / total
    return (x, y)


def signed_area(points: list[PointLike]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Args:
        points: Polygon vertices in traversal order

    Returns:
        Signed area; positive for counter-clockwise order in a y-up frame.
        Returns 0.0 for fewer than three points.
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def point_on_segment(
    point: PointLike, start: PointLike, end: PointLike, tolerance: float = 1e-6
) -> bool:
    """Check whether a point lies strictly inside a line segment.

    The point must be within ``tolerance`` of the segment's line and project
    between the endpoints, excluding points within ``tolerance`` of either
    endpoint.

    Args:
        point: The point to test
        start: First endpoint of the segment
        end: Second endpoint of the segment
        tolerance: Distance tolerance in drawing units

    Returns:
        True if the point is on the segment's interior
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length <= tolerance:
        return False

    distance = abs(_cross(dx, dy, point.x - start.x, point.y - start.y)) / length
    if distance >= tolerance:
        return False

    # Projection along the segment, in drawing units
    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length
    return tolerance < t < length - tolerance


def get_edge_id(node_id1: str, node_id2: str) -> str:
    """Return an id for the undirected edge between two nodes.

    Examples:
        >>> get_edge_id("b", "a")
        'a-b'
    """
    if node_id1 < node_id2:
        return f"{node_id1}-{node_id2}"
    return f"{node_id2}-{node_id1}"
