"""Unit tests for point containment."""

import pytest

from pathgraph.core.containment import contains
from pathgraph.domain import Graph, Node


def _p(x: float, y: float) -> Node:
    return Node("query", x, y)


class TestContains:
    """Tests for contains."""

    @pytest.mark.parametrize(
        ("x", "y"),
        [(0.5, 0.25), (0.1, 0.9), (0.5, 0.5), (0.99, 0.01)],
    )
    def test_inside_square(self, crossed_square: Graph, x: float, y: float):
        assert contains(crossed_square, _p(x, y))

    @pytest.mark.parametrize(
        ("x", "y"),
        [(2.0, 2.0), (-0.5, 0.5), (1.5, 0.5), (0.5, -0.1), (0.5, 1.1)],
    )
    def test_outside_square(self, crossed_square: Graph, x: float, y: float):
        assert not contains(crossed_square, _p(x, y))

    def test_bottom_edge_inside_top_edge_outside(self, crossed_square: Graph):
        """Edges count over the half-open span [min y, max y)."""
        assert contains(crossed_square, _p(0.5, 0.0))
        assert not contains(crossed_square, _p(0.5, 1.0))

    def test_triangle(self, triangle: Graph):
        assert contains(triangle, _p(0.2, 0.2))
        assert not contains(triangle, _p(0.8, 0.8))

    def test_bowtie_lobes(self, bowtie: Graph):
        assert contains(bowtie, _p(0.25, 1.0))
        assert contains(bowtie, _p(1.75, 1.0))
        assert not contains(bowtie, _p(1.0, 0.25))
        assert not contains(bowtie, _p(1.0, 1.75))

    def test_open_stroke_contains_nothing(self, make_graph):
        graph = make_graph(
            {"a": (0, 0), "b": (2, 0), "c": (2, 2)},
            [("a", "b"), ("b", "c")],
        )
        assert not contains(graph, _p(1.5, 0.5))

    def test_dangling_stroke_does_not_matter(self, triangle: Graph):
        triangle.add_edge(triangle.get_node("a"), Node("tail", -1, 0.5))
        assert not contains(triangle, _p(-0.5, 0.5))
        assert contains(triangle, _p(0.2, 0.2))
