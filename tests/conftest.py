"""Shared fixtures: small reference drawings and documents."""

import json
from pathlib import Path
from typing import Any

import pytest

from pathgraph.domain import Graph, Node


def build_graph(points: dict[str, tuple[float, float]], edges: list[tuple[str, str]]) -> Graph:
    """Build a graph from named coordinates and id pairs."""
    nodes = [Node(node_id, x, y) for node_id, (x, y) in points.items()]
    return Graph.from_lists(nodes, edges)


@pytest.fixture
def triangle() -> Graph:
    """Right triangle a(0,0), b(1,0), c(0,1)."""
    return build_graph(
        {"a": (0, 0), "b": (1, 0), "c": (0, 1)},
        [("a", "b"), ("b", "c"), ("c", "a")],
    )


@pytest.fixture
def crossed_square() -> Graph:
    """Unit square with both diagonals."""
    return build_graph(
        {"a": (0, 0), "b": (1, 0), "c": (1, 1), "d": (0, 1)},
        [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a"), ("a", "c"), ("b", "d")],
    )


@pytest.fixture
def bowtie() -> Graph:
    """Closed stroke crossing itself once at (1, 1)."""
    return build_graph(
        {"p1": (0, 0), "p2": (2, 2), "p3": (0, 2), "p4": (2, 0)},
        [("p1", "p2"), ("p2", "p4"), ("p4", "p3"), ("p3", "p1")],
    )


def path_entity_dict(entity_id: str, graph: Graph, **properties: Any) -> dict[str, Any]:
    """Serialize a graph as a path entity."""
    return {
        "id": entity_id,
        "type": "path",
        "nodes": [node.to_dict() for node in graph.get_nodes()],
        "edges": [[node1.id, node2.id] for node1, node2 in graph.get_edges()],
        **properties,
    }


@pytest.fixture
def document_path(tmp_path: Path, crossed_square: Graph) -> Path:
    """Document with a valid path, a shape, an empty path and a broken path."""
    document = {
        "version": 1,
        "entities": [
            path_entity_dict("square", crossed_square, colorId=3, strokeWidth=2),
            {"id": "box", "type": "shape", "x": 10, "y": 10},
            {"id": "empty", "type": "path", "nodes": [], "edges": []},
            {
                "id": "broken",
                "type": "path",
                "nodes": [{"id": "a", "x": 0, "y": 0}],
                "edges": [["a", "missing"]],
            },
        ],
    }
    path = tmp_path / "page.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def make_graph():
    """Factory fixture for ad-hoc graphs."""
    return build_graph
