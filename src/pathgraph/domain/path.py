"""Path entity: the editor-facing owner of a graph.

A path entity holds exactly one graph. Edits never mutate a committed
entity: they clone its graph, apply the change, and wrap the result in a
new entity.
"""

from dataclasses import dataclass, field
from typing import Any

from pathgraph.domain.graph import Graph
from pathgraph.domain.node import Node

ENTITY_TYPE_PATH = "path"


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """A 2D affine transform ``(x, y) -> (a*x + c*y + e, b*x + d*y + f)``.

    Attributes:
        a, b, c, d: Linear part, column-major as in SVG ``matrix()``
        e, f: Translation
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def translate(cls, dx: float, dy: float) -> "AffineTransform":
        return cls(e=dx, f=dy)

    @classmethod
    def scale(
        cls, sx: float, sy: float, origin: tuple[float, float] = (0.0, 0.0)
    ) -> "AffineTransform":
        ox, oy = origin
        return cls(a=sx, d=sy, e=ox - sx * ox, f=oy - sy * oy)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map a point through this transform."""
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)


@dataclass(frozen=True)
class PathEntity:
    """A freeform multi-segment line on the canvas.

    Attributes:
        id: Entity id
        graph: The path's nodes and edges, owned exclusively by this entity
        properties: Style properties (color, stroke, ...) carried through
            serialization untouched
    """

    id: str
    graph: Graph
    properties: dict[str, Any] = field(default_factory=dict)

    def get_nodes(self) -> list[Node]:
        return self.graph.get_nodes()

    def get_node(self, node_id: str) -> Node | None:
        """Return a node by id, or None if this path has no such node."""
        if node_id not in self.graph:
            return None
        return self.graph.get_node(node_id)

    def get_edges(self) -> list[tuple[Node, Node]]:
        return self.graph.get_edges()

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the path's nodes.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y); all zero for an empty path
        """
        nodes = self.graph.get_nodes()
        if not nodes:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [node.x for node in nodes]
        ys = [node.y for node in nodes]
        return (min(xs), min(ys), max(xs), max(ys))

    def get_outline(self) -> list[Node]:
        """Return the outer boundary of the path, normalizing a copy if needed."""
        from pathgraph.core.faces import get_outline

        return get_outline(self.graph)

    def get_faces(self) -> list[list[Node]]:
        """Return the closed regions of the path."""
        from pathgraph.core.faces import get_faces

        return get_faces(self.graph)

    def contains(self, x: float, y: float) -> bool:
        """Hit-test a point against the path's outline."""
        from pathgraph.core.containment import contains

        return contains(self.graph, Node(id="", x=x, y=y))

    def with_graph(self, graph: Graph) -> "PathEntity":
        """Return an entity with the same id and properties over ``graph``."""
        return PathEntity(id=self.id, graph=graph, properties=dict(self.properties))

    def set_node_position(self, node_id: str, x: float, y: float) -> "PathEntity":
        """Return a new entity with one node moved."""
        graph = self.graph.clone()
        graph.set_node_position(node_id, x, y)
        return self.with_graph(graph)

    def transform(self, transform: AffineTransform) -> "PathEntity":
        """Return a new entity with every node mapped through ``transform``."""
        graph = self.graph.clone()
        for node in self.graph.get_nodes():
            x, y = transform.apply(node.x, node.y)
            graph.set_node_position(node.id, x, y)
        return self.with_graph(graph)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted entity form.

        Returns:
            Dictionary with id, type, nodes, edges and style properties
        """
        return {
            **self.properties,
            "id": self.id,
            "type": ENTITY_TYPE_PATH,
            "nodes": [node.to_dict() for node in self.graph.get_nodes()],
            "edges": [[node1.id, node2.id] for node1, node2 in self.graph.get_edges()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathEntity":
        """Deserialize from the persisted entity form.

        Adjacency is rebuilt by replaying every edge through ``add_edge``.

        Args:
            data: Dictionary with id, nodes and edges fields

        Returns:
            PathEntity instance

        Raises:
            KeyError: If a required field is missing
            NodeNotFoundError: If an edge references an unknown node id
        """
        nodes = [Node.from_dict(node) for node in data["nodes"]]
        edges = [(str(edge[0]), str(edge[1])) for edge in data["edges"]]
        properties = {
            key: value
            for key, value in data.items()
            if key not in ("id", "type", "nodes", "edges")
        }
        return cls(
            id=str(data["id"]),
            graph=Graph.from_lists(nodes, edges),
            properties=properties,
        )
