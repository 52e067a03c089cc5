"""Mutable node/edge model of a path entity.

The graph stores nodes by id and edges as a symmetric adjacency relation:
if ``v`` is listed under ``u`` then ``u`` is listed under ``v``. There are
no parallel edges and no self loops.

Mutation methods clear the ``normalized`` flag and return the graph so they
can be chained. Normalization and face extraction live in ``pathgraph.core``
and never modify a graph in place.
"""

import math
from collections.abc import Iterable, Iterator

from pathgraph.domain.node import Node
from pathgraph.exceptions import EdgeNotFoundError, InvalidArgumentError, NodeNotFoundError

_TAU = 2 * math.pi


class Graph:
    """A planar path as nodes connected by undirected edges.

    Example:
        graph = Graph()
        graph.add_edge(Node("a", 0, 0), Node("b", 1, 0)).add_edge(
            Node("b", 1, 0), Node("c", 0, 1)
        )
        graph.get_edges()  # [(a, b), (b, c)]
    """

    def __init__(
        self,
        nodes: dict[str, Node] | None = None,
        edges: dict[str, list[str]] | None = None,
    ) -> None:
        """Initialize the graph.

        Args:
            nodes: Node id to node mapping (taken over, not copied)
            edges: Node id to neighbor ids mapping; must already be symmetric
        """
        self._nodes: dict[str, Node] = nodes if nodes is not None else {}
        self._edges: dict[str, list[str]] = edges if edges is not None else {}
        self._arguments: dict[str, dict[str, float]] = {}
        self._normalized = False

    @classmethod
    def from_lists(
        cls, nodes: Iterable[Node], edges: Iterable[tuple[str, str]]
    ) -> "Graph":
        """Rebuild a graph from a node list and an edge id-pair list.

        Edges are replayed through ``add_edge``, so nodes without any edge
        are not part of the result.

        Args:
            nodes: Nodes referenced by the edges
            edges: Pairs of node ids

        Returns:
            New graph

        Raises:
            NodeNotFoundError: If an edge references an unknown node id
        """
        node_by_id = {node.id: node for node in nodes}
        graph = cls()
        for from_id, to_id in edges:
            from_node = node_by_id.get(from_id)
            if from_node is None:
                raise NodeNotFoundError(from_id)
            to_node = node_by_id.get(to_id)
            if to_node is None:
                raise NodeNotFoundError(to_id)
            graph.add_edge(from_node, to_node)
        return graph

    @property
    def normalized(self) -> bool:
        """Whether this graph is a planar subdivision without dangling nodes."""
        return self._normalized

    def mark_normalized(self) -> None:
        """Flag this graph as normalized. Called by the normalizer only."""
        self._normalized = True

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        edge_count = sum(len(ids) for ids in self._edges.values()) // 2
        return f"Graph(nodes={len(self._nodes)}, edges={edge_count}, normalized={self._normalized})"

    def get_nodes(self) -> list[Node]:
        """Return all nodes in insertion order."""
        return list(self._nodes.values())

    def get_node(self, node_id: str) -> Node:
        """Return the node with the given id.

        Raises:
            NodeNotFoundError: If the node does not exist
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def get_neighbors(self, node_id: str) -> list[str]:
        """Return the ids adjacent to a node, in insertion order."""
        return list(self._edges.get(node_id, []))

    def degree(self, node_id: str) -> int:
        """Return the number of edges incident to a node."""
        return len(self._edges.get(node_id, []))

    def has_edge(self, node_id1: str, node_id2: str) -> bool:
        """Check whether an edge connects the two nodes."""
        return node_id2 in self._edges.get(node_id1, [])

    def get_edges(self) -> list[tuple[Node, Node]]:
        """Return each undirected edge once, smaller id first.

        Returns:
            List of (node, node) pairs
        """
        edges: list[tuple[Node, Node]] = []
        for from_id, to_ids in self._edges.items():
            from_node = self.get_node(from_id)
            for to_id in to_ids:
                if from_id > to_id:
                    continue
                edges.append((from_node, self.get_node(to_id)))
        return edges

    def clone(self) -> "Graph":
        """Copy nodes and adjacency.

        The copy starts with an empty angle cache and is not flagged as
        normalized.
        """
        nodes = dict(self._nodes)
        edges = {node_id: list(ids) for node_id, ids in self._edges.items()}
        return Graph(nodes, edges)

    def add_node(self, node: Node) -> "Graph":
        """Insert a node, replacing any node with the same id."""
        self._nodes[node.id] = node

        self._normalized = False
        return self

    def add_edge(self, node1: Node, node2: Node) -> "Graph":
        """Connect two nodes, inserting them if absent.

        Adding an edge that already exists, in either direction, is a no-op.
        """
        if node2.id in self._edges.get(node1.id, []):
            return self

        self._nodes[node1.id] = node1
        self._nodes[node2.id] = node2
        self._edges.setdefault(node1.id, []).append(node2.id)
        self._edges.setdefault(node2.id, []).append(node1.id)

        self._normalized = False
        return self

    def delete_edge(self, node_id1: str, node_id2: str) -> "Graph":
        """Remove the edge between two nodes.

        An endpoint left without edges is deleted as well.

        Raises:
            EdgeNotFoundError: If the nodes are not connected
        """
        if not self.has_edge(node_id1, node_id2):
            raise EdgeNotFoundError(node_id1, node_id2)

        self._detach(node_id1, node_id2)
        self._detach(node_id2, node_id1)

        self._normalized = False
        return self

    def delete_node(self, node_id: str) -> "Graph":
        """Remove a node and every edge touching it.

        A former neighbor left without edges is deleted too. This does not
        cascade further: a neighbor left with one edge stays.

        Raises:
            NodeNotFoundError: If the node does not exist
        """
        if node_id not in self._nodes:
            raise NodeNotFoundError(node_id)

        del self._nodes[node_id]
        for next_id in self._edges.pop(node_id, []):
            self._detach(next_id, node_id)

        self._normalized = False
        return self

    def merge_nodes(self, source_id: str, dest_id: str) -> "Graph":
        """Merge the source node into the destination node.

        Every edge of the source is reconnected to the destination, then the
        source is deleted. Edges that already exist are not duplicated and
        the source-destination edge does not become a self loop.

        Raises:
            NodeNotFoundError: If the destination node does not exist
        """
        dest = self.get_node(dest_id)

        for other_id in self.get_neighbors(source_id):
            if other_id == dest_id:
                continue
            self.add_edge(self.get_node(other_id), dest)

        if source_id in self._nodes:
            self.delete_node(source_id)

        self._normalized = False
        return self

    def set_node_position(self, node_id: str, x: float, y: float) -> "Graph":
        """Move a node. Its id and provenance are kept.

        Raises:
            NodeNotFoundError: If the node does not exist
        """
        node = self.get_node(node_id)
        self._nodes[node_id] = node.moved_to(x, y)

        self._normalized = False
        return self

    def split_edge(self, node_id1: str, node_id2: str, node: Node) -> "Graph":
        """Insert a node in the middle of an existing edge.

        Raises:
            EdgeNotFoundError: If the nodes are not connected
        """
        if not self.has_edge(node_id1, node_id2):
            raise EdgeNotFoundError(node_id1, node_id2)

        self.add_edge(self.get_node(node_id1), node)
        self.add_edge(node, self.get_node(node_id2))
        self.delete_edge(node_id1, node_id2)
        return self

    def get_argument(self, p0_id: str, p1_id: str) -> float:
        """Return the angle from the X axis to the segment p0 -> p1.

        Values are cached per unordered pair; the reverse direction is
        derived by adding π. The cache is only reset by cloning.

        Args:
            p0_id: Id of the start node
            p1_id: Id of the end node

        Returns:
            Angle in radians in [0, 2π)

        Raises:
            InvalidArgumentError: If both ids are equal
            NodeNotFoundError: If either node does not exist
        """
        if p0_id == p1_id:
            raise InvalidArgumentError(p0_id)
        if p0_id > p1_id:
            return (self.get_argument(p1_id, p0_id) + math.pi) % _TAU

        cached = self._arguments.get(p0_id, {}).get(p1_id)
        if cached is not None:
            return cached

        p0 = self.get_node(p0_id)
        p1 = self.get_node(p1_id)
        value = math.atan2(p1.y - p0.y, p1.x - p0.x) % _TAU
        self._arguments.setdefault(p0_id, {})[p1_id] = value
        return value

    def _detach(self, node_id: str, other_id: str) -> None:
        remaining = [next_id for next_id in self._edges.get(node_id, []) if next_id != other_id]
        if remaining:
            self._edges[node_id] = remaining
        else:
            self._nodes.pop(node_id, None)
            self._edges.pop(node_id, None)
