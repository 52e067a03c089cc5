"""Domain models for pathgraph.

This module contains the models representing a path drawn in the editor:

- Node: A point with a stable id, optionally synthesized at an edge crossing
- Graph: Nodes connected by undirected edges, with the mutation API used by
  editing gestures
- PathEntity: The canvas entity owning exactly one graph
- AffineTransform: Transform applied to a whole path
"""

from pathgraph.domain.graph import Graph
from pathgraph.domain.node import Node
from pathgraph.domain.path import ENTITY_TYPE_PATH, AffineTransform, PathEntity

__all__: list[str] = [
    "ENTITY_TYPE_PATH",
    "AffineTransform",
    "Graph",
    "Node",
    "PathEntity",
]
