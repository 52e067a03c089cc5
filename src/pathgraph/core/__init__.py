"""Core algorithms for pathgraph.

This module contains the core algorithms for:

- Geometry operations (segment crossing test, crossing point, signed area)
- Normalization (crossing splitting, dangling node pruning, cleanup)
- Face extraction (outline tracing, bounded face enumeration)
- Point containment against the outline
- Document processing

Key functions:
- is_cross: Strict proper-crossing test for two segments
- get_cross_point: Weighted intersection point of two crossing segments
- signed_area: Calculate polygon area using shoelace formula
- normalize: Return a normalized copy of a graph
- get_outline: Trace the outer boundary of a normalized graph
- get_faces: Enumerate bounded faces of a normalized graph
- contains: Test if a point lies inside the outline

Key classes:
- PathProcessor: Normalizes every path of a document
"""

from pathgraph.core.containment import contains
from pathgraph.core.faces import (
    Face,
    canonicalize_face,
    get_faces,
    get_node_by_smallest_angle,
    get_outline,
    is_same_face,
)
from pathgraph.core.geometry import (
    TAU,
    get_cross_point,
    get_edge_id,
    is_cross,
    normalize_radian,
    point_on_segment,
    signed_area,
)
from pathgraph.core.normalizer import (
    canonicalize,
    normalize,
    prune_dangling,
    split_crossings,
)
from pathgraph.core.processor import PathProcessor, PathResult, process_path

__all__ = [
    "TAU",
    # Face types
    "Face",
    # Processor classes
    "PathProcessor",
    "PathResult",
    # Normalizer functions
    "canonicalize",
    "canonicalize_face",
    # Containment
    "contains",
    # Geometry functions
    "get_cross_point",
    "get_edge_id",
    # Face functions
    "get_faces",
    "get_node_by_smallest_angle",
    "get_outline",
    "is_cross",
    "is_same_face",
    "normalize",
    "normalize_radian",
    "point_on_segment",
    "process_path",
    "prune_dangling",
    "signed_area",
    "split_crossings",
]
