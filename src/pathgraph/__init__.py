"""Pathgraph - Planar path graph engine.

Pathgraph treats a freehand drawing as a planar graph: nodes at 2-D points,
undirected straight edges between them. It splits edges at their crossings,
prunes dangling strokes, traces the outer outline, enumerates the enclosed
faces and answers point containment queries.

Example:
    $ pathgraph normalize page.json

This will create page-normalized.json with every path split at its
crossings and stripped of dangling strokes.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
