"""Graph node type.

A node is a point with a stable id. Nodes placed by the editor carry an
externally assigned id; crossing nodes inserted by normalization derive
their id from the four endpoints of the two edges that produced them.
"""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Node:
    """A point in 2D space with a stable id.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        id: Node id, unique within its graph
        x: X coordinate in drawing units
        y: Y coordinate in drawing units
        crossing_of: Sorted ids of the four edge endpoints this node was
            synthesized from, or None for explicit nodes
    """

    id: str
    x: float
    y: float
    crossing_of: tuple[str, str, str, str] | None = None

    @classmethod
    def crossing(
        cls, p00: str, p01: str, p10: str, p11: str, x: float, y: float
    ) -> "Node":
        """Create a crossing node for edges p00-p01 and p10-p11.

        The id depends only on the set of endpoint ids, so normalizing the
        same structure twice yields equal crossing nodes.

        Args:
            p00: First endpoint id of the first edge
            p01: Second endpoint id of the first edge
            p10: First endpoint id of the second edge
            p11: Second endpoint id of the second edge
            x: X coordinate of the crossing
            y: Y coordinate of the crossing

        Returns:
            Node with derived id and provenance
        """
        a, b, c, d = sorted((p00, p01, p10, p11))
        return cls(id=f"{a}-{b}-{c}-{d}", x=x, y=y, crossing_of=(a, b, c, d))

    @property
    def is_crossing(self) -> bool:
        """Whether this node was synthesized at an edge crossing."""
        return self.crossing_of is not None

    def moved_to(self, x: float, y: float) -> "Node":
        """Return a copy of this node at a new position."""
        return replace(self, x=x, y=y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted ``{id, x, y}`` form."""
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Node":
        """Deserialize from an ``{id, x, y}`` dictionary.

        Args:
            data: Dictionary with id, x, and y fields

        Returns:
            Node instance
        """
        return cls(id=str(data["id"]), x=float(data["x"]), y=float(data["y"]))
