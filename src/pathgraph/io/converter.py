"""Conversion between serialized entities and domain models.

Serialized path entities look like::

    {
        "id": "path-1",
        "type": "path",
        "nodes": [{"id": "n1", "x": 0, "y": 0}, ...],
        "edges": [["n1", "n2"], ...],
        "colorId": 0,
        ...
    }

Style keys other than id, type, nodes and edges are kept as entity
properties and written back unchanged.
"""

from typing import Any

from pathgraph.domain import ENTITY_TYPE_PATH, PathEntity
from pathgraph.exceptions import EntityFormatError, NodeNotFoundError


def is_path_entity(data: dict[str, Any]) -> bool:
    """Check whether a serialized entity is a path."""
    return data.get("type") == ENTITY_TYPE_PATH


def dict_to_path_entity(data: dict[str, Any]) -> PathEntity:
    """Convert a serialized entity to a PathEntity.

    Args:
        data: Serialized path entity

    Returns:
        PathEntity with its graph rebuilt from the edge list

    Raises:
        EntityFormatError: If fields are missing or malformed, or an edge
            references a node that is not listed
    """
    entity_id = str(data.get("id", "<unknown>"))

    if not is_path_entity(data):
        raise EntityFormatError(entity_id, f"expected type 'path', got {data.get('type')!r}")

    for key in ("id", "nodes", "edges"):
        if key not in data:
            raise EntityFormatError(entity_id, f"missing field '{key}'")

    for edge in data["edges"]:
        if not isinstance(edge, list | tuple) or len(edge) != 2:
            raise EntityFormatError(entity_id, f"edge must be a [from, to] pair, got {edge!r}")

    try:
        return PathEntity.from_dict(data)
    except NodeNotFoundError as e:
        raise EntityFormatError(entity_id, f"edge references unknown node '{e.node_id}'") from e
    except (KeyError, TypeError, ValueError) as e:
        raise EntityFormatError(entity_id, f"malformed node: {e}") from e


def path_entity_to_dict(entity: PathEntity) -> dict[str, Any]:
    """Convert a PathEntity to its serialized form."""
    return entity.to_dict()
