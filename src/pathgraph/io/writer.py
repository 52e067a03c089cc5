"""Document writer for saving processed canvases."""

import json
from pathlib import Path
from typing import Any

from pathgraph.domain import PathEntity
from pathgraph.exceptions import DocumentSaveError
from pathgraph.io.converter import is_path_entity, path_entity_to_dict


def merge_entities(
    entities: list[dict[str, Any]], paths: dict[str, PathEntity]
) -> list[dict[str, Any]]:
    """Replace serialized path entities with updated ones.

    Args:
        entities: Serialized entities in document order
        paths: Updated path entities by id

    Returns:
        New entity list; entities without an update are kept as they are
    """
    merged: list[dict[str, Any]] = []
    for entity in entities:
        entity_id = str(entity.get("id"))
        if is_path_entity(entity) and entity_id in paths:
            merged.append(path_entity_to_dict(paths[entity_id]))
        else:
            merged.append(entity)
    return merged


class DocumentWriter:
    """Writes documents with updated path entities.

    Example:
        writer = DocumentWriter(reader.document)
        writer.save(Path("page-normalized.json"), {path.id: path})
    """

    def __init__(self, document: dict[str, Any]) -> None:
        """Initialize the document writer.

        Args:
            document: The source document; it is not modified
        """
        self._document = document

    def save(self, output_path: Path, paths: dict[str, PathEntity] | None = None) -> None:
        """Write the document, substituting updated path entities.

        Args:
            output_path: Where to write the document
            paths: Updated path entities by id

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        document = dict(self._document)
        document["entities"] = merge_entities(self._document.get("entities", []), paths or {})

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with output_path.open("w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.write("\n")
        except OSError as e:
            raise DocumentSaveError(str(output_path), str(e)) from e

    @staticmethod
    def get_normalized_path(input_path: Path) -> Path:
        """Generate output path for a normalized document.

        Args:
            input_path: Original document path

        Returns:
            Path with "-normalized" suffix before extension
        """
        return input_path.with_name(f"{input_path.stem}-normalized{input_path.suffix}")
