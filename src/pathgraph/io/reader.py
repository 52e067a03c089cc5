"""Document reader for loading serialized canvases.

This module provides the DocumentReader class for loading JSON documents
and extracting path entities into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pathgraph.domain import PathEntity
from pathgraph.exceptions import DocumentLoadError
from pathgraph.io.converter import dict_to_path_entity, is_path_entity


class DocumentReader:
    """Loads JSON documents and extracts path entities.

    A document is a JSON object with an ``entities`` list. Entities of other
    types (shapes, text) are kept as raw dictionaries but not converted.

    Example:
        reader = DocumentReader(Path("page.json"))
        reader.load()
        for path in reader.iter_paths():
            print(path.id)
    """

    def __init__(self, document_path: Path) -> None:
        """Initialize the document reader.

        Args:
            document_path: Path to the JSON document
        """
        self._document_path = document_path
        self._document: dict[str, Any] | None = None

    def load(self) -> None:
        """Load the document file.

        Raises:
            DocumentLoadError: If the file is missing, is not JSON, or has no
                entity list
        """
        if not self._document_path.exists():
            raise DocumentLoadError(str(self._document_path), "file not found")

        try:
            with self._document_path.open(encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentLoadError(str(self._document_path), str(e)) from e

        if not isinstance(document, dict) or not isinstance(document.get("entities"), list):
            raise DocumentLoadError(
                str(self._document_path), "expected an object with an entities list"
            )

        self._document = document

    @property
    def document(self) -> dict[str, Any]:
        """Return the raw document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._document

    @property
    def entities(self) -> list[dict[str, Any]]:
        """Return every serialized entity, in document order."""
        return self.document["entities"]

    @property
    def entity_count(self) -> int:
        """Return the number of entities of any type."""
        return len(self.entities)

    @property
    def path_count(self) -> int:
        """Return the number of path entities."""
        return sum(1 for entity in self.entities if is_path_entity(entity))

    def iter_paths(self) -> Iterator[PathEntity]:
        """Iterate over path entities, converting to domain model.

        Yields:
            PathEntity domain models

        Raises:
            RuntimeError: If the document has not been loaded yet
            EntityFormatError: If a path entity is malformed
        """
        for entity in self.entities:
            if is_path_entity(entity):
                yield dict_to_path_entity(entity)

    def get_path(self, entity_id: str) -> PathEntity | None:
        """Return the path entity with the given id, or None."""
        for entity in self.entities:
            if is_path_entity(entity) and str(entity.get("id")) == entity_id:
                return dict_to_path_entity(entity)
        return None
