"""Document I/O layer for pathgraph.

This module handles reading and writing JSON documents holding serialized
entities. It provides a clean abstraction layer between the persisted
node/edge lists and the domain models.

Key responsibilities:
- Load documents and extract path entities
- Convert serialized entities to domain models and back
- Write documents with updated paths, leaving other entities untouched

Key classes:
- DocumentReader: Load documents and extract paths
- DocumentWriter: Save updated documents
"""

from pathgraph.io.converter import dict_to_path_entity, is_path_entity, path_entity_to_dict
from pathgraph.io.reader import DocumentReader
from pathgraph.io.writer import DocumentWriter, merge_entities

__all__ = [
    "DocumentReader",
    "DocumentWriter",
    "dict_to_path_entity",
    "is_path_entity",
    "merge_entities",
    "path_entity_to_dict",
]
