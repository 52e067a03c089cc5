"""Unit tests for the document I/O layer.

Tests for DocumentReader, DocumentWriter, and converter functions.
"""

import json
from pathlib import Path

import pytest

from pathgraph.core.normalizer import normalize
from pathgraph.domain import Graph, PathEntity
from pathgraph.exceptions import DocumentLoadError, DocumentSaveError, EntityFormatError
from pathgraph.io.converter import dict_to_path_entity, is_path_entity, path_entity_to_dict
from pathgraph.io.reader import DocumentReader
from pathgraph.io.writer import DocumentWriter, merge_entities


class TestDocumentReader:
    """Tests for DocumentReader class."""

    def test_init(self):
        """Test DocumentReader initialization."""
        path = Path("page.json")
        reader = DocumentReader(path)
        assert reader._document_path == path
        assert reader._document is None

    def test_load_nonexistent_file(self, tmp_path: Path):
        reader = DocumentReader(tmp_path / "missing.json")
        with pytest.raises(DocumentLoadError, match="file not found"):
            reader.load()

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DocumentLoadError) as exc_info:
            DocumentReader(path).load()
        assert exc_info.value.path == str(path)

    @pytest.mark.parametrize("content", ["[]", '{"entities": {}}', '{"shapes": []}'])
    def test_load_without_entity_list(self, tmp_path: Path, content: str):
        path = tmp_path / "doc.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(DocumentLoadError, match="entities"):
            DocumentReader(path).load()

    def test_document_before_load(self):
        """Test accessing the document before loading raises RuntimeError."""
        reader = DocumentReader(Path("page.json"))
        with pytest.raises(RuntimeError, match="Document not loaded"):
            _ = reader.document

    def test_iter_paths_before_load(self):
        reader = DocumentReader(Path("page.json"))
        with pytest.raises(RuntimeError, match="Document not loaded"):
            list(reader.iter_paths())

    def test_counts(self, document_path: Path):
        reader = DocumentReader(document_path)
        reader.load()
        assert reader.entity_count == 4
        assert reader.path_count == 3

    def test_get_path(self, document_path: Path):
        reader = DocumentReader(document_path)
        reader.load()

        path = reader.get_path("square")
        assert path is not None
        assert len(path.get_nodes()) == 4
        assert path.properties == {"colorId": 3, "strokeWidth": 2}

        assert reader.get_path("box") is None
        assert reader.get_path("nope") is None

    def test_iter_paths_skips_other_entities(self, tmp_path: Path, triangle: Graph):
        document = {
            "entities": [
                {"id": "box", "type": "shape"},
                PathEntity("t", triangle).to_dict(),
            ]
        }
        path = tmp_path / "doc.json"
        path.write_text(json.dumps(document), encoding="utf-8")

        reader = DocumentReader(path)
        reader.load()
        assert [entity.id for entity in reader.iter_paths()] == ["t"]

    def test_iter_paths_raises_on_broken_path(self, document_path: Path):
        reader = DocumentReader(document_path)
        reader.load()
        with pytest.raises(EntityFormatError) as exc_info:
            list(reader.iter_paths())
        assert exc_info.value.entity_id == "broken"


class TestConverter:
    """Tests for converter functions."""

    def test_is_path_entity(self):
        assert is_path_entity({"type": "path"})
        assert not is_path_entity({"type": "shape"})
        assert not is_path_entity({})

    def test_round_trip_keeps_style(self, triangle: Graph):
        data = path_entity_to_dict(PathEntity("t", triangle, {"colorId": 5}))
        entity = dict_to_path_entity(data)
        assert entity.id == "t"
        assert entity.properties == {"colorId": 5}
        assert len(entity.get_edges()) == 3

    def test_crossing_node_ids_survive(self, crossed_square: Graph):
        normalized = normalize(crossed_square)
        entity = dict_to_path_entity(path_entity_to_dict(PathEntity("p", normalized)))
        assert entity.get_node("a-b-c-d") is not None
        assert len(entity.get_edges()) == 8

    def test_wrong_type(self):
        with pytest.raises(EntityFormatError, match="expected type 'path'"):
            dict_to_path_entity({"id": "s", "type": "shape", "nodes": [], "edges": []})

    @pytest.mark.parametrize("missing", ["id", "nodes", "edges"])
    def test_missing_field(self, missing: str):
        data = {"id": "p", "type": "path", "nodes": [], "edges": []}
        del data[missing]
        with pytest.raises(EntityFormatError, match=f"missing field '{missing}'"):
            dict_to_path_entity(data)

    @pytest.mark.parametrize("edge", [["a"], ["a", "b", "c"], "ab", 3])
    def test_malformed_edge(self, edge):
        data = {
            "id": "p",
            "type": "path",
            "nodes": [{"id": "a", "x": 0, "y": 0}, {"id": "b", "x": 1, "y": 0}],
            "edges": [edge],
        }
        with pytest.raises(EntityFormatError, match="edge must be"):
            dict_to_path_entity(data)

    def test_unknown_node(self):
        data = {
            "id": "p",
            "type": "path",
            "nodes": [{"id": "a", "x": 0, "y": 0}],
            "edges": [["a", "b"]],
        }
        with pytest.raises(EntityFormatError, match="unknown node 'b'"):
            dict_to_path_entity(data)

    @pytest.mark.parametrize(
        "node",
        [{"id": "a", "x": 0}, {"id": "a", "x": "left", "y": 0}, {"x": 0, "y": 0}],
    )
    def test_malformed_node(self, node):
        data = {"id": "p", "type": "path", "nodes": [node], "edges": []}
        with pytest.raises(EntityFormatError, match="malformed node"):
            dict_to_path_entity(data)


class TestDocumentWriter:
    """Tests for DocumentWriter class."""

    def test_get_normalized_path(self):
        assert DocumentWriter.get_normalized_path(Path("/tmp/page.json")) == Path(
            "/tmp/page-normalized.json"
        )

    def test_get_normalized_path_no_extension(self):
        assert DocumentWriter.get_normalized_path(Path("page")) == Path("page-normalized")

    def test_merge_entities(self, triangle: Graph):
        entities = [
            {"id": "box", "type": "shape"},
            {"id": "t", "type": "path", "nodes": [], "edges": []},
            {"id": "u", "type": "path", "nodes": [], "edges": []},
        ]
        merged = merge_entities(entities, {"t": PathEntity("t", triangle)})

        assert merged[0] is entities[0]
        assert len(merged[1]["edges"]) == 3
        assert merged[2] is entities[2]

    def test_save(self, tmp_path: Path, document_path: Path, crossed_square: Graph):
        reader = DocumentReader(document_path)
        reader.load()

        normalized = PathEntity("square", normalize(crossed_square), {"colorId": 3})
        output = tmp_path / "out" / "page.json"
        DocumentWriter(reader.document).save(output, {"square": normalized})

        saved = json.loads(output.read_text(encoding="utf-8"))
        assert saved["version"] == 1
        assert [entity["id"] for entity in saved["entities"]] == [
            "square",
            "box",
            "empty",
            "broken",
        ]
        assert len(saved["entities"][0]["nodes"]) == 5
        assert saved["entities"][0]["colorId"] == 3
        assert saved["entities"][3]["edges"] == [["a", "missing"]]

    def test_save_does_not_modify_source(self, document_path: Path, triangle: Graph):
        reader = DocumentReader(document_path)
        reader.load()
        before = json.dumps(reader.document, sort_keys=True)

        DocumentWriter(reader.document).save(
            document_path.with_name("out.json"), {"square": PathEntity("square", triangle)}
        )
        assert json.dumps(reader.document, sort_keys=True) == before

    def test_save_unwritable(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(DocumentSaveError):
            DocumentWriter({"entities": []}).save(blocker / "page.json")
