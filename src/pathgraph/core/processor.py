"""Document processing orchestration.

This module runs the normalization pipeline over every path entity of a
document: optional canonicalization, normalization, face extraction, then
writing the normalized document back.

Key components:
- process_path: Normalize a single path and report what changed
- PathProcessor: Main orchestrator class for document processing
"""

import time
import traceback
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from pathgraph.config import PathGraphSettings
from pathgraph.core.faces import get_faces
from pathgraph.core.normalizer import canonicalize, normalize
from pathgraph.domain import PathEntity
from pathgraph.exceptions import PathGraphError
from pathgraph.io import DocumentReader, DocumentWriter, dict_to_path_entity
from pathgraph.utils import ProcessingLogger, ProcessingStats, configure_logging


@dataclass
class PathResult:
    """Outcome of normalizing one path.

    Attributes:
        entity: The path entity wrapping the normalized graph
        faces: Number of bounded faces found
        crossings: Number of crossing nodes inserted
        pruned: Number of nodes removed, dangling ones included
        duration_ms: Wall time spent on this path
    """

    entity: PathEntity
    faces: int
    crossings: int
    pruned: int
    duration_ms: float


def process_path(
    entity: PathEntity,
    canonicalize_first: bool = False,
    merge_tolerance: float = 1e-6,
) -> PathResult:
    """Normalize one path entity.

    The input entity is not modified; canonicalization runs on a clone.

    Args:
        entity: Path to normalize
        canonicalize_first: Merge coincident nodes and split edges at nodes
            lying on them before normalizing
        merge_tolerance: Distance below which two nodes are the same point

    Returns:
        PathResult with the normalized entity and counts
    """
    start_time = time.perf_counter()

    graph = entity.graph.clone()
    if canonicalize_first:
        canonicalize(graph, merge_tolerance)

    normalized = normalize(graph)
    faces = get_faces(normalized)

    before = {node.id for node in graph.get_nodes()}
    after = {node.id for node in normalized.get_nodes()}
    crossings = sum(1 for node in normalized.get_nodes() if node.id not in before)

    duration_ms = (time.perf_counter() - start_time) * 1000
    return PathResult(
        entity=entity.with_graph(normalized),
        faces=len(faces),
        crossings=crossings,
        pruned=len(before - after),
        duration_ms=duration_ms,
    )


class PathProcessor:
    """Orchestrates normalization of every path in a document.

    Manages the complete workflow:
    1. Load document file
    2. Normalize each path entity and count its faces
    3. Collect results and update statistics
    4. Save the normalized document

    Example:
        settings = PathGraphSettings()
        processor = PathProcessor(settings)
        stats = processor.process(
            document_path=Path("page.json"),
            output_path=Path("page-normalized.json"),
        )
    """

    def __init__(self, config: PathGraphSettings, quiet: bool = True) -> None:
        """Initialize path processor with configuration.

        Args:
            config: Settings containing geometry, processing and logging config
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.processing_logger = ProcessingLogger(self.logger)
        self.results: dict[str, PathResult] = {}

    def process(
        self,
        document_path: Path,
        output_path: Path | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ProcessingStats:
        """Normalize every path of a document.

        Args:
            document_path: Path to the input JSON document
            output_path: Path for the output document (auto-generated if None)
            progress_callback: Optional callback(completed, total, path_id, success)
                for progress updates

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            DocumentLoadError: If the document cannot be read
            DocumentSaveError: If the output cannot be written
            PathGraphError: If a path fails and ``skip_invalid`` is off
        """
        self.processing_logger = ProcessingLogger(self.logger)
        self.results = {}
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if output_path is None:
            output_path = DocumentWriter.get_normalized_path(document_path)

        self.logger.info(
            "Starting document processing",
            input=str(document_path),
            output=str(output_path),
        )

        reader = DocumentReader(document_path)
        reader.load()

        total = reader.path_count
        self.logger.info(
            "Document loaded",
            entities=reader.entity_count,
            paths=total,
        )

        completed = 0
        for raw in reader.entities:
            if raw.get("type") != "path":
                continue

            path_id = str(raw.get("id", "<unknown>"))
            success = self._process_entity(raw, path_id)
            completed += 1
            if progress_callback is not None:
                progress_callback(completed, total, path_id, success)

        if self.config.processing.write_output:
            DocumentWriter(reader.document).save(
                output_path,
                {path_id: result.entity for path_id, result in self.results.items()},
            )
            self.logger.info("Document saved", output=str(output_path))

        stats.end_time = time.time()
        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            faces=stats.faces_found,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats

    def _process_entity(self, raw: dict, path_id: str) -> bool:
        try:
            entity = dict_to_path_entity(raw)
            if len(entity.graph) == 0:
                self.processing_logger.log_path_skipped(path_id, "empty path")
                return True

            self.processing_logger.log_path_start(
                path_id, len(entity.graph), len(entity.get_edges())
            )
            result = process_path(
                entity,
                canonicalize_first=self.config.geometry.canonicalize,
                merge_tolerance=self.config.geometry.merge_tolerance,
            )
        except PathGraphError as e:
            if not self.config.processing.skip_invalid:
                raise
            self.processing_logger.log_path_error(path_id, e, traceback.format_exc())
            return False

        self.results[path_id] = result
        self.processing_logger.log_path_complete(
            path_id,
            faces=result.faces,
            crossings=result.crossings,
            pruned=result.pruned,
            duration_ms=result.duration_ms,
        )
        return True
