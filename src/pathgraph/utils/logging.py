"""Logging utilities for pathgraph."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

_HANDLER_NAME = "pathgraph"


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    faces_found: int = 0
    crossings_added: int = 0
    nodes_pruned: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    path_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_path_time_ms(self) -> float | None:
        """Average normalization time per path."""
        if not self.path_times_ms:
            return None
        return sum(self.path_times_ms) / len(self.path_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"pathgraph_{timestamp}.log")

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.set_name(_HANDLER_NAME)
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pathgraph")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_path_start(self, path_id: str, node_count: int, edge_count: int) -> None:
        """Log start of path processing."""
        self._logger.debug("Processing path", path=path_id, nodes=node_count, edges=edge_count)

    def log_path_complete(
        self,
        path_id: str,
        faces: int,
        crossings: int,
        pruned: int,
        duration_ms: float,
    ) -> None:
        """Log successful path normalization."""
        self._logger.info(
            "Path normalized",
            path=path_id,
            faces=faces,
            crossings=crossings,
            pruned=pruned,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.faces_found += faces
        self._stats.crossings_added += crossings
        self._stats.nodes_pruned += pruned
        self._stats.path_times_ms.append(duration_ms)

    def log_path_skipped(self, path_id: str, reason: str) -> None:
        """Log skipped path."""
        self._logger.debug("Path skipped", path=path_id, reason=reason)
        self._stats.skipped_count += 1

    def log_path_error(
        self,
        path_id: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log path processing error."""
        self._logger.error(
            "Path processing failed",
            path=path_id,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((path_id, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
