"""CLI application entry point for pathgraph.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from pathgraph import __version__
from pathgraph.cli.output import (
    console,
    create_progress,
    print_containment,
    print_document_info,
    print_error,
    print_errors,
    print_header,
    print_path_table,
    print_step,
    print_success,
)
from pathgraph.config import (
    GeometryConfig,
    LoggingConfig,
    PathGraphSettings,
    ProcessingConfig,
)
from pathgraph.core import PathProcessor, get_faces, get_outline, normalize
from pathgraph.exceptions import DocumentLoadError, DocumentSaveError, PathGraphError
from pathgraph.io import DocumentReader, DocumentWriter, dict_to_path_entity

# Create the Typer app
app = typer.Typer(
    name="pathgraph",
    help="Normalize freehand paths into planar graphs and query their faces.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pathgraph[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Normalize freehand paths into planar graphs and query their faces."""


def _load_document(document: Path) -> DocumentReader:
    if not document.is_file():
        raise DocumentLoadError(str(document), "not a file")
    reader = DocumentReader(document)
    reader.load()
    return reader


@app.command()
def inspect(
    document: Annotated[
        Path,
        typer.Argument(help="Path to a JSON document", show_default=False),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="List outline node ids of every path"),
    ] = False,
) -> None:
    """Show node, edge, face and outline counts for every path of a document.

    Paths are normalized in memory; the document is not modified.
    """
    try:
        reader = _load_document(document)
        print_document_info(str(document), reader.entity_count, reader.path_count)

        rows: list[tuple[str, int, int, int, int]] = []
        invalid: dict[str, str] = {}
        outlines: dict[str, list[str]] = {}
        for raw in reader.entities:
            if raw.get("type") != "path":
                continue
            path_id = str(raw.get("id", "<unknown>"))
            try:
                entity = dict_to_path_entity(raw)
                graph = normalize(entity.graph)
                outline = get_outline(graph)
            except PathGraphError as e:
                invalid[path_id] = str(e)
                continue
            rows.append(
                (path_id, len(graph), len(graph.get_edges()), len(get_faces(graph)), len(outline))
            )
            outlines[path_id] = [node.id for node in outline]

        print_path_table(rows, invalid)

        if verbose:
            for path_id, node_ids in outlines.items():
                console.print(f"  {path_id}: {' '.join(node_ids)}", highlight=False)

    except PathGraphError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command(name="normalize")
def normalize_command(
    document: Annotated[
        Path,
        typer.Argument(help="Path to a JSON document", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-normalized.json)",
        ),
    ] = None,
    cleanup: Annotated[
        bool,
        typer.Option(
            "--canonicalize",
            help="Merge coincident nodes and split edges at nodes lying on them first",
        ),
    ] = False,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Distance below which two nodes are merged",
        ),
    ] = 1e-6,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Abort on the first invalid path"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Split every path at its crossings and drop dangling strokes.

    Example:
        pathgraph normalize page.json

    This will create page-normalized.json next to the input document.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    try:
        settings = PathGraphSettings(
            geometry=GeometryConfig(canonicalize=cleanup, merge_tolerance=tolerance),
            processing=ProcessingConfig(skip_invalid=not strict),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level.upper(),
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1) from None

    output_path = output if output is not None else DocumentWriter.get_normalized_path(document)

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading document")

        reader = _load_document(document)
        if not quiet:
            print_document_info(str(document), reader.entity_count, reader.path_count)
            print_step("Normalizing")

        processor = PathProcessor(settings, quiet=not verbose)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Normalizing {reader.path_count} paths",
                    total=reader.path_count,
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process(document, output_path, progress_callback=update_progress)
        else:
            stats = processor.process(document, output_path)

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                faces=stats.faces_found,
                crossings=stats.crossings_added,
                errors=stats.error_count,
                avg_time_ms=stats.avg_path_time_ms,
            )
            print_errors(stats.errors)

    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save document: {e.reason}")
        raise typer.Exit(code=1)
    except PathGraphError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command(name="contains")
def contains_command(
    document: Annotated[
        Path,
        typer.Argument(help="Path to a JSON document", show_default=False),
    ],
    x: Annotated[float, typer.Argument(help="X coordinate of the query point")],
    y: Annotated[float, typer.Argument(help="Y coordinate of the query point")],
    entity_id: Annotated[
        str | None,
        typer.Option("--entity", "-e", help="Only test the path with this id"),
    ] = None,
) -> None:
    """Test whether a point lies inside the outline of each path.

    Without --entity every path of the document is tested.
    """
    try:
        reader = _load_document(document)
        if entity_id is not None:
            path = reader.get_path(entity_id)
            if path is None:
                print_error(f"Path not found: {entity_id}")
                raise typer.Exit(code=1)
            paths = [path]
        else:
            paths = list(reader.iter_paths())

        for path in paths:
            print_containment(path.id, x, y, path.contains(x, y))

    except PathGraphError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
