"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for path processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pathgraph[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(document_path: str, entity_count: int, path_count: int) -> None:
    """Print document information.

    Args:
        document_path: Path to the document file
        entity_count: Number of entities of any type
        path_count: Number of path entities
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(document_path)
    console.print(line)
    console.print(f"  {entity_count:,} entities {SYM_DOT} {path_count:,} paths")


def print_path_table(rows: list[tuple[str, int, int, int, int]], invalid: dict[str, str]) -> None:
    """Print a summary table of normalized paths.

    Args:
        rows: (path id, nodes, edges, faces, outline length) per valid path
        invalid: Error message by path id for paths that failed
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Path")
    table.add_column("Nodes", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("Faces", justify="right")
    table.add_column("Outline", justify="right")

    for path_id, nodes, edges, faces, outline in rows:
        table.add_row(Text(path_id), str(nodes), str(edges), str(faces), str(outline))
    for path_id, message in invalid.items():
        table.add_row(Text(path_id), f"[red]{SYM_ERR} {message}[/red]", "", "", "")

    console.print()
    console.print(table)


def print_containment(entity_id: str, x: float, y: float, inside: bool) -> None:
    """Print the result of a point containment query."""
    verdict = "[green]inside[/green]" if inside else "[dim]outside[/dim]"
    line = Text("  ")
    line.append(entity_id, style="bold")
    console.print(line, end="")
    console.print(f" {SYM_DOT} ({x:g}, {y:g}) {verdict}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str | None,
    total_time_s: float,
    processed: int,
    faces: int,
    crossings: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file, None when nothing was written
        total_time_s: Total processing time in seconds
        processed: Number of paths normalized
        faces: Total number of faces found
        crossings: Total number of crossing nodes inserted
        errors: Number of errors encountered
        avg_time_ms: Average processing time per path in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} paths {SYM_DOT} {faces} faces {SYM_DOT} {crossings} crossings "
        f"{SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per path")


def print_errors(errors: list[tuple[str, str]]) -> None:
    """Print per-path errors collected during processing."""
    for path_id, message in errors:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(path_id, style="bold")
        line.append(f": {message}")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
