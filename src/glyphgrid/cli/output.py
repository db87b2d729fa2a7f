"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphgrid.domain import DrawCall, FontMetrics, TextExtent

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphgrid[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(settings_path: str, metrics: FontMetrics) -> None:
    """Print font metrics summary.

    Args:
        settings_path: Path to the settings file
        metrics: Loaded font metrics
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(settings_path)
    console.print(line)
    console.print(
        f"  {metrics.glyph_width}x{metrics.glyph_height} cells {SYM_DOT} "
        f"{metrics.line_height}px lines {SYM_DOT} starts at {metrics.start_char_code}"
    )
    overrides = (
        len(metrics.advance_widths) + len(metrics.x_offsets) + len(metrics.y_offsets)
    )
    console.print(f"  {overrides} overrides {SYM_DOT} {len(metrics.codepage)} codepage entries")


def print_grid_info(
    columns: int, rows: int, first_code: int, texture_size: tuple[int, int]
) -> None:
    """Print the glyph grid of a texture."""
    width, height = texture_size
    last_code = first_code + columns * rows - 1
    console.print(f"  {width}x{height} px {SYM_DOT} {columns} columns {SYM_DOT} {rows} rows")
    if columns and rows:
        console.print(f"  glyphs {first_code}–{last_code}")


def print_extent(extent: TextExtent) -> None:
    """Print measured text size."""
    console.print(f"{extent.width}x{extent.height}")


def print_lines(lines: list[str]) -> None:
    """Print wrapped lines verbatim, one per row.

    Lines bypass Rich so they are never re-wrapped at the terminal width
    and keep their whitespace.
    """
    for line in lines:
        typer.echo(line)


def print_layout(calls: list[DrawCall]) -> None:
    """Print draw calls as a table."""
    table = Table(show_edge=False)
    table.add_column("char")
    table.add_column("code", justify="right")
    table.add_column("source", justify="right")
    table.add_column("dest", justify="right")

    for call in calls:
        source = call.source
        table.add_row(
            repr(call.char),
            str(call.code),
            f"{source.x},{source.y} {source.width}x{source.height}",
            f"{call.dest_x},{call.dest_y}",
        )

    console.print(table)


def print_success(
    output_path: str,
    size: tuple[int, int],
    lines: int,
    draw_calls: int,
    total_time_ms: float,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        size: Image size in pixels
        lines: Number of rendered lines
        draw_calls: Number of draw calls issued
        total_time_ms: Rendering time in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {total_time_ms:.0f}ms")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({size[0]}x{size[1]})")
    console.print(line)

    console.print(f"  {lines} lines {SYM_DOT} {draw_calls} draw calls")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
