"""CLI application entry point for glyphgrid.

This module provides the main CLI interface using Typer.
"""

import math
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphgrid import __version__
from glyphgrid.cli.output import (
    console,
    print_error,
    print_extent,
    print_font_info,
    print_grid_info,
    print_header,
    print_layout,
    print_lines,
    print_step,
    print_success,
)
from glyphgrid.config import GlyphGridSettings, LoggingConfig, PreviewConfig
from glyphgrid.core import (
    PreviewRenderer,
    layout_text,
    measure_text,
    wrap_lines,
)
from glyphgrid.domain import normalize_glyph_key
from glyphgrid.exceptions import GlyphGridError
from glyphgrid.io import (
    dumps_font_settings,
    load_font_metrics,
    load_texture,
    write_font_settings,
)
from glyphgrid.utils import configure_logging, get_logger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="glyphgrid",
    help="Author and preview monospaced-cell bitmap fonts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphgrid[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Author and preview monospaced-cell bitmap fonts."""
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    app_settings = GlyphGridSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    configure_logging(
        log_file=app_settings.logging.log_file,
        console_level=app_settings.logging.log_level,
        file_level=app_settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"quiet": quiet}


@app.command()
def preview(
    ctx: typer.Context,
    texture: Annotated[
        Path,
        typer.Argument(help="Path to the font texture image", show_default=False),
    ],
    settings: Annotated[
        Path,
        typer.Argument(help="Path to the font settings JSON", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to render", show_default=False),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output PNG path"),
    ] = Path("preview.png"),
    wrap: Annotated[
        bool,
        typer.Option("--wrap", help="Wrap text to the preview width"),
    ] = False,
    width: Annotated[
        int,
        typer.Option("--width", "-w", help="Preview width in pixels when wrapping", min=1),
    ] = 300,
    padding: Annotated[
        int,
        typer.Option("--padding", help="Padding around the text in pixels", min=0, max=64),
    ] = 1,
    color: Annotated[
        str,
        typer.Option("--color", "-c", help="Text color"),
    ] = "#000000",
    background: Annotated[
        str,
        typer.Option("--background", "-b", help="Background color (#ffffff = transparent)"),
    ] = "#ffffff",
    stroke_color: Annotated[
        str,
        typer.Option("--stroke-color", help="Outline color"),
    ] = "#000000",
    stroke_bits: Annotated[
        int,
        typer.Option(
            "--stroke-bits",
            help="Outline directions as a bit mask (1=E 2=SE 4=S 8=SW 16=W 32=NW 64=N 128=NE)",
            min=0,
            max=255,
        ),
    ] = 0,
    scale: Annotated[
        int,
        typer.Option("--scale", "-s", help="Integer upscale factor", min=1, max=16),
    ] = 1,
    keep_background: Annotated[
        bool,
        typer.Option(
            "--keep-background",
            help="Do not make the texture's top-left color transparent",
        ),
    ] = False,
) -> None:
    """Render preview text with a font and save it as a PNG.

    Example:
        glyphgrid preview font.png font.json "Pixel fonts" -o preview.png
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    try:
        config = PreviewConfig(
            padding=padding,
            width=width,
            text_color=color,
            background_color=background,
            stroke_color=stroke_color,
            stroke_bits=stroke_bits,
            scale=scale,
        )
    except ValidationError as e:
        print_error("Invalid preview options", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    try:
        metrics = load_font_metrics(settings)
        font_texture = load_texture(texture, strip_background=not keep_background)

        if not quiet:
            print_font_info(str(settings), metrics)
            print_step("Rendering")

        renderer = PreviewRenderer(config, get_logger())
        image = renderer.render_preview(font_texture, metrics, text, wrap=wrap)
        image.save(output, format="PNG")
    except GlyphGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except (OSError, ValueError) as e:
        print_error(f"Could not render preview: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        stats = renderer.stats
        print_success(
            output_path=str(output),
            size=image.size,
            lines=stats.lines,
            draw_calls=stats.draw_calls,
            total_time_ms=stats.total_ms,
        )


@app.command()
def measure(
    settings: Annotated[
        Path,
        typer.Argument(help="Path to the font settings JSON", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to measure", show_default=False),
    ],
) -> None:
    """Print the pixel size (WIDTHxHEIGHT) of text."""
    try:
        metrics = load_font_metrics(settings)
    except GlyphGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_extent(measure_text(metrics, text))


@app.command()
def wrap(
    settings: Annotated[
        Path,
        typer.Argument(help="Path to the font settings JSON", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to wrap", show_default=False),
    ],
    max_width: Annotated[
        int | None,
        typer.Option("--max-width", "-m", help="Maximum line width in pixels", min=0),
    ] = None,
) -> None:
    """Wrap text and print one line per row."""
    try:
        metrics = load_font_metrics(settings)
    except GlyphGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    limit = math.inf if max_width is None else max_width
    print_lines(wrap_lines(metrics, text, limit))


@app.command()
def grid(
    texture: Annotated[
        Path,
        typer.Argument(help="Path to the font texture image", show_default=False),
    ],
    settings: Annotated[
        Path,
        typer.Argument(help="Path to the font settings JSON", show_default=False),
    ],
) -> None:
    """Show how a texture is divided into glyph cells."""
    try:
        metrics = load_font_metrics(settings)
        font_texture = load_texture(texture, strip_background=False)
    except GlyphGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_font_info(str(settings), metrics)
    print_grid_info(
        columns=metrics.columns(font_texture.width),
        rows=metrics.rows(font_texture.height),
        first_code=metrics.start_char_code,
        texture_size=(font_texture.width, font_texture.height),
    )


@app.command()
def layout(
    settings: Annotated[
        Path,
        typer.Argument(help="Path to the font settings JSON", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to lay out", show_default=False),
    ],
    texture_width: Annotated[
        int,
        typer.Option("--texture-width", "-t", help="Texture width in pixels", min=1),
    ],
    x: Annotated[int, typer.Option("--x", help="Origin x")] = 0,
    y: Annotated[int, typer.Option("--y", help="Origin y")] = 0,
) -> None:
    """List the draw calls the renderer would issue for text."""
    try:
        metrics = load_font_metrics(settings)
    except GlyphGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_layout(list(layout_text(metrics, text, x, y, texture_width)))


@app.command(name="set")
def set_metrics(
    settings: Annotated[
        Path,
        typer.Argument(help="Path to the font settings JSON", show_default=False),
    ],
    glyph: Annotated[
        str,
        typer.Argument(
            help="Glyph to edit: a literal character or a decimal character code",
            show_default=False,
        ),
    ],
    advance: Annotated[
        int | None,
        typer.Option("--advance", "-a", help="Advance width in pixels"),
    ] = None,
    x_offset: Annotated[
        int | None,
        typer.Option("--x-offset", "-x", help="Horizontal draw offset"),
    ] = None,
    y_offset: Annotated[
        int | None,
        typer.Option("--y-offset", "-y", help="Vertical draw offset"),
    ] = None,
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Remove all overrides of the glyph"),
    ] = False,
) -> None:
    """Edit one glyph's overrides and rewrite the settings file.

    Setting a value equal to its default removes the override.
    """
    if not clear and advance is None and x_offset is None and y_offset is None:
        print_error(
            "Nothing to set",
            details="Use --advance, --x-offset, --y-offset or --clear.",
        )
        raise typer.Exit(code=1)

    try:
        metrics = load_font_metrics(settings)
        code = normalize_glyph_key(glyph)

        if clear:
            metrics.set_advance_width(code, None)
            metrics.set_x_offset(code, None)
            metrics.set_y_offset(code, None)
        if advance is not None:
            metrics.set_advance_width(code, advance)
        if x_offset is not None:
            metrics.set_x_offset(code, x_offset)
        if y_offset is not None:
            metrics.set_y_offset(code, y_offset)

        write_font_settings(metrics, settings)
    except GlyphGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    console.print(
        f"{code} advance={metrics.advance(code)} "
        f"x={metrics.x_offset(code)} y={metrics.y_offset(code)}"
    )


@app.command()
def export(
    settings: Annotated[
        Path,
        typer.Argument(help="Path to the font settings JSON", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to a file instead of stdout"),
    ] = None,
) -> None:
    """Export font settings with redundant overrides removed."""
    try:
        metrics = load_font_metrics(settings)
        if output is not None:
            write_font_settings(metrics, output)
            return
    except GlyphGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(dumps_font_settings(metrics))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
