"""CLI application entry point for glyphbold.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphbold import __version__
from glyphbold.cli.output import (
    console,
    print_error,
    print_font_info,
    print_forest,
    print_header,
    print_step,
    print_success,
)
from glyphbold.config import (
    CanvasConfig,
    GlyphboldSettings,
    LayoutConfig,
    LoggingConfig,
    OffsetConfig,
)
from glyphbold.core import (
    ContourClassifier,
    Renderer,
    build_contours,
    paint,
    validate_parameters,
)
from glyphbold.exceptions import FontLoadError, GlyphboldError, InvalidParameterError
from glyphbold.io import FontReader, RasterPainter
from glyphbold.utils import configure_logging

app = typer.Typer(
    name="glyphbold",
    help="Render text with artificially boldened glyph outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphbold[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Text to render"),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output PNG path (default: {font name}-bold.png)",
        ),
    ] = None,
    boldness: Annotated[
        float,
        typer.Option(
            "--boldness",
            "-b",
            help="Offset distance in pixels; negative values thin the glyphs",
        ),
    ] = 1.0,
    sampling: Annotated[
        float,
        typer.Option(
            "--sampling",
            "-s",
            help="Vertex merge grid size in pixels (> 0)",
        ),
    ] = 1.0,
    size: Annotated[
        float,
        typer.Option(
            "--size",
            help="Font size in pixels per em",
        ),
    ] = 72.0,
    baseline: Annotated[
        float,
        typer.Option(
            "--baseline",
            help="Baseline position from the top of the image",
        ),
    ] = 100.0,
    width: Annotated[
        int,
        typer.Option("--width", help="Image width in pixels", min=1),
    ] = 800,
    height: Annotated[
        int,
        typer.Option("--height", help="Image height in pixels", min=1),
    ] = 200,
    contours: Annotated[
        bool,
        typer.Option(
            "--contours",
            help="Print the classified contours and exit without rendering",
        ),
    ] = False,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
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
    """Render TEXT in a font with every contour offset by BOLDNESS.

    Example:
        glyphbold Roboto-Regular.ttf "Hello" -b 2 -o hello.png
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        validate_parameters(boldness, sampling)
        settings = GlyphboldSettings(
            offset=OffsetConfig(boldness=boldness, sampling_resolution=sampling),
            layout=LayoutConfig(font_size=size, baseline_y=baseline),
            canvas=CanvasConfig(width=width, height=height),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except InvalidParameterError as e:
        print_error(f"Invalid {e.name}: {e.reason}")
        raise typer.Exit(code=1)
    except ValidationError as e:
        print_error("Invalid option value", details=str(e))
        raise typer.Exit(code=1)

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading font")

        reader = FontReader(input_font)
        reader.load()

        if not quiet:
            print_font_info(
                font_path=str(input_font),
                font_type=reader.format,
                glyph_count=reader.glyph_count,
                upm=reader.units_per_em,
            )

        if contours:
            _handle_contours(reader, text, settings)
            reader.close()
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Rendering")

        renderer = Renderer(reader, settings)
        result = renderer.render(
            text,
            settings.offset.boldness,
            settings.offset.sampling_resolution,
        )

        painter = RasterPainter(settings.canvas.width, settings.canvas.height)
        paint(result, painter)
        reader.close()

        output_path = output or input_font.with_name(f"{input_font.stem}-bold.png")
        painter.save(output_path)

        if not quiet:
            print_success(str(output_path), result, renderer.stats.last_duration_ms)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphboldError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_contours(reader: FontReader, text: str, settings: GlyphboldSettings) -> None:
    """Handle --contours mode.

    Args:
        reader: Loaded font reader
        text: Text to analyse
        settings: Glyphbold settings
    """
    layout = settings.layout
    commands = reader.get_path(text, layout.origin_x, 0.0, layout.font_size)
    polygons = build_contours(commands, settings.tessellation)
    forest = ContourClassifier().classify(polygons)

    print_step(f"Contours ({len(polygons)})")
    print_forest(forest)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
