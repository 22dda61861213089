"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphbold.domain import ContourForest, Polygon, RenderResult

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
    console.print(f"\n[bold]Glyphbold[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    line.append(f" ({font_type})")
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def _add_contour_rows(table: Table, polygon: Polygon, role: str, depth: int) -> None:
    indent = "  " * depth
    table.add_row(
        f"{indent}{role}",
        str(len(polygon.points)),
        f"{polygon.area:,.1f}",
        polygon.winding.name.lower(),
    )
    child_role = "hole" if role != "hole" else "island"
    for child in polygon.children:
        _add_contour_rows(table, child, child_role, depth + 1)


def print_forest(forest: ContourForest) -> None:
    """Print the classified contours as a table.

    Args:
        forest: Classified contours
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Contour")
    table.add_column("Points", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Winding")

    for root in forest:
        _add_contour_rows(table, root, "root", 0)

    console.print(table)
    console.print(f"\n  {len(forest)} roots {SYM_DOT} {forest.hole_count} nested")


def print_success(output_path: str, result: RenderResult, duration_ms: float) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the written image
        result: Render pass output
        duration_ms: Render time in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {duration_ms:.1f}ms")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    skipped_style = "yellow" if result.skipped > 0 else "green"
    console.print(
        f"  {result.contour_count} contours {SYM_DOT} {len(result.commands)} fills {SYM_DOT} "
        f"[{skipped_style}]{result.skipped} skipped[/{skipped_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        # Validation messages contain square brackets
        line = Text("  ")
        line.append(details)
        console.print(line)
