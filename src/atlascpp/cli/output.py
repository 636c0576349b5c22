"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and summaries.
"""

from rich.console import Console
from rich.text import Text

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
    console.print(f"\n[bold]Atlascpp[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_atlas_info(
    layout_path: str,
    image_type: str,
    width: int,
    height: int,
    font_count: int,
    glyph_count: int,
) -> None:
    """Print atlas layout information.

    Args:
        layout_path: Path to the layout file
        image_type: Image kind (e.g., "msdf")
        width: Atlas width in pixels
        height: Atlas height in pixels
        font_count: Number of fonts in the atlas
        glyph_count: Total number of glyphs over all fonts
    """
    line1 = Text("  ")
    line1.append(layout_path)
    line1.append(f" ({image_type})")
    console.print(line1)
    console.print(
        f"  {width}×{height} px {SYM_DOT} {font_count} fonts {SYM_DOT} {glyph_count:,} glyphs"
    )


def print_font_metrics_source(font_index: int, font_path: str, family: str | None) -> None:
    """Print which font file supplied metrics for a font.

    Args:
        font_index: Position of the font in the atlas
        font_path: Path to the font file
        family: Family name read from the font, if any
    """
    line = Text(f"  font<{font_index}> ")
    line.append(font_path)
    if family:
        line.append(f" {SYM_DOT} {family}")
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    fonts: int,
    glyphs: int,
    skipped: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total export time in seconds
        fonts: Number of fonts exported
        glyphs: Number of glyphs written to glyph tables
        skipped: Number of glyphs left out for lacking a codepoint
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {fonts} fonts {SYM_DOT} {glyphs} glyphs {SYM_DOT} {skipped} without codepoint")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
