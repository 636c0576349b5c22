"""CLI application entry point for atlascpp.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from atlascpp import __version__
from atlascpp.cli.output import (
    console,
    print_atlas_info,
    print_error,
    print_font_metrics_source,
    print_header,
    print_step,
    print_success,
)
from atlascpp.config import AtlasCppSettings, ContractConfig, ExportConfig, LoggingConfig
from atlascpp.core import CppExporter
from atlascpp.domain import FontGeometry
from atlascpp.exceptions import (
    AtlasCppError,
    FontMetricsError,
    LayoutError,
    OutputError,
    UnsupportedYDirectionError,
)
from atlascpp.io import AtlasLayoutReader, CppWriter, FontMetricsReader
from atlascpp.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="atlascpp",
    help="Export packed glyph atlas metrics as compilable C++ source.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Atlascpp[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def export(
    layout: Annotated[
        Path,
        typer.Argument(
            help="Path to the atlas layout JSON file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {layout}.cpp)",
        ),
    ] = None,
    fonts: Annotated[
        list[Path] | None,
        typer.Option(
            "--font",
            "-f",
            help="Font file to take vertical metrics from, in atlas font order (repeatable)",
        ),
    ] = None,
    kerning: Annotated[
        bool,
        typer.Option(
            "--kerning",
            help="Request kerning data (reserved, currently not emitted)",
        ),
    ] = False,
    interface_header: Annotated[
        str,
        typer.Option(
            "--interface-header",
            help="Header declaring the atlas types",
        ),
    ] = "atlas.hpp",
    image_payload: Annotated[
        str,
        typer.Option(
            "--image-payload",
            help="Fragment holding the packed image bytes",
        ),
    ] = "atlas.bin.h",
    namespace: Annotated[
        str,
        typer.Option(
            "--namespace",
            help="C++ namespace of the emitted definitions",
        ),
    ] = "nie::atlas",
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
    """Export an atlas layout as a C++ source file.

    The source defines the atlas record, per-font metrics and a codepoint lookup
    for every font. The packed image is included from the image payload fragment,
    which the build must provide.

    Example:
        atlascpp atlas.json

    This will create atlas.cpp next to atlas.json.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not layout.exists():
        print_error(
            f"Input file not found: {layout}",
            details=f"The file '{layout}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not layout.is_file():
        print_error(
            f"Input path is not a file: {layout}",
            details="Please provide a path to an atlas layout JSON file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = AtlasCppSettings(
        contract=ContractConfig(
            interface_header=interface_header,
            image_payload=image_payload,
            namespace=namespace,
        ),
        export=ExportConfig(kerning=kerning),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    output_path = output if output is not None else CppWriter.get_output_path(layout)

    try:
        if not quiet:
            print_step("Loading atlas layout")

        with AtlasLayoutReader(layout) as reader:
            image_type = reader.image_type
            metrics = reader.metrics
            atlas_fonts = list(reader.fonts)
            glyph_count = reader.glyph_count

        if not quiet:
            print_atlas_info(
                layout_path=str(layout),
                image_type=image_type.value,
                width=metrics.width,
                height=metrics.height,
                font_count=len(atlas_fonts),
                glyph_count=glyph_count,
            )

        if fonts:
            atlas_fonts = _apply_font_metrics(atlas_fonts, fonts, settings, quiet, verbose)

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        if not quiet:
            print_step("Exporting")

        exporter = CppExporter(settings, logger=logger)
        stats = exporter.export(
            fonts=atlas_fonts,
            image_type=image_type,
            metrics=metrics,
            output_path=output_path,
        )

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                fonts=stats.font_count,
                glyphs=stats.glyph_count,
                skipped=stats.skipped_count,
            )

    except LayoutError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except FontMetricsError as e:
        print_error(f"Could not read font metrics: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except UnsupportedYDirectionError as e:
        print_error(
            str(e),
            details="Regenerate the atlas with a bottom y origin.",
        )
        raise typer.Exit(code=1)
    except OutputError as e:
        print_error(f"Could not write output: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except AtlasCppError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _apply_font_metrics(
    atlas_fonts: list[FontGeometry],
    font_paths: list[Path],
    settings: AtlasCppSettings,
    quiet: bool,
    verbose: bool,
) -> list[FontGeometry]:
    """Replace the metrics of the first fonts with metrics read from font files.

    Args:
        atlas_fonts: Fonts from the layout, in atlas order
        font_paths: Font files, one per leading atlas font
        settings: Atlascpp settings
        quiet: Suppress output
        verbose: Show which file supplied each font's metrics

    Returns:
        Fonts with updated metrics

    Raises:
        FontMetricsError: If more font files than atlas fonts are given, or a
            font file cannot be read
    """
    if len(font_paths) > len(atlas_fonts):
        raise FontMetricsError(
            str(font_paths[len(atlas_fonts)]),
            f"atlas has only {len(atlas_fonts)} fonts",
        )

    if not quiet:
        print_step("Reading font metrics")

    updated = list(atlas_fonts)
    for font_index, font_path in enumerate(font_paths):
        with FontMetricsReader(font_path) as reader:
            font_metrics = reader.read_metrics(
                em_normalize=settings.export.em_normalize_font_metrics
            )
            family = reader.family_name
        updated[font_index] = updated[font_index].replace_metrics(font_metrics)
        if verbose:
            print_font_metrics_source(font_index, str(font_path), family)

    return updated


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
