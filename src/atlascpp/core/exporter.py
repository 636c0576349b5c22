"""Export orchestration for atlas source files.

This module runs the emitters over an atlas in one pass and writes the result
to a destination file.

Key components:
- write_source: Emit a complete source file to an open stream
- render_source: Emit a complete source file to a string
- CppExporter: Validates, opens the destination and tracks statistics
- export_cpp: Boolean success/failure wrapper around CppExporter
"""

import io
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import structlog

from atlascpp.config import AtlasCppSettings
from atlascpp.core.emitters import (
    AtlasHeaderEmitter,
    CodepointIndexEmitter,
    FontMetricsEmitter,
    GlyphTableEmitter,
    PreambleEmitter,
)
from atlascpp.core.source import SourceWriter
from atlascpp.core.table import GlyphTable
from atlascpp.domain import AtlasMetrics, ExternalContract, FontGeometry, ImageType, YDirection
from atlascpp.exceptions import AtlasCppError, UnsupportedYDirectionError
from atlascpp.io import CppWriter
from atlascpp.utils import ExportLogger, ExportStats


def write_source(
    stream: TextIO,
    fonts: Sequence[FontGeometry],
    image_type: ImageType,
    metrics: AtlasMetrics,
    contract: ExternalContract | None = None,
    export_logger: ExportLogger | None = None,
) -> int:
    """Emit the complete source for an atlas.

    Does not check the vertical convention; CppExporter.export does that
    before any output is produced.

    Args:
        stream: Text stream opened for writing
        fonts: Fonts in identifier order
        image_type: Kind of image packed in the atlas
        metrics: Global atlas metrics
        contract: Companion artifacts to reference (defaults if None)
        export_logger: Receives per-font events and statistics

    Returns:
        Number of characters written
    """
    writer = SourceWriter(stream)
    preamble = PreambleEmitter(contract or ExternalContract())
    metrics_emitter = FontMetricsEmitter(metrics.y_direction)
    table_emitter = GlyphTableEmitter(metrics)
    index_emitter = CodepointIndexEmitter()

    preamble.emit(writer)
    AtlasHeaderEmitter(image_type, metrics).emit(writer)

    for font_index, font in enumerate(fonts):
        if export_logger is not None:
            export_logger.log_font_start(font_index, len(font.glyphs))

        table = GlyphTable.build(font.glyphs)

        metrics_emitter.emit(writer, font_index, font.metrics)
        table_emitter.emit(writer, font_index, table)
        index_emitter.emit(writer, table)

        if export_logger is not None:
            for glyph in font.glyphs:
                if not glyph.has_codepoint:
                    export_logger.log_glyph_skipped(font_index, glyph.index, "no codepoint")
            export_logger.log_font_complete(
                font_index,
                emitted=len(table),
                plane_bounds_omitted=sum(g.plane_bounds.is_empty() for g in table),
                atlas_bounds_omitted=sum(g.atlas_bounds.is_empty() for g in table),
            )

    preamble.close(writer)
    return writer.written


def render_source(
    fonts: Sequence[FontGeometry],
    image_type: ImageType,
    metrics: AtlasMetrics,
    contract: ExternalContract | None = None,
) -> str:
    """Emit the complete source for an atlas to a string.

    Args:
        fonts: Fonts in identifier order
        image_type: Kind of image packed in the atlas
        metrics: Global atlas metrics
        contract: Companion artifacts to reference (defaults if None)

    Returns:
        The source text
    """
    buffer = io.StringIO(newline="")
    write_source(buffer, fonts, image_type, metrics, contract)
    return buffer.getvalue()


class CppExporter:
    """Exports atlas metrics as a C++ source file.

    Example:
        exporter = CppExporter(AtlasCppSettings())
        stats = exporter.export(
            fonts=fonts,
            image_type=ImageType.MSDF,
            metrics=atlas_metrics,
            output_path=Path("atlas.cpp"),
        )
    """

    def __init__(
        self,
        settings: AtlasCppSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the exporter.

        Args:
            settings: Application settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or AtlasCppSettings()
        self.logger = logger or structlog.get_logger("atlascpp")
        self.contract = self.settings.contract.to_contract()

    def export(
        self,
        fonts: Sequence[FontGeometry],
        image_type: ImageType,
        metrics: AtlasMetrics,
        output_path: Path,
        kerning: bool | None = None,
    ) -> ExportStats:
        """Export the atlas to a source file.

        Args:
            fonts: Fonts in identifier order
            image_type: Kind of image packed in the atlas
            metrics: Global atlas metrics
            output_path: Destination source file
            kerning: Request kerning data (config default if None); not emitted

        Returns:
            ExportStats with counts and timing

        Raises:
            UnsupportedYDirectionError: If the atlas is top-down
            OutputError: If the destination cannot be written
        """
        export_logger = ExportLogger(self.logger)
        stats = export_logger.stats
        stats.start_time = time.time()

        if kerning is None:
            kerning = self.settings.export.kerning

        self.logger.info(
            "Starting export",
            output=str(output_path),
            fonts=len(fonts),
            image_type=image_type.value,
            width=metrics.width,
            height=metrics.height,
        )

        if metrics.y_direction is YDirection.TOP_DOWN:
            error = UnsupportedYDirectionError(metrics.y_direction.value)
            export_logger.log_export_failed(str(output_path), error)
            raise error

        if kerning:
            self.logger.debug("Kerning requested but not emitted")

        writer = CppWriter(output_path, atomic=self.settings.export.atomic)
        try:
            with writer.open() as stream:
                stats.chars_written = write_source(
                    stream,
                    fonts,
                    image_type,
                    metrics,
                    contract=self.contract,
                    export_logger=export_logger,
                )
        except AtlasCppError as e:
            export_logger.log_export_failed(str(output_path), e)
            raise

        stats.end_time = time.time()
        self.logger.info(
            "Export complete",
            output=str(output_path),
            fonts=stats.font_count,
            glyphs=stats.glyph_count,
            skipped=stats.skipped_count,
            chars=stats.chars_written,
            duration_ms=round(stats.duration_seconds * 1000, 2),
        )
        return stats


def export_cpp(
    fonts: Sequence[FontGeometry],
    image_type: ImageType,
    metrics: AtlasMetrics,
    filename: str | Path,
    kerning: bool = False,
    settings: AtlasCppSettings | None = None,
) -> bool:
    """Write the font and glyph metrics and atlas layout into a C++ source file.

    Args:
        fonts: Fonts in identifier order
        image_type: Kind of image packed in the atlas
        metrics: Global atlas metrics
        filename: Destination source file
        kerning: Request kerning data (reserved, not emitted)
        settings: Application settings (defaults if None)

    Returns:
        True on success, False if the atlas is top-down or the file cannot be written
    """
    try:
        CppExporter(settings).export(fonts, image_type, metrics, Path(filename), kerning=kerning)
    except AtlasCppError:
        return False
    return True
