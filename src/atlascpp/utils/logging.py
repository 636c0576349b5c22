"""Logging utilities for Atlascpp."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ExportStats:
    """Statistics from an export run."""

    font_count: int = 0
    glyph_count: int = 0
    skipped_count: int = 0
    plane_bounds_omitted: int = 0
    atlas_bounds_omitted: int = 0
    chars_written: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate export duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers of the previous call.
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

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

    logger = structlog.get_logger("atlascpp")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ExportLogger:
    """Logger for tracking export progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ExportStats()

    def log_font_start(self, font_index: int, glyph_count: int) -> None:
        """Log start of a font's export."""
        self._logger.debug("Exporting font", font=font_index, glyphs=glyph_count)

    def log_glyph_skipped(self, font_index: int, glyph_index: int | None, reason: str) -> None:
        """Log a glyph left out of the exported table."""
        self._logger.debug(
            "Glyph skipped", font=font_index, glyph_index=glyph_index, reason=reason
        )
        self._stats.skipped_count += 1

    def log_font_complete(
        self,
        font_index: int,
        emitted: int,
        plane_bounds_omitted: int,
        atlas_bounds_omitted: int,
    ) -> None:
        """Log a completed font."""
        self._logger.info(
            "Font exported",
            font=font_index,
            glyphs=emitted,
            plane_bounds_omitted=plane_bounds_omitted,
            atlas_bounds_omitted=atlas_bounds_omitted,
        )
        self._stats.font_count += 1
        self._stats.glyph_count += emitted
        self._stats.plane_bounds_omitted += plane_bounds_omitted
        self._stats.atlas_bounds_omitted += atlas_bounds_omitted

    def log_export_failed(self, output: str, error: Exception) -> None:
        """Log a failed export."""
        self._logger.error(
            "Export failed",
            output=output,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ExportStats:
        """Get current export statistics."""
        return self._stats
