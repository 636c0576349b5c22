"""Font metrics reader for TTF/OTF fonts.

This module provides the FontMetricsReader class for reading the vertical
metrics of a font file into the FontMetrics domain model.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from atlascpp.domain.font import FontMetrics
from atlascpp.exceptions import FontMetricsError

NAME_ID_FAMILY = 1
NAME_ID_TYPOGRAPHIC_FAMILY = 16


class FontMetricsReader:
    """Reads vertical metrics from a font file.

    Ascender, descender and line gap come from the hhea table, falling back
    to the OS/2 typographic values when hhea carries none. Underline position
    and thickness come from the post table.

    Example:
        with FontMetricsReader(Path("font.ttf")) as reader:
            metrics = reader.read_metrics(em_normalize=True)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the metrics reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontMetricsError: If the font file is missing or cannot be parsed
        """
        if not self._font_path.exists():
            raise FontMetricsError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path), lazy=True)
        except Exception as e:
            raise FontMetricsError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def family_name(self) -> str | None:
        """Return the font's family name, preferring the typographic family.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "name" not in font:
            return None
        name_table = font["name"]
        for name_id in (NAME_ID_TYPOGRAPHIC_FAMILY, NAME_ID_FAMILY):
            name = name_table.getDebugName(name_id)
            if name:
                return name
        return None

    def read_metrics(self, em_normalize: bool = True) -> FontMetrics:
        """Read the vertical metrics of the font.

        Args:
            em_normalize: Express metrics in ems instead of font units

        Returns:
            FontMetrics for the font

        Raises:
            RuntimeError: If font has not been loaded yet
            FontMetricsError: If the font lacks the required tables
        """
        font = self._require_font()
        units_per_em = self.units_per_em

        try:
            hhea = font["hhea"]
            ascender = hhea.ascent
            descender = hhea.descent
            line_gap = hhea.lineGap
            if not ascender and not descender and "OS/2" in font:
                os2 = font["OS/2"]
                ascender = os2.sTypoAscender
                descender = os2.sTypoDescender
                line_gap = os2.sTypoLineGap

            underline_y = 0.0
            underline_thickness = 0.0
            if "post" in font:
                post = font["post"]
                underline_y = post.underlinePosition
                underline_thickness = post.underlineThickness
        except KeyError as e:
            raise FontMetricsError(str(self._font_path), f"missing table {e}") from e

        divisor = units_per_em if em_normalize else 1
        return FontMetrics(
            line_height=(ascender - descender + line_gap) / divisor,
            ascender_y=ascender / divisor,
            descender_y=descender / divisor,
            underline_y=underline_y / divisor,
            em_size=units_per_em / divisor,
            underline_thickness=underline_thickness / divisor,
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontMetricsReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
