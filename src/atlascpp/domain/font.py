"""Font and glyph geometry.

This module defines the per-font input of the exporter: vertical metrics and
the ordered glyph list with each glyph's plane and atlas quads.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Bounds:
    """An axis-aligned quad.

    Attributes:
        left: Minimum x
        bottom: Bottom edge y
        right: Maximum x
        top: Top edge y
    """

    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0
    top: float = 0.0

    def is_empty(self) -> bool:
        """Check if all four edges are exactly zero.

        Returns:
            True if the quad is the all-zero box, False otherwise
        """
        return not (self.left or self.bottom or self.right or self.top)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (left, bottom, right, top) tuple."""
        return (self.left, self.bottom, self.right, self.top)

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary."""
        return {
            "left": self.left,
            "bottom": self.bottom,
            "right": self.right,
            "top": self.top,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Bounds":
        """Deserialize from dictionary; a missing quad is the all-zero box."""
        if not data:
            return cls()
        return cls(
            left=float(data.get("left", 0.0)),
            bottom=float(data.get("bottom", 0.0)),
            right=float(data.get("right", 0.0)),
            top=float(data.get("top", 0.0)),
        )


@dataclass(frozen=True, slots=True)
class FontMetrics:
    """Vertical metrics of a font.

    All values are in the same units as the glyph plane bounds (font units,
    or ems when the atlas was em-normalized). Y values assume a bottom-up axis.

    Attributes:
        line_height: Distance between consecutive baselines
        ascender_y: Ascender position relative to the baseline
        descender_y: Descender position relative to the baseline
        underline_y: Underline position relative to the baseline
        em_size: Size of one em in these units
        underline_thickness: Underline stroke thickness
    """

    line_height: float = 0.0
    ascender_y: float = 0.0
    descender_y: float = 0.0
    underline_y: float = 0.0
    em_size: float = 1.0
    underline_thickness: float = 0.0

    def to_dict(self) -> dict[str, float]:
        """Serialize to the metrics block of a layout file."""
        return {
            "emSize": self.em_size,
            "lineHeight": self.line_height,
            "ascender": self.ascender_y,
            "descender": self.descender_y,
            "underlineY": self.underline_y,
            "underlineThickness": self.underline_thickness,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontMetrics":
        """Deserialize from the metrics block of a layout file."""
        return cls(
            line_height=float(data.get("lineHeight", 0.0)),
            ascender_y=float(data.get("ascender", 0.0)),
            descender_y=float(data.get("descender", 0.0)),
            underline_y=float(data.get("underlineY", 0.0)),
            em_size=float(data.get("emSize", 1.0)),
            underline_thickness=float(data.get("underlineThickness", 0.0)),
        )


@dataclass(frozen=True, slots=True)
class GlyphGeometry:
    """A glyph placed in the atlas.

    Attributes:
        codepoint: Unicode codepoint (0 for glyphs only reachable by index)
        advance: Horizontal advance
        plane_bounds: Quad the glyph covers when rendered, in font units
        atlas_bounds: Quad of the atlas holding the glyph, in pixels
        index: Glyph index in the font, if known
    """

    codepoint: int
    advance: float
    plane_bounds: Bounds = field(default_factory=Bounds)
    atlas_bounds: Bounds = field(default_factory=Bounds)
    index: int | None = None

    @property
    def has_codepoint(self) -> bool:
        """Check if the glyph is reachable by codepoint."""
        return self.codepoint != 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a glyph entry of a layout file.

        Returns:
            Dictionary representation of the glyph
        """
        data: dict[str, Any] = {}
        if self.codepoint:
            data["unicode"] = self.codepoint
        if self.index is not None:
            data["index"] = self.index
        data["advance"] = self.advance
        if not self.plane_bounds.is_empty():
            data["planeBounds"] = self.plane_bounds.to_dict()
        if not self.atlas_bounds.is_empty():
            data["atlasBounds"] = self.atlas_bounds.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphGeometry":
        """Deserialize from a glyph entry of a layout file.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            GlyphGeometry instance
        """
        index = data.get("index")
        return cls(
            codepoint=int(data.get("unicode", 0)),
            advance=float(data.get("advance", 0.0)),
            plane_bounds=Bounds.from_dict(data.get("planeBounds")),
            atlas_bounds=Bounds.from_dict(data.get("atlasBounds")),
            index=int(index) if index is not None else None,
        )


@dataclass(frozen=True)
class FontGeometry:
    """One font of the atlas.

    The position of a font in the exported sequence is its identifier in the
    emitted source, so callers must keep the order stable.

    Attributes:
        metrics: Vertical font metrics
        glyphs: Glyphs in font order
        name: Font name, if known
    """

    metrics: FontMetrics
    glyphs: tuple[GlyphGeometry, ...] = ()
    name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.glyphs, tuple):
            object.__setattr__(self, "glyphs", tuple(self.glyphs))

    def replace_metrics(self, metrics: FontMetrics) -> "FontGeometry":
        """Return a copy of this font with different vertical metrics."""
        return FontGeometry(metrics=metrics, glyphs=self.glyphs, name=self.name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a variant entry of a layout file."""
        data: dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        data["metrics"] = self.metrics.to_dict()
        data["glyphs"] = [g.to_dict() for g in self.glyphs]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontGeometry":
        """Deserialize from a variant entry of a layout file."""
        return cls(
            metrics=FontMetrics.from_dict(data.get("metrics", {})),
            glyphs=tuple(GlyphGeometry.from_dict(g) for g in data.get("glyphs", [])),
            name=data.get("name"),
        )
