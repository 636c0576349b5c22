"""Domain models for atlascpp.

This module contains the domain models describing a packed glyph atlas and the
external build artifacts the emitted source depends on. All models are:

- Immutable (frozen dataclasses)
- Supplied fully constructed before export and never modified by it
- Independent of the layout file format and of fontTools

Key classes:
- AtlasMetrics: Global atlas layout (pixel size, scale, distance range)
- ImageType: Kind of image packed in the atlas
- FontGeometry: One font's vertical metrics and ordered glyphs
- GlyphGeometry: One glyph's advance, plane bounds and atlas bounds
- ExternalContract: Companion artifacts referenced by the emitted source
"""

from atlascpp.domain.atlas import AtlasMetrics, DistanceRange, ImageType, YDirection
from atlascpp.domain.contract import CompanionArtifact, ExternalContract
from atlascpp.domain.font import Bounds, FontGeometry, FontMetrics, GlyphGeometry

__all__: list[str] = [
    # Enums
    "ImageType",
    "YDirection",
    # Atlas types
    "AtlasMetrics",
    "DistanceRange",
    # Font types
    "Bounds",
    "FontMetrics",
    "FontGeometry",
    "GlyphGeometry",
    # Build contract
    "CompanionArtifact",
    "ExternalContract",
]
