"""Emitters for the sections of an exported atlas source file.

Each emitter renders one section and writes it through a SourceWriter:

- PreambleEmitter: includes, namespace and the raw image accessor
- AtlasHeaderEmitter: the global ``atlas_t atlas`` record
- FontMetricsEmitter: ``font<N>::metrics`` for one font
- GlyphTableEmitter: the static glyph list inside ``font<N>::glyph``
- CodepointIndexEmitter: the codepoint map and lookup closing ``font<N>::glyph``

Emitters only read their inputs and never read back what was written.
"""

from atlascpp.core.source import (
    SourceWriter,
    braced,
    int_member,
    real_member,
    real_record,
    unsigned_member,
)
from atlascpp.core.table import GlyphTable
from atlascpp.domain.atlas import AtlasMetrics, ImageType, YDirection
from atlascpp.domain.contract import ExternalContract
from atlascpp.domain.font import Bounds, FontMetrics, GlyphGeometry

LOOKUP_MAP_TYPE = "mapbox::eternal::map<uint32_t,size_t>"


def plane_bounds_members(
    bounds: Bounds, y_direction: YDirection
) -> list[tuple[str, float]]:
    """Lay out plane bounds for the given vertical convention.

    Args:
        bounds: Plane bounds in font units, bottom-up
        y_direction: Vertical convention of the output

    Returns:
        (field name, value) pairs in emission order
    """
    left, bottom, right, top = bounds.to_tuple()
    if y_direction is YDirection.TOP_DOWN:
        # Not reachable through CppExporter.export, which rejects top-down atlases.
        return [("left", left), ("top", -top), ("right", right), ("bottom", -bottom)]
    return [("left", left), ("bottom", bottom), ("right", right), ("top", top)]


def atlas_bounds_members(
    bounds: Bounds, width: int, height: int, y_direction: YDirection
) -> list[tuple[str, float]]:
    """Normalize pixel atlas bounds to texture coordinates.

    Coordinates are divided by ``dimension - 1`` so that 0 and 1 fall on the
    centers of the first and last pixel.

    Args:
        bounds: Atlas bounds in pixels
        width: Atlas width in pixels
        height: Atlas height in pixels
        y_direction: Vertical convention of the output

    Returns:
        (field name, value) pairs in emission order
    """
    left, bottom, right, top = bounds.to_tuple()
    x_span = width - 1
    y_span = height - 1
    if y_direction is YDirection.TOP_DOWN:
        # Not reachable through CppExporter.export, which rejects top-down atlases.
        return [
            ("left", left / x_span),
            ("top", (height - top) / y_span),
            ("right", right / x_span),
            ("bottom", (height - bottom) / y_span),
        ]
    return [
        ("left", left / x_span),
        ("bottom", bottom / y_span),
        ("right", right / x_span),
        ("top", top / y_span),
    ]


class PreambleEmitter:
    """Emits the includes and the raw image data accessor.

    Line breaks inside the preamble are CRLF; the rest of the file has none
    until the closing brace.
    """

    def __init__(self, contract: ExternalContract) -> None:
        self.contract = contract

    def render(self) -> str:
        """Render the preamble text."""
        c = self.contract
        return (
            f"#include <{c.lookup_header.name}>\r\n"
            f'#include "{c.interface_declaration.name}"\r\n'
            f"namespace {c.namespace}{{const unsigned char {c.data_array}[] = {{\r\n"
            f'#include "{c.image_payload.name}"\r\n'
            f"}};std::span<const char> {c.data_accessor}() {{ return std::span<const char>("
            f"reinterpret_cast<const char*>(&{c.data_array}[0]),sizeof({c.data_array})); }}"
        )

    def emit(self, writer: SourceWriter) -> None:
        writer.write(self.render())

    def close(self, writer: SourceWriter) -> None:
        """Close the namespace opened by the preamble."""
        writer.write("}\n")


class AtlasHeaderEmitter:
    """Emits the global atlas record."""

    def __init__(self, image_type: ImageType, metrics: AtlasMetrics) -> None:
        self.image_type = image_type
        self.metrics = metrics

    def members(self) -> list[str]:
        """Render the record members in emission order.

        Distance range members are present only for distance-field images.
        """
        members: list[str] = []
        if self.image_type.is_distance_field:
            distance_range = self.metrics.distance_range
            members.append(real_member("distanceRange", distance_range.width))
            members.append(real_member("distanceRangeMiddle", distance_range.middle))
        members.append(real_member("size", self.metrics.size))
        members.append(int_member("width", self.metrics.width))
        members.append(int_member("height", self.metrics.height))
        return members

    def emit(self, writer: SourceWriter) -> None:
        writer.write("atlas_t atlas = ")
        writer.write(braced(self.members(), trailing_separator=True))
        writer.write(";")


class FontMetricsEmitter:
    """Emits the vertical metrics record of one font."""

    def __init__(self, y_direction: YDirection) -> None:
        self.y_direction = y_direction

    def members(self, font_metrics: FontMetrics) -> list[str]:
        """Render the metrics members, signed for the vertical convention.

        Args:
            font_metrics: Metrics of the font, bottom-up

        Returns:
            Rendered members in emission order
        """
        y_factor = self.y_direction.y_factor
        return [
            real_member("lineHeight", font_metrics.line_height),
            real_member("ascender", y_factor * font_metrics.ascender_y),
            real_member("descender", y_factor * font_metrics.descender_y),
            real_member("underlineY", y_factor * font_metrics.underline_y),
        ]

    def emit(self, writer: SourceWriter, font_index: int, font_metrics: FontMetrics) -> None:
        writer.write(f"template<>metrics_t font<{font_index}>::metrics=")
        writer.write(braced(self.members(font_metrics), trailing_separator=True))
        writer.write(";")


class GlyphTableEmitter:
    """Emits the static glyph list of one font.

    Opens the ``font<N>::glyph`` function body; CodepointIndexEmitter closes it.
    """

    def __init__(self, metrics: AtlasMetrics) -> None:
        self.metrics = metrics

    def plane_bounds(self, glyph: GlyphGeometry) -> str | None:
        """Render the plane bounds member, or None for an all-zero quad."""
        if glyph.plane_bounds.is_empty():
            return None
        return real_record(
            "planeBounds",
            plane_bounds_members(glyph.plane_bounds, self.metrics.y_direction),
        )

    def atlas_bounds(self, glyph: GlyphGeometry) -> str | None:
        """Render the normalized atlas bounds member, or None for an all-zero quad."""
        if glyph.atlas_bounds.is_empty():
            return None
        return real_record(
            "atlasBounds",
            atlas_bounds_members(
                glyph.atlas_bounds,
                self.metrics.width,
                self.metrics.height,
                self.metrics.y_direction,
            ),
        )

    def initializer(self, glyph: GlyphGeometry) -> str:
        """Render the initializer of one glyph_t entry."""
        members = [
            unsigned_member("codepoint", glyph.codepoint),
            real_member("advance", glyph.advance),
        ]
        plane = self.plane_bounds(glyph)
        if plane is not None:
            members.append(plane)
        atlas = self.atlas_bounds(glyph)
        if atlas is not None:
            members.append(atlas)
        return braced(members)

    def emit(self, writer: SourceWriter, font_index: int, table: GlyphTable) -> None:
        writer.write(
            f"template<>const glyph_t* font<{font_index}>::glyph(uint32_t code)"
            "{static const glyph_t list[] = "
        )
        writer.write(braced(self.initializer(glyph) for glyph in table))


class CodepointIndexEmitter:
    """Emits the codepoint map of one font and the lookup using it.

    At runtime ``font<N>::glyph(code)`` returns a pointer into the glyph list,
    or nullptr when no listed glyph has that codepoint.
    """

    def render_pairs(self, table: GlyphTable) -> str:
        """Render the map initializer ``{{cp,pos},...}``."""
        return braced(f"{{{codepoint},{position}}}" for codepoint, position in table.index_pairs())

    def emit(self, writer: SourceWriter, table: GlyphTable) -> None:
        writer.write(f";auto gmap={LOOKUP_MAP_TYPE}(")
        writer.write(self.render_pairs(table))
        writer.write(
            ");auto it=gmap.find(code);if(it!=gmap.end())return &list[it->second];return nullptr;}"
        )
