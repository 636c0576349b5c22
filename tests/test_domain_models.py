"""Tests for domain models to verify they work correctly."""

import pytest

from atlascpp.config import ContractConfig
from atlascpp.domain import (
    AtlasMetrics,
    Bounds,
    CompanionArtifact,
    DistanceRange,
    ExternalContract,
    FontGeometry,
    FontMetrics,
    GlyphGeometry,
    ImageType,
    YDirection,
)


class TestBounds:
    """Tests for Bounds class."""

    def test_default_is_empty(self) -> None:
        """Test default quad is the all-zero box."""
        assert Bounds().is_empty()

    def test_any_nonzero_edge_is_not_empty(self) -> None:
        """Test a single non-zero edge makes the quad non-empty."""
        assert not Bounds(left=0.5).is_empty()
        assert not Bounds(bottom=-0.1).is_empty()
        assert not Bounds(right=1.0).is_empty()
        assert not Bounds(top=2.0).is_empty()

    def test_negative_zero_is_empty(self) -> None:
        """Test negative zero counts as zero."""
        assert Bounds(-0.0, -0.0, -0.0, -0.0).is_empty()

    def test_to_tuple(self) -> None:
        """Test conversion to (left, bottom, right, top)."""
        assert Bounds(1, 2, 3, 4).to_tuple() == (1, 2, 3, 4)

    def test_from_dict_missing_is_empty(self) -> None:
        """Test a missing quad deserializes to the all-zero box."""
        assert Bounds.from_dict(None).is_empty()

    def test_bounds_immutable(self) -> None:
        """Test that bounds are immutable."""
        b = Bounds(1, 2, 3, 4)
        with pytest.raises(AttributeError):
            b.left = 0.0  # type: ignore


class TestDistanceRange:
    """Tests for DistanceRange class."""

    def test_width_and_middle(self) -> None:
        """Test span and midpoint."""
        r = DistanceRange(lower=-2.0, upper=6.0)
        assert r.width == 8.0
        assert r.middle == 2.0

    def test_from_width(self) -> None:
        """Test rebuilding from span and midpoint."""
        r = DistanceRange.from_width(4.0, 1.0)
        assert r.lower == -1.0
        assert r.upper == 3.0

    def test_from_width_keeps_given_values(self) -> None:
        """Test span and midpoint come back verbatim when not exactly representable."""
        r = DistanceRange.from_width(0.1, 0.3)
        assert r.upper - r.lower != 0.1
        assert r.width == 0.1
        assert r.middle == 0.3


class TestAtlasMetrics:
    """Tests for AtlasMetrics class."""

    def test_defaults(self) -> None:
        """Test default distance range and y direction."""
        m = AtlasMetrics(width=16, height=8, size=32.0)
        assert m.y_direction is YDirection.BOTTOM_UP
        assert m.distance_range == DistanceRange(0.0, 0.0)

    @pytest.mark.parametrize("width,height", [(1, 10), (10, 1), (0, 0)])
    def test_too_small_rejected(self, width: int, height: int) -> None:
        """Test atlases smaller than 2x2 are rejected."""
        with pytest.raises(ValueError, match="at least 2x2"):
            AtlasMetrics(width=width, height=height, size=1.0)

    def test_from_dict(self) -> None:
        """Test deserializing an atlas block."""
        m = AtlasMetrics.from_dict(
            {
                "type": "msdf",
                "distanceRange": 4,
                "distanceRangeMiddle": 0,
                "size": 48.5,
                "width": 256,
                "height": 128,
                "yOrigin": "top",
            }
        )
        assert m.width == 256
        assert m.height == 128
        assert m.size == 48.5
        assert m.distance_range == DistanceRange(-2.0, 2.0)
        assert m.y_direction is YDirection.TOP_DOWN

    def test_serialization(self) -> None:
        """Test atlas block serialization and deserialization."""
        m1 = AtlasMetrics(
            width=64, height=32, size=24.0, distance_range=DistanceRange(-1.0, 3.0)
        )
        data = m1.to_dict(ImageType.SDF)
        assert data["type"] == "sdf"
        assert data["yOrigin"] == "bottom"
        assert AtlasMetrics.from_dict(data) == m1


class TestEnums:
    """Tests for ImageType and YDirection."""

    @pytest.mark.parametrize(
        "image_type", [ImageType.SDF, ImageType.PSDF, ImageType.MSDF, ImageType.MTSDF]
    )
    def test_distance_field_kinds(self, image_type: ImageType) -> None:
        """Test the four distance-field kinds."""
        assert image_type.is_distance_field

    @pytest.mark.parametrize("image_type", [ImageType.HARD_MASK, ImageType.SOFT_MASK])
    def test_mask_kinds(self, image_type: ImageType) -> None:
        """Test mask kinds are not distance fields."""
        assert not image_type.is_distance_field

    def test_image_type_values(self) -> None:
        """Test image type names used by layout files."""
        assert ImageType("hardmask") is ImageType.HARD_MASK
        assert ImageType("mtsdf") is ImageType.MTSDF

    def test_y_factor(self) -> None:
        """Test metric sign per vertical convention."""
        assert YDirection.BOTTOM_UP.y_factor == 1.0
        assert YDirection.TOP_DOWN.y_factor == -1.0


class TestGlyphGeometry:
    """Tests for GlyphGeometry class."""

    def test_has_codepoint(self) -> None:
        """Test codepoint 0 marks an index-only glyph."""
        assert GlyphGeometry(codepoint=65, advance=0.5).has_codepoint
        assert not GlyphGeometry(codepoint=0, advance=0.5).has_codepoint

    def test_from_dict(self) -> None:
        """Test deserializing a glyph entry."""
        g = GlyphGeometry.from_dict(
            {
                "unicode": 66,
                "advance": 0.55,
                "planeBounds": {"left": 0.1, "bottom": -0.2, "right": 0.5, "top": 0.7},
                "atlasBounds": {"left": 1.5, "bottom": 2.5, "right": 20.5, "top": 30.5},
            }
        )
        assert g.codepoint == 66
        assert g.advance == 0.55
        assert g.plane_bounds == Bounds(0.1, -0.2, 0.5, 0.7)
        assert g.atlas_bounds == Bounds(1.5, 2.5, 20.5, 30.5)
        assert g.index is None

    def test_from_dict_index_only(self) -> None:
        """Test a glyph addressed by index has codepoint 0."""
        g = GlyphGeometry.from_dict({"index": 12, "advance": 0.3})
        assert g.codepoint == 0
        assert g.index == 12
        assert g.plane_bounds.is_empty()
        assert g.atlas_bounds.is_empty()

    def test_serialization(self) -> None:
        """Test glyph serialization and deserialization."""
        g1 = GlyphGeometry(
            codepoint=0x263A,
            advance=1.0,
            plane_bounds=Bounds(0, 0, 1, 1),
            atlas_bounds=Bounds(4, 4, 36, 36),
            index=101,
        )
        assert GlyphGeometry.from_dict(g1.to_dict()) == g1

    def test_to_dict_omits_empty_bounds(self) -> None:
        """Test all-zero quads are left out of the glyph entry."""
        data = GlyphGeometry(codepoint=32, advance=0.25).to_dict()
        assert "planeBounds" not in data
        assert "atlasBounds" not in data


class TestFontGeometry:
    """Tests for FontMetrics and FontGeometry classes."""

    def test_metrics_from_dict(self) -> None:
        """Test deserializing a metrics block."""
        m = FontMetrics.from_dict(
            {
                "emSize": 1,
                "lineHeight": 1.2,
                "ascender": 0.9,
                "descender": -0.3,
                "underlineY": -0.1,
                "underlineThickness": 0.05,
            }
        )
        assert m.line_height == 1.2
        assert m.ascender_y == 0.9
        assert m.descender_y == -0.3
        assert m.underline_y == -0.1
        assert m.underline_thickness == 0.05

    def test_glyphs_stored_as_tuple(self) -> None:
        """Test glyph lists are frozen into tuples."""
        font = FontGeometry(
            metrics=FontMetrics(), glyphs=[GlyphGeometry(codepoint=65, advance=0.5)]
        )
        assert isinstance(font.glyphs, tuple)

    def test_replace_metrics(self) -> None:
        """Test replacing metrics keeps glyphs and name."""
        glyphs = (GlyphGeometry(codepoint=65, advance=0.5),)
        font = FontGeometry(metrics=FontMetrics(line_height=1.0), glyphs=glyphs, name="Sans")
        updated = font.replace_metrics(FontMetrics(line_height=2.0))
        assert updated.metrics.line_height == 2.0
        assert updated.glyphs == glyphs
        assert updated.name == "Sans"
        assert font.metrics.line_height == 1.0

    def test_serialization(self) -> None:
        """Test font serialization and deserialization."""
        font = FontGeometry(
            metrics=FontMetrics(line_height=1.25, ascender_y=1.0, descender_y=-0.25),
            glyphs=(
                GlyphGeometry(codepoint=65, advance=0.6, plane_bounds=Bounds(0, 0, 0.6, 0.7)),
                GlyphGeometry(codepoint=0, advance=0.9, index=7),
            ),
            name="Display",
        )
        assert FontGeometry.from_dict(font.to_dict()) == font


class TestExternalContract:
    """Tests for the external build contract."""

    def test_default_artifacts(self) -> None:
        """Test default artifact names and include order."""
        contract = ExternalContract()
        assert [a.name for a in contract.artifacts] == [
            "mapbox/eternal.hpp",
            "atlas.hpp",
            "atlas.bin.h",
        ]
        assert contract.namespace == "nie::atlas"

    def test_contract_from_config(self) -> None:
        """Test configuration produces a matching contract."""
        contract = ContractConfig(
            interface_header="glyphs.hpp",
            image_payload="glyphs.bin.inc",
            namespace="ui::font",
        ).to_contract()
        assert contract.interface_declaration.name == "glyphs.hpp"
        assert contract.image_payload.name == "glyphs.bin.inc"
        assert contract.lookup_header.name == "mapbox/eternal.hpp"
        assert contract.namespace == "ui::font"

    def test_default_config_matches_default_contract(self) -> None:
        """Test default configuration equals the default contract."""
        assert ContractConfig().to_contract() == ExternalContract()

    def test_artifact_immutable(self) -> None:
        """Test that companion artifacts are immutable."""
        artifact = CompanionArtifact("atlas.hpp", "declarations")
        with pytest.raises(AttributeError):
            artifact.name = "other.hpp"  # type: ignore
