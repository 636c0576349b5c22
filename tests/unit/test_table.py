"""Tests for the codepoint-addressable glyph table."""

import pytest

from atlascpp.core.table import GlyphTable
from atlascpp.domain import Bounds, GlyphGeometry


@pytest.fixture
def glyphs() -> list[GlyphGeometry]:
    """Glyphs in font order, two of them without codepoint."""
    return [
        GlyphGeometry(codepoint=0, advance=0.5, index=0),
        GlyphGeometry(codepoint=32, advance=0.25, index=1),
        GlyphGeometry(codepoint=65, advance=0.6, plane_bounds=Bounds(0, 0, 0.6, 0.7), index=2),
        GlyphGeometry(codepoint=0, advance=1.1, plane_bounds=Bounds(0, 0, 1, 1), index=3),
        GlyphGeometry(codepoint=0x1F600, advance=1.0, index=4),
    ]


class TestGlyphTable:
    """Tests for GlyphTable class."""

    def test_unassigned_glyphs_excluded(self, glyphs: list[GlyphGeometry]) -> None:
        """Test glyphs with codepoint 0 get no table entry."""
        table = GlyphTable.build(glyphs)
        assert [g.codepoint for g in table] == [32, 65, 0x1F600]
        assert table.skipped == 2
        assert 0 not in table

    def test_font_order_preserved(self, glyphs: list[GlyphGeometry]) -> None:
        """Test entries keep the font's glyph order."""
        table = GlyphTable.build(glyphs)
        assert [g.index for g in table] == [1, 2, 4]

    def test_index_matches_positions(self, glyphs: list[GlyphGeometry]) -> None:
        """Test every index entry points at the entry with that codepoint."""
        table = GlyphTable.build(glyphs)
        assert dict(table.index) == {32: 0, 65: 1, 0x1F600: 2}
        for codepoint, position in table.index_pairs():
            assert table.entries[position].codepoint == codepoint

    def test_lookup_present(self, glyphs: list[GlyphGeometry]) -> None:
        """Test lookup returns the glyph with the queried codepoint."""
        table = GlyphTable.build(glyphs)
        for glyph in glyphs:
            if glyph.codepoint:
                found = table.lookup(glyph.codepoint)
                assert found is glyph
                assert found.codepoint == glyph.codepoint

    @pytest.mark.parametrize("codepoint", [0, 33, 66, 0x10FFFF])
    def test_lookup_absent(self, glyphs: list[GlyphGeometry], codepoint: int) -> None:
        """Test lookup returns None for codepoints not in the table."""
        assert GlyphTable.build(glyphs).lookup(codepoint) is None

    def test_empty(self) -> None:
        """Test a font without glyphs."""
        table = GlyphTable.build([])
        assert len(table) == 0
        assert list(table.index_pairs()) == []
        assert table.lookup(65) is None

    def test_duplicate_codepoint_points_at_first(self) -> None:
        """Test duplicates are all listed and map to the first entry only."""
        first = GlyphGeometry(codepoint=65, advance=0.6)
        second = GlyphGeometry(codepoint=65, advance=0.7)
        table = GlyphTable.build([first, second])
        assert len(table) == 2
        assert table.lookup(65) is first
        assert list(table.index_pairs()) == [(65, 0)]

    def test_index_read_only(self, glyphs: list[GlyphGeometry]) -> None:
        """Test the index cannot be modified after building."""
        table = GlyphTable.build(glyphs)
        with pytest.raises(TypeError):
            table.index[66] = 0  # type: ignore[index]

    def test_accepts_iterator(self, glyphs: list[GlyphGeometry]) -> None:
        """Test the table is built from a single pass over any iterable."""
        table = GlyphTable.build(iter(glyphs))
        assert len(table) == 3
