"""Codepoint-addressable glyph table.

The emitted glyph list and the emitted codepoint map must agree on which
glyphs are listed and in which position. GlyphTable derives both from a
single filtered pass over the font's glyphs.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from atlascpp.domain.font import GlyphGeometry


@dataclass(frozen=True)
class GlyphTable:
    """Glyphs reachable by codepoint, in font order, with a codepoint index.

    Attributes:
        entries: Glyphs with a non-zero codepoint, in font order
        index: Codepoint to position in entries
        skipped: Number of glyphs left out for lacking a codepoint
    """

    entries: tuple[GlyphGeometry, ...]
    index: Mapping[int, int]
    skipped: int = 0

    @classmethod
    def build(cls, glyphs: Iterable[GlyphGeometry]) -> "GlyphTable":
        """Build the table and its index in one pass.

        Glyphs without a codepoint are skipped. If a codepoint occurs more than
        once, every occurrence gets a table entry and the index points at the
        first one.

        Args:
            glyphs: Glyphs in font order

        Returns:
            GlyphTable for the given glyphs
        """
        entries: list[GlyphGeometry] = []
        index: dict[int, int] = {}
        skipped = 0

        for glyph in glyphs:
            if not glyph.has_codepoint:
                skipped += 1
                continue
            index.setdefault(glyph.codepoint, len(entries))
            entries.append(glyph)

        return cls(entries=tuple(entries), index=MappingProxyType(index), skipped=skipped)

    def lookup(self, codepoint: int) -> GlyphGeometry | None:
        """Find the glyph for a codepoint.

        Args:
            codepoint: Unicode codepoint to look up

        Returns:
            The glyph, or None if no listed glyph has this codepoint
        """
        position = self.index.get(codepoint)
        if position is None:
            return None
        return self.entries[position]

    def index_pairs(self) -> Iterator[tuple[int, int]]:
        """Yield (codepoint, position) for every indexed codepoint, in table order."""
        yield from self.index.items()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[GlyphGeometry]:
        return iter(self.entries)

    def __contains__(self, codepoint: object) -> bool:
        return codepoint in self.index
