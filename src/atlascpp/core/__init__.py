"""Core export logic for atlascpp.

This module contains:

- String escaping for C++ literals
- The numeric formatting policy (17 significant digits)
- Emitters for every section of the exported source
- The single-pass glyph table and codepoint index
- Export orchestration

Key functions:
- escape_cpp_string: Escape text for a C++ string literal
- format_real: Format a double with round-trip precision
- render_source: Render a complete source file to a string
- export_cpp: Export an atlas, reporting success as a boolean

Key classes:
- GlyphTable: Codepoint-addressable glyph list
- CppExporter: Validates, writes and tracks an export
"""

from atlascpp.core.emitters import (
    AtlasHeaderEmitter,
    CodepointIndexEmitter,
    FontMetricsEmitter,
    GlyphTableEmitter,
    PreambleEmitter,
    atlas_bounds_members,
    plane_bounds_members,
)
from atlascpp.core.escape import escape_cpp_string
from atlascpp.core.exporter import CppExporter, export_cpp, render_source, write_source
from atlascpp.core.numeric import format_int, format_real
from atlascpp.core.source import SourceWriter
from atlascpp.core.table import GlyphTable

__all__ = [
    # Emitters
    "AtlasHeaderEmitter",
    "CodepointIndexEmitter",
    # Exporter
    "CppExporter",
    "FontMetricsEmitter",
    # Table
    "GlyphTable",
    "GlyphTableEmitter",
    "PreambleEmitter",
    "SourceWriter",
    "atlas_bounds_members",
    # Escaping and numbers
    "escape_cpp_string",
    "export_cpp",
    "format_int",
    "format_real",
    "plane_bounds_members",
    "render_source",
    "write_source",
]
