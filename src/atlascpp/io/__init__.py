"""I/O layer for atlascpp.

This module handles reading atlas layouts and font files, and writing the
exported source. It keeps file formats and fonttools out of the domain models.

Key responsibilities:
- Load atlas layout JSON into domain models
- Read vertical metrics from TTF/OTF fonts
- Write exported source, publishing it only when complete

Key classes:
- AtlasLayoutReader: Load atlas layouts
- FontMetricsReader: Read font metrics with fonttools
- CppWriter: Write the exported source file
"""

from atlascpp.io.font_metrics import FontMetricsReader
from atlascpp.io.reader import AtlasLayoutReader
from atlascpp.io.writer import CppWriter

__all__ = [
    "AtlasLayoutReader",
    "CppWriter",
    "FontMetricsReader",
]
