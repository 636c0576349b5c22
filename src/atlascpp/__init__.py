"""Atlascpp - Export packed glyph atlas metrics as compilable C++ source.

Atlascpp takes the layout of a packed distance-field glyph atlas (font metrics,
glyph plane and atlas bounds, global atlas properties) and writes a C++ source
file holding the metrics as static data, with a compile-time codepoint lookup
for every font. The packed image itself is supplied to the build separately.

Example:
    $ atlascpp atlas.json

This will create atlas.cpp next to atlas.json.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
