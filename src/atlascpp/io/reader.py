"""Reader for atlas layout files.

This module provides the AtlasLayoutReader class for loading the JSON layout
produced by distance-field atlas generators into domain models.

A layout holds an ``atlas`` block and either a single font (top-level
``metrics`` and ``glyphs``) or several fonts under ``variants``.
"""

import json
from pathlib import Path
from typing import Any

from atlascpp.domain.atlas import AtlasMetrics, ImageType
from atlascpp.domain.font import FontGeometry
from atlascpp.exceptions import AtlasFormatError, AtlasLoadError


class AtlasLayoutReader:
    """Loads an atlas layout file.

    Example:
        with AtlasLayoutReader(Path("atlas.json")) as reader:
            print(reader.image_type, len(reader.fonts))
    """

    def __init__(self, layout_path: Path) -> None:
        """Initialize the layout reader.

        Args:
            layout_path: Path to the layout JSON file
        """
        self._layout_path = layout_path
        self._image_type: ImageType | None = None
        self._metrics: AtlasMetrics | None = None
        self._fonts: tuple[FontGeometry, ...] | None = None

    def load(self) -> None:
        """Load and parse the layout file.

        Raises:
            AtlasLoadError: If the file is missing, unreadable or not JSON
            AtlasFormatError: If the JSON does not describe an atlas layout
        """
        path = str(self._layout_path)
        if not self._layout_path.exists():
            raise AtlasLoadError(path, "file not found")

        try:
            with open(self._layout_path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise AtlasLoadError(path, e.strerror or str(e)) from e
        except json.JSONDecodeError as e:
            raise AtlasLoadError(path, f"invalid JSON: {e}") from e

        self._parse(data)

    def _parse(self, data: Any) -> None:
        path = str(self._layout_path)
        if not isinstance(data, dict):
            raise AtlasFormatError(path, "top-level value must be an object")

        atlas = data.get("atlas")
        if not isinstance(atlas, dict):
            raise AtlasFormatError(path, "missing 'atlas' block")

        try:
            self._image_type = ImageType(atlas["type"])
        except KeyError:
            raise AtlasFormatError(path, "atlas block has no 'type'") from None
        except ValueError:
            raise AtlasFormatError(path, f"unknown image type '{atlas['type']}'") from None

        try:
            self._metrics = AtlasMetrics.from_dict(atlas)
            if "variants" in data:
                self._fonts = tuple(FontGeometry.from_dict(v) for v in data["variants"])
            else:
                self._fonts = (FontGeometry.from_dict(data),)
        except KeyError as e:
            raise AtlasFormatError(path, f"missing field {e}") from e
        except (AttributeError, TypeError, ValueError) as e:
            raise AtlasFormatError(path, str(e)) from e

    def _require_loaded(self) -> None:
        if self._fonts is None:
            raise RuntimeError("Layout not loaded. Call load() first.")

    @property
    def image_type(self) -> ImageType:
        """Image kind stored in the atlas.

        Raises:
            RuntimeError: If the layout has not been loaded yet
        """
        self._require_loaded()
        assert self._image_type is not None
        return self._image_type

    @property
    def metrics(self) -> AtlasMetrics:
        """Global atlas metrics.

        Raises:
            RuntimeError: If the layout has not been loaded yet
        """
        self._require_loaded()
        assert self._metrics is not None
        return self._metrics

    @property
    def fonts(self) -> tuple[FontGeometry, ...]:
        """Fonts in layout order.

        Raises:
            RuntimeError: If the layout has not been loaded yet
        """
        self._require_loaded()
        assert self._fonts is not None
        return self._fonts

    @property
    def glyph_count(self) -> int:
        """Total number of glyphs over all fonts."""
        return sum(len(font.glyphs) for font in self.fonts)

    def close(self) -> None:
        """Drop the loaded layout."""
        self._image_type = None
        self._metrics = None
        self._fonts = None

    def __enter__(self) -> "AtlasLayoutReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
