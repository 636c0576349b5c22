"""Global atlas layout types.

This module defines the types describing the packed atlas as a whole:
- ImageType: Enum for the kind of image stored in the atlas
- YDirection: Enum for the vertical axis convention
- DistanceRange: Lower/upper distance bounds encoded by a distance field
- AtlasMetrics: Pixel dimensions, scale, distance range and y direction
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ImageType(str, Enum):
    """Kind of image packed into the atlas.

    Mask kinds store plain coverage; the remaining kinds store a (pseudo,
    multi-channel or multi-channel-plus-true) signed distance field.
    """

    HARD_MASK = "hardmask"
    SOFT_MASK = "softmask"
    SDF = "sdf"
    PSDF = "psdf"
    MSDF = "msdf"
    MTSDF = "mtsdf"

    @property
    def is_distance_field(self) -> bool:
        """Check whether the image encodes distances.

        Returns:
            True for the four distance-field kinds, False for masks
        """
        return self not in (ImageType.HARD_MASK, ImageType.SOFT_MASK)


class YDirection(str, Enum):
    """Vertical axis convention of the atlas.

    - BOTTOM_UP: Y grows upwards, origin at the bottom row
    - TOP_DOWN: Y grows downwards, origin at the top row
    """

    BOTTOM_UP = "bottom"
    TOP_DOWN = "top"

    @property
    def y_factor(self) -> float:
        """Sign applied to vertical font metrics for this convention."""
        return -1.0 if self is YDirection.TOP_DOWN else 1.0


@dataclass(frozen=True, slots=True)
class DistanceRange:
    """Range of signed distances representable by the distance field.

    A range rebuilt from its span and midpoint keeps both values as given, so
    width and middle return them unchanged instead of recomputing them from
    the rounded bounds.

    Attributes:
        lower: Distance mapped to the lowest pixel value
        upper: Distance mapped to the highest pixel value
    """

    lower: float
    upper: float
    given_width: float | None = field(default=None, repr=False, compare=False)
    given_middle: float | None = field(default=None, repr=False, compare=False)

    @property
    def width(self) -> float:
        """Span of the range (upper - lower)."""
        if self.given_width is not None:
            return self.given_width
        return self.upper - self.lower

    @property
    def middle(self) -> float:
        """Arithmetic mean of lower and upper."""
        if self.given_middle is not None:
            return self.given_middle
        return 0.5 * (self.lower + self.upper)

    @classmethod
    def from_width(cls, width: float, middle: float = 0.0) -> "DistanceRange":
        """Rebuild a range from its span and midpoint.

        Args:
            width: Span of the range
            middle: Midpoint of the range

        Returns:
            DistanceRange centered on middle, reporting width and middle verbatim
        """
        return cls(
            lower=middle - 0.5 * width,
            upper=middle + 0.5 * width,
            given_width=width,
            given_middle=middle,
        )


@dataclass(frozen=True, slots=True)
class AtlasMetrics:
    """Global properties of a packed atlas.

    Attributes:
        width: Atlas width in pixels (at least 2)
        height: Atlas height in pixels (at least 2)
        size: Pixels per em the glyphs were rendered at
        distance_range: Distance range encoded by distance-field images
        y_direction: Vertical axis convention of the atlas bounds
    """

    width: int
    height: int
    size: float
    distance_range: DistanceRange = field(default_factory=lambda: DistanceRange(0.0, 0.0))
    y_direction: YDirection = YDirection.BOTTOM_UP

    def __post_init__(self) -> None:
        # Atlas bounds are normalized by (dimension - 1).
        if self.width < 2 or self.height < 2:
            raise ValueError(
                f"Atlas must be at least 2x2 pixels, got {self.width}x{self.height}"
            )

    def to_dict(self, image_type: ImageType | None = None) -> dict[str, Any]:
        """Serialize to the atlas block of a layout file.

        Args:
            image_type: Image kind to record alongside the metrics

        Returns:
            Dictionary representation of the atlas block
        """
        data: dict[str, Any] = {}
        if image_type is not None:
            data["type"] = image_type.value
        data.update(
            {
                "distanceRange": self.distance_range.width,
                "distanceRangeMiddle": self.distance_range.middle,
                "size": self.size,
                "width": self.width,
                "height": self.height,
                "yOrigin": self.y_direction.value,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AtlasMetrics":
        """Deserialize from the atlas block of a layout file.

        Args:
            data: Dictionary representation of the atlas block

        Returns:
            AtlasMetrics instance
        """
        return cls(
            width=int(data["width"]),
            height=int(data["height"]),
            size=float(data.get("size", 0.0)),
            distance_range=DistanceRange.from_width(
                float(data.get("distanceRange", 0.0)),
                float(data.get("distanceRangeMiddle", 0.0)),
            ),
            y_direction=YDirection(data.get("yOrigin", YDirection.BOTTOM_UP.value)),
        )
