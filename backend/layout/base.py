"""
Abstract base class for all tiling patterns.

Input: Plane + Unit (meters) and the Transform from the transform calculator.
Output: candidate Rects in output space, in emission order. Candidates may
overhang the plane; the clipper trims them afterwards.
"""

import enum
import math
from abc import ABC, abstractmethod
from typing import Iterator

from .errors import DegenerateGeometry
from .geometry import Plane, Rect, Transform, Unit


class PatternVariant(str, enum.Enum):
    STRAIGHT = "straight"
    STAGGERED = "staggered"
    HERRINGBONE = "herringbone"


class BasePattern(ABC):
    """All pattern generators inherit from this."""

    variant: PatternVariant

    @abstractmethod
    def candidates(self, plane: Plane, unit: Unit, transform: Transform) -> Iterator[Rect]:
        """
        Yields candidate rectangles in emission order.
        Every call starts over, so the same inputs always give the same sequence.
        """

    def count(self, plane: Plane, unit: Unit, transform: Transform) -> int:
        """Number of candidates candidates() will yield, without generating them. One per grid cell."""
        nb_x, nb_y = self.grid_extent(plane, unit)
        return nb_x * nb_y

    # --- Helper methods for all patterns ---

    def tile_count(self, extent: float, size: float) -> int:
        """
        How many tiles of `size` cover `extent`, rounded up.
        Raises DegenerateGeometry when the ratio cannot be counted
        (tile scaled down to nothing, or extent/size overflows).
        """
        if not size > 0:
            raise DegenerateGeometry(f"Tile size {size} is too small to place")
        ratio = extent / size
        if not math.isfinite(ratio):
            raise DegenerateGeometry(
                f"Extent {extent} is too large for tile size {size}"
            )
        return math.ceil(ratio)

    def unit_pixels(self, unit: Unit, transform: Transform) -> tuple[float, float]:
        """(pw, pl): unit width and length scaled to output space."""
        return unit.width * transform.scale, unit.length * transform.scale

    def grid_extent(self, plane: Plane, unit: Unit) -> tuple[int, int]:
        """(nbX, nbY): columns and rows needed to cover the plane, rounded up."""
        return self.tile_count(plane.width, unit.width), self.tile_count(plane.height, unit.length)

    def make_rect(self, x: float, y: float, width: float, height: float) -> Rect:
        """Build a candidate Rect."""
        return Rect(x=x, y=y, width=width, height=height)
