"""
Value types shared by every stage of the layout pipeline.

World units (meters): Plane, Unit.
Output units (device pixels): Viewport, Transform, Rect.

All types are frozen. A recomputation always builds new instances.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Plane:
    """The bounded area being tiled."""
    width: float
    height: float


@dataclass(frozen=True)
class Unit:
    """The module placed repeatedly across the plane."""
    width: float
    length: float


@dataclass(frozen=True)
class Viewport:
    """Drawable surface, already corrected for device pixel ratio by the host."""
    width: float
    height: float
    padding: float = 0.0

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def usable_height(self) -> float:
        return self.height - 2 * self.padding


@dataclass(frozen=True)
class Transform:
    """Uniform world-to-output mapping. (x0, y0)..(x1, y1) is the plane's printed box."""
    scale: float
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in output space. Used for both candidates and clipped rects."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def is_positive(value: float) -> bool:
    """True for finite numbers strictly greater than zero."""
    return math.isfinite(value) and value > 0
