"""
Transform calculator.

Input: Plane (meters) + Viewport (pixels, with padding).
Output: Transform with a single scale factor that fits the whole plane
inside the padded viewport without distorting its aspect ratio.
"""

import logging

from .errors import DegenerateGeometry
from .geometry import Plane, Rect, Transform, Viewport, is_positive

logger = logging.getLogger(__name__)


def compute_transform(plane: Plane, viewport: Viewport) -> Transform:
    """
    scale = min((Vw - 2p) / W, (Vh - 2p) / H), origin at (p, p).

    Raises DegenerateGeometry when the plane or the usable viewport area
    has a non-positive side.
    """
    if not (is_positive(plane.width) and is_positive(plane.height)):
        raise DegenerateGeometry(
            f"Plane must have positive dimensions, got {plane.width} x {plane.height}"
        )
    if viewport.padding < 0:
        raise DegenerateGeometry(f"Padding cannot be negative, got {viewport.padding}")

    avail_w = viewport.usable_width
    avail_h = viewport.usable_height
    if not (is_positive(avail_w) and is_positive(avail_h)):
        raise DegenerateGeometry(
            f"Viewport {viewport.width} x {viewport.height} leaves no room "
            f"inside {viewport.padding}px padding"
        )

    scale = min(avail_w / plane.width, avail_h / plane.height)
    x0 = viewport.padding
    y0 = viewport.padding
    transform = Transform(
        scale=scale,
        x0=x0,
        y0=y0,
        x1=x0 + plane.width * scale,
        y1=y0 + plane.height * scale,
    )
    logger.debug("Transform for plane %sx%s: scale=%.4f", plane.width, plane.height, scale)
    return transform


def plane_outline(transform: Transform) -> Rect:
    """The plane's own rectangle in output space, stroked before any unit."""
    return Rect(
        x=transform.x0,
        y=transform.y0,
        width=transform.x1 - transform.x0,
        height=transform.y1 - transform.y0,
    )
