"""
Boundary clipper.

Intersects a candidate rectangle with the plane's output-space box.
Candidates that only touch an edge (zero overlap) are discarded,
never emitted as zero-area rectangles.
"""

from typing import Iterable, Iterator, Optional

from .geometry import Rect, Transform


def _clip_span(start: float, size: float, low: float, high: float) -> tuple[float, float]:
    """Clip one axis. An untrimmed span comes back as-is so its size stays exact."""
    end = start + size
    if start >= low and end <= high:
        return start, size
    clipped_start = max(start, low)
    return clipped_start, min(end, high) - clipped_start


def clip_rect(rect: Rect, transform: Transform) -> Optional[Rect]:
    """Returns the clipped rectangle, or None when nothing of it lies inside the plane."""
    if (rect.right <= transform.x0 or rect.x >= transform.x1
            or rect.bottom <= transform.y0 or rect.y >= transform.y1):
        return None

    x, width = _clip_span(rect.x, rect.width, transform.x0, transform.x1)
    y, height = _clip_span(rect.y, rect.height, transform.y0, transform.y1)
    if (x, y, width, height) == (rect.x, rect.y, rect.width, rect.height):
        return rect
    return Rect(x=x, y=y, width=width, height=height)


def clip_all(rects: Iterable[Rect], transform: Transform) -> Iterator[Rect]:
    """Clip every candidate in order, skipping the discarded ones."""
    for rect in rects:
        clipped = clip_rect(rect, transform)
        if clipped is not None:
            yield clipped
