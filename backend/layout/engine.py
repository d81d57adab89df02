"""
Layout pipeline: transform -> pattern candidates -> clipping -> draw list.

Every call recomputes from scratch. Nothing is cached between calls and
no input is mutated, so concurrent callers never share state.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .base import PatternVariant
from .clipper import clip_all
from .errors import DegenerateGeometry, LayoutTooLarge
from .geometry import Plane, Rect, Transform, Unit, Viewport, is_positive
from .registry import get_pattern, parse_pattern
from .transform import compute_transform, plane_outline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Layout:
    """Everything a renderer needs: the plane outline and the clipped unit rects."""
    pattern: PatternVariant
    transform: Transform
    outline: Rect
    rects: tuple[Rect, ...]


def _check_unit(unit: Unit) -> None:
    if not (is_positive(unit.width) and is_positive(unit.length)):
        raise DegenerateGeometry(
            f"Unit must have positive dimensions, got {unit.width} x {unit.length}"
        )


def estimate_candidate_count(plane: Plane, unit: Unit, pattern: PatternVariant | str,
                             transform: Transform) -> int:
    """How many candidate rects the pattern would generate, before clipping."""
    _check_unit(unit)
    return get_pattern(pattern).count(plane, unit, transform)


def build_layout(plane: Plane, unit: Unit, pattern: PatternVariant | str, viewport: Viewport,
                 max_candidates: Optional[int] = None) -> Layout:
    """
    Runs the full pipeline.

    Raises UnknownPattern if the pattern name is not supported, then
    DegenerateGeometry if any dimension is unusable, then LayoutTooLarge when
    max_candidates is set and would be exceeded. Pattern generation only
    starts once all of those checks pass.
    """
    variant = parse_pattern(pattern)
    _check_unit(unit)
    transform = compute_transform(plane, viewport)
    generator = get_pattern(variant)

    if max_candidates is not None:
        count = generator.count(plane, unit, transform)
        if count > max_candidates:
            raise LayoutTooLarge(count, max_candidates)

    rects = tuple(clip_all(generator.candidates(plane, unit, transform), transform))
    logger.debug("Layout %s: %d rects drawn", variant.value, len(rects))
    return Layout(
        pattern=variant,
        transform=transform,
        outline=plane_outline(transform),
        rects=rects,
    )


def compute_layout(plane: Plane, unit: Unit, pattern: PatternVariant | str,
                   viewport: Viewport) -> list[Rect]:
    """The draw command sequence: clipped rects in generator emission order."""
    return list(build_layout(plane, unit, pattern, viewport).rects)
