"""
Layout preview API.

POST /api/layout          : Compute the clipped rectangles for a plane/unit/pattern/viewport
GET  /api/layout/patterns : Supported pattern names
GET  /api/layout/style    : Fixed renderer style (fill, stroke, outline)

The client calls POST /api/layout again whenever its inputs change or the
canvas is resized. Each response replaces the previous one entirely.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..config import settings
from ..layout.engine import build_layout
from ..layout.errors import DegenerateGeometry, LayoutTooLarge, UnknownPattern
from ..layout.registry import list_patterns

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("", response_model=schemas.LayoutResponse)
def compute_layout(request: schemas.LayoutRequest):
    """
    Run the layout pipeline.

    400 unknown_pattern     : pattern name not supported, nothing is drawn
    422 degenerate_geometry : a dimension is zero/negative or the viewport has no room
    413 layout_too_large    : more candidate rects than LAYOUT_MAX_CANDIDATES
    """
    try:
        layout = build_layout(
            request.plane.to_plane(),
            request.unit.to_unit(),
            request.pattern,
            request.viewport.to_viewport(settings.LAYOUT_PADDING_PX),
            max_candidates=settings.LAYOUT_MAX_CANDIDATES,
        )
    except UnknownPattern as e:
        logger.warning("Unknown pattern requested: %r", e.value)
        raise HTTPException(status_code=400, detail={
            "error": "unknown_pattern",
            "message": str(e),
            "available": e.available,
        })
    except DegenerateGeometry as e:
        logger.warning("Degenerate layout request: %s", e)
        raise HTTPException(status_code=422, detail={
            "error": "degenerate_geometry",
            "message": str(e),
        })
    except LayoutTooLarge as e:
        logger.warning("Layout rejected: %s", e)
        raise HTTPException(status_code=413, detail={
            "error": "layout_too_large",
            "message": str(e),
            "count": e.count,
            "limit": e.limit,
        })

    return schemas.LayoutResponse.from_layout(layout)


@router.get("/patterns", response_model=List[str])
def get_patterns():
    return list_patterns()


@router.get("/style", response_model=schemas.RenderStyle)
def get_style():
    return schemas.RenderStyle(
        fill=settings.STYLE_FILL_COLOR,
        stroke=settings.STYLE_STROKE_COLOR,
        stroke_width=settings.STYLE_STROKE_WIDTH,
        outline=settings.STYLE_OUTLINE_COLOR,
        outline_width=settings.STYLE_OUTLINE_WIDTH,
    )
