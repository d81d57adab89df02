from pydantic import BaseModel
from typing import Optional, List

from .layout.engine import Layout
from .layout.geometry import Plane, Unit, Viewport


# Dimensions are plain floats on purpose: zero or negative values must reach
# the layout engine and come back as degenerate_geometry, not a generic 422.

class PlaneIn(BaseModel):
    width: float
    height: float

    def to_plane(self) -> Plane:
        return Plane(width=self.width, height=self.height)

class UnitIn(BaseModel):
    width: float
    length: float

    def to_unit(self) -> Unit:
        return Unit(width=self.width, length=self.length)

class ViewportIn(BaseModel):
    width: float
    height: float
    padding: Optional[float] = None  # falls back to LAYOUT_PADDING_PX

    def to_viewport(self, default_padding: float) -> Viewport:
        padding = default_padding if self.padding is None else self.padding
        return Viewport(width=self.width, height=self.height, padding=padding)

class LayoutRequest(BaseModel):
    plane: PlaneIn
    unit: UnitIn
    pattern: str
    viewport: ViewportIn

class RectOut(BaseModel):
    x: float
    y: float
    width: float
    height: float

class TransformOut(BaseModel):
    scale: float
    x0: float
    y0: float
    x1: float
    y1: float

class LayoutResponse(BaseModel):
    pattern: str
    transform: TransformOut
    outline: RectOut
    rects: List[RectOut] = []

    @classmethod
    def from_layout(cls, layout: Layout) -> "LayoutResponse":
        t = layout.transform
        return cls(
            pattern=layout.pattern.value,
            transform=TransformOut(scale=t.scale, x0=t.x0, y0=t.y0, x1=t.x1, y1=t.y1),
            outline=RectOut(**layout.outline.to_dict()),
            rects=[RectOut(**r.to_dict()) for r in layout.rects],
        )

class RenderStyle(BaseModel):
    fill: str
    stroke: str
    stroke_width: float
    outline: str
    outline_width: float
