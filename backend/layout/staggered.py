"""
Staggered (running bond) pattern.

Same grid as straight, but every odd row is pushed left by half a unit.
The shift is one-sided: odd rows overhang the left edge (trimmed by the
clipper) and can stop half a unit short of the right edge.
"""

from .base import BasePattern, PatternVariant


class StaggeredPattern(BasePattern):

    variant = PatternVariant.STAGGERED

    def row_offset(self, row: int, pw: float) -> float:
        """Horizontal shift for a row: -pw/2 on odd rows, 0 on even rows."""
        return -pw / 2 if row % 2 != 0 else 0.0

    def candidates(self, plane, unit, transform):
        pw, pl = self.unit_pixels(unit, transform)
        nb_x, nb_y = self.grid_extent(plane, unit)
        for row in range(nb_y):
            y = transform.y0 + row * pl
            offset_x = self.row_offset(row, pw)
            for col in range(nb_x):
                yield self.make_rect(transform.x0 + col * pw + offset_x, y, pw, pl)
