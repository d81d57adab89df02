"""
Straight (stack bond) pattern.

Plain grid, row-major. Exact coverage when the plane is a whole multiple of
the unit; otherwise the last column and row overhang and get clipped.
"""

from .base import BasePattern, PatternVariant


class StraightPattern(BasePattern):

    variant = PatternVariant.STRAIGHT

    def candidates(self, plane, unit, transform):
        pw, pl = self.unit_pixels(unit, transform)
        nb_x, nb_y = self.grid_extent(plane, unit)
        for row in range(nb_y):
            y = transform.y0 + row * pl
            for col in range(nb_x):
                yield self.make_rect(transform.x0 + col * pw, y, pw, pl)
