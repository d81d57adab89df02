"""
Herringbone pattern, 90 degree approximation.

Each square block of side (pl + pw) holds two units forming an "L":
  A: horizontal, (baseX, baseY, pl, pw)
  B: vertical,   (baseX + pl, baseY, pw, pl), against A's right edge
No 45 degree rotation. Block counts are taken over the scaled plane size.
"""

from .base import BasePattern, PatternVariant


class HerringbonePattern(BasePattern):

    variant = PatternVariant.HERRINGBONE

    def block_extent(self, plane, unit, transform) -> tuple[float, int, int]:
        """(block, nbBlockX, nbBlockY) with block = pl + pw in output units."""
        pw, pl = self.unit_pixels(unit, transform)
        block = pl + pw
        nb_block_x = self.tile_count(plane.width * transform.scale, block)
        nb_block_y = self.tile_count(plane.height * transform.scale, block)
        return block, nb_block_x, nb_block_y

    def candidates(self, plane, unit, transform):
        pw, pl = self.unit_pixels(unit, transform)
        block, nb_block_x, nb_block_y = self.block_extent(plane, unit, transform)
        for row in range(nb_block_y):
            base_y = transform.y0 + row * block
            for col in range(nb_block_x):
                base_x = transform.x0 + col * block
                yield self.make_rect(base_x, base_y, pl, pw)
                yield self.make_rect(base_x + pl, base_y, pw, pl)

    def count(self, plane, unit, transform):
        _, nb_block_x, nb_block_y = self.block_extent(plane, unit, transform)
        return 2 * nb_block_x * nb_block_y
