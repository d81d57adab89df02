"""
Layout engine: tiling and clipping for the preview canvas.

Pure Python geometry. No I/O, no rendering.
Given plane and unit dimensions, a pattern variant and a viewport,
produce the ordered list of output-space rectangles the renderer must paint.
"""
