#
# PROJECT: ascii-painter
# MODULE: ascii_painter/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .canvas import GridBuffer

# Character cells are taller than wide; squeeze the horizontal axis so a
# disk looks round on screen.
CIRCLE_ASPECT = 0.8


def rect_cells(x, y, w, h):
    """
    Yields (x, y) for every cell of an axis-aligned rectangle.
    (x, y) is the top-left corner; w <= 0 or h <= 0 yields nothing.
    """
    for i in range(h):
        for j in range(w):
            yield x + j, y + i


def disk_cells(cx, cy, r, aspect=CIRCLE_ASPECT):
    """
    Yields (x, y) for every cell of a filled disk centered at (cx, cy).

    Offset (j, i) is inside when j*j*aspect + i*i <= r*r. r == 0 yields
    the center cell only; a negative radius yields nothing.
    """
    r_sq = r * r
    for i in range(-r, r + 1):
        for j in range(-r, r + 1):
            if j * j * aspect + i * i <= r_sq:
                yield cx + j, cy + i


def triangle_cells(tip_x, tip_y, h):
    """
    Yields (x, y) for an upward isosceles triangle with its apex at
    (tip_x, tip_y). Row i spans columns tip_x - i .. tip_x + i, so the base
    is 2h - 1 wide. h <= 0 yields nothing.
    """
    for i in range(h):
        for j in range(-i, i + 1):
            yield tip_x + j, tip_y + i


def fill_cells(buffer: GridBuffer, cells, glyph, color):
    """Writes glyph/color into each cell; the buffer clips out-of-range cells."""
    write = buffer.write
    for x, y in cells:
        write(x, y, glyph, color)


def fill_rect(buffer: GridBuffer, x, y, w, h, glyph, color):
    # Clip rows and columns up front; large background rectangles are common
    x0, x1 = max(0, x), min(buffer.width, x + w)
    y0, y1 = max(0, y), min(buffer.height, y + h)
    if x0 >= x1 or y0 >= y1:
        return
    write = buffer.write
    for row in range(y0, y1):
        for col in range(x0, x1):
            write(col, row, glyph, color)


def fill_disk(buffer: GridBuffer, cx, cy, r, glyph, color, aspect=CIRCLE_ASPECT):
    fill_cells(buffer, disk_cells(cx, cy, r, aspect), glyph, color)


def fill_triangle(buffer: GridBuffer, tip_x, tip_y, h, glyph, color):
    fill_cells(buffer, triangle_cells(tip_x, tip_y, h), glyph, color)
