#
# PROJECT: ascii-painter
# MODULE: ascii_painter/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from dataclasses import dataclass

from .color import ColorTag


class InvalidDimension(ValueError):
    """Raised when a grid buffer is created with a non-positive size."""


@dataclass(frozen=True)
class Cell:
    """One grid position: a single glyph and its color tag."""
    glyph: str
    color: ColorTag

    def __post_init__(self):
        if not isinstance(self.glyph, str) or len(self.glyph) != 1:
            raise ValueError(f"glyph must be a single character, got {self.glyph!r}")
        if not isinstance(self.color, ColorTag):
            raise TypeError(f"color must be a ColorTag, got {self.color!r}")


BACKGROUND = Cell('.', ColorTag.GRAY)


class GridBuffer:
    """
    Fixed-size 2D array of cells, indexed cells[y][x].

    Writes outside [0, width) x [0, height) are silently clipped so shapes
    may extend past the grid edges.
    """
    __slots__ = ['width', 'height', 'cells']

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"grid size must be positive, got {width}x{height}")
        self.width, self.height = width, height
        self.cells = [[BACKGROUND] * width for _ in range(height)]

    def clear(self):
        """Reset every cell to the background cell."""
        for row in self.cells:
            row[:] = [BACKGROUND] * self.width

    def write(self, x: int, y: int, glyph: str, color: ColorTag):
        """
        Set cell (x, y). Off-grid coordinates are a silent no-op.

        The glyph and color are checked before clipping: a multi-character
        glyph (ValueError) or a non-ColorTag color (TypeError) is a caller
        bug and raises whether or not the cell is on the grid.
        """
        cell = Cell(glyph, color)
        if x < 0 or x >= self.width or y < 0 or y >= self.height: return
        self.cells[y][x] = cell

    def cell_at(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def rows(self):
        """Yield each row as a tuple of cells, top to bottom."""
        for row in self.cells:
            yield tuple(row)

    def snapshot(self):
        return tuple(self.rows())

    def __repr__(self):
        return f"GridBuffer({self.width}x{self.height})"
