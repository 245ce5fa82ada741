#
# PROJECT: ascii-painter
# MODULE: ascii_painter/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from dataclasses import dataclass, fields
from enum import Enum

from .canvas import GridBuffer
from .color import ColorTag
from .rasterizer import (disk_cells, fill_disk, fill_rect, fill_triangle,
                         rect_cells, triangle_cells)


class ShapeKind(Enum):
    RECTANGLE = 'rectangle'
    CIRCLE = 'circle'
    TRIANGLE = 'triangle'


@dataclass(frozen=True)
class Shape:
    """
    Base for the closed set of drawable shapes.

    Shapes are immutable. Each variant knows which grid cells it covers and
    writes them into a GridBuffer with rasterize(); cells past the grid
    edges are clipped by the buffer, never reported as errors.
    """
    kind = None

    def __post_init__(self):
        # Checked here so rasterize() can never fail on a bad layer
        for f in fields(self):
            if f.name in ('glyph', 'color'):
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{type(self).__name__} parameter {f.name} must be an int, "
                                f"got {type(value).__name__}")
        if not isinstance(self.glyph, str) or len(self.glyph) != 1:
            raise ValueError(f"glyph must be a single character, got {self.glyph!r}")
        if not isinstance(self.color, ColorTag):
            raise TypeError(f"color must be a ColorTag, got {self.color!r}")

    def cells(self):
        """Yields the (x, y) cells this shape covers, unclipped."""
        raise NotImplementedError

    def rasterize(self, buffer: GridBuffer):
        raise NotImplementedError


@dataclass(frozen=True)
class Rectangle(Shape):
    x: int
    y: int
    w: int
    h: int
    glyph: str = '#'
    color: ColorTag = ColorTag.WHITE

    kind = ShapeKind.RECTANGLE

    def cells(self):
        return rect_cells(self.x, self.y, self.w, self.h)

    def rasterize(self, buffer: GridBuffer):
        fill_rect(buffer, self.x, self.y, self.w, self.h, self.glyph, self.color)


@dataclass(frozen=True)
class Circle(Shape):
    cx: int
    cy: int
    r: int
    glyph: str = '@'
    color: ColorTag = ColorTag.WHITE

    kind = ShapeKind.CIRCLE

    def cells(self):
        return disk_cells(self.cx, self.cy, self.r)

    def rasterize(self, buffer: GridBuffer):
        fill_disk(buffer, self.cx, self.cy, self.r, self.glyph, self.color)


@dataclass(frozen=True)
class Triangle(Shape):
    tip_x: int
    tip_y: int
    h: int
    glyph: str = '^'
    color: ColorTag = ColorTag.WHITE

    kind = ShapeKind.TRIANGLE

    def cells(self):
        return triangle_cells(self.tip_x, self.tip_y, self.h)

    def rasterize(self, buffer: GridBuffer):
        fill_triangle(buffer, self.tip_x, self.tip_y, self.h, self.glyph, self.color)


_SHAPE_CLASSES = {
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.CIRCLE: Circle,
    ShapeKind.TRIANGLE: Triangle,
}

# Parameter names in prompt order, e.g. "x y w h"
PARAM_NAMES = {
    ShapeKind.RECTANGLE: ('x', 'y', 'w', 'h'),
    ShapeKind.CIRCLE: ('cx', 'cy', 'r'),
    ShapeKind.TRIANGLE: ('tip_x', 'tip_y', 'h'),
}


def make_shape(kind, params, glyph=None, color=ColorTag.WHITE) -> Shape:
    """
    Build a shape from its kind and a sequence of integer parameters.

    Only the parameter types are checked. Negative or zero sizes are
    accepted and simply cover fewer (or no) cells.

    Raises:
        TypeError: a parameter is not an int.
        ValueError: unknown kind or wrong number of parameters.
    """
    if not isinstance(kind, ShapeKind):
        kind = ShapeKind(str(kind).strip().lower())
    params = tuple(params)
    names = PARAM_NAMES[kind]
    if len(params) != len(names):
        raise ValueError(f"{kind.value} takes {len(names)} parameters "
                         f"({' '.join(names)}), got {len(params)}")

    cls = _SHAPE_CLASSES[kind]
    if glyph is None:
        return cls(*params, color=color)
    return cls(*params, glyph=glyph, color=color)
