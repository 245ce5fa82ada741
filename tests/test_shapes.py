"""Tests for shape rasterization and the shape factory."""

from __future__ import annotations

import dataclasses

import pytest

from ascii_painter.canvas import Cell, GridBuffer
from ascii_painter.color import ColorTag
from ascii_painter.rasterizer import CIRCLE_ASPECT, disk_cells, rect_cells, triangle_cells
from ascii_painter.scene import Scene
from ascii_painter.shapes import Circle, Rectangle, ShapeKind, Triangle, make_shape
from tests.conftest import drawn_cells


def _raster(shape, w=10, h=10):
    buf = GridBuffer(w, h)
    shape.rasterize(buf)
    return buf


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------

class TestRectangle:
    def test_exact_cells(self):
        buf = _raster(Rectangle(2, 3, 4, 2, "#", ColorTag.RED))
        assert drawn_cells(buf) == {
            (2, 3), (3, 3), (4, 3), (5, 3),
            (2, 4), (3, 4), (4, 4), (5, 4),
        }
        assert buf.cell_at(2, 3) == Cell("#", ColorTag.RED)

    @pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-2, 3), (3, -2), (-1, -1)])
    def test_degenerate_draws_nothing(self, w, h):
        assert drawn_cells(_raster(Rectangle(2, 2, w, h))) == set()

    def test_clipped_at_edges(self):
        buf = _raster(Rectangle(-2, -2, 4, 4), w=5, h=5)
        assert drawn_cells(buf) == {(0, 0), (1, 0), (0, 1), (1, 1)}

    def test_full_canvas_background(self):
        buf = _raster(Rectangle(0, 0, 10, 10, "~", ColorTag.BLUE))
        assert len(drawn_cells(buf)) == 100

    def test_larger_than_canvas(self):
        buf = _raster(Rectangle(-5, -5, 50, 50, "~", ColorTag.BLUE))
        assert len(drawn_cells(buf)) == 100

    def test_entirely_off_canvas(self):
        assert drawn_cells(_raster(Rectangle(20, 20, 3, 3))) == set()

    def test_cells_matches_rasterize(self):
        rect = Rectangle(1, 2, 3, 4)
        assert set(rect.cells()) == drawn_cells(_raster(rect))


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

class TestCircle:
    def test_zero_radius_is_single_point(self):
        buf = _raster(Circle(5, 5, 0, "@", ColorTag.YELLOW))
        assert drawn_cells(buf) == {(5, 5)}
        assert buf.cell_at(5, 5) == Cell("@", ColorTag.YELLOW)

    def test_negative_radius_draws_nothing(self):
        assert drawn_cells(_raster(Circle(5, 5, -2))) == set()

    def test_radius_one(self):
        assert drawn_cells(_raster(Circle(5, 5, 1))) == {
            (5, 4), (4, 5), (5, 5), (6, 5), (5, 6),
        }

    def test_radius_two(self):
        assert drawn_cells(_raster(Circle(5, 5, 2))) == {
            (5, 3),
            (4, 4), (5, 4), (6, 4),
            (3, 5), (4, 5), (5, 5), (6, 5), (7, 5),
            (4, 6), (5, 6), (6, 6),
            (5, 7),
        }

    def test_inclusion_rule(self):
        r = 4
        cells = set(disk_cells(0, 0, r))
        for i in range(-r, r + 1):
            for j in range(-r, r + 1):
                inside = j * j * CIRCLE_ASPECT + i * i <= r * r
                assert ((j, i) in cells) == inside

    def test_wider_than_tall(self):
        cells = set(disk_cells(0, 0, 5))
        assert (5, 1) in cells
        assert (1, 5) not in cells

    def test_symmetric(self):
        cells = set(disk_cells(0, 0, 3))
        assert cells == {(-x, y) for x, y in cells}
        assert cells == {(x, -y) for x, y in cells}

    def test_clipped_near_edge(self):
        buf = _raster(Circle(0, 0, 1))
        assert drawn_cells(buf) == {(0, 0), (1, 0), (0, 1)}


# ---------------------------------------------------------------------------
# Triangle
# ---------------------------------------------------------------------------

class TestTriangle:
    def test_exact_rows(self):
        buf = _raster(Triangle(5, 0, 3, "^", ColorTag.RED))
        assert drawn_cells(buf) == {
            (5, 0),
            (4, 1), (5, 1), (6, 1),
            (3, 2), (4, 2), (5, 2), (6, 2), (7, 2),
        }
        assert buf.cell_at(5, 0) == Cell("^", ColorTag.RED)

    @pytest.mark.parametrize("h", [1, 2, 4, 6])
    def test_base_width(self, h):
        cells = list(triangle_cells(10, 0, h))
        base = [x for x, y in cells if y == h - 1]
        assert len(base) == 2 * h - 1
        assert len(cells) == h * h

    @pytest.mark.parametrize("h", [0, -1, -5])
    def test_non_positive_height_draws_nothing(self, h):
        assert drawn_cells(_raster(Triangle(5, 5, h))) == set()

    def test_clipped_at_bottom(self):
        buf = _raster(Triangle(5, 8, 5))
        assert max(y for _, y in drawn_cells(buf)) == 9
        assert len(drawn_cells(buf)) == 1 + 3


# ---------------------------------------------------------------------------
# Shared contract
# ---------------------------------------------------------------------------

class TestShapeContract:
    def test_default_glyphs(self):
        assert Rectangle(0, 0, 1, 1).glyph == "#"
        assert Circle(0, 0, 1).glyph == "@"
        assert Triangle(0, 0, 1).glyph == "^"

    def test_kinds(self):
        assert Rectangle(0, 0, 1, 1).kind is ShapeKind.RECTANGLE
        assert Circle(0, 0, 1).kind is ShapeKind.CIRCLE
        assert Triangle(0, 0, 1).kind is ShapeKind.TRIANGLE

    def test_shapes_are_immutable(self):
        rect = Rectangle(0, 0, 2, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rect.w = 5

    def test_bad_glyph_rejected_at_construction(self):
        with pytest.raises(ValueError):
            Circle(0, 0, 1, glyph="@@")

    def test_bad_color_rejected_at_construction(self):
        with pytest.raises(TypeError):
            Triangle(0, 0, 1, color="red")

    @pytest.mark.parametrize("build", [
        lambda: Circle(0, 0, 2.5),
        lambda: Rectangle(0, 0, "3", 1),
        lambda: Triangle(0, 0, True),
        lambda: Rectangle(0.0, 0, 1, 1),
    ])
    def test_non_int_geometry_rejected_at_construction(self, build):
        with pytest.raises(TypeError):
            build()

    def test_scene_of_valid_shapes_always_redraws(self):
        scene = Scene([Circle(5, 5, 2), Rectangle(0, 0, -1, 1), Triangle(9, 9, 4)])
        buf = scene.redraw(GridBuffer(10, 10))
        assert buf.cell_at(5, 5) == Cell("@", ColorTag.WHITE)

    def test_rect_cells_unclipped(self):
        assert list(rect_cells(-1, 0, 2, 1)) == [(-1, 0), (0, 0)]


class TestMakeShape:
    def test_builds_each_kind(self):
        assert make_shape(ShapeKind.RECTANGLE, [1, 2, 3, 4]) == Rectangle(1, 2, 3, 4)
        assert make_shape(ShapeKind.CIRCLE, (5, 5, 2)) == Circle(5, 5, 2)
        assert make_shape(ShapeKind.TRIANGLE, [5, 0, 3]) == Triangle(5, 0, 3)

    def test_kind_by_name(self):
        shape = make_shape("Circle", [1, 1, 1], glyph="o", color=ColorTag.PINK)
        assert shape == Circle(1, 1, 1, "o", ColorTag.PINK)

    def test_negative_sizes_accepted(self):
        rect = make_shape(ShapeKind.RECTANGLE, [0, 0, -3, -3])
        assert list(rect.cells()) == []

    @pytest.mark.parametrize("params", [[1, 2, 3, 4.0], [1, 2, "3", 4], [1, 2, True, 4]])
    def test_non_int_params_rejected(self, params):
        with pytest.raises(TypeError):
            make_shape(ShapeKind.RECTANGLE, params)

    @pytest.mark.parametrize("params", [[1, 2, 3], [1, 2, 3, 4, 5], []])
    def test_wrong_param_count_rejected(self, params):
        with pytest.raises(ValueError):
            make_shape(ShapeKind.RECTANGLE, params)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            make_shape("hexagon", [1, 2, 3])
