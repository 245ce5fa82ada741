#
# PROJECT: ascii-painter
# MODULE: ascii_painter/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import logging

from .canvas import GridBuffer
from .color import ColorTag
from .presets import house_at_sunset
from .shapes import Shape, make_shape

logger = logging.getLogger(__name__)


class Scene:
    """
    Ordered stack of shapes ("layers").

    Insertion order is the z-order: redraw() rasterizes oldest first, so a
    shape added later overwrites earlier ones wherever their cells coincide.
    The scene owns its shapes; since shapes are immutable, editing one
    means undoing it and adding a replacement.
    """

    def __init__(self, shapes=()):
        self._layers = []  # list of Shape, oldest first
        for shape in shapes:
            self.add(shape)

    @property
    def layers(self):
        """Read-only view of the shapes, oldest first."""
        return tuple(self._layers)

    def __len__(self):
        return len(self._layers)

    def __iter__(self):
        return iter(tuple(self._layers))

    def add(self, shape: Shape):
        """Append a shape on top of the stack."""
        if not isinstance(shape, Shape):
            raise TypeError(f"expected a Shape, got {type(shape).__name__}")
        self._layers.append(shape)
        logger.debug("Added %r (layers=%d)", shape, len(self._layers))
        return shape

    def add_shape(self, kind, params, glyph=None, color=ColorTag.WHITE):
        """Build a shape with make_shape() and append it.

        Args:
            kind: ShapeKind or its name ('rectangle', 'circle', 'triangle').
            params: integer parameters in prompt order.
            glyph: single character; None picks the shape's default.
            color: ColorTag of every covered cell.
        """
        return self.add(make_shape(kind, params, glyph, color))

    def undo_last(self):
        """Remove and return the most recent shape; None when the scene is empty."""
        if not self._layers:
            return None
        shape = self._layers.pop()
        logger.debug("Undid %r (layers=%d)", shape, len(self._layers))
        return shape

    def clear(self):
        """Remove all shapes from the scene."""
        self._layers.clear()

    def redraw(self, buffer: GridBuffer) -> GridBuffer:
        """Clear the buffer and composite every shape onto it, oldest first."""
        buffer.clear()
        for shape in self._layers:
            shape.rasterize(buffer)
        return buffer

    @classmethod
    def demo(cls, width: int, height: int) -> 'Scene':
        """Factory method for the preset 'house at sunset' scene."""
        return cls(house_at_sunset(width, height))
