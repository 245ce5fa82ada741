#
# PROJECT: ascii-painter
# MODULE: ascii_painter/presets.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .color import ColorTag
from .shapes import Circle, Rectangle, Triangle


def house_at_sunset(width: int = 60, height: int = 25):
    """
    Demo composition, back to front. Sky and ground span the canvas;
    the rest sits at fixed positions laid out for a 60x25 canvas.
    """
    return [
        Rectangle(0, 0, width, height, '~', ColorTag.BLUE),          # sky
        Rectangle(0, 15, width, height - 15, '#', ColorTag.GREEN),   # ground
        Circle(width // 2, 4, 3, 'O', ColorTag.YELLOW),              # sun
        Rectangle(10, 10, 15, 8, '#', ColorTag.WHITE),               # house
        Triangle(17, 4, 6, '^', ColorTag.RED),                       # roof
        Rectangle(15, 14, 5, 4, '|', ColorTag.CYAN),                 # door
        Rectangle(12, 11, 3, 3, '+', ColorTag.BLUE),                 # windows
        Rectangle(20, 11, 3, 3, '+', ColorTag.BLUE),
        Rectangle(40, 12, 3, 7, '|', ColorTag.YELLOW),               # trunk
        Circle(41, 9, 5, '%', ColorTag.GREEN),                       # canopy
    ]
