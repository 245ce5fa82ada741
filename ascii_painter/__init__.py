#
# PROJECT: ascii-painter
# MODULE: ascii_painter/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .color import ColorTag, ansi_code, color_from_choice, parse_color
from .config import PainterConfig
from .canvas import BACKGROUND, Cell, GridBuffer, InvalidDimension
from .shapes import Shape, ShapeKind, Rectangle, Circle, Triangle, make_shape
from .scene import Scene
from .renderer import Renderer, render_text
