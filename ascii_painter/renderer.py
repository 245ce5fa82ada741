#
# PROJECT: ascii-painter
# MODULE: ascii_painter/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import curses
import logging

from .canvas import GridBuffer
from .color import ColorTag, RESET_CODE, ansi_code, init_colors
from .config import PainterConfig

logger = logging.getLogger(__name__)

# Row numbers are right-aligned to at least this many digits
MIN_LABEL_DIGITS = 2


def ruler_line(width: int, step: int = 10) -> str:
    """
    Column ruler: the column index every `step` columns, spaces elsewhere.
    Indices wider than one character push the following columns right,
    exactly like the printed ruler always has.
    """
    parts = []
    for i in range(width):
        parts.append(str(i) if i % step == 0 else ' ')
    return ''.join(parts)


def label_digits(height: int) -> int:
    return max(MIN_LABEL_DIGITS, len(str(height - 1)))


def row_label(y: int, digits: int = MIN_LABEL_DIGITS) -> str:
    return f"{y:>{digits}}: "


def render_text(buffer: GridBuffer, use_color: bool = True, rulers: bool = True,
                ruler_step: int = 10) -> str:
    """
    Render the buffer as text, one line per row.

    With color on, each cell is wrapped in its ANSI code and a reset, and
    the rulers are drawn in gray. Returns the text without a trailing
    newline.
    """
    gray = ansi_code(ColorTag.GRAY) if use_color else ''
    reset = RESET_CODE if use_color else ''

    digits = label_digits(buffer.height)
    lines = []
    if rulers:
        ruler = ruler_line(buffer.width, ruler_step)
        if use_color:
            # Only the digits are colored
            ruler = ''.join(ch if ch == ' ' else f"{gray}{ch}{reset}" for ch in ruler)
        lines.append(' ' * len(row_label(0, digits)) + ruler)

    for y, row in enumerate(buffer.rows()):
        prefix = f"{gray}{row_label(y, digits)}{reset}" if rulers else ''
        if use_color:
            body = ''.join(f"{ansi_code(c.color)}{c.glyph}{reset}" for c in row)
        else:
            body = ''.join(c.glyph for c in row)
        lines.append(prefix + body)

    return '\n'.join(lines)


class Renderer:
    """
    Curses renderer for a GridBuffer.

    render(stdscr, buffer, config) draws one frame. It does NOT call
    stdscr.refresh(); the caller does that after drawing the menu and
    status lines.
    """

    def __init__(self):
        self.color_attrs = None

    def init_colors(self, config: PainterConfig):
        """Initialize curses color pairs. Call once after curses.wrapper init."""
        self.color_attrs = init_colors(config)

    def render(self, stdscr, buffer: GridBuffer, config: PainterConfig):
        """
        Draw the buffer (and rulers) at the top-left of the screen.
        Returns the number of screen lines used.
        """
        if self.color_attrs is None:
            self.color_attrs = {tag: 0 for tag in ColorTag}
        attrs = self.color_attrs if config.use_color else {tag: 0 for tag in ColorTag}

        th, tw = stdscr.getmaxyx()
        stdscr.erase()

        digits = label_digits(buffer.height)
        top = 0
        left = 0
        if config.show_rulers:
            top, left = 1, len(row_label(0, digits))
            ruler = ruler_line(buffer.width, config.ruler_step)
            self._put(stdscr, 0, left, ruler[:max(0, tw - left - 1)],
                      attrs[ColorTag.GRAY])

        max_rows = min(buffer.height, th - top)
        max_cols = min(buffer.width, tw - left - 1)
        if max_rows < buffer.height or max_cols < buffer.width:
            logger.debug("Terminal %dx%d clips %r", tw, th, buffer)

        for y, row in enumerate(buffer.rows()):
            if y >= max_rows:
                break
            if config.show_rulers:
                self._put(stdscr, top + y, 0, row_label(y, digits), attrs[ColorTag.GRAY])
            for x in range(max_cols):
                cell = row[x]
                self._put(stdscr, top + y, left + x, cell.glyph, attrs[cell.color])

        return top + max_rows

    @staticmethod
    def _put(stdscr, y, x, text, attr):
        if not text:
            return
        try:
            stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Writing into the bottom-right corner raises after the write
            pass
