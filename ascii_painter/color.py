#
# PROJECT: ascii-painter
# MODULE: ascii_painter/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import curses
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ColorTag(Enum):
    """Display color of a cell. Resolved to terminal codes only when rendering."""
    RESET = 'reset'
    GRAY = 'gray'
    WHITE = 'white'
    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'
    YELLOW = 'yellow'
    CYAN = 'cyan'
    PINK = 'pink'


# ANSI SGR foreground codes
_ANSI_CODES = {
    ColorTag.RESET: '\033[0m',
    ColorTag.GRAY: '\033[90m',
    ColorTag.WHITE: '\033[37m',
    ColorTag.RED: '\033[31m',
    ColorTag.GREEN: '\033[32m',
    ColorTag.BLUE: '\033[34m',
    ColorTag.YELLOW: '\033[33m',
    ColorTag.CYAN: '\033[36m',
    ColorTag.PINK: '\033[95m',
}

RESET_CODE = _ANSI_CODES[ColorTag.RESET]

# Order of the color prompt: 1.Red 2.Green 3.Blue 4.Yel 5.Cyn 6.Wht
MENU_COLORS = [
    ColorTag.RED,
    ColorTag.GREEN,
    ColorTag.BLUE,
    ColorTag.YELLOW,
    ColorTag.CYAN,
    ColorTag.WHITE,
]

COLOR_PROMPT = "Color [1.Red 2.Green 3.Blue 4.Yel 5.Cyn 6.Wht]: "


def ansi_code(tag: ColorTag) -> str:
    """Return the ANSI escape sequence for a color tag."""
    return _ANSI_CODES[tag]


def color_from_choice(choice) -> ColorTag:
    """
    Map a menu number to a color tag.
    1-5 select Red/Green/Blue/Yellow/Cyan; anything else is White.
    """
    if isinstance(choice, int) and not isinstance(choice, bool) and 1 <= choice <= 5:
        return MENU_COLORS[choice - 1]
    return ColorTag.WHITE


def parse_color(name) -> ColorTag:
    """
    Parse a color name such as 'red' or 'CYAN' to a ColorTag.
    Raises ValueError for unknown names.
    """
    if isinstance(name, ColorTag):
        return name
    val = str(name).strip().lower()
    try:
        return ColorTag(val)
    except ValueError:
        raise ValueError(f"unknown color {name!r}") from None


# curses foreground per tag; GRAY is bright black where 16 colors exist
_CURSES_FG = {
    ColorTag.RESET: -1,
    ColorTag.WHITE: curses.COLOR_WHITE,
    ColorTag.RED: curses.COLOR_RED,
    ColorTag.GREEN: curses.COLOR_GREEN,
    ColorTag.BLUE: curses.COLOR_BLUE,
    ColorTag.YELLOW: curses.COLOR_YELLOW,
    ColorTag.CYAN: curses.COLOR_CYAN,
}


def init_colors(config):
    """
    Safely initialize one curses color pair per ColorTag.
    Returns a dict ColorTag -> curses attribute. Every tag maps to the
    default attribute (0) when color is disabled or unsupported.
    """
    plain = {tag: 0 for tag in ColorTag}
    if not config.use_color:
        return plain

    try:
        if not curses.has_colors():
            logger.info("Terminal reports no color support")
            return plain

        curses.start_color()

        default_bg = curses.COLOR_BLACK
        try:
            curses.use_default_colors()
            default_bg = -1
        except curses.error:
            pass

        num_colors = 8
        try:
            num_colors = curses.COLORS
        except AttributeError:
            pass

        fg_map = dict(_CURSES_FG)
        if default_bg != -1:
            fg_map[ColorTag.RESET] = curses.COLOR_WHITE
        if num_colors >= 16:
            fg_map[ColorTag.GRAY] = 8     # bright black
            fg_map[ColorTag.PINK] = 13    # bright magenta
        else:
            fg_map[ColorTag.GRAY] = curses.COLOR_WHITE
            fg_map[ColorTag.PINK] = curses.COLOR_MAGENTA

        attrs = {}
        for pair_id, tag in enumerate(ColorTag, start=1):
            try:
                curses.init_pair(pair_id, fg_map[tag], default_bg)
                attr = curses.color_pair(pair_id)
            except curses.error:
                attr = 0
            # Without a bright palette, dim is the closest thing to gray
            if tag is ColorTag.GRAY and num_colors < 16:
                attr |= curses.A_DIM
            attrs[tag] = attr
        return attrs

    except curses.error as e:
        logger.warning("Color initialization failed: %s", e)
        return plain
