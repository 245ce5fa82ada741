#
# PROJECT: ascii-painter
# MODULE: ascii_painter/app.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import curses
import logging

from .canvas import GridBuffer
from .color import COLOR_PROMPT, color_from_choice
from .config import PainterConfig
from .renderer import Renderer
from .scene import Scene
from .shapes import PARAM_NAMES, ShapeKind

logger = logging.getLogger(__name__)

MENU = (" 1/r Rectangle  2/c Circle  3/t Triangle  "
        "4/u Undo  5/x Clear  6/d Demo  7/q Exit")

_SHAPE_KEYS = {
    ord('1'): ShapeKind.RECTANGLE, ord('r'): ShapeKind.RECTANGLE,
    ord('2'): ShapeKind.CIRCLE, ord('c'): ShapeKind.CIRCLE,
    ord('3'): ShapeKind.TRIANGLE, ord('t'): ShapeKind.TRIANGLE,
}


def parse_ints(text):
    """Split whitespace-separated integers; raises ValueError on anything else."""
    return [int(tok) for tok in text.split()]


class PainterApp:
    """
    Interactive painter loop: redraw the scene, show the menu, read one key,
    apply the edit, repeat. Input is blocking; nothing changes between keys.
    """

    def __init__(self, stdscr, config: PainterConfig, renderer=None):
        self.stdscr = stdscr
        self.config = config
        self.running = True
        self.status = ""

        self.renderer = renderer if renderer is not None else Renderer()
        self.buffer = GridBuffer(config.canvas_width, config.canvas_height)
        if config.start_with_demo:
            self.scene = Scene.demo(config.canvas_width, config.canvas_height)
        else:
            self.scene = Scene()

        # Screen line where prompts go; updated on every draw
        self.prompt_row = 0

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def prompt(self, label: str) -> str:
        """Show `label` on the prompt line and read one line of text."""
        stdscr = self.stdscr
        th, tw = stdscr.getmaxyx()
        row = min(self.prompt_row, th - 1)
        try:
            stdscr.move(row, 0)
            stdscr.clrtoeol()
            stdscr.addstr(row, 0, label[:max(0, tw - 1)])
        except curses.error:
            pass
        self._set_echo(True)
        try:
            raw = stdscr.getstr(row, min(len(label), tw - 1))
        finally:
            self._set_echo(False)
        if isinstance(raw, bytes):
            raw = raw.decode('utf-8', errors='replace')
        return raw

    @staticmethod
    def _set_echo(on: bool):
        try:
            if on:
                curses.echo()
                curses.curs_set(1)
            else:
                curses.noecho()
                curses.curs_set(0)
        except curses.error:
            pass

    def add_shape_interactive(self, kind: ShapeKind):
        """Ask for a color and the shape's parameters, then add the shape."""
        # Anything but 1-5 (including non-numbers) picks white
        try:
            choice = parse_ints(self.prompt(COLOR_PROMPT))
        except ValueError:
            choice = []
        color = color_from_choice(choice[0] if choice else None)

        names = PARAM_NAMES[kind]
        label = f"Coords ({' '.join(names)}): "
        try:
            params = parse_ints(self.prompt(label))
        except ValueError:
            self.reject("Coordinates must be integers")
            return
        if len(params) != len(names):
            self.reject(f"Expected {len(names)} numbers: {' '.join(names)}")
            return

        shape = self.scene.add_shape(kind, params, color=color)
        logger.info("Added %r", shape)
        self.status = f"Added {kind.value}"

    def reject(self, message: str):
        logger.warning("Rejected input: %s", message)
        self.status = message

    def handle_key(self, key: int):
        if key == -1:
            return

        scene = self.scene
        if key in _SHAPE_KEYS:
            self.add_shape_interactive(_SHAPE_KEYS[key])
        elif key in (ord('4'), ord('u')):
            shape = scene.undo_last()
            self.status = "Undone" if shape is not None else "Nothing to undo"
            logger.info("Undo -> %r", shape)
        elif key in (ord('5'), ord('x')):
            scene.clear()
            self.status = "Cleared"
            logger.info("Cleared scene")
        elif key in (ord('6'), ord('d')):
            self.scene = Scene.demo(self.buffer.width, self.buffer.height)
            self.status = "Loaded demo"
            logger.info("Loaded demo scene")
        elif key in (ord('7'), ord('q')):
            self.running = False

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def draw(self):
        self.scene.redraw(self.buffer)
        used = self.renderer.render(self.stdscr, self.buffer, self.config)

        th, tw = self.stdscr.getmaxyx()
        hdr = f"--- ASCII PAINTER --- layers:{len(self.scene)}"
        footer = [hdr, MENU, self.status]
        row = used + 1
        for line in footer:
            if row >= th:
                break
            try:
                self.stdscr.addstr(row, 0, line[:max(0, tw - 1)])
            except curses.error:
                pass
            row += 1
        self.prompt_row = min(row, th - 1)

    def run(self):
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.renderer.init_colors(self.config)

        while self.running:
            self.draw()
            self.stdscr.refresh()
            self.handle_key(self.stdscr.getch())


def main(stdscr, config):
    """Entry point called from curses.wrapper."""
    app = PainterApp(stdscr, config)
    app.run()
