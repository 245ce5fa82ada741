"""Shared test fixtures."""

from __future__ import annotations

import curses

import pytest

from ascii_painter.canvas import BACKGROUND, GridBuffer


def drawn_cells(buffer: GridBuffer) -> set[tuple[int, int]]:
    """Coordinates of every cell that is not background."""
    return {
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.cell_at(x, y) != BACKGROUND
    }


class FakeScreen:
    """Minimal stand-in for a curses window.

    Records addstr() calls by position, raises curses.error for writes that
    start off-screen like the real thing, and replays queued keys/lines.
    """

    def __init__(self, rows: int = 40, cols: int = 100, keys=(), lines=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.lines = list(lines)
        self.writes: dict[tuple[int, int], tuple[str, int]] = {}
        self.refreshes = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.writes.clear()

    def addstr(self, y, x, text, attr=0):
        if y < 0 or y >= self.rows or x < 0 or x >= self.cols:
            raise curses.error("addwstr() returned ERR")
        self.writes[(y, x)] = (text, attr)

    def move(self, y, x):
        pass

    def clrtoeol(self):
        pass

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else ord("q")

    def getstr(self, *args):
        return self.lines.pop(0) if self.lines else b""

    def text_at(self, y, x):
        return self.writes.get((y, x), ("", 0))[0]


@pytest.fixture
def buffer():
    return GridBuffer(10, 10)


@pytest.fixture
def screen():
    return FakeScreen()
