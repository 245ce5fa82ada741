#
# PROJECT: ascii-painter
# MODULE: ascii_painter/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import os
from dataclasses import dataclass


@dataclass
class PainterConfig:
    """Configuration for the canvas and its terminal rendering."""
    canvas_width: int = 60
    canvas_height: int = 25
    use_color: bool = True
    show_rulers: bool = True
    ruler_step: int = 10
    start_with_demo: bool = False

    def __post_init__(self):
        if self.ruler_step < 1:
            self.ruler_step = 1

    @classmethod
    def detect_terminal(cls) -> 'PainterConfig':
        """
        Guess terminal capabilities from the environment and return a
        default config. Accurate color detection requires curses
        initialization, so this is a pre-init guess.
        """
        term = os.environ.get('TERM', '').lower()
        no_color = 'NO_COLOR' in os.environ

        is_dumb = term in ('dumb', 'unknown')

        return cls(use_color=not (is_dumb or no_color))
