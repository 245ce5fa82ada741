#!/usr/bin/env python3
#
# PROJECT: ascii-painter
# MODULE: client_paint.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ascii_painter.app import main as run_painter
from ascii_painter.canvas import GridBuffer, InvalidDimension
from ascii_painter.config import PainterConfig
from ascii_painter.renderer import render_text
from ascii_painter.scene import Scene

logger = logging.getLogger("ascii_painter")


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                        Empty 60x25 canvas
  %(prog)s --demo                 Start from the house-at-sunset scene
  %(prog)s --width 80 --height 30 Bigger canvas
  %(prog)s --demo --print         Print the demo scene once and exit
  %(prog)s --no-color --no-rulers Plain glyphs only
  %(prog)s --log-file paint.log --log-level debug
"""
    parser = argparse.ArgumentParser(
        description="ASCII Shape Painter",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=60,
                        help="Canvas width in cells (default: 60)")
    parser.add_argument("--height", type=int, default=25,
                        help="Canvas height in cells (default: 25)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--no-rulers", action="store_true",
                        help="Hide the row and column rulers")
    parser.add_argument("--demo", action="store_true",
                        help="Start with the demo scene loaded")
    parser.add_argument("--print", dest="print_once", action="store_true",
                        help="Render once to stdout and exit (no curses)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"],
                        help="Log level when --log-file is given (default: info)")
    return parser.parse_args(argv)


def build_config(args) -> PainterConfig:
    """Terminal detection plus command-line overrides."""
    config = PainterConfig.detect_terminal()
    config.canvas_width = args.width
    config.canvas_height = args.height
    if args.no_color:
        config.use_color = False
    if args.no_rulers:
        config.show_rulers = False
    config.start_with_demo = args.demo
    return config


def setup_logging(args):
    # Log records on stderr would scribble over the curses screen
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level.upper()),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            force=True,
        )
    else:
        # No log file: discard everything, warnings included
        logging.basicConfig(handlers=[logging.NullHandler()], force=True)


def print_once(config: PainterConfig):
    buffer = GridBuffer(config.canvas_width, config.canvas_height)
    scene = Scene.demo(buffer.width, buffer.height) if config.start_with_demo else Scene()
    scene.redraw(buffer)
    print(render_text(buffer, use_color=config.use_color,
                      rulers=config.show_rulers, ruler_step=config.ruler_step))


if __name__ == "__main__":
    args = parse_args()
    setup_logging(args)
    config = build_config(args)

    # Validate the canvas size before curses takes over the terminal
    try:
        GridBuffer(config.canvas_width, config.canvas_height)
    except InvalidDimension as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.print_once:
        print_once(config)
        sys.exit(0)

    try:
        curses.wrapper(lambda s: run_painter(s, config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("Painter crashed")
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
