#!/usr/bin/env python3
#
# PROJECT: shaded-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from shaded_cli_renderer.color import Color
from shaded_cli_renderer.demo import DemoApp
from shaded_cli_renderer.logging_config import setup_logging
from shaded_cli_renderer.math_utils import Vec3


def vector_arg(text):
    """'x,y,z' -> Vec3 for argparse."""
    try:
        x, y, z = (float(p) for p in text.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y,z but got {text!r}")
    if x == 0 and y == 0 and z == 0:
        raise argparse.ArgumentTypeError("direction must be non-zero")
    return Vec3(x, y, z)


def color_arg(text):
    """'#RRGGBB' -> Color for argparse."""
    try:
        return Color.from_hex(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                                       Spinning demo cube
  %(prog)s teapot.obj                            Load a mesh file
  %(prog)s teapot.obj --obj-color #FF8800        Orange model
  %(prog)s --fov 60 --light-dir 1,-1,-1          Narrower view, light from the side
  %(prog)s --ascii --no-color --log-file demo.log

keys: w/s forward/back, a/d strafe, r/f up/down, arrows turn,
      c toggle culling, b toggle braille, q quit
"""
    parser = argparse.ArgumentParser(
        description="CLI Shaded Renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to a v/f mesh file")
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Vertical field of view in degrees (default: 90)")
    parser.add_argument("--near", type=float, default=0.1,
                        help="Near plane distance (default: 0.1)")
    parser.add_argument("--far", type=float, default=1000.0,
                        help="Far plane distance (default: 1000)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--no-cull", action="store_true",
                        help="Disable backface culling")
    parser.add_argument("--obj-color", type=color_arg, default="#FFFFFF",
                        help="Model color in hex #RRGGBB (default: #FFFFFF)")
    parser.add_argument("--bg-color", type=color_arg, default="#000000",
                        help="Background color in hex #RRGGBB (default: #000000)")
    parser.add_argument("--light-dir", type=vector_arg, default=Vec3(0, 0, -1),
                        help="Directional light as x,y,z (default: 0,0,-1)")
    parser.add_argument("--log-file", default=None,
                        help="Write diagnostics to this file")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING or ERROR")
    return parser.parse_args(argv)


def main(stdscr, args):
    app = DemoApp(stdscr, args)
    app.run()


if __name__ == "__main__":
    args = parse_args()
    if args.log_file:
        setup_logging(level=args.log_level, log_file=args.log_file)
    else:
        # curses owns the terminal; keep stray warnings off the screen
        logging.getLogger('shaded_cli_renderer').addHandler(logging.NullHandler())
        logging.getLogger('shaded_cli_renderer').propagate = False
    try:
        curses.wrapper(lambda s: main(s, args))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
