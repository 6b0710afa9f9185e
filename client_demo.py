#!/usr/bin/env python3
#
# PROJECT: braille-cli-canvas
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from braille_cli_canvas.color import COLOR_MODES
from braille_cli_canvas.config import AnimationConfig
from braille_cli_canvas.demo import SCENES, main as run_demo


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s sine                       Print a static sine wave
  %(prog)s wave --fps 30              Scrolling sine wave (Esc or Ctrl-C quits)
  %(prog)s spiral --color-mode 256    Growing spiral, stops when complete
  %(prog)s mix --mono                 Two drawables, one finishes early
"""
    parser = argparse.ArgumentParser(
        description="Braille canvas demo",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("scene", nargs='?', default='wave',
                        choices=['sine'] + sorted(SCENES),
                        help="Scene to show (default: wave)")
    parser.add_argument("--fps", type=float, default=24.0,
                        help="Target frames per second (default: 24)")
    parser.add_argument("--mono", action="store_true",
                        help="Disable color output")
    parser.add_argument("--color-mode", choices=COLOR_MODES,
                        help="Force a color mode instead of detecting it")
    parser.add_argument("--show-cursor", action="store_true",
                        help="Keep the cursor visible while animating")
    parser.add_argument("--log-file",
                        help="Write debug logs to this file")
    return parser.parse_args(argv)


def build_config(args):
    overrides = {'fps': args.fps, 'hide_cursor': not args.show_cursor}
    if args.color_mode:
        overrides['color_mode'] = args.color_mode
    if args.mono:
        overrides['color_mode'] = 'mono'
    return AnimationConfig.detect_terminal(**overrides)


def main(argv=None):
    args = parse_args(argv)
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=logging.DEBUG,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    try:
        run_demo(args.scene, config)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.getLogger(__name__).exception("demo failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
