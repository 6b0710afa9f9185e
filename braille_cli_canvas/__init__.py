#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import to_float
from .errors import BrailleCanvasError, PaintError, FormatError, IoError
from .color import Color, parse_hex_color
from .dots import DotBuffer, locate
from .canvas import Canvas, Bound
from .drawable import Drawable, Animated, Points, Plot
from .config import AnimationConfig
from .terminal import AnsiTerminal, TerminalSink, raw_session
from .animation import Animation, AnimationState, Entry
