#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from collections import namedtuple

from .errors import FormatError

COLOR_MODES = ('truecolor', '256', '8', 'mono')

RESET = '\x1b[0m'


class Color(namedtuple('Color', ['r', 'g', 'b'])):
    """24-bit RGB color with 0-255 channels."""
    __slots__ = ()

    def __new__(cls, r, g, b):
        return super().__new__(cls, _clamp(r), _clamp(g), _clamp(b))

    def hex(self) -> str:
        return '#{:02X}{:02X}{:02X}'.format(*self)


def _clamp(v):
    return max(0, min(255, int(round(v))))


def parse_hex_color(hex_str, strict=False):
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns None on failure, or raises FormatError when strict is set.
    """
    if hex_str is None:
        if strict:
            raise FormatError("missing color")
        return None
    val = str(hex_str).strip().lstrip('#')
    try:
        if len(val) != 6:
            raise ValueError(val)
        return Color(int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))
    except ValueError:
        if strict:
            raise FormatError(f"invalid hex color {hex_str!r}") from None
        return None


def as_color(value):
    """Coerce None, a Color, an (r, g, b) sequence or a hex string."""
    if value is None or isinstance(value, Color):
        return value
    if isinstance(value, str):
        return parse_hex_color(value, strict=True)
    try:
        r, g, b = value
    except (TypeError, ValueError):
        raise FormatError(f"cannot interpret {value!r} as a color") from None
    return Color(r, g, b)


class ColorBlend:
    """
    Running mean of every color contributed to one cell.

    Order independent; contributions are never removed.
    """
    __slots__ = ('r', 'g', 'b', 'count')

    def __init__(self):
        self.r = self.g = self.b = 0
        self.count = 0

    def add(self, color):
        self.r += color[0]
        self.g += color[1]
        self.b += color[2]
        self.count += 1

    def mean(self):
        if not self.count:
            return None
        n = self.count
        return Color(self.r / n, self.g / n, self.b / n)


# --- xterm-256 / ANSI palette matching ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp 232-255: 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def _rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color.
    Used on terminals that only support 8 colors."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx


def foreground(color, mode='truecolor') -> str:
    """SGR escape selecting `color` as foreground in the given color mode."""
    if color is None or mode == 'mono':
        return ''
    r, g, b = color
    if mode == 'truecolor':
        return f'\x1b[38;2;{r};{g};{b}m'
    if mode == '256':
        return f'\x1b[38;5;{_rgb_to_nearest_xterm(r, g, b)}m'
    if mode == '8':
        return f'\x1b[{30 + _rgb_to_nearest_ansi8(r, g, b)}m'
    raise ValueError(f"unknown color mode {mode!r}")


def paint_glyph(ch: str, color, mode='truecolor') -> str:
    """Bracket a single glyph with a color escape and a reset."""
    prefix = foreground(color, mode)
    if not prefix:
        return ch
    return prefix + ch + RESET
