#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import sys

from .color import as_color, paint_glyph
from .dots import DotBuffer, cell_of, glyph, locate
from .errors import PaintError
from .math_utils import line_points, to_float

logger = logging.getLogger(__name__)


class Bound:
    """
    Smallest rectangle of cells ever touched.

    Grows on every include() and only collapses on reset().
    """
    __slots__ = ('min_col', 'min_row', 'max_col', 'max_row')

    def __init__(self):
        self.reset()

    def reset(self):
        self.min_col = self.min_row = None
        self.max_col = self.max_row = None

    @property
    def empty(self) -> bool:
        return self.min_col is None

    def include(self, cell):
        col, row = cell
        if self.min_col is None:
            self.min_col = self.max_col = col
            self.min_row = self.max_row = row
            return
        if col < self.min_col: self.min_col = col
        if col > self.max_col: self.max_col = col
        if row < self.min_row: self.min_row = row
        if row > self.max_row: self.max_row = row

    def as_tuple(self):
        """(min_col, min_row, max_col, max_row), or None when empty."""
        if self.empty:
            return None
        return (self.min_col, self.min_row, self.max_col, self.max_row)

    def size(self):
        if self.empty:
            return (0, 0)
        return (self.max_col - self.min_col + 1, self.max_row - self.min_row + 1)


class Canvas:
    """
    Unbounded braille canvas.

    Coordinates are continuous drawing-space values with y pointing up.
    Each terminal cell holds a 2x4 dot matrix, so one cell covers 2 units
    of x and 4 units of y.

    Example:
        c = Canvas()
        for x in range(-360, 360):
            c.set(x / 10, math.sin(math.radians(x)) * 10)
        print(c.frame())
    """

    def __init__(self, color_mode='truecolor'):
        self.buffer = DotBuffer()
        self.bound = Bound()
        self.color_mode = color_mode

    # ── Dot operations ──────────────────────────────────────────────────

    def set(self, x, y, color=None):
        cell, bit = locate(x, y)
        self.buffer.set(cell, bit)
        self.bound.include(cell)
        if color is not None:
            self.buffer.set_color(cell, as_color(color))
        return self

    def unset(self, x, y):
        cell, bit = locate(x, y)
        self.buffer.unset(cell, bit)
        return self

    def toggle(self, x, y, color=None):
        cell, bit = locate(x, y)
        self.buffer.toggle(cell, bit)
        if self.buffer.is_lit(cell, bit):
            self.bound.include(cell)
            if color is not None:
                self.buffer.set_color(cell, as_color(color))
        return self

    def fill(self, x, y, color=None):
        """Light all 8 dots of the cell containing (x, y)."""
        cell = cell_of(x, y)
        self.buffer.fill(cell)
        self.bound.include(cell)
        if color is not None:
            self.buffer.set_color(cell, as_color(color))
        return self

    def get(self, x, y) -> bool:
        """True when the dot addressed by (x, y) is lit."""
        cell, bit = locate(x, y)
        return self.buffer.is_lit(cell, bit)

    def line(self, xy1, xy2, color=None):
        """Light every dot on the segment from xy1 to xy2."""
        for x, y in line_points(xy1[0], xy1[1], xy2[0], xy2[1]):
            self.set(x, y, color)
        return self

    def reserve(self, x, y):
        """Grow the bounding box to include (x, y) without lighting anything."""
        self.bound.include(cell_of(x, y))
        return self

    # ── Drawables ───────────────────────────────────────────────────────

    def paint(self, drawable, x=0, y=0):
        """
        Set every point produced by `drawable`, translated by (x, y).

        The drawable is queried afresh on every call.  A drawable that has
        nothing to produce raises PaintError, which is propagated as-is.
        """
        ox, oy = to_float(x), to_float(y)
        points = drawable.produce_points()
        if points is None:
            raise PaintError(drawable)
        count = 0
        for point in points:
            if len(point) > 2:
                px, py, color = point[0], point[1], point[2]
            else:
                px, py, color = point[0], point[1], None
            self.set(to_float(px) + ox, to_float(py) + oy, color)
            count += 1
        logger.debug("painted %d points from %r at (%s, %s)", count, drawable, ox, oy)
        return self

    # ── Lifetime ────────────────────────────────────────────────────────

    def clear(self):
        """Drop every dot and collapse the bounding box."""
        self.buffer.clear()
        self.bound.reset()

    reset = clear

    def erase(self):
        """Drop every dot but keep the bounding box (stable frame size)."""
        self.buffer.clear()

    # ── Output ──────────────────────────────────────────────────────────

    def get_size(self):
        """(width, height) of the bounding box in cells."""
        return self.bound.size()

    def lines(self, trim=True):
        """One string per cell row of the bounding box, top to bottom."""
        if self.bound.empty:
            return []
        b = self.bound
        masks = self.buffer.masks
        mode = self.color_mode
        out = []
        for row in range(b.min_row, b.max_row + 1):
            chars = []
            for col in range(b.min_col, b.max_col + 1):
                mask = masks.get((col, row))
                if not mask:
                    chars.append(' ')
                    continue
                color = self.buffer.get_color((col, row))
                chars.append(paint_glyph(glyph(mask), color, mode))
            line = ''.join(chars)
            out.append(line.rstrip(' ') if trim else line)
        return out

    render = lines

    def frame(self, trim=True) -> str:
        return '\n'.join(self.lines(trim))

    def print(self, file=None):
        out = file if file is not None else sys.stdout
        out.write(self.frame() + '\n')
        out.flush()
