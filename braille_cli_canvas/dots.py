#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/dots.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .color import ColorBlend
from .math_utils import to_float

# Braille dot numbering inside one 2x4 cell
#  1 4
#  2 5
#  3 6
#  7 8
# Bit index per (sub_row, sub_col); the glyph is chr(0x2800 + mask).
BRAILLE_BITS = [[0, 3],
                [1, 4],
                [2, 5],
                [6, 7]]

BRAILLE_BASE = 0x2800
FULL_MASK = 0xFF


def locate(x, y):
    """
    Map a drawing-space point to ((col, row), bit).

    Drawing space has y pointing up; terminal rows grow downward, so the
    vertical axis is negated.  Precision finer than 1/2 unit horizontally
    and 1/4 unit vertically is discarded.
    """
    fx = math.floor(to_float(x))
    fy = math.floor(-to_float(y))
    col, sub_col = divmod(fx, 2)
    row, sub_row = divmod(fy, 4)
    return (col, row), BRAILLE_BITS[sub_row][sub_col]


def cell_of(x, y):
    """Cell (col, row) containing the drawing-space point."""
    return locate(x, y)[0]


def glyph(mask: int) -> str:
    """Braille glyph for a mask; empty cells render as a space."""
    if not mask:
        return ' '
    return chr(BRAILLE_BASE + mask)


class DotBuffer:
    """
    Sparse grid of cell masks keyed by integer (col, row).

    A cell whose mask drops to zero is removed so that it renders as a
    space rather than the blank braille glyph.  Colors are tracked per cell
    as a running blend and are not un-blended when dots are removed.
    """
    __slots__ = ('masks', 'colors')

    def __init__(self):
        self.masks = {}
        self.colors = {}

    def __len__(self):
        return len(self.masks)

    def __contains__(self, cell):
        return cell in self.masks

    def set(self, cell, bit: int):
        self.masks[cell] = self.masks.get(cell, 0) | (1 << bit)

    def unset(self, cell, bit: int):
        mask = self.masks.get(cell, 0) & ~(1 << bit)
        self._store(cell, mask)

    def toggle(self, cell, bit: int):
        mask = self.masks.get(cell, 0) ^ (1 << bit)
        self._store(cell, mask)

    def fill(self, cell):
        self.masks[cell] = FULL_MASK

    def get_mask(self, cell) -> int:
        return self.masks.get(cell, 0)

    def is_lit(self, cell, bit: int) -> bool:
        return bool(self.get_mask(cell) & (1 << bit))

    def set_color(self, cell, color):
        blend = self.colors.get(cell)
        if blend is None:
            blend = self.colors[cell] = ColorBlend()
        blend.add(color)

    def get_color(self, cell):
        """Current blended color of a lit cell, or None."""
        if cell not in self.masks:
            return None
        blend = self.colors.get(cell)
        return blend.mean() if blend else None

    def cells(self):
        return self.masks.keys()

    def clear(self):
        self.masks.clear()
        self.colors.clear()

    def _store(self, cell, mask):
        if mask:
            self.masks[cell] = mask
        else:
            self.masks.pop(cell, None)
