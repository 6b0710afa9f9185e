#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/drawable.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import Iterable, Iterator, Optional, Protocol, Tuple, runtime_checkable

from .color import Color, as_color, parse_hex_color
from .errors import FormatError, IoError
from .math_utils import to_float

Point = Tuple[float, float, Optional[Color]]


@runtime_checkable
class Drawable(Protocol):
    """
    Anything the canvas can paint.

    produce_points() must return a finite iterable of (x, y[, color])
    and must not change the drawable's own state.  Return None (or raise
    PaintError) when there is no usable geometry.
    """

    def produce_points(self) -> Optional[Iterable[Point]]:
        ...


@runtime_checkable
class Animated(Drawable, Protocol):
    """A drawable that advances itself; update() returns True when done."""

    def update(self) -> bool:
        ...


class Points:
    """
    Static set of points, optionally colored.

    Each entry is (x, y) or (x, y, color) where color is a Color, an
    (r, g, b) tuple or a '#RRGGBB' string.
    """
    __slots__ = ('points',)

    def __init__(self, points=()):
        self.points = []
        for p in points:
            self.add(*p)

    def __len__(self):
        return len(self.points)

    def __repr__(self):
        return f"Points(n={len(self.points)})"

    def add(self, x, y, color=None):
        self.points.append((to_float(x), to_float(y), as_color(color)))

    def produce_points(self) -> Optional[Iterator[Point]]:
        if not self.points:
            return None
        return iter(self.points)

    @classmethod
    def from_text(cls, text: str):
        """
        Parse whitespace-separated `x y [#RRGGBB]` lines.
        Blank lines and lines starting with '#' followed by a space are skipped.
        """
        pts = cls()
        for lineno, line in enumerate(text.splitlines(), 1):
            stripped = line.strip()
            if not stripped or stripped.startswith('# '):
                continue
            fields = stripped.split()
            if len(fields) not in (2, 3):
                raise FormatError(f"line {lineno}: expected 'x y [color]', got {stripped!r}")
            try:
                x, y = float(fields[0]), float(fields[1])
                color = None
                if len(fields) == 3:
                    color = parse_hex_color(fields[2], strict=True)
                pts.add(x, y, color)
            except (ValueError, TypeError) as e:
                raise FormatError(f"line {lineno}: {e}") from None
        return pts

    @classmethod
    def from_file(cls, filename):
        """Load a point list written in the from_text() format."""
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            raise IoError(e.errno, f"could not read points from {filename!r}: {e.strerror}") from e
        return cls.from_text(text)


class Plot:
    """Samples y = func(x) for x in [start, stop) with the given step."""
    __slots__ = ('func', 'start', 'stop', 'step', 'color')

    def __init__(self, func, start, stop, step=1.0, color=None):
        if to_float(step) <= 0:
            raise ValueError("step must be positive")
        self.func = func
        self.start = to_float(start)
        self.stop = to_float(stop)
        self.step = to_float(step)
        self.color = as_color(color)

    def __repr__(self):
        return f"Plot({getattr(self.func, '__name__', self.func)}, {self.start}, {self.stop})"

    def produce_points(self) -> Optional[Iterator[Point]]:
        if self.stop <= self.start:
            return None
        return self._samples()

    def _samples(self):
        i = 0
        x = self.start
        while x < self.stop:
            yield (x, self.func(x), self.color)
            i += 1
            x = self.start + i * self.step
