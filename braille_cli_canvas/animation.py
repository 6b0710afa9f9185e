#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from .canvas import Canvas
from .config import AnimationConfig
from .math_utils import to_float
from .terminal import AnsiTerminal, raw_session

logger = logging.getLogger(__name__)


class AnimationState(Enum):
    RUNNING = 'running'
    DRAINING = 'draining'
    STOPPED = 'stopped'


@dataclass
class Entry:
    """One drawable in the animation, painted at `offset` every tick."""
    drawable: Any
    update: Optional[Callable[[Any], bool]]
    offset: Tuple[float, float] = (0.0, 0.0)
    finished: bool = False

    def __post_init__(self):
        if self.update is None:
            self.finished = True

    def step(self):
        if self.finished or self.update is None:
            return
        if self.update(self.drawable):
            self.finished = True


class Animation:
    """
    Drives a set of drawables: update -> repaint -> render -> pace.

    Each tick every unfinished entry gets its update function called; an
    entry whose update returns True is finished and is only painted from
    then on.  The loop ends after the tick in which the last entry finishes,
    or as soon as a cancel key (Esc / Ctrl-C) is seen.  Frames are redrawn
    in place by moving the cursor back over the previous frame.

    Example:
        anime = Animation()
        anime.push(wave, lambda w: w.shift(0.2), offset=(0, 10))
        anime.run()
    """

    def __init__(self, config: Optional[AnimationConfig] = None, sink=None,
                 clock=time.monotonic, sleep=time.sleep):
        self.config = config if config is not None else AnimationConfig.detect_terminal()
        self.sink = sink if sink is not None else AnsiTerminal(cancel_keys=self.config.cancel_keys)
        self.canvas = Canvas(color_mode=self.config.color_mode)
        self.entries = []
        self.state = AnimationState.RUNNING
        self.ticks = 0
        self.cancelled = False
        self._clock = clock
        self._sleep = sleep
        self._prev_height = 0

    def push(self, drawable, update=None, offset=(0, 0)):
        """
        Add a drawable.

        `update` is called with the drawable once per tick and returns True
        when the drawable is done changing.  When omitted, the drawable's own
        update() method is used if it has one; otherwise the entry is static.
        """
        if update is None:
            method = getattr(drawable, 'update', None)
            if callable(method):
                update = lambda d: d.update()
        entry = Entry(drawable, update,
                      (to_float(offset[0]), to_float(offset[1])))
        self.entries.append(entry)
        return entry

    @property
    def all_finished(self) -> bool:
        return all(e.finished for e in self.entries)

    # ────────────────────────────────────────────────────────────────────
    # One tick
    # ────────────────────────────────────────────────────────────────────
    def tick(self):
        """Advance every entry, repaint and return the rendered lines."""
        for entry in self.entries:
            entry.step()

        canvas = self.canvas
        canvas.clear()
        if self.config.bounds is not None:
            (min_x, max_x), (min_y, max_y) = self.config.bounds
            canvas.reserve(min_x, min_y)
            canvas.reserve(max_x, max_y)
        for entry in self.entries:
            canvas.paint(entry.drawable, *entry.offset)

        self.ticks += 1
        if self.all_finished:
            self.state = AnimationState.DRAINING
        return canvas.lines(trim=self.config.trim_trailing)

    def draw(self, lines):
        """Overwrite the previous frame in place."""
        lines = list(lines)
        if len(lines) < self._prev_height:
            # Blank out rows left over from a taller previous frame
            lines.extend([''] * (self._prev_height - len(lines)))
        self.sink.move_cursor_up(self._prev_height)
        self.sink.write_frame(lines)
        self._prev_height = len(lines)
        logger.debug("tick %d: wrote %d lines", self.ticks, len(lines))

    def _wait(self, deadline) -> bool:
        """Sleep until `deadline`, polling for cancel.  True if cancelled."""
        poll = self.config.poll_interval
        while True:
            if self.sink.poll_cancel():
                return True
            remaining = deadline - self._clock()
            if remaining <= 0:
                return False
            self._sleep(min(poll, remaining))

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self) -> int:
        """Run until every entry is finished or the user cancels.  Returns tick count."""
        interval = self.config.frame_interval
        self.state = AnimationState.RUNNING
        self.cancelled = False
        self._prev_height = 0
        self.ticks = 0
        logger.info("animation start: %d entries at %.1f fps",
                    len(self.entries), self.config.fps)
        reason = 'error'
        try:
            with raw_session(self.sink, hide_cursor=self.config.hide_cursor):
                while True:
                    if self.sink.poll_cancel():
                        self.cancelled = True
                        break
                    start = self._clock()
                    self.draw(self.tick())
                    if self.state is AnimationState.DRAINING:
                        break
                    if self._wait(start + interval):
                        self.cancelled = True
                        break
            reason = 'cancelled' if self.cancelled else 'finished'
        finally:
            self.state = AnimationState.STOPPED
            logger.info("animation stopped after %d ticks (%s)", self.ticks, reason)
        return self.ticks
