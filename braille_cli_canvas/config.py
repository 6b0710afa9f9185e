#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .color import COLOR_MODES

ESC = '\x1b'
CTRL_C = '\x03'


@dataclass
class AnimationConfig:
    """Configuration for the animation loop."""
    fps: float = 24.0
    hide_cursor: bool = True
    color_mode: str = 'truecolor'
    # Granularity of the cancel-key poll while waiting for the next frame
    poll_interval: float = 0.01
    cancel_keys: Tuple[str, ...] = (ESC, CTRL_C)
    # ((min_x, max_x), (min_y, max_y)) in drawing units, reserved every tick
    bounds: Optional[Tuple[Tuple[float, float], Tuple[float, float]]] = None
    trim_trailing: bool = True

    frame_interval: float = field(init=False, repr=False, default=0.0)

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.color_mode not in COLOR_MODES:
            raise ValueError(f"color_mode must be one of {COLOR_MODES}, got {self.color_mode!r}")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self.frame_interval = 1.0 / self.fps

    @classmethod
    def detect_terminal(cls, environ=None, **overrides) -> 'AnimationConfig':
        """
        Autodetect color support and return a default config.
        Checks NO_COLOR, COLORTERM and TERM environment variables.
        """
        env = os.environ if environ is None else environ
        term = env.get('TERM', '').lower()
        colorterm = env.get('COLORTERM', '').lower()

        if 'NO_COLOR' in env or term in ('dumb', 'unknown', ''):
            mode = 'mono'
        elif colorterm in ('truecolor', '24bit'):
            mode = 'truecolor'
        elif '256color' in term:
            mode = '256'
        elif term == 'linux':
            # Linux console: 8 colors only
            mode = '8'
        else:
            mode = 'truecolor'

        options = {'color_mode': mode}
        options.update(overrides)
        return cls(**options)
