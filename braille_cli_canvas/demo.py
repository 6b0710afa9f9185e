#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import sys

from .animation import Animation
from .canvas import Canvas
from .color import Color
from .drawable import Plot


class Wave:
    """Sine wave that scrolls by `speed` radians per update.  Never finishes."""

    def __init__(self, width=72.0, amplitude=10.0, speed=0.15, color=None):
        self.width = width
        self.amplitude = amplitude
        self.speed = speed
        self.phase = 0.0
        self.color = color

    def update(self) -> bool:
        self.phase += self.speed
        return False

    def produce_points(self):
        half = self.width / 2
        for i in range(int(self.width * 10)):
            x = -half + i / 10
            y = math.sin(math.radians(x * 10) + self.phase) * self.amplitude
            yield (x, y, self.color)


class Spiral:
    """Archimedean spiral that grows one turn-fraction per update."""

    def __init__(self, turns=4.0, growth=1.5, steps_per_update=40, color=None):
        self.turns = turns
        self.growth = growth
        self.steps_per_update = steps_per_update
        self.total = int(turns * 360)
        self.drawn = 0
        self.color = color

    def update(self) -> bool:
        self.drawn = min(self.total, self.drawn + self.steps_per_update)
        return self.drawn >= self.total

    def produce_points(self):
        for deg in range(self.drawn):
            t = math.radians(deg)
            r = self.growth * t
            # Double x so the spiral looks round: cells are 2 wide, 4 tall
            yield (r * math.cos(t) * 2, r * math.sin(t) * 2, self.color)


def print_sine(config, out=None):
    """Static sine wave, printed once."""
    canvas = Canvas(color_mode=config.color_mode)
    plot = Plot(lambda x: math.sin(math.radians(x * 10)) * 10, -36, 36, 0.1,
                color=Color(0x4F, 0xC3, 0xF7))
    canvas.paint(plot)
    canvas.print(out if out is not None else sys.stdout)


def run_wave(config, sink=None):
    anime = Animation(config, sink)
    anime.push(Wave(color=Color(0xD0, 0xDD, 0x14)))
    return anime.run()


def run_spiral(config, sink=None):
    anime = Animation(config, sink)
    anime.push(Spiral(color=Color(0x8D, 0x05, 0x82)))
    return anime.run()


def run_mix(config, sink=None):
    """A finished spiral stays on screen while the wave keeps moving."""
    anime = Animation(config, sink)
    anime.push(Spiral(turns=3, color=Color(0xFF, 0x88, 0x00)), offset=(-60, 0))
    anime.push(Wave(width=60, color=Color(0x00, 0xFF, 0xFF)), offset=(40, 0))
    return anime.run()


SCENES = {
    'wave': run_wave,
    'spiral': run_spiral,
    'mix': run_mix,
}


def main(scene, config, sink=None):
    """Entry point: 'sine' prints a still frame, the others animate."""
    if scene == 'sine':
        print_sine(config)
        return 0
    try:
        runner = SCENES[scene]
    except KeyError:
        raise ValueError(f"unknown scene {scene!r}") from None
    return runner(config, sink)
