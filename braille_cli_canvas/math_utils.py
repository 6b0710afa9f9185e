#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math


def to_float(value) -> float:
    """
    Convert any numeric value to a finite float.

    Accepts ints, floats, Fractions, Decimals, numpy scalars or anything
    else implementing __float__.  The dot mapping is total over finite
    floats only, so NaN and infinities are rejected.
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise TypeError(f"coordinate {value!r} is not convertible to float") from None
    except OverflowError:
        raise ValueError(f"{type(value).__name__} coordinate is not finite as a float") from None
    if not math.isfinite(v):
        raise ValueError(f"coordinate {value!r} is not finite")
    return v


def round_half_away(v: float) -> int:
    """Round to nearest integer, halves away from zero (not banker's rounding)."""
    return int(math.floor(v + 0.5)) if v >= 0 else -int(math.floor(-v + 0.5))


def line_points(x1, y1, x2, y2):
    """
    Yield evenly spaced points from (x1, y1) to (x2, y2) inclusive.

    Endpoints are rounded to the dot grid first, then the segment is walked
    in max(|dx|, |dy|) steps so every dot on the major axis is visited once.
    """
    ax, ay = round_half_away(to_float(x1)), round_half_away(to_float(y1))
    bx, by = round_half_away(to_float(x2)), round_half_away(to_float(y2))
    dx, dy = bx - ax, by - ay
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield (float(ax), float(ay))
        return
    for i in range(steps + 1):
        yield (ax + dx * i / steps, ay + dy * i / steps)
