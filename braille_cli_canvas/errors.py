#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class BrailleCanvasError(Exception):
    """Base class for every error raised by this package."""


class PaintError(BrailleCanvasError):
    """A drawable could not produce usable geometry for its current state."""

    def __init__(self, drawable, reason="no geometry"):
        self.drawable = drawable
        self.reason = reason
        super().__init__(f"cannot paint {drawable!r}: {reason}")


class FormatError(BrailleCanvasError, ValueError):
    """Structured input handed to a drawable constructor is malformed."""


class IoError(BrailleCanvasError, OSError):
    """A drawable's backing resource could not be read."""
