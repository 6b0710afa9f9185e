#
# PROJECT: braille-cli-canvas
# MODULE: braille_cli_canvas/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import os
import sys
from contextlib import contextmanager
from typing import Protocol, Sequence

if os.name != 'nt':
    import select
    import termios
    import tty

from .config import CTRL_C, ESC

logger = logging.getLogger(__name__)

HIDE_CURSOR = '\x1b[?25l'
SHOW_CURSOR = '\x1b[?25h'


def contains_cancel(text: str, cancel_keys) -> bool:
    """
    True if `text` holds a cancel keypress.

    Arrow, function and navigation keys arrive as ESC [ ... (CSI) or
    ESC O x (SS3); those sequences are skipped so only a lone ESC counts
    as the escape key.
    """
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch == ESC and i + 1 < n and text[i + 1] == '[':
            # CSI: parameter/intermediate bytes, then one final byte in @..~
            i += 2
            while i < n and not '@' <= text[i] <= '~':
                i += 1
            i += 1
            continue
        if ch == ESC and i + 1 < n and text[i + 1] == 'O':
            i += 3
            continue
        if ch in cancel_keys:
            return True
        i += 1
    return False


class TerminalSink(Protocol):
    """What the animation loop needs from a terminal."""

    def write_frame(self, lines: Sequence[str]) -> None: ...

    def move_cursor_up(self, n: int) -> None: ...

    def poll_cancel(self) -> bool: ...

    def enter_raw_mode(self) -> None: ...

    def exit_raw_mode(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...


class AnsiTerminal:
    """
    TerminalSink over a VT100 text stream and a keyboard fd.

    Raw mode is cbreak with ISIG cleared so Ctrl-C arrives as a byte
    instead of SIGINT.  On a non-tty input raw mode is skipped and
    poll_cancel() never fires.
    """

    def __init__(self, out=None, infile=None, cancel_keys=(ESC, CTRL_C)):
        self.out = out if out is not None else sys.stdout
        self.infile = infile if infile is not None else sys.stdin
        self.cancel_keys = tuple(cancel_keys)
        self._saved_attrs = None
        self._fd = None

    @property
    def raw(self) -> bool:
        return self._saved_attrs is not None

    def _input_fd(self):
        if os.name == 'nt':
            return None
        try:
            fd = self.infile.fileno()
        except (AttributeError, OSError, ValueError):
            return None
        return fd if os.isatty(fd) else None

    def enter_raw_mode(self):
        if self.raw:
            return
        fd = self._input_fd()
        if fd is None:
            logger.debug("input is not a tty, raw mode skipped")
            return
        self._saved_attrs = termios.tcgetattr(fd)
        self._fd = fd
        tty.setcbreak(fd)
        attrs = termios.tcgetattr(fd)
        attrs[3] &= ~termios.ISIG
        termios.tcsetattr(fd, termios.TCSANOW, attrs)

    def exit_raw_mode(self):
        if not self.raw:
            return
        termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
        self._saved_attrs = None
        self._fd = None

    def poll_cancel(self) -> bool:
        """Non-blocking: drain pending input and report any cancel key."""
        if not self.raw:
            return False
        chunks = []
        while select.select([self._fd], [], [], 0)[0]:
            data = os.read(self._fd, 64)
            if not data:
                break
            chunks.append(data)
        if not chunks:
            return False
        text = b''.join(chunks).decode('utf-8', errors='replace')
        return contains_cancel(text, self.cancel_keys)

    def write_frame(self, lines):
        # Erase each row before writing so a shorter line leaves no residue
        self.out.write(''.join('\x1b[2K' + line + '\r\n' for line in lines))
        self.out.flush()

    def move_cursor_up(self, n):
        if n > 0:
            self.out.write(f'\x1b[{n}F')
            self.out.flush()

    def hide_cursor(self):
        self.out.write(HIDE_CURSOR)
        self.out.flush()

    def show_cursor(self):
        self.out.write(SHOW_CURSOR)
        self.out.flush()


@contextmanager
def raw_session(sink, hide_cursor=True):
    """
    Hold the terminal in raw mode (and optionally hide the cursor) for the
    duration of the block.  Always restores on exit, including errors.
    """
    sink.enter_raw_mode()
    try:
        if hide_cursor:
            sink.hide_cursor()
        yield sink
    finally:
        try:
            sink.show_cursor()
        finally:
            sink.exit_raw_mode()
