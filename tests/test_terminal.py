import io
import os
import time

import pytest

from braille_cli_canvas.config import CTRL_C, ESC
from braille_cli_canvas.terminal import (
    HIDE_CURSOR,
    SHOW_CURSOR,
    AnsiTerminal,
    contains_cancel,
    raw_session,
)

from conftest import FakeSink


class TestRawSession:
    def test_restores_on_normal_exit(self):
        sink = FakeSink()
        with raw_session(sink):
            assert sink.raw
            assert sink.cursor_hidden
        assert not sink.raw
        assert not sink.cursor_hidden

    def test_restores_on_error(self):
        sink = FakeSink()
        with pytest.raises(KeyError):
            with raw_session(sink):
                raise KeyError("boom")
        assert not sink.raw
        assert not sink.cursor_hidden

    def test_cursor_left_visible(self):
        sink = FakeSink()
        with raw_session(sink, hide_cursor=False):
            assert not sink.cursor_hidden


class TestContainsCancel:
    KEYS = (ESC, CTRL_C)

    @pytest.mark.parametrize("text", ['\x1b', 'ab\x1b', '\x03', 'q\x03q', '\x1bx'])
    def test_cancel_keys(self, text):
        assert contains_cancel(text, self.KEYS)

    @pytest.mark.parametrize("text", [
        '',
        'q',
        '\x1b[A',            # arrow up
        '\x1b[1;5C',         # ctrl + arrow right
        '\x1b[15~',          # F5
        '\x1bOP',            # F1 (SS3)
        '\x1bOH\x1b[F',      # Home, End
    ])
    def test_escape_sequences_ignored(self, text):
        assert not contains_cancel(text, self.KEYS)

    def test_lone_esc_after_sequence(self):
        assert contains_cancel('\x1b[B\x1b', self.KEYS)


class TestAnsiTerminal:
    def test_non_tty_input(self):
        term = AnsiTerminal(out=io.StringIO(), infile=io.StringIO())
        term.enter_raw_mode()
        assert not term.raw
        assert not term.poll_cancel()
        term.exit_raw_mode()

    def test_write_frame(self):
        out = io.StringIO()
        AnsiTerminal(out=out, infile=io.StringIO()).write_frame(['⠁', ''])
        assert out.getvalue() == '\x1b[2K⠁\r\n\x1b[2K\r\n'

    def test_move_cursor_up(self):
        out = io.StringIO()
        term = AnsiTerminal(out=out, infile=io.StringIO())
        term.move_cursor_up(0)
        term.move_cursor_up(3)
        assert out.getvalue() == '\x1b[3F'

    def test_cursor_visibility(self):
        out = io.StringIO()
        term = AnsiTerminal(out=out, infile=io.StringIO())
        term.hide_cursor()
        term.show_cursor()
        assert out.getvalue() == HIDE_CURSOR + SHOW_CURSOR


def _wait_for_cancel(term, attempts=200):
    for _ in range(attempts):
        if term.poll_cancel():
            return True
        time.sleep(0.005)
    return False


@pytest.mark.skipif(os.name == 'nt', reason="needs a pty")
class TestPty:
    @pytest.fixture
    def pty_pair(self):
        import pty
        master, slave = pty.openpty()
        slave_file = os.fdopen(slave, 'r')
        yield master, slave_file
        slave_file.close()
        os.close(master)

    def test_escape_cancels(self, pty_pair):
        import termios
        master, slave_file = pty_pair
        before = termios.tcgetattr(slave_file.fileno())
        term = AnsiTerminal(out=io.StringIO(), infile=slave_file)
        with raw_session(term):
            assert term.raw
            assert not term.poll_cancel()
            os.write(master, b'\x1b')
            assert _wait_for_cancel(term)
        assert not term.raw
        assert termios.tcgetattr(slave_file.fileno()) == before

    def test_other_keys_ignored(self, pty_pair):
        master, slave_file = pty_pair
        term = AnsiTerminal(out=io.StringIO(), infile=slave_file)
        term.enter_raw_mode()
        try:
            os.write(master, b'q')
            assert not _wait_for_cancel(term, attempts=20)
            os.write(master, b'\x03')
            assert _wait_for_cancel(term)
        finally:
            term.exit_raw_mode()

    def test_arrow_key_does_not_cancel(self, pty_pair):
        master, slave_file = pty_pair
        term = AnsiTerminal(out=io.StringIO(), infile=slave_file)
        with raw_session(term):
            os.write(master, b'\x1b[A')
            assert not _wait_for_cancel(term, attempts=20)
            os.write(master, b'\x1bOB')
            assert not _wait_for_cancel(term, attempts=20)
