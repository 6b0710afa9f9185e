import io
import math

import pytest

from braille_cli_canvas.canvas import Bound, Canvas
from braille_cli_canvas.color import RESET, Color
from braille_cli_canvas.drawable import Points
from braille_cli_canvas.errors import PaintError


def _sine_canvas(**kwargs):
    c = Canvas(**kwargs)
    for x in range(-360, 360):
        c.set(x / 10, math.sin(math.radians(x)) * 10)
    return c


class TestBound:
    def test_empty(self):
        b = Bound()
        assert b.empty
        assert b.as_tuple() is None
        assert b.size() == (0, 0)

    def test_grows(self):
        b = Bound()
        b.include((2, 3))
        b.include((-1, 5))
        assert b.as_tuple() == (-1, 3, 2, 5)
        assert b.size() == (4, 3)


class TestDots:
    def test_single_dot_renders(self):
        c = Canvas()
        c.set(0, 0)
        assert c.lines() == ['⠁']

    def test_right_column_dot(self):
        c = Canvas()
        c.set(1, 0)
        assert c.frame() == '⠈'

    def test_set_unset_leaves_no_glyph(self):
        c = Canvas()
        c.set(0, 0)
        c.set(5, 0)
        c.unset(5, 0)
        assert c.lines() == ['⠁']
        assert not c.get(5, 0)

    def test_toggle_twice(self):
        c = Canvas()
        c.set(0, 0)
        c.toggle(1, -1)
        c.toggle(1, -1)
        assert c.buffer.get_mask((0, 0)) == 1

    def test_toggle_on_extends_bound(self):
        c = Canvas()
        c.toggle(10, -8)
        assert c.bound.as_tuple() == (5, 2, 5, 2)

    def test_fill(self):
        c = Canvas()
        c.fill(0.5, -0.5)
        assert c.frame() == '⣿'

    def test_line(self):
        c = Canvas()
        c.line((0, 0), (3, 0))
        assert c.frame() == '⠉⠉'

    def test_vertical_line(self):
        c = Canvas()
        c.line((0, 0), (0, -3))
        assert c.frame() == '⡇'

    def test_method_chaining(self):
        c = Canvas().set(0, 0).set(1, 0)
        assert c.frame() == '⠉'


class TestBoundingBox:
    def test_never_shrinks_on_unset(self):
        c = Canvas()
        c.set(0, 0)
        c.set(10, -20)
        before = c.bound.as_tuple()
        c.unset(10, -20)
        assert c.bound.as_tuple() == before == (0, 0, 5, 5)

    def test_clear_collapses(self):
        c = Canvas()
        c.set(10, -20)
        c.clear()
        assert c.bound.empty
        assert c.lines() == []

    def test_erase_keeps_bound(self):
        c = Canvas()
        c.set(0, 0)
        c.set(10, -20)
        c.erase()
        assert c.get_size() == (6, 6)
        assert c.lines() == [''] * 6

    def test_reserve(self):
        c = Canvas()
        c.set(0, 0)
        c.reserve(10, 0)
        assert c.get_size() == (6, 1)
        assert c.lines() == ['⠁']
        assert c.lines(trim=False) == ['⠁' + ' ' * 5]

    def test_rows_top_to_bottom(self):
        c = Canvas()
        c.set(0, 4)    # row -1
        c.set(0, -4)   # row 1
        assert c.lines() == ['⠁', '', '⠁']


class TestRender:
    def test_glyph_offset_equals_mask(self):
        c = _sine_canvas()
        b = c.bound
        for r, line in enumerate(c.lines()):
            for col_off, ch in enumerate(line):
                if ch == ' ':
                    continue
                assert 0x2800 <= ord(ch) <= 0x28FF
                mask = c.buffer.get_mask((b.min_col + col_off, b.min_row + r))
                assert ord(ch) - 0x2800 == mask

    def test_sine_wave_scenario(self):
        c = _sine_canvas()
        lines = c.lines()
        assert len(lines) > 1
        min_col, min_row, max_col, max_row = c.bound.as_tuple()
        # x spans [-36, 36) drawing units, two units per cell
        assert (min_col, max_col) == (-18, 17)
        assert (max_col - min_col + 1) * 2 == 72
        assert (min_row, max_row) == (-3, 2)
        assert len(c.buffer) > 0

    def test_print(self):
        c = Canvas()
        c.set(0, 0)
        out = io.StringIO()
        c.print(out)
        assert out.getvalue() == '⠁\n'


class TestColor:
    def test_colored_cell_is_wrapped(self):
        c = Canvas()
        c.set(0, 0, Color(1, 2, 3))
        assert c.frame() == '\x1b[38;2;1;2;3m⠁' + RESET

    def test_mono_mode_drops_escapes(self):
        c = Canvas(color_mode='mono')
        c.set(0, 0, '#FF0000')
        assert c.frame() == '⠁'

    def test_blend_is_commutative(self):
        a, b = Color(255, 0, 0), Color(0, 0, 255)
        c1 = Canvas().set(0, 0, a).set(1, 0, b)
        c2 = Canvas().set(1, 0, b).set(0, 0, a)
        assert c1.buffer.get_color((0, 0)) == c2.buffer.get_color((0, 0)) == Color(128, 0, 128)
        assert c1.frame() == c2.frame() == '\x1b[38;2;128;0;128m⠉' + RESET

    def test_repeated_set_counts_twice(self):
        c = Canvas()
        c.set(0, 0, Color(255, 0, 0))
        c.set(0, 0, Color(255, 0, 0))
        c.set(0, 0, Color(0, 0, 255))
        assert c.buffer.get_color((0, 0)) == Color(170, 0, 85)

    def test_unset_does_not_unblend(self):
        c = Canvas()
        c.set(0, 0, Color(255, 0, 0))
        c.set(1, 0, Color(0, 0, 255))
        c.unset(1, 0)
        assert c.buffer.get_color((0, 0)) == Color(128, 0, 128)

    def test_only_colored_cells_escaped(self):
        c = Canvas()
        c.set(0, 0, Color(9, 9, 9))
        c.set(2, 0)
        assert c.frame() == '\x1b[38;2;9;9;9m⠁' + RESET + '⠁'


class TestPaint:
    def test_offset(self):
        c = Canvas()
        c.paint(Points([(0, 0)]), 2, -4)
        assert c.bound.as_tuple() == (1, 1, 1, 1)

    def test_requeried_each_call(self):
        pts = Points([(0, 0)])
        c = Canvas()
        c.paint(pts)
        pts.add(1, 0)
        c.clear()
        c.paint(pts)
        assert c.frame() == '⠉'

    def test_colored_points(self):
        c = Canvas()
        c.paint(Points([(0, 0, (10, 20, 30))]))
        assert c.buffer.get_color((0, 0)) == Color(10, 20, 30)

    def test_empty_drawable_fails(self):
        c = Canvas()
        with pytest.raises(PaintError):
            c.paint(Points())

    def test_drawable_error_propagates(self):
        class Broken:
            def produce_points(self):
                raise PaintError(self, "zero-size image")

        with pytest.raises(PaintError, match="zero-size image"):
            Canvas().paint(Broken())
