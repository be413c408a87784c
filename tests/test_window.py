"""Tests for window selection around an anchor line."""

import pytest

from anchored_context.core.window import half_widths, select_window
from anchored_context.types import InvalidInputError, Window


class TestScenarios:
    def test_anchor_near_start(self):
        w = select_window(1000, 5, 128)
        assert (w.start, w.end) == (1, 128)
        assert w.truncated_before is False
        assert w.truncated_after is True

    def test_anchor_near_end(self):
        w = select_window(1000, 995, 128)
        assert (w.start, w.end) == (872, 1000)
        assert w.truncated_before is True
        assert w.truncated_after is False

    def test_anchor_interior(self):
        w = select_window(1000, 500, 128)
        assert (w.start, w.end) == (436, 564)
        assert w.truncated_before is True
        assert w.truncated_after is True
        assert w.span == 128


class TestBoundaries:
    def test_last_anchor_clamped_to_start(self):
        assert select_window(1000, 64, 128) == Window(1, 128, False, True)

    def test_first_interior_anchor_touches_line_one(self):
        w = select_window(1000, 65, 128)
        assert (w.start, w.end) == (1, 129)
        # Nothing dropped above line 1.
        assert w.truncated_before is False
        assert w.truncated_after is True

    def test_first_anchor_clamped_to_end(self):
        assert select_window(1000, 936, 128) == Window(872, 1000, True, False)

    def test_last_interior_anchor(self):
        assert select_window(1000, 935, 128) == Window(871, 999, True, True)

    def test_document_shorter_than_window(self):
        assert select_window(10, 5, 128) == Window(1, 10, False, False)

    def test_document_exactly_window_size(self):
        assert select_window(128, 100, 128) == Window(1, 128, False, False)

    def test_single_line_document(self):
        assert select_window(1, 1, 128) == Window(1, 1, False, False)


class TestOddMaxLines:
    def test_half_widths_floor_below_ceil_above(self):
        assert half_widths(5) == (2, 3)
        assert half_widths(128) == (64, 64)
        assert half_widths(1) == (0, 1)

    def test_interior_window_is_asymmetric(self):
        w = select_window(100, 50, 5)
        assert (w.start, w.end) == (48, 53)
        assert w.span == 5

    def test_start_clamp(self):
        assert select_window(100, 2, 5) == Window(1, 5, False, True)

    def test_near_start_interior(self):
        assert select_window(100, 3, 5) == Window(1, 6, False, True)

    def test_end_clamp(self):
        assert select_window(100, 97, 5) == Window(95, 100, True, False)

    def test_near_end_interior(self):
        assert select_window(100, 96, 5) == Window(94, 99, True, True)

    def test_max_lines_one(self):
        w = select_window(100, 50, 1)
        assert (w.start, w.end) == (50, 51)


@pytest.mark.parametrize("max_lines", [1, 2, 7, 128])
def test_every_anchor_is_inside_a_bounded_window(max_lines):
    line_count = 300
    for anchor in range(1, line_count + 1):
        w = select_window(line_count, anchor, max_lines)
        assert 1 <= w.start <= w.end <= line_count
        assert w.start <= anchor <= w.end
        assert w.span <= max_lines
        assert w.truncated_before == (w.start > 1)
        assert w.truncated_after == (w.end < line_count)


class TestInvalidInput:
    def test_anchor_zero(self):
        with pytest.raises(InvalidInputError) as exc:
            select_window(10, 0, 4)
        assert exc.value.field == "anchor_line"

    def test_anchor_past_end(self):
        with pytest.raises(InvalidInputError) as exc:
            select_window(10, 11, 4)
        assert exc.value.field == "anchor_line"

    def test_non_positive_max_lines(self):
        with pytest.raises(InvalidInputError) as exc:
            select_window(10, 5, 0)
        assert exc.value.field == "max_lines"

    def test_empty_document(self):
        with pytest.raises(InvalidInputError) as exc:
            select_window(0, 1, 4)
        assert exc.value.field == "line_count"
