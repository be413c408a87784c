"""Window selection: which lines to keep around an anchor."""

from __future__ import annotations

from ..types import InvalidInputError, Window


def half_widths(max_lines: int) -> tuple[int, int]:
    """Split max_lines around the anchor: floor below, ceiling above."""
    lower = max_lines // 2
    return lower, max_lines - lower


def select_window(line_count: int, anchor_line: int, max_lines: int) -> Window:
    """Choose an inclusive 1-based line range around anchor_line.

    Three cases:
    - anchor near the top: keep lines 1..max_lines
    - anchor near the bottom: keep (line_count - max_lines)..line_count
    - otherwise: anchor - lower .. anchor + upper

    ``end - start`` never exceeds max_lines and the anchor is always inside the
    range. Truncation flags reflect whether lines remain outside the range.
    """
    if line_count < 1:
        raise InvalidInputError(f"line_count must be >= 1 (got {line_count})", field="line_count")
    if max_lines <= 0:
        raise InvalidInputError(f"max_lines must be > 0 (got {max_lines})", field="max_lines")
    if not 1 <= anchor_line <= line_count:
        raise InvalidInputError(
            f"anchor_line {anchor_line} outside [1, {line_count}]", field="anchor_line"
        )

    lower, upper = half_widths(max_lines)

    if anchor_line - lower < 1:
        start, end = 1, min(max_lines, line_count)
    elif anchor_line + upper >= line_count:
        start, end = max(1, line_count - max_lines), line_count
    else:
        start, end = anchor_line - lower, anchor_line + upper

    return Window(
        start=start,
        end=end,
        truncated_before=start > 1,
        truncated_after=end < line_count,
    )
