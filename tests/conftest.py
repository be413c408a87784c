"""Shared fixtures for anchored-context tests."""

from __future__ import annotations

import pytest

from anchored_context.types import TagMatch


def make_document(line_count: int, tags: dict[int, str] | None = None) -> str:
    """Build a vimdoc-ish document; ``tags`` maps 1-based line -> tag name."""
    tags = tags or {}
    lines = []
    for i in range(1, line_count + 1):
        if i in tags:
            lines.append(f"Line {i:04d} section header *{tags[i]}*")
        else:
            lines.append(f"Line {i:04d} of the document with some filler.")
    return "\n".join(lines)


def word_count(text: str) -> int:
    """Deterministic stub estimator: whitespace-delimited words."""
    return len(text.split())


class FixedRowParser:
    """Stub parser: every known tag sits on a fixed 0-based row."""

    def __init__(self, rows: dict[str, int]):
        self.rows = rows
        self.calls: list[str] = []

    def find_tag(self, text: str, tag: str) -> TagMatch | None:
        self.calls.append(tag)
        if tag not in self.rows:
            return None
        return TagMatch(tag=tag, row=self.rows[tag])


@pytest.fixture
def thousand_line_doc() -> str:
    return make_document(
        1000,
        tags={5: "near-start", 500: "middle", 995: "near-end"},
    )


@pytest.fixture
def small_doc() -> str:
    return make_document(20, tags={3: "intro"})


@pytest.fixture()
def tmp_cwd(tmp_path, monkeypatch):
    """Run test in a clean temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
