"""All dataclasses, Protocols, and error types for anchored-context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Document & Tags
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Document:
    """Raw text plus its lines (split on "\\n"). Line numbers are 1-based."""
    text: str
    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> Document:
        return cls(text=text, lines=tuple(text.split("\n")))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def slice(self, start: int, end: int) -> str:
        """Join lines start..end (inclusive, 1-based) with newlines."""
        return "\n".join(self.lines[start - 1:end])


@dataclass(frozen=True)
class TagMatch:
    """A tag definition found by a parser."""
    tag: str
    row: int  # 0-based, as reported by the parser
    column: int = 0

    @property
    def line(self) -> int:
        return self.row + 1


# ---------------------------------------------------------------------------
# Windowing & Excerpts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Window:
    """Inclusive 1-based line range kept around an anchor."""
    start: int
    end: int
    truncated_before: bool = False
    truncated_after: bool = False

    @property
    def span(self) -> int:
        return self.end - self.start


@dataclass
class Excerpt:
    """Text handed to the caller: the full document or a marked window of it."""
    tag: str
    text: str
    tokens: int
    truncated: bool = False
    window: Window | None = None
    anchor_line: int | None = None

    def to_dict(self) -> dict:
        return {
            "tag": self.tag,
            "text": self.text,
            "tokens": self.tokens,
            "truncated": self.truncated,
            "window": (
                [self.window.start, self.window.end] if self.window else None
            ),
            "anchor_line": self.anchor_line,
        }


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class AnchoredContextError(Exception):
    """Base class for every error raised by anchored-context."""


class TagNotFoundError(AnchoredContextError):
    def __init__(self, tag: str):
        super().__init__(f"Tag not found: {tag}")
        self.tag = tag


class TokenBudgetExceededError(AnchoredContextError):
    def __init__(self, tag: str, tokens: int, max_tokens: int):
        super().__init__(
            f"The number of tokens exceeds the limit for tag '{tag}': "
            f"{tokens} >= {max_tokens}"
        )
        self.tag = tag
        self.tokens = tokens
        self.max_tokens = max_tokens


class InvalidInputError(AnchoredContextError):
    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


# ---------------------------------------------------------------------------
# External capabilities
# ---------------------------------------------------------------------------

TokenCounter = Callable[[str], int]


@runtime_checkable
class TagQuery(Protocol):
    def find_tag(self, text: str, tag: str) -> TagMatch | None: ...


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class ExcerptConfig:
    max_tokens: int = 2048
    max_lines: int = 128  # vimdoc lines average 10-11 tokens
    leading_marker: str = "...\n"
    trailing_marker: str = "\n..."


@dataclass
class ParserConfig:
    type: str = "vimdoc"  # "vimdoc" or "tree-sitter"
    language: str = "vimdoc"  # tree-sitter grammar name
    delimiter: str = "*"
    node_type: str = "tag"  # tree-sitter node holding a tag definition


@dataclass
class AnchoredContextConfig:
    version: str = "0.1"
    token_counter: str = "estimate"
    excerpt: ExcerptConfig = field(default_factory=ExcerptConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    tags_files: list[str] = field(default_factory=list)
