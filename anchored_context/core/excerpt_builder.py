"""BudgetedExcerptBuilder: full document or a token-budgeted window around a tag."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..parsers import build_parser
from ..token_counter import create_token_counter, estimate_tokens
from ..types import (
    AnchoredContextConfig,
    Document,
    Excerpt,
    ExcerptConfig,
    InvalidInputError,
    TokenBudgetExceededError,
)
from .tag_locator import TagLocator
from .window import select_window

logger = logging.getLogger(__name__)


class BudgetedExcerptBuilder:
    """Build an excerpt of a document that fits a token budget.

    If the whole document estimates at or under ``max_tokens`` it is returned
    verbatim. Otherwise the tag is located, a window of at most ``max_lines``
    lines is cut around it, and truncation markers are added on the sides
    where lines were dropped. The assembled excerpt must estimate strictly
    below ``max_tokens``; if it does not, ``TokenBudgetExceededError`` is
    raised instead of returning an oversized excerpt.

    Stateless between calls.
    """

    def __init__(
        self,
        locator: TagLocator | None = None,
        token_counter: Callable[[str], int] | None = None,
        config: ExcerptConfig | None = None,
    ) -> None:
        self.locator = locator or TagLocator()
        self.token_counter = token_counter or estimate_tokens
        self.config = config or ExcerptConfig()

    @classmethod
    def from_config(cls, config: AnchoredContextConfig) -> BudgetedExcerptBuilder:
        return cls(
            locator=TagLocator(build_parser(config.parser)),
            token_counter=create_token_counter(config.token_counter),
            config=config.excerpt,
        )

    def build(
        self,
        text: str,
        tag: str,
        max_tokens: int | None = None,
        max_lines: int | None = None,
    ) -> Excerpt:
        max_tokens = self.config.max_tokens if max_tokens is None else max_tokens
        max_lines = self.config.max_lines if max_lines is None else max_lines
        self._validate(text, tag, max_tokens, max_lines)

        tokens = self.token_counter(text)
        if tokens <= max_tokens:
            logger.debug("Tag %r: whole document fits (%d <= %d tokens)", tag, tokens, max_tokens)
            return Excerpt(tag=tag, text=text, tokens=tokens)

        anchor = self.locator.locate(text, tag)
        document = Document.from_text(text)
        window = select_window(document.line_count, anchor, max_lines)
        logger.debug(
            "Tag %r: %d tokens over budget, keeping lines %d-%d of %d (anchor %d)",
            tag, tokens, window.start, window.end, document.line_count, anchor,
        )

        content = document.slice(window.start, window.end)
        if window.truncated_before:
            content = self.config.leading_marker + content
        if window.truncated_after:
            content = content + self.config.trailing_marker

        excerpt_tokens = self.token_counter(content)
        if excerpt_tokens >= max_tokens:
            raise TokenBudgetExceededError(tag, excerpt_tokens, max_tokens)

        return Excerpt(
            tag=tag,
            text=content,
            tokens=excerpt_tokens,
            truncated=True,
            window=window,
            anchor_line=anchor,
        )

    def build_many(
        self,
        text: str,
        tags: Iterable[str],
        max_tokens: int | None = None,
        max_lines: int | None = None,
    ) -> list[Excerpt]:
        """Build one excerpt per tag, in order. The first failure propagates."""
        return [self.build(text, tag, max_tokens, max_lines) for tag in tags]

    @staticmethod
    def _validate(text: str, tag: str, max_tokens: int, max_lines: int) -> None:
        if not text:
            raise InvalidInputError("Document text must not be empty", field="document")
        if not tag:
            raise InvalidInputError("Tag name must not be empty", field="tag")
        if max_tokens <= 0:
            raise InvalidInputError(f"max_tokens must be > 0 (got {max_tokens})", field="max_tokens")
        if max_lines <= 0:
            raise InvalidInputError(f"max_lines must be > 0 (got {max_lines})", field="max_lines")


def build_excerpt(
    text: str,
    tag: str,
    max_tokens: int = 2048,
    max_lines: int = 128,
) -> Excerpt:
    """One-shot helper with the default vimdoc parser and estimator."""
    return BudgetedExcerptBuilder().build(text, tag, max_tokens=max_tokens, max_lines=max_lines)
