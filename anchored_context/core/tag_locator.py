"""TagLocator: find the line on which a tag is defined."""

from __future__ import annotations

import logging

from ..parsers import DocumentParser, VimdocParser
from ..types import InvalidInputError, TagMatch, TagNotFoundError, TagQuery

logger = logging.getLogger(__name__)


class TagLocator:
    """Resolve a tag name to the 1-based line of its first definition.

    Only the first match in tree iteration order is used; later duplicate
    definitions are ignored. A missing tag raises ``TagNotFoundError`` so no
    caller ever does arithmetic on an absent anchor.
    """

    def __init__(self, parser: TagQuery | None = None) -> None:
        self.parser = parser or VimdocParser()

    def locate(self, text: str, tag: str) -> int:
        if not tag:
            raise InvalidInputError("Tag name must not be empty", field="tag")
        if not text:
            raise InvalidInputError("Document text must not be empty", field="document")

        match = self.parser.find_tag(text, tag)
        if match is None:
            raise TagNotFoundError(tag)

        logger.debug("Located tag %r at line %d", tag, match.line)
        return match.line

    def list_tags(self, text: str) -> list[TagMatch]:
        """All tag definitions in the document, in tree iteration order."""
        if not isinstance(self.parser, DocumentParser):
            raise TypeError(
                f"{type(self.parser).__name__} cannot enumerate tags; "
                "use a DocumentParser"
            )
        return self.parser.find_tags(text)
