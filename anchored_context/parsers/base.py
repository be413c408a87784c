"""DocumentParser ABC: parse text and query it for tag definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..types import TagMatch


class DocumentParser(ABC):
    """Base class for structural parsers that know where tags are defined."""

    def __init__(self, delimiter: str = "*") -> None:
        self.delimiter = delimiter

    @property
    @abstractmethod
    def name(self) -> str:
        """Parser identifier (e.g. 'vimdoc', 'tree-sitter')."""

    @abstractmethod
    def find_tags(self, text: str) -> list[TagMatch]:
        """Return every tag definition in tree iteration order."""

    def delimited(self, tag: str) -> str:
        return f"{self.delimiter}{tag}{self.delimiter}"

    def find_tag(self, text: str, tag: str) -> TagMatch | None:
        """First definition whose delimited text equals the delimited tag exactly."""
        for match in self.find_tags(text):
            if match.tag == tag:
                return match
        return None
