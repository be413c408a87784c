"""VimdocParser: line-oriented vimdoc tag recognition, zero external deps."""

from __future__ import annotations

import re

from ..types import TagMatch
from .base import DocumentParser

# A line ending in " >" (or a lone ">") opens a code block.
_CODEBLOCK_START = re.compile(r"(?:^|\s)>[a-z0-9]*$")


class VimdocParser(DocumentParser):
    """Recognise vimdoc tag definitions such as ``*tag-name*``.

    A definition is the delimiter, a run of non-blank characters without the
    delimiter, and the delimiter again, bounded by whitespace or the line
    edges. Text inside ``>`` ... ``<`` code blocks is not scanned, the same way
    the vimdoc grammar treats it as verbatim.
    """

    def __init__(self, delimiter: str = "*") -> None:
        super().__init__(delimiter)
        d = re.escape(delimiter)
        excluded = "".join(sorted({re.escape(c) for c in delimiter}))
        self._pattern = re.compile(
            rf"(?:(?<=\s)|^){d}([^\s{excluded}]+){d}(?=\s|$)"
        )

    @property
    def name(self) -> str:
        return "vimdoc"

    def find_tags(self, text: str) -> list[TagMatch]:
        matches: list[TagMatch] = []
        in_codeblock = False
        for row, line in enumerate(text.split("\n")):
            if in_codeblock:
                # Blocks end at "<" or at the first non-indented line.
                if line.startswith("<"):
                    in_codeblock = False
                    continue
                if not line or line[0].isspace():
                    continue
                in_codeblock = False

            for m in self._pattern.finditer(line):
                matches.append(TagMatch(tag=m.group(1), row=row, column=m.start()))

            if _CODEBLOCK_START.search(line.rstrip()):
                in_codeblock = True
        return matches
