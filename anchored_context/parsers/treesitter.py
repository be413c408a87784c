"""TreeSitterParser: tag lookup through a tree-sitter grammar query.

Requires the ``tree-sitter`` extra (``tree_sitter`` + ``tree_sitter_language_pack``).
"""

from __future__ import annotations

import logging

from ..types import TagMatch
from .base import DocumentParser

logger = logging.getLogger(__name__)


def _escape_query_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class TreeSitterParser(DocumentParser):
    """Parse with a prebuilt grammar and capture ``node_type`` nodes.

    Matches are consumed in capture order, i.e. the first match in tree
    iteration order wins.
    """

    def __init__(
        self,
        language: str = "vimdoc",
        node_type: str = "tag",
        delimiter: str = "*",
    ) -> None:
        super().__init__(delimiter)
        try:
            import tree_sitter
            from tree_sitter_language_pack import get_language, get_parser
        except ImportError:
            raise ImportError(
                "tree-sitter not installed. Install with: pip install anchored-context[tree-sitter]"
            )
        self.language_name = language
        self.node_type = node_type
        self._ts = tree_sitter
        self._language = get_language(language)
        self._parser = get_parser(language)

    @property
    def name(self) -> str:
        return "tree-sitter"

    def _captures(self, query_source: str, text: str) -> list[tuple[str, int, int]]:
        """Run a query and return (node text, row, column) in tree order."""
        source_bytes = text.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        query = self._ts.Query(self._language, query_source)

        if hasattr(self._ts, "QueryCursor"):
            result = self._ts.QueryCursor(query).captures(tree.root_node)
        else:
            result = query.captures(tree.root_node)

        if isinstance(result, dict):
            nodes = [n for captured in result.values() for n in captured]
        else:
            nodes = [n for n, _ in result]
        nodes.sort(key=lambda n: n.start_byte)

        captures: list[tuple[str, int, int]] = []
        for node in nodes:
            node_text = source_bytes[node.start_byte:node.end_byte].decode("utf-8", "replace")
            captures.append((node_text, node.start_point[0], node.start_point[1]))
        return captures

    def _strip(self, node_text: str) -> str:
        d = self.delimiter
        if node_text.startswith(d) and node_text.endswith(d) and len(node_text) > 2 * len(d):
            return node_text[len(d):-len(d)]
        return node_text

    def find_tags(self, text: str) -> list[TagMatch]:
        captures = self._captures(f"({self.node_type}) @tag", text)
        return [
            TagMatch(tag=self._strip(node_text), row=row, column=col)
            for node_text, row, col in captures
        ]

    def find_tag(self, text: str, tag: str) -> TagMatch | None:
        wanted = self.delimited(tag)
        query_source = (
            f'(({self.node_type}) @tag (#eq? @tag "{_escape_query_string(wanted)}"))'
        )
        for node_text, row, col in self._captures(query_source, text):
            # Predicate support differs across bindings; equality is rechecked here.
            if node_text == wanted:
                return TagMatch(tag=tag, row=row, column=col)
        logger.debug("tree-sitter query found no %s node equal to %r", self.node_type, wanted)
        return None
