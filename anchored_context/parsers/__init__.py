from ..types import ParserConfig
from .base import DocumentParser
from .vimdoc import VimdocParser


def build_parser(config: ParserConfig | None = None) -> DocumentParser:
    """Construct the parser named by ``config.type``."""
    config = config or ParserConfig()
    if config.type == "vimdoc":
        return VimdocParser(delimiter=config.delimiter)
    if config.type == "tree-sitter":
        from .treesitter import TreeSitterParser

        return TreeSitterParser(
            language=config.language,
            node_type=config.node_type,
            delimiter=config.delimiter,
        )
    raise ValueError(f"Unknown parser type: {config.type}")


__all__ = ["DocumentParser", "VimdocParser", "build_parser"]
