"""Configuration loading, validation, and defaults."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .token_counter import is_valid_mode
from .types import AnchoredContextConfig, ExcerptConfig, ParserConfig

CONFIG_FILENAMES = [
    "anchored-context.yaml",
    "anchored-context.yml",
    "anchored-context.json",
]

PARSER_TYPES = ("vimdoc", "tree-sitter")


def _discover_config() -> Path | None:
    """Search CWD then parent dirs up to home for a config file."""
    cwd = Path.cwd()
    home = Path.home()
    search = cwd
    while True:
        for name in CONFIG_FILENAMES:
            candidate = search / name
            if candidate.is_file():
                return candidate
        if search == home or search == search.parent:
            break
        search = search.parent
    return None


def _build_config(raw: dict[str, Any]) -> AnchoredContextConfig:
    """Build an AnchoredContextConfig from a raw dict."""
    excerpt_raw = raw.get("excerpt", {}) or {}
    defaults = ExcerptConfig()
    excerpt = ExcerptConfig(
        max_tokens=excerpt_raw.get("max_tokens", defaults.max_tokens),
        max_lines=excerpt_raw.get("max_lines", defaults.max_lines),
        leading_marker=excerpt_raw.get("leading_marker", defaults.leading_marker),
        trailing_marker=excerpt_raw.get("trailing_marker", defaults.trailing_marker),
    )

    parser_raw = raw.get("parser", {}) or {}
    parser = ParserConfig(
        type=parser_raw.get("type", "vimdoc"),
        language=parser_raw.get("language", "vimdoc"),
        delimiter=parser_raw.get("delimiter", "*"),
        node_type=parser_raw.get("node_type", "tag"),
    )

    tags_files = raw.get("tags_files", []) or []
    if isinstance(tags_files, str):
        tags_files = [tags_files]

    return AnchoredContextConfig(
        version=str(raw.get("version", "0.1")),
        token_counter=raw.get("token_counter", "estimate"),
        excerpt=excerpt,
        parser=parser,
        tags_files=[str(p) for p in tags_files],
    )


def validate_config(config: AnchoredContextConfig) -> list[str]:
    """Validate a config. Returns list of error strings (empty = valid)."""
    errors: list[str] = []

    if config.excerpt.max_tokens <= 0:
        errors.append(f"excerpt.max_tokens must be > 0 (got {config.excerpt.max_tokens})")

    if config.excerpt.max_lines <= 0:
        errors.append(f"excerpt.max_lines must be > 0 (got {config.excerpt.max_lines})")

    if config.parser.type not in PARSER_TYPES:
        errors.append(
            f"parser.type must be one of {', '.join(PARSER_TYPES)} "
            f"(got '{config.parser.type}')"
        )

    if not config.parser.delimiter:
        errors.append("parser.delimiter must not be empty")

    if not is_valid_mode(config.token_counter):
        errors.append(f"Unknown token_counter mode: '{config.token_counter}'")

    return errors


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict | None = None,
) -> AnchoredContextConfig:
    """Load config from dict, explicit path, or auto-discover."""
    if config_dict is not None:
        return _build_config(config_dict)

    if config_path is not None:
        path = Path(config_path)
    else:
        path = _discover_config()

    if path is None:
        # Return defaults
        return _build_config({})

    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    text = path.read_text()
    if path.suffix == ".json":
        raw = json.loads(text)
    else:
        raw = yaml.safe_load(text) or {}

    return _build_config(raw)
