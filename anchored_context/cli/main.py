"""CLI: anchored-context excerpt, tags, config validate."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ..config import load_config, validate_config
from ..core.excerpt_builder import BudgetedExcerptBuilder
from ..core.tag_locator import TagLocator
from ..parsers import build_parser
from ..tags_file import resolve_tag
from ..types import AnchoredContextError, Excerpt

logger = logging.getLogger("anchored_context.cli")


def _read_document(path: Path) -> str:
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(1)
    text = path.read_text(errors="replace")
    if not text:
        logger.warning("Could not read the file: %s", path)
        sys.exit(1)
    return text


def _print_excerpts(excerpts: list[Excerpt], as_json: bool) -> None:
    if as_json:
        print(json.dumps([e.to_dict() for e in excerpts], indent=2))
        return
    for i, e in enumerate(excerpts):
        if len(excerpts) > 1:
            if i:
                print()
            state = f"lines {e.window.start}-{e.window.end}" if e.window else "full document"
            print(f"==> {e.tag} ({state}, {e.tokens} tokens) <==")
        print(e.text)


def cmd_excerpt(args):
    """Print token-budgeted excerpts for one or more tags."""
    config = load_config(args.config)
    if args.max_tokens is not None:
        config.excerpt.max_tokens = args.max_tokens
    if args.max_lines is not None:
        config.excerpt.max_lines = args.max_lines

    builder = BudgetedExcerptBuilder.from_config(config)

    excerpts: list[Excerpt] = []
    if args.file:
        text = _read_document(Path(args.file))
        excerpts = builder.build_many(text, args.tags)
    else:
        if not config.tags_files:
            print("No --file given and no tags_files configured.", file=sys.stderr)
            sys.exit(1)
        for tag in args.tags:
            path = resolve_tag(tag, config.tags_files)
            if path is None:
                print(f"Tag not found in tags files: {tag}", file=sys.stderr)
                sys.exit(1)
            excerpts.append(builder.build(_read_document(path), tag))

    _print_excerpts(excerpts, args.json)


def cmd_tags(args):
    """List tag definitions in a document."""
    config = load_config(args.config)
    locator = TagLocator(build_parser(config.parser))
    matches = locator.list_tags(_read_document(Path(args.file)))

    if not matches:
        print("No tags found.")
        return

    print(f"{'Line':>6}  Tag")
    print("-" * 40)
    for m in matches:
        print(f"{m.line:>6}  {m.tag}")


def cmd_config_validate(args):
    """Validate config file."""
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        print("Config validation errors:")
        for err in errors:
            print(f"  - {err}")
        sys.exit(1)
    else:
        print("Config is valid.")


def main():
    parser = argparse.ArgumentParser(
        prog="anchored-context",
        description="Token-budgeted document excerpts anchored on a tag",
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # excerpt
    excerpt_parser = subparsers.add_parser("excerpt", help="Print excerpts around tags")
    excerpt_parser.add_argument("tags", nargs="+", help="Tag name(s)")
    excerpt_parser.add_argument("--file", "-f", help="Document to excerpt (default: resolve via tags_files)")
    excerpt_parser.add_argument("--max-tokens", type=int, help="Token budget override")
    excerpt_parser.add_argument("--max-lines", type=int, help="Window size override")
    excerpt_parser.add_argument("--json", action="store_true", help="Print JSON")

    # tags
    tags_parser = subparsers.add_parser("tags", help="List tag definitions in a document")
    tags_parser.add_argument("--file", "-f", required=True, help="Document to scan")

    # config validate
    config_parser = subparsers.add_parser("config", help="Config operations")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("validate", help="Validate config file")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "excerpt":
            cmd_excerpt(args)
        elif args.command == "tags":
            cmd_tags(args)
        elif args.command == "config":
            if args.config_command == "validate":
                cmd_config_validate(args)
            else:
                print("Usage: anchored-context config validate")
                sys.exit(1)
    except AnchoredContextError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
