"""Read help ``tags`` index files (name<TAB>file<TAB>search) to find documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def read_tags_file(path: str | Path) -> dict[str, Path]:
    """Map tag name -> document path. First entry wins on duplicates.

    Document paths are resolved relative to the index file's directory.
    """
    path = Path(path)
    base = path.parent
    entries: dict[str, Path] = {}
    for lineno, line in enumerate(path.read_text(errors="replace").splitlines(), 1):
        if not line.strip() or line.startswith("!_TAG_"):
            continue
        parts = line.split("\t")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            logger.debug("Skipping malformed line %d in %s", lineno, path)
            continue
        name, filename = parts[0], parts[1]
        entries.setdefault(name, base / filename)
    return entries


def resolve_tag(tag: str, tags_files: Iterable[str | Path]) -> Path | None:
    """Return the document defining tag, searching index files in order."""
    for tags_file in tags_files:
        tags_path = Path(tags_file).expanduser()
        if not tags_path.is_file():
            logger.warning("Tags file not found: %s", tags_path)
            continue
        entries = read_tags_file(tags_path)
        if tag in entries:
            return entries[tag]
    return None
