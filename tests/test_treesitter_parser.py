"""Tests for the tree-sitter parser (skipped without the tree-sitter extra)."""

import pytest

pytest.importorskip("tree_sitter")
pytest.importorskip("tree_sitter_language_pack")

from anchored_context.core.tag_locator import TagLocator  # noqa: E402
from anchored_context.parsers import build_parser  # noqa: E402
from anchored_context.types import ParserConfig, TagNotFoundError  # noqa: E402

HELP_TEXT = "\n".join([
    "*intro*\tIntroduction",
    "",
    "Some text about the plugin.",
    "",
    "Options\t\t\t\t\t\t*plugin-options*",
    "",
    "See |intro| for details.",
    "",
])


@pytest.fixture
def parser():
    try:
        return build_parser(ParserConfig(type="tree-sitter", language="vimdoc"))
    except Exception as e:  # grammar download or lookup failure
        pytest.skip(f"vimdoc grammar unavailable: {e}")


def test_find_tag(parser):
    match = parser.find_tag(HELP_TEXT, "plugin-options")
    assert match is not None
    assert match.row == 4


def test_link_is_not_a_definition(parser):
    assert parser.find_tag(HELP_TEXT, "intro").row == 0


def test_no_substring_match(parser):
    assert parser.find_tag(HELP_TEXT, "plugin") is None


def test_find_tags(parser):
    tags = [m.tag for m in parser.find_tags(HELP_TEXT)]
    assert tags == ["intro", "plugin-options"]


def test_locator_with_tree_sitter(parser):
    locator = TagLocator(parser)
    assert locator.locate(HELP_TEXT, "plugin-options") == 5
    with pytest.raises(TagNotFoundError):
        locator.locate(HELP_TEXT, "missing")
