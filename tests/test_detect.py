"""Tests for the structured-parsing heuristic."""

from __future__ import annotations

import pytest

from chatmark.detect import needs_structured_parsing


@pytest.mark.parametrize(
    "message",
    [
        "**bold**",
        "snake_case",
        "`code`",
        "# title",
        "[x]",
        "wow!",
        "well-known",
        "> quoted",
        "intro\n> quoted",
        "1. first",
        "see https://example.com",
        "see http://example.com",
    ],
)
def test_markdown_hints_trigger_parsing(message: str) -> None:
    """Each kind of markdown hint routes the message through the parser."""
    assert needs_structured_parsing(message)


@pytest.mark.parametrize(
    "message",
    [
        "",
        "hello world",
        "Thanks. See you tomorrow",
        "a > b, but not at line start",
        "step 1. then step 2",
    ],
)
def test_plain_text_takes_fast_path(message: str) -> None:
    """Messages without any hint skip structured parsing."""
    assert not needs_structured_parsing(message)


def test_ordered_marker_only_counts_at_message_start() -> None:
    """An ordered-list marker on a later line is not a hint by itself."""
    assert not needs_structured_parsing("Steps\n1. first")
