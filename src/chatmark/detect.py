"""Cheap check for whether a message needs the structured markdown parser at all."""

from __future__ import annotations

import re

MARKDOWN_CHARS = re.compile(r"[*_`#\[\]!-]")
BLOCKQUOTE_MARKER = re.compile(r"^> ", re.MULTILINE)
LEADING_ORDERED_MARKER = re.compile(r"^\d+\.\s")
URL_SCHEME = re.compile(r"https?://")
FENCE = "```"


def needs_structured_parsing(message: str) -> bool:
    """Return True if *message* might contain markdown or a URL.

    Over-approximates: a plain message that passes through the parser
    still renders as plain text, so only false negatives matter.
    """
    return bool(
        MARKDOWN_CHARS.search(message)
        or FENCE in message
        or BLOCKQUOTE_MARKER.search(message)
        or LEADING_ORDERED_MARKER.match(message)
        or URL_SCHEME.search(message)
    )
