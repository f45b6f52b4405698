"""Inline resolution: links first, emphasis in the gaps between them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.emphasis import extract_emphasis
from chatmark.links import extract_links
from chatmark.model import InlineSpan, Link

if TYPE_CHECKING:
    from chatmark.model import LinkCandidate


def compose_line(text: str, links: list[LinkCandidate]) -> list[InlineSpan]:
    """Interleave link spans with emphasis-parsed gaps.

    Link display text is taken as-is; markers inside it are not parsed.
    With no links the whole text is a single trailing gap.
    """
    spans: list[InlineSpan] = []
    cursor = 0
    for link in links:
        if link.start > cursor:
            spans.extend(extract_emphasis(text[cursor : link.start]))
        spans.append(Link(display_text=link.display_text, target_url=link.target_url))
        cursor = link.end

    if cursor < len(text):
        spans.extend(extract_emphasis(text[cursor:]))
    return spans


def resolve_inline(text: str) -> list[InlineSpan]:
    """Return the inline spans of a single line of block text."""
    return compose_line(text, extract_links(text))
