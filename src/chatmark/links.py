"""Link extraction: markdown `[text](url)` links and bare http(s) URLs."""

from __future__ import annotations

import re

from chatmark.model import LinkCandidate

MARKDOWN_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BARE_URL = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+")


def extract_links(text: str) -> list[LinkCandidate]:
    """Find all links in *text*, sorted by start offset.

    A bare URL starting inside a markdown link (its display text or its
    target) belongs to that markdown link and is dropped.
    """
    markdown = [
        LinkCandidate(
            start=m.start(),
            end=m.end(),
            display_text=m.group(1),
            target_url=m.group(2),
            kind="markdown",
        )
        for m in MARKDOWN_LINK.finditer(text)
    ]

    bare = [
        LinkCandidate(
            start=m.start(),
            end=m.end(),
            display_text=m.group(0),
            target_url=m.group(0),
            kind="bare",
        )
        for m in BARE_URL.finditer(text)
        if not any(link.start <= m.start() < link.end for link in markdown)
    ]

    return sorted([*markdown, *bare], key=lambda link: link.start)
