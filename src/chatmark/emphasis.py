"""Emphasis extraction: inline code, bold and italic spans within a run of text.

Patterns are scanned one after another; a match that intersects the range
of an earlier match is rejected and the scan resumes one character later,
so spans never overlap. Code goes first because its content is literal;
bold goes before italic so `**` is never read as two single asterisks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chatmark.model import Emphasis, Plain, Styled

EMPHASIS_PATTERNS: tuple[tuple[Emphasis, re.Pattern[str]], ...] = (
    (Emphasis.CODE, re.compile(r"`([^`]+?)`")),
    (Emphasis.BOLD, re.compile(r"\*\*(.+?)\*\*", re.DOTALL)),
    (Emphasis.ITALIC, re.compile(r"\*([^*]+?)\*")),
)


@dataclass(frozen=True)
class _Match:
    start: int
    end: int
    inner: str
    emphasis: Emphasis


def extract_emphasis(text: str) -> list[Styled | Plain]:
    """Split *text* into Plain and Styled spans, delimiters removed."""
    matches = sorted(_scan(text), key=lambda m: m.start)

    spans: list[Styled | Plain] = []
    cursor = 0
    for match in matches:
        if match.start > cursor:
            spans.append(Plain(text[cursor : match.start]))
        spans.append(Styled(text=match.inner, emphasis=frozenset({match.emphasis})))
        cursor = match.end

    if cursor < len(text):
        spans.append(Plain(text[cursor:]))
    return spans


def _scan(text: str) -> list[_Match]:
    found: list[_Match] = []
    for emphasis, pattern in EMPHASIS_PATTERNS:
        pos = 0
        while m := pattern.search(text, pos):
            if any(m.start() < c.end and c.start < m.end() for c in found):
                pos = m.start() + 1
                continue
            found.append(
                _Match(start=m.start(), end=m.end(), inner=m.group(1), emphasis=emphasis)
            )
            pos = m.end()
    return found
