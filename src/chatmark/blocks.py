"""Block segmenter: split a message into headings, code blocks, quotes, list items, paragraphs.

Handles: `#`/`##`/`###` headings, fenced code blocks, `> ` quotes, `- `/`* `
bullets, `1. ` ordered items, blank lines.
Does NOT handle: nested blocks, setext headings, indented code, tables.
"""

from __future__ import annotations

import re
from typing import Literal

from chatmark.detect import FENCE
from chatmark.model import (
    BlockSegment,
    Blockquote,
    CodeBlock,
    Heading,
    ListItem,
    Paragraph,
    Spacer,
)

ORDERED_ITEM = re.compile(r"^(\d+)\.\s(.*)$", re.DOTALL)

_HEADING_MARKERS: tuple[tuple[str, Literal[1, 2, 3]], ...] = (("# ", 1), ("## ", 2), ("### ", 3))


def segment_blocks(message: str) -> list[BlockSegment]:
    """Classify every line of *message*, collapsing fenced code into one segment."""
    lines = message.split("\n")
    blocks: list[BlockSegment] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith(FENCE):
            block, i = _collect_code_block(lines, i)
            blocks.append(block)
            continue
        blocks.append(_classify_line(line))
        i += 1
    return blocks


def _collect_code_block(lines: list[str], start: int) -> tuple[CodeBlock, int]:
    """Consume a fence opened at *start*; return the block and the index after it.

    An unterminated fence swallows the rest of the input.
    """
    language = lines[start][len(FENCE) :].strip()
    i = start + 1
    code_lines: list[str] = []
    while i < len(lines) and lines[i] != FENCE:
        code_lines.append(lines[i])
        i += 1
    if i < len(lines):
        # Skip the closing fence
        i += 1
    return CodeBlock(lines=tuple(code_lines), language=language), i


def _classify_line(line: str) -> BlockSegment:
    for marker, level in _HEADING_MARKERS:
        if line.startswith(marker):
            return Heading(level=level, text=line[len(marker) :])

    if line.startswith("> "):
        return Blockquote(text=line[2:])

    if line.startswith(("- ", "* ")):
        return ListItem(kind="bullet", ordinal=None, text=line[2:])

    # Same pattern decides and captures, so an ordered line is never dropped
    if match := ORDERED_ITEM.match(line):
        return ListItem(kind="ordered", ordinal=match.group(1), text=match.group(2))

    if line.strip():
        return Paragraph(text=line)

    return Spacer()
