"""Render entry point: message text → ordered render segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import assert_never

from chatmark.blocks import segment_blocks
from chatmark.detect import needs_structured_parsing
from chatmark.inline import resolve_inline
from chatmark.model import (
    BlockSegment,
    Blockquote,
    CodeBlock,
    Heading,
    InlineSpan,
    ListItem,
    Paragraph,
    Spacer,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainMessage:
    """The whole message shown as literal text, without any parsing."""

    text: str


@dataclass(frozen=True)
class RenderedBlock:
    """A block segment plus the inline spans of its text.

    `spans` is empty for headings, code blocks and spacers, which are shown literally.
    """

    block: BlockSegment
    spans: tuple[InlineSpan, ...] = ()


type RenderSegment = PlainMessage | RenderedBlock


def render(message: str, *, is_from_user: bool) -> list[RenderSegment]:
    """Turn a chat message into render segments.

    User messages and messages without any markdown hint come back as a
    single PlainMessage.
    """
    if is_from_user or not needs_structured_parsing(message):
        return [PlainMessage(message)]

    segments: list[RenderSegment] = [_render_block(block) for block in segment_blocks(message)]
    logger.debug("Rendered %d block(s) from %d char(s)", len(segments), len(message))
    return segments


def _render_block(block: BlockSegment) -> RenderedBlock:
    match block:
        case Paragraph(text=text) | Blockquote(text=text) | ListItem(text=text):
            return RenderedBlock(block, tuple(resolve_inline(text)))
        case Heading() | CodeBlock() | Spacer():
            return RenderedBlock(block)
        case _:
            assert_never(block)
