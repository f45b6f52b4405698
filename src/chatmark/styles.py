"""Style lookup: one Rich style string per block and span kind."""

from __future__ import annotations

from enum import StrEnum
from typing import assert_never

from chatmark.model import (
    Blockquote,
    CodeBlock,
    Emphasis,
    Heading,
    Link,
    ListItem,
    Paragraph,
    Plain,
    Spacer,
    Styled,
)


class StyleKey(StrEnum):
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    LIST_BULLET = "list_bullet"
    LIST_ORDERED = "list_ordered"
    PARAGRAPH = "paragraph"
    SPACER = "spacer"
    LINK = "link"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    PLAIN = "plain"


DEFAULT_STYLES: dict[StyleKey, str] = {
    StyleKey.HEADING_1: "bold underline",
    StyleKey.HEADING_2: "bold",
    StyleKey.HEADING_3: "bold dim",
    StyleKey.CODE_BLOCK: "#253528 on #F0F4F0",
    StyleKey.BLOCKQUOTE: "italic",
    StyleKey.LIST_BULLET: "bold",
    StyleKey.LIST_ORDERED: "bold",
    StyleKey.PARAGRAPH: "",
    StyleKey.SPACER: "",
    StyleKey.LINK: "underline #8BA889",
    StyleKey.BOLD: "bold",
    StyleKey.ITALIC: "italic",
    StyleKey.CODE: "bold cyan",
    StyleKey.PLAIN: "",
}

_EMPHASIS_KEYS: dict[Emphasis, StyleKey] = {
    Emphasis.BOLD: StyleKey.BOLD,
    Emphasis.ITALIC: StyleKey.ITALIC,
    Emphasis.CODE: StyleKey.CODE,
}

_HEADING_KEYS: dict[int, StyleKey] = {
    1: StyleKey.HEADING_1,
    2: StyleKey.HEADING_2,
    3: StyleKey.HEADING_3,
}

type Styleable = (
    Heading | CodeBlock | Blockquote | ListItem | Paragraph | Spacer | Link | Plain | Emphasis
)


def style_key_for(item: Styleable) -> StyleKey:
    """Map a block, a non-styled span, or an emphasis kind to its style key.

    Styled spans carry a set of emphasis kinds; look each one up separately.
    """
    match item:
        case Heading(level=level):
            return _HEADING_KEYS[level]
        case CodeBlock():
            return StyleKey.CODE_BLOCK
        case Blockquote():
            return StyleKey.BLOCKQUOTE
        case ListItem(kind="bullet"):
            return StyleKey.LIST_BULLET
        case ListItem():
            return StyleKey.LIST_ORDERED
        case Paragraph():
            return StyleKey.PARAGRAPH
        case Spacer():
            return StyleKey.SPACER
        case Link():
            return StyleKey.LINK
        case Plain():
            return StyleKey.PLAIN
        case Emphasis():
            return _EMPHASIS_KEYS[item]
        case _:
            assert_never(item)


def styled_keys(span: Styled) -> list[StyleKey]:
    """Style keys for every emphasis on *span*, in a stable order."""
    return [_EMPHASIS_KEYS[e] for e in Emphasis if e in span.emphasis]
