"""Value types flowing through the render pipeline: blocks, link candidates, inline spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

# === Block segments ===


@dataclass(frozen=True)
class Heading:
    """A `#`, `##` or `###` heading line."""

    level: Literal[1, 2, 3]
    text: str


@dataclass(frozen=True)
class CodeBlock:
    """Lines between a pair of fences, kept verbatim."""

    lines: tuple[str, ...] = ()
    language: str = ""  # info string after the opening fence


@dataclass(frozen=True)
class Blockquote:
    """A single `> ` line."""

    text: str


@dataclass(frozen=True)
class ListItem:
    """A bullet (`- `, `* `) or ordered (`1. `) list line."""

    kind: Literal["bullet", "ordered"]
    ordinal: str | None
    text: str


@dataclass(frozen=True)
class Paragraph:
    """Any other non-blank line."""

    text: str


@dataclass(frozen=True)
class Spacer:
    """A blank line."""


type BlockSegment = Heading | CodeBlock | Blockquote | ListItem | Paragraph | Spacer


# === Links ===


@dataclass(frozen=True)
class LinkCandidate:
    """A link found in a line; offsets are half-open and index that same line."""

    start: int
    end: int
    display_text: str
    target_url: str
    kind: Literal["markdown", "bare"]


# === Inline spans ===


class Emphasis(StrEnum):
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"


@dataclass(frozen=True)
class Link:
    """Clickable text pointing at a URL."""

    display_text: str
    target_url: str


@dataclass(frozen=True)
class Styled:
    """Text rendered with one or more emphasis kinds."""

    text: str
    emphasis: frozenset[Emphasis]


@dataclass(frozen=True)
class Plain:
    text: str


type InlineSpan = Link | Styled | Plain
