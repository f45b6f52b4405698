"""Turn render segments into Rich renderables for the terminal and the TUI."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from rich.console import Group
from rich.style import Style
from rich.text import Text

from chatmark.model import (
    Blockquote,
    CodeBlock,
    Heading,
    Link,
    ListItem,
    Paragraph,
    Plain,
    Spacer,
    Styled,
)
from chatmark.render import PlainMessage, RenderedBlock
from chatmark.styles import DEFAULT_STYLES, StyleKey, style_key_for, styled_keys

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from chatmark.model import BlockSegment, InlineSpan
    from chatmark.render import RenderSegment

BULLET = "•"
QUOTE_BAR = "▌ "
CODE_INDENT = "  "


class RichRenderer:
    """Build Rich Text from render segments using a style lookup table.

    `link_action` maps a URL to a Textual action string; when set, links
    carry an `@click` meta so clicking them runs that action.
    """

    def __init__(
        self,
        styles: dict[StyleKey, str] | None = None,
        link_action: Callable[[str], str] | None = None,
    ) -> None:
        self._styles = styles if styles is not None else DEFAULT_STYLES
        self._link_action = link_action

    def style(self, key: StyleKey) -> Style:
        return Style.parse(self._styles.get(key, ""))

    def render(self, segments: Iterable[RenderSegment]) -> Group:
        """Return one Text per segment, grouped in order."""
        return Group(*(self.segment_text(s) for s in segments))

    def segment_text(self, segment: RenderSegment) -> Text:
        match segment:
            case PlainMessage(text=text):
                return Text(text, style=self.style(StyleKey.PLAIN))
            case RenderedBlock(block=block, spans=spans):
                return self._block_text(block, spans)
            case _:
                assert_never(segment)

    def _block_text(self, block: BlockSegment, spans: tuple[InlineSpan, ...]) -> Text:
        match block:
            case Heading(text=text):
                return Text(text, style=self.style(style_key_for(block)))
            case CodeBlock(lines=lines):
                body = "\n".join(f"{CODE_INDENT}{line}" for line in lines)
                return Text(body, style=self.style(StyleKey.CODE_BLOCK))
            case Blockquote():
                text = Text()
                text.append(QUOTE_BAR, style=self.style(StyleKey.BLOCKQUOTE))
                text.append_text(self.spans_text(spans, StyleKey.BLOCKQUOTE))
                return text
            case ListItem(kind=kind, ordinal=ordinal):
                marker = BULLET if kind == "bullet" else f"{ordinal}."
                text = Text()
                text.append(f"{marker} ", style=self.style(style_key_for(block)))
                text.append_text(self.spans_text(spans, StyleKey.PLAIN))
                return text
            case Paragraph():
                return self.spans_text(spans, StyleKey.PARAGRAPH)
            case Spacer():
                return Text("")
            case _:
                assert_never(block)

    def spans_text(self, spans: Iterable[InlineSpan], base: StyleKey) -> Text:
        """Join inline spans into one Text on top of the *base* style."""
        text = Text(style=self.style(base))
        for span in spans:
            text.append(*self._span_parts(span))
        return text

    def _span_parts(self, span: InlineSpan) -> tuple[str, Style]:
        match span:
            case Link(display_text=display, target_url=url):
                style = self.style(StyleKey.LINK) + Style(link=url)
                if self._link_action is not None:
                    style += Style.from_meta({"@click": self._link_action(url)})
                return display, style
            case Styled(text=text):
                style = sum((self.style(key) for key in styled_keys(span)), Style())
                return text, style
            case Plain(text=text):
                return text, self.style(StyleKey.PLAIN)
            case _:
                assert_never(span)


def to_rich(
    segments: Iterable[RenderSegment],
    styles: dict[StyleKey, str] | None = None,
    link_action: Callable[[str], str] | None = None,
) -> Group:
    """Render segments to a Rich Group with the given style table."""
    return RichRenderer(styles, link_action).render(segments)
