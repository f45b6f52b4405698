"""Message bubble widget — one chat message rendered as markdown segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Vertical
from textual.widgets import Static

from chatmark.console import RichRenderer
from chatmark.model import CodeBlock, Spacer
from chatmark.render import PlainMessage, RenderedBlock, render

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from chatmark.render import RenderSegment
    from chatmark.styles import StyleKey
    from chatmark.transcript import ChatMessage


def link_click_action(url: str) -> str:
    """Textual action string that activates *url* when a link is clicked."""
    return f"app.activate_link({url!r})"


def _segment_class(segment: RenderSegment) -> str:
    if isinstance(segment, PlainMessage):
        return "plain-message"
    if isinstance(segment, RenderedBlock):
        if isinstance(segment.block, CodeBlock):
            return "code-block"
        if isinstance(segment.block, Spacer):
            return "spacer"
    return "block"


class MessageBubble(Vertical):
    """A chat bubble: user messages on the right, bot messages on the left."""

    DEFAULT_CSS = """
    MessageBubble {
        height: auto;
        width: 100%;
        margin-bottom: 1;
    }
    MessageBubble.user {
        align-horizontal: right;
    }
    MessageBubble > .bubble {
        height: auto;
        width: 80%;
        padding: 0 1;
        border: round $primary;
    }
    MessageBubble.user > .bubble {
        background: $primary 30%;
    }
    MessageBubble .code-block {
        background: $surface;
        padding: 0 1;
        margin: 1 0;
    }
    MessageBubble .spacer {
        height: 1;
    }
    MessageBubble > .timestamp {
        width: 80%;
        text-style: dim;
    }
    MessageBubble.user > .timestamp {
        text-align: right;
    }
    """

    def __init__(
        self,
        message: ChatMessage,
        styles: dict[StyleKey, str] | None = None,
        *,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(id=id, classes="user" if message.is_user else "bot")
        self.message = message
        self._renderer = RichRenderer(styles, link_action=link_click_action)

    @property
    def segments(self) -> list[RenderSegment]:
        """The render segments for this bubble's message."""
        return render(self.message.text, is_from_user=self.message.is_user)

    def compose(self) -> ComposeResult:
        with Vertical(classes="bubble"):
            for segment in self.segments:
                yield Static(self._renderer.segment_text(segment), classes=_segment_class(segment))
        if self.message.timestamp:
            yield Static(self.message.timestamp, classes="timestamp", markup=False)
