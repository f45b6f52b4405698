"""Textual App — scrollable chat transcript with clickable links."""

from __future__ import annotations

import logging
import webbrowser
from typing import TYPE_CHECKING, ClassVar

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from chatmark.linking import activate_link, notice_for
from chatmark.tui.help_screen import HelpScreen
from chatmark.tui.widgets.message_bubble import MessageBubble

if TYPE_CHECKING:
    from collections.abc import Callable

    from textual.binding import BindingType

    from chatmark.styles import StyleKey
    from chatmark.transcript import ChatMessage

logger = logging.getLogger(__name__)


class ChatApp(App[None]):
    """Chat transcript viewer."""

    TITLE = "chatmark"

    CSS = """
    #transcript {
        height: 1fr;
        padding: 1 2;
    }
    #empty-message {
        width: 100%;
        height: 100%;
        content-align: center middle;
        text-style: dim;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit", show=True),
        Binding("question_mark", "show_help", "Help", show=True),
        Binding("j", "scroll_line_down", "Scroll Down", show=False),
        Binding("k", "scroll_line_up", "Scroll Up", show=False),
        Binding("g", "scroll_to_top", "Top", show=False),
        Binding("G", "scroll_to_bottom", "Bottom", show=False, key_display="G"),
        Binding("home", "scroll_to_top", "Top", show=False),
        Binding("end", "scroll_to_bottom", "Bottom", show=False),
    ]

    def __init__(
        self,
        messages: list[ChatMessage],
        styles: dict[StyleKey, str] | None = None,
        opener: Callable[[str], bool] = webbrowser.open,
    ) -> None:
        super().__init__()
        self._messages = messages
        self._styles = styles
        self._opener = opener

    def compose(self) -> ComposeResult:
        """Create the transcript layout."""
        yield Header()
        with VerticalScroll(id="transcript"):
            if not self._messages:
                yield Static("No messages in this transcript.", id="empty-message")
            for message in self._messages:
                yield MessageBubble(message, self._styles)
        yield Footer()

    def on_mount(self) -> None:
        """Focus the transcript so scroll keys work immediately."""
        self.set_focus(self._transcript)

    @property
    def _transcript(self) -> VerticalScroll:
        return self.query_one("#transcript", VerticalScroll)

    # === Actions ===

    def action_activate_link(self, url: str) -> None:
        """Open a clicked link without blocking the UI."""
        self._open_link(url)

    @work(thread=True, group="links")
    def _open_link(self, url: str) -> None:
        """Fire-and-forget: open *url* and report failures as a notice."""
        outcome = activate_link(url, self._opener)
        logger.debug("Link %s: %s", url, outcome)
        notice = notice_for(outcome)
        if notice is not None:
            self.call_from_thread(self.notify, notice, title="Error", severity="error")

    def action_scroll_line_down(self) -> None:
        self._transcript.scroll_down()

    def action_scroll_line_up(self) -> None:
        self._transcript.scroll_up()

    def action_scroll_to_top(self) -> None:
        self._transcript.scroll_home()

    def action_scroll_to_bottom(self) -> None:
        self._transcript.scroll_end()

    def action_show_help(self) -> None:
        """Show the help overlay."""
        self.push_screen(HelpScreen())
