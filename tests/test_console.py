"""Tests for the Rich renderer."""

from __future__ import annotations

from rich.console import Console
from rich.style import Style
from rich.text import Text

from chatmark.console import RichRenderer, to_rich
from chatmark.render import render
from chatmark.styles import DEFAULT_STYLES, StyleKey


def _plain_lines(message: str) -> list[str]:
    group = to_rich(render(message, is_from_user=False))
    return [r.plain for r in group.renderables if isinstance(r, Text)]


def test_block_markers() -> None:
    """Bullets, ordinals, quotes and code blocks get their visual markers."""
    assert _plain_lines("- a\n3. b\n> c\n```\nx\n```") == ["• a", "3. b", "▌ c", "  x"]


def test_delimiters_are_hidden() -> None:
    """Emphasis delimiters and markdown link syntax do not reach the output."""
    assert _plain_lines("**a** *b* `c` [d](https://e.io)") == ["a b c d"]


def test_link_style_carries_url_and_click_action() -> None:
    """Links get a Rich hyperlink and, when requested, an @click action."""
    renderer = RichRenderer(link_action=lambda url: f"app.activate_link({url!r})")
    (segment,) = render("go https://x.io", is_from_user=False)
    text = renderer.segment_text(segment)
    link_spans = [s for s in text.spans if getattr(s.style, "link", None)]
    assert len(link_spans) == 1
    style = link_spans[0].style
    assert style.link == "https://x.io"
    assert style.meta["@click"] == "app.activate_link('https://x.io')"
    assert text.plain[link_spans[0].start : link_spans[0].end] == "https://x.io"


def test_custom_styles_are_applied() -> None:
    """The style table decides how headings look."""
    styles = dict(DEFAULT_STYLES)
    styles[StyleKey.HEADING_1] = "bold red"
    (segment,) = render("# Hi", is_from_user=False)
    text = RichRenderer(styles).segment_text(segment)
    assert text.style.color is not None
    assert text.style.color.name == "red"


def test_prints_to_console() -> None:
    """A full message prints without error."""
    console = Console(record=True, width=60)
    console.print(to_rich(render("# T\n\n- **x**\n> q", is_from_user=False)))
    output = console.export_text()
    assert "T" in output
    assert "• x" in output


def test_quote_bar_follows_blockquote_style() -> None:
    """The quote bar uses the blockquote style, so restyling links leaves it alone."""
    styles = dict(DEFAULT_STYLES)
    styles[StyleKey.LINK] = "red"
    styles[StyleKey.BLOCKQUOTE] = "green"
    (segment,) = render("> quoted", is_from_user=False)
    text = RichRenderer(styles).segment_text(segment)
    bar = [s for s in text.spans if s.start == 0]
    assert bar
    assert all(Style.parse(str(s.style)).color.name == "green" for s in bar)
    assert not text.style


def test_list_marker_style_does_not_cover_item_text() -> None:
    """Only the bullet carries the marker style; item text keeps its own."""
    (segment,) = render("- item", is_from_user=False)
    text = RichRenderer().segment_text(segment)
    assert text.plain == "• item"
    assert not text.style
    marker_spans = [s for s in text.spans if s.end <= len("• ")]
    assert any(Style.parse(str(s.style)).bold for s in marker_spans)
