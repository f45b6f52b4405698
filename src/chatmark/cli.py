"""CLI entry point and subcommand definitions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from chatmark.config import ConfigError, get_config_path, load_styles
from chatmark.console import to_rich
from chatmark.render import render
from chatmark.serialize import segments_to_json
from chatmark.transcript import TranscriptError, load_transcript

if TYPE_CHECKING:
    from chatmark.styles import StyleKey

logger = logging.getLogger(__name__)


def _setup_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_styles_or_exit(path: Path | None) -> dict[StyleKey, str]:
    try:
        return load_styles(path if path is not None else get_config_path())
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)


def _read_message(source: str) -> str:
    """Read a message from a file path, or from stdin for `-`."""
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {source}: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_render(args: argparse.Namespace) -> None:
    """Render one message to the terminal."""
    message = _read_message(args.file)
    segments = render(message, is_from_user=args.user)
    if args.json:
        print(json.dumps(segments_to_json(segments), indent=2))
        return
    styles = _load_styles_or_exit(args.styles)
    Console().print(to_rich(segments, styles))


def _cmd_view(args: argparse.Namespace) -> None:
    """Open a transcript in the TUI.

    Imports are deferred to avoid loading Textual for `render`.
    """
    from chatmark.tui.app import ChatApp  # noqa: PLC0415

    try:
        messages = load_transcript(Path(args.transcript))
    except TranscriptError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    styles = _load_styles_or_exit(args.styles)
    logger.debug("Loaded %d message(s) from %s", len(messages), args.transcript)
    ChatApp(messages, styles).run()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate subcommand."""
    parser = argparse.ArgumentParser(
        prog="chatmark",
        description="Render chat messages written in light markdown",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # render
    render_parser = subparsers.add_parser("render", help="Render a message to the terminal")
    render_parser.add_argument("file", nargs="?", default="-", help="Message file (default: stdin)")
    render_parser.add_argument(
        "--user", action="store_true", help="Treat as a user message (no markdown)"
    )
    render_parser.add_argument("--json", action="store_true", help="Output segments as JSON")

    # view
    view_parser = subparsers.add_parser("view", help="Browse a JSON transcript in the TUI")
    view_parser.add_argument("transcript", help="Transcript JSON file")

    for sub in (render_parser, view_parser):
        sub.add_argument("-v", "--verbose", action="store_true")
        sub.add_argument("--styles", type=Path, help="Path to styles.toml")

    args = parser.parse_args(argv)
    _setup_logging(verbose=args.verbose)

    dispatch = {
        "render": _cmd_render,
        "view": _cmd_view,
    }
    dispatch[args.command](args)
