"""Chat transcripts: a JSON array of messages shown by the TUI."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class TranscriptError(Exception):
    """Raised when a transcript file is malformed."""


@dataclass(frozen=True)
class ChatMessage:
    """One chat message; user messages are never parsed as markdown."""

    text: str
    is_user: bool
    timestamp: str = ""


def parse_message(entry: Any, index: int = 0) -> ChatMessage:  # noqa: ANN401
    """Build a ChatMessage from one JSON object.

    Accepts either `"is_user": bool` or `"role": "user" | "assistant"`.
    """
    if not isinstance(entry, dict):
        msg = f"Message {index} is not an object"
        raise TranscriptError(msg)
    if "text" not in entry or not isinstance(entry["text"], str):
        msg = f"Message {index} is missing required string field 'text'"
        raise TranscriptError(msg)

    if "is_user" in entry:
        if not isinstance(entry["is_user"], bool):
            msg = f"Message {index} field 'is_user' must be true or false"
            raise TranscriptError(msg)
        is_user = entry["is_user"]
    else:
        is_user = entry.get("role", "assistant") == "user"

    return ChatMessage(
        text=entry["text"],
        is_user=is_user,
        timestamp=str(entry.get("timestamp", "")),
    )


def load_transcript(path: Path) -> list[ChatMessage]:
    """Load messages from a JSON transcript file.

    Raises TranscriptError on unreadable files, invalid JSON or bad entries.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read transcript {path}: {e}"
        raise TranscriptError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {path}: {e}"
        raise TranscriptError(msg) from e

    if not isinstance(data, list):
        msg = f"Transcript {path} must be a JSON array of messages"
        raise TranscriptError(msg)
    return [parse_message(entry, i) for i, entry in enumerate(data)]
