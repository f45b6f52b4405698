"""Shared fixtures: sample messages, transcripts and a recording link opener."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from chatmark.transcript import ChatMessage

if TYPE_CHECKING:
    from pathlib import Path


SAMPLE_BOT_MESSAGE = """\
# Release notes

Thanks for asking! Here is **what changed** in *this* release:

- Faster `sync` command
- See [the docs](https://example.com/docs) or https://example.com/faq

1. Update
2. Restart

> Back up first.

```python
print("hello")
```"""


@dataclass
class RecordingOpener:
    """Stand-in for webbrowser.open that records URLs and returns a fixed result."""

    result: bool = True
    error: Exception | None = None
    opened: list[str] = field(default_factory=list)

    def __call__(self, url: str) -> bool:
        self.opened.append(url)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def sample_messages() -> list[ChatMessage]:
    return [
        ChatMessage(text="How do I upgrade?", is_user=True, timestamp="10:00"),
        ChatMessage(text=SAMPLE_BOT_MESSAGE, is_user=False, timestamp="10:01"),
    ]


@pytest.fixture
def transcript_file(tmp_path: Path) -> Path:
    """Write a two-message transcript using both the is_user and role forms."""
    path = tmp_path / "transcript.json"
    path.write_text(
        json.dumps(
            [
                {"text": "# not a heading", "is_user": True, "timestamp": "09:00"},
                {"text": "## Answer\nvisit https://example.com", "role": "assistant"},
            ]
        )
    )
    return path
