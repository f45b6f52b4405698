"""JSON-friendly dicts for render segments, used by `chatmark render --json`."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any, assert_never

from chatmark.model import Styled
from chatmark.render import PlainMessage, RenderedBlock

if TYPE_CHECKING:
    from chatmark.model import BlockSegment, InlineSpan
    from chatmark.render import RenderSegment


def _tagged(obj: BlockSegment | InlineSpan) -> dict[str, Any]:
    data: dict[str, Any] = {"type": type(obj).__name__}
    data.update(asdict(obj))
    if isinstance(obj, Styled):
        data["emphasis"] = sorted(e.value for e in obj.emphasis)
    if "lines" in data:
        data["lines"] = list(data["lines"])
    return data


def segment_to_dict(segment: RenderSegment) -> dict[str, Any]:
    match segment:
        case PlainMessage(text=text):
            return {"type": "PlainMessage", "text": text}
        case RenderedBlock(block=block, spans=spans):
            data = _tagged(block)
            if spans:
                data["spans"] = [_tagged(span) for span in spans]
            return data
        case _:
            assert_never(segment)


def segments_to_json(segments: list[RenderSegment]) -> list[dict[str, Any]]:
    """Convert render segments to plain dicts tagged with a "type" field."""
    return [segment_to_dict(s) for s in segments]
