"""SSE frame decoding for chat completion streams.

Each line of a streamed body is classified into one of three outcomes:

* ``DONE``   - the ``data: [DONE]`` sentinel; the stream ends successfully.
* ``SKIP``   - blank/whitespace lines, SSE comments (``:keep-alive``), other
  SSE fields (``event:``, ``id:``, ``retry:``), ``null`` payloads and frames
  whose response has no (or ``null``) choices.
* ``CHOICE`` - a JSON ``ChatResponse`` frame; only ``choices[0]`` is kept.

Malformed JSON raises :class:`StreamDecodeError`; it is never skipped.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from ..constants import SSE_DATA_PREFIX, STREAM_DONE_SIGN
from ..errors import StreamDecodeError
from ..models import ChatResponse, Choice, Usage

_OTHER_SSE_FIELDS = ("event:", "id:", "retry:")
_NULL_PAYLOAD = "null"


class FrameKind(str, Enum):
    SKIP = "skip"
    DONE = "done"
    CHOICE = "choice"


@dataclass(frozen=True)
class SseFrame:
    """Outcome of decoding one line.

    ``usage`` is carried even on skipped frames so a trailing usage-only
    frame still reaches the stream metrics.
    """

    kind: FrameKind
    choice: Optional[Choice] = None
    usage: Optional[Usage] = None


_SKIP = SseFrame(FrameKind.SKIP)
_DONE = SseFrame(FrameKind.DONE)


def strip_data_prefix(line: str) -> str:
    """Remove a leading ``data:`` field name and surrounding whitespace."""
    text = line.strip()
    if text.startswith(SSE_DATA_PREFIX):
        text = text[len(SSE_DATA_PREFIX):].strip()
    return text


def decode_sse_line(line: str) -> Optional[str]:
    """Return the payload text of a data line, or ``None`` for lines to skip."""
    raw = line.strip()
    if not raw or raw.startswith(":") or raw.startswith(_OTHER_SSE_FIELDS):
        return None
    return strip_data_prefix(raw) or None


def decode_chat_response(payload: str | bytes) -> ChatResponse:
    """Decode a JSON ``ChatResponse``; raise ``StreamDecodeError`` on bad input."""
    try:
        return ChatResponse.model_validate_json(payload)
    except ValidationError as exc:
        errors = exc.errors()
        detail = errors[0].get("msg", "invalid") if errors else "invalid"
        frame = payload.decode("utf-8", "replace") if isinstance(payload, bytes) else payload
        raise StreamDecodeError(
            message=f"malformed JSON payload: {detail}",
            frame=frame,
            raw=exc,
        ) from exc


def parse_frame(line: str) -> SseFrame:
    """Classify one body line. See the module docstring for the rules."""
    text = decode_sse_line(line)
    if text is None:
        return _SKIP
    if text == STREAM_DONE_SIGN:
        return _DONE
    if text == _NULL_PAYLOAD:
        return _SKIP
    response = decode_chat_response(text)
    choice = response.first_choice()
    if choice is None:
        return SseFrame(FrameKind.SKIP, usage=response.usage) if response.usage else _SKIP
    return SseFrame(FrameKind.CHOICE, choice, response.usage)


__all__ = [
    "FrameKind",
    "SseFrame",
    "strip_data_prefix",
    "decode_sse_line",
    "decode_chat_response",
    "parse_frame",
]
