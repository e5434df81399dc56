"""Lifecycle states of a streaming read."""
from __future__ import annotations

from enum import Enum


class StreamState(str, Enum):
    """Where a :class:`ChoiceStream` is in its lifecycle.

    ``READING`` is the only non-terminal state. ``DONE_SENTINEL`` and
    ``EOF`` (body ended without a sentinel) are the two successful endings.
    """

    READING = "reading"
    DONE_SENTINEL = "done_sentinel"
    EOF = "eof"
    DECODE_ERROR = "decode_error"
    TRANSPORT_ERROR = "transport_error"
    CANCELLED = "cancelled"
    ABANDONED = "abandoned"

    @property
    def terminal(self) -> bool:
        return self is not StreamState.READING

    @property
    def succeeded(self) -> bool:
        return self in (StreamState.DONE_SENTINEL, StreamState.EOF)


__all__ = ["StreamState"]
