"""Vendor-neutral completion finish reasons."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ChatFinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ChatFinishReason"]:
        """Return the matching member, or ``None`` for missing/unknown strings."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


__all__ = ["ChatFinishReason"]
