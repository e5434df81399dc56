"""Streaming metrics data structures.

Kept separate from the pipeline so the consumer and the logging code share
one definition.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models import Usage


@dataclass
class StreamMetrics:
    """Collected metrics for a single streaming call.

    Attributes:
        emitted: Number of choices delivered to the consumer.
        time_to_first_choice_ms: Latency from stream open to the first choice.
        total_duration_ms: Latency from stream open to the terminal state.
        prompt_tokens / completion_tokens / total_tokens: Server-reported
            usage, when a frame carried it.
    """

    emitted: int = 0
    time_to_first_choice_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def apply_usage(self, usage: Usage) -> None:
        """Copy server-reported counters; the last reported usage wins."""
        self.prompt_tokens = usage.prompt_tokens
        self.completion_tokens = usage.completion_tokens
        self.total_tokens = usage.total_tokens

    def tokens(self) -> Dict[str, Optional[int]]:
        return {
            "prompt": self.prompt_tokens,
            "completion": self.completion_tokens,
            "total": self.total_tokens,
        }

    def to_log_fields(self) -> Dict[str, Any]:
        return {
            "emitted_count": self.emitted,
            "time_to_first_choice_ms": self.time_to_first_choice_ms,
            "total_duration_ms": self.total_duration_ms,
            "tokens": self.tokens() if self.total_tokens is not None else None,
        }


__all__ = ["StreamMetrics"]
