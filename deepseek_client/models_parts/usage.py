"""
Token usage counters reported by the server.
"""
from __future__ import annotations

from .wire_model import WireModel


class Usage(WireModel):
    """Token accounting for one completion.

    The server reports ``total_tokens``; it is never recomputed locally.
    Cache hit/miss counters split ``prompt_tokens`` by context-cache outcome.
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_cache_hit_tokens: int = 0
    prompt_cache_miss_tokens: int = 0

    def is_consistent(self) -> bool:
        """Return True when ``total == prompt + completion``."""
        return self.total_tokens == self.prompt_tokens + self.completion_tokens


__all__ = ["Usage"]
