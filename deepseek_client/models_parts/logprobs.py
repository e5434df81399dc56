"""
Log-probability DTOs attached to a ``Choice`` when ``logprobs`` was requested.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .wire_model import WireModel


class TopLogprob(WireModel):
    """One alternative token at an output position."""

    token: Optional[str] = None
    logprob: float = 0.0
    bytes: Optional[List[int]] = None


class LogprobContent(WireModel):
    """Log probability of one output token plus its top alternatives."""

    token: Optional[str] = None
    logprob: float = 0.0
    bytes: Optional[List[int]] = None
    top_logprobs: List[TopLogprob] = Field(default_factory=list)


class Logprobs(WireModel):
    """Per-token log probability information for a choice."""

    content: List[LogprobContent] = Field(default_factory=list)


__all__ = ["TopLogprob", "LogprobContent", "Logprobs"]
