"""
Choice DTO: one candidate completion.

Blocking calls populate ``message``; streaming calls populate ``delta`` with
the incremental fragment of the same shape.
"""
from __future__ import annotations

from typing import Optional

from .logprobs import Logprobs
from .message import Message
from .wire_model import WireModel


class Choice(WireModel):
    index: int = 0
    message: Optional[Message] = None
    delta: Optional[Message] = None
    finish_reason: Optional[str] = None
    logprobs: Optional[Logprobs] = None

    @property
    def content_message(self) -> Optional[Message]:
        """The populated message, preferring ``delta`` over ``message``."""
        return self.delta if self.delta is not None else self.message


__all__ = ["Choice"]
