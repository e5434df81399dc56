"""
ChatRequest DTO for ``POST /chat/completions``.

Numeric parameters are range-checked by pydantic at construction time. The
``stream`` flag is not a constructor field: the client forces it when the
request is serialized for a blocking or streaming call.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field, PrivateAttr

from .message import Message
from .wire_model import WireModel


class ChatRequest(WireModel):
    """Parameters of a chat completion call.

    Attributes:
        messages: Ordered conversation messages.
        model: Model id (``deepseek-chat`` or ``deepseek-reasoner``).
        frequency_penalty: -2.0..2.0; positive values discourage repetition.
        presence_penalty: -2.0..2.0; positive values encourage new topics.
        max_tokens: Upper bound on generated tokens.
        stop: Up to 4 stop sequences.
        temperature: Sampling temperature, 0..2.
        top_p: Nucleus sampling mass, 0..1.
        logprobs: Return log probabilities of output tokens.
        top_logprobs: 0..20 alternatives per position; requires ``logprobs``.
            Not enforced here, see :meth:`has_consistent_logprobs`.
    """

    messages: List[Message] = Field(default_factory=list)
    model: Optional[str] = None
    frequency_penalty: float = Field(default=0.0, ge=-2.0, le=2.0)
    max_tokens: int = Field(default=4096, ge=1)
    presence_penalty: float = Field(default=0.0, ge=-2.0, le=2.0)
    stop: List[str] = Field(default_factory=list, max_length=4)
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)
    logprobs: bool = False
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=20)

    _stream: bool = PrivateAttr(default=False)

    @property
    def stream(self) -> bool:
        """Mode of the most recent serialization (``True`` for streaming calls)."""
        return self._stream

    def has_consistent_logprobs(self) -> bool:
        """Return False when ``top_logprobs`` is set without ``logprobs``."""
        return self.top_logprobs is None or self.logprobs

    def to_payload(self, *, stream: bool) -> Dict[str, Any]:
        """Return the JSON body for the request with ``stream`` forced.

        ``None`` valued fields (``model``, ``top_logprobs``, message
        ``reasoning_content``) are omitted from the body.
        """
        self._stream = stream
        payload = self.model_dump(mode="json", exclude_none=True)
        payload["stream"] = stream
        return payload


__all__ = [
    "ChatRequest",
]
