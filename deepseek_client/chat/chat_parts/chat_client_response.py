"""
Vendor-neutral result of a blocking chat call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from .chat_finish_reason import ChatFinishReason
from .chat_message import ChatMessage
from .usage_details import UsageDetails


@dataclass
class ChatClientResponse:
    """Attributes:
        messages: Response messages (one for DeepSeek, the first choice).
        response_id: Server completion id.
        model_id: Model that produced the answer.
        created_at: Timezone-aware UTC creation time.
        finish_reason: Why generation stopped, when known.
        usage: Token counters, when reported.
        raw_representation: The vendor response object.
    """

    messages: List[ChatMessage] = field(default_factory=list)
    response_id: Optional[str] = None
    model_id: Optional[str] = None
    created_at: Optional[datetime] = None
    finish_reason: Optional[ChatFinishReason] = None
    usage: Optional[UsageDetails] = None
    raw_representation: Any = None

    @property
    def text(self) -> str:
        """Concatenated text of all messages."""
        return "".join(m.text for m in self.messages)


__all__ = ["ChatClientResponse"]
