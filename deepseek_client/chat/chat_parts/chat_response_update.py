"""
Vendor-neutral streaming update (one per streamed choice).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .chat_finish_reason import ChatFinishReason
from .chat_role import ChatRole


@dataclass
class ChatResponseUpdate:
    """A partial response. Every update of one stream shares ``response_id``."""

    role: Optional[ChatRole] = None
    text: str = ""
    finish_reason: Optional[ChatFinishReason] = None
    response_id: Optional[str] = None
    raw_representation: Any = None
    additional_properties: Dict[str, Any] = field(default_factory=dict)


__all__ = ["ChatResponseUpdate"]
