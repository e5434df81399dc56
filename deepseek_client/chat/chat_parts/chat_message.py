"""
Vendor-neutral chat message.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .chat_role import ChatRole


@dataclass
class ChatMessage:
    """One conversation turn.

    Attributes:
        role: Author role.
        text: Plain text content.
        raw_representation: The vendor object this message was mapped from,
            when it came from a response.
        additional_properties: Vendor extras (e.g. ``logprobs``,
            ``reasoning_content``).
    """

    role: ChatRole
    text: str = ""
    raw_representation: Any = None
    additional_properties: Dict[str, Any] = field(default_factory=dict)


__all__ = ["ChatMessage"]
