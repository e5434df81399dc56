"""
Message DTO for chat requests and responses.

A ``Message`` is immutable once built. Use the role factories to construct
request messages; response messages (and streaming deltas) are decoded from
JSON with the same type.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import ConfigDict, field_validator

from .wire_model import WireModel

# Roles understood by the chat completions endpoint.
ROLE_USER = "user"
ROLE_SYSTEM = "system"
ROLE_ASSISTANT = "assistant"


class Message(WireModel):
    """A single chat message.

    Attributes:
        content: Message text. ``null`` from the server decodes as ``""``.
        role: Author role (``"user"``, ``"system"`` or ``"assistant"``).
            Streaming deltas after the first usually omit it (``""``).
        reasoning_content: Chain-of-thought text returned by
            ``deepseek-reasoner``; never sent on requests.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    content: str = ""
    role: str = ""
    reasoning_content: Optional[str] = None

    @field_validator("content", "role", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def new_user_message(cls, content: str) -> "Message":
        return cls(content=content, role=ROLE_USER)

    @classmethod
    def new_system_message(cls, content: str) -> "Message":
        return cls(content=content, role=ROLE_SYSTEM)

    @classmethod
    def new_assistant_message(cls, content: str) -> "Message":
        return cls(content=content, role=ROLE_ASSISTANT)


__all__ = [
    "Message",
    "ROLE_USER",
    "ROLE_SYSTEM",
    "ROLE_ASSISTANT",
]
