"""
Vendor-neutral chat abstraction and the DeepSeek adapter.

Re-exports the one-class-per-file types under ``deepseek_client.chat.chat_parts``
so callers import from a single stable path.
"""

from __future__ import annotations

from .chat_parts import (
    ChatClient,
    ChatClientMetadata,
    ChatClientResponse,
    ChatFinishReason,
    ChatMessage,
    ChatOptions,
    ChatResponseUpdate,
    ChatRole,
    SupportsStreamingResponse,
    UsageDetails,
)
from .adapter import DeepSeekChatClient

__all__ = [
    "ChatClient",
    "ChatClientMetadata",
    "ChatClientResponse",
    "ChatFinishReason",
    "ChatMessage",
    "ChatOptions",
    "ChatResponseUpdate",
    "ChatRole",
    "SupportsStreamingResponse",
    "UsageDetails",
    "DeepSeekChatClient",
]
