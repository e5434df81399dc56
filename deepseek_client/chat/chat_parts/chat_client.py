"""ChatClient Protocol (single-class module).

Capability marker for clients that answer a conversation with one response.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from .chat_client_response import ChatClientResponse
from .chat_message import ChatMessage
from .chat_options import ChatOptions


@runtime_checkable
class ChatClient(Protocol):
    """Blocking chat capability.

    Implementations raise a ``ProviderError`` when no response could be
    obtained; they never return ``None``.
    """

    def get_response(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
    ) -> ChatClientResponse:  # pragma: no cover - interface
        """Send the conversation and return the complete response."""
        ...

    def get_service(self, service_type: type, service_key: Any = None) -> Any:  # pragma: no cover - interface
        """Return an object of ``service_type`` offered by this client, or ``None``."""
        ...
