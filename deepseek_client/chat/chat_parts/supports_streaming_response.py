"""SupportsStreamingResponse Protocol (single-class module).

Capability marker for clients that stream partial responses.
"""
from __future__ import annotations

from typing import Iterator, Optional, Protocol, Sequence, runtime_checkable

from ...cancellation import CancellationToken
from .chat_message import ChatMessage
from .chat_options import ChatOptions
from .chat_response_update import ChatResponseUpdate


@runtime_checkable
class SupportsStreamingResponse(Protocol):
    """Streaming chat capability.

    Updates are yielded lazily in server order. Cancelling the token ends
    iteration with ``CancelledError``; closing the iterator early releases
    the underlying connection.
    """

    def get_streaming_response(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Iterator[ChatResponseUpdate]:  # pragma: no cover - interface
        """Stream the answer as :class:`ChatResponseUpdate` values."""
        ...
