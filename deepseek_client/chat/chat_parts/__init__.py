"""Chat parts package public surface.

`deepseek_client.chat` remains the primary stable import path.
"""

from .chat_role import ChatRole
from .chat_finish_reason import ChatFinishReason
from .chat_message import ChatMessage
from .chat_options import ChatOptions
from .usage_details import UsageDetails
from .chat_client_response import ChatClientResponse
from .chat_response_update import ChatResponseUpdate
from .chat_client_metadata import ChatClientMetadata
from .chat_client import ChatClient
from .supports_streaming_response import SupportsStreamingResponse

__all__ = [
    "ChatRole",
    "ChatFinishReason",
    "ChatMessage",
    "ChatOptions",
    "UsageDetails",
    "ChatClientResponse",
    "ChatResponseUpdate",
    "ChatClientMetadata",
    "ChatClient",
    "SupportsStreamingResponse",
]
