"""Models parts package public surface.

`deepseek_client.models` remains the primary stable import path.
"""

from .wire_model import WireModel
from .message import Message, ROLE_ASSISTANT, ROLE_SYSTEM, ROLE_USER
from .chat_request import ChatRequest
from .logprobs import LogprobContent, Logprobs, TopLogprob
from .usage import Usage
from .choice import Choice
from .chat_response import ChatResponse
from .model import Model, ModelResponse

__all__ = [
    "WireModel",
    "Message",
    "ROLE_USER",
    "ROLE_SYSTEM",
    "ROLE_ASSISTANT",
    "ChatRequest",
    "TopLogprob",
    "LogprobContent",
    "Logprobs",
    "Usage",
    "Choice",
    "ChatResponse",
    "Model",
    "ModelResponse",
]
