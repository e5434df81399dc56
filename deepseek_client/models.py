"""
Wire-level DTOs (pydantic models) public surface.

Re-exports the one-class-per-file implementations under
``deepseek_client.models_parts``.
"""

from .models_parts import (
    ChatRequest,
    ChatResponse,
    Choice,
    LogprobContent,
    Logprobs,
    Message,
    Model,
    ModelResponse,
    ROLE_ASSISTANT,
    ROLE_SYSTEM,
    ROLE_USER,
    TopLogprob,
    Usage,
    WireModel,
)

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
