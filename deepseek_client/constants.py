"""Stable wire-level constants for the DeepSeek API.

Endpoints are relative to :data:`BASE_ADDRESS`; the HTTP client is created
with that base URL so call sites only pass the path.
"""

from __future__ import annotations

# Base domain for API requests.
BASE_ADDRESS = "https://api.deepseek.com"

# Chat completions endpoint (blocking and SSE streaming).
COMPLETION_ENDPOINT = "/chat/completions"

# Model listing endpoint.
MODELS_ENDPOINT = "/models"

# SSE field prefix and end-of-stream sentinel payload.
SSE_DATA_PREFIX = "data:"
STREAM_DONE_SIGN = "[DONE]"

# Published model identifiers.
MODEL_CHAT = "deepseek-chat"
MODEL_REASONER = "deepseek-reasoner"

PROVIDER_NAME = "deepseek"

DEFAULT_TIMEOUT_SECONDS = 60.0

# Capacity of the producer -> consumer handoff queue used for streaming.
DEFAULT_STREAM_QUEUE_SIZE = 64


__all__ = [
    "BASE_ADDRESS",
    "COMPLETION_ENDPOINT",
    "MODELS_ENDPOINT",
    "SSE_DATA_PREFIX",
    "STREAM_DONE_SIGN",
    "MODEL_CHAT",
    "MODEL_REASONER",
    "PROVIDER_NAME",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_STREAM_QUEUE_SIZE",
]
