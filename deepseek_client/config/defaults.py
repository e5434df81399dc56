"""deepseek_client.config.defaults
===============================

Central place for small, stable default values used by the client. These
defaults can be overridden via environment variables or an external
configuration file, but provide sensible fallbacks for local development and
tests.

This module intentionally avoids importing from other packages of the
library to prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

from ..constants import (
    BASE_ADDRESS,
    DEFAULT_STREAM_QUEUE_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
    MODEL_CHAT,
)

# Base URL used when neither config file nor env provide one.
DEEPSEEK_DEFAULT_BASE_URL = BASE_ADDRESS

# Model selected by the generic chat adapter when options carry no model id.
DEEPSEEK_DEFAULT_MODEL = MODEL_CHAT

# Request timeout (seconds) applied to clients the library constructs itself.
DEEPSEEK_DEFAULT_TIMEOUT = DEFAULT_TIMEOUT_SECONDS

# Bounded handoff capacity between the stream producer and its consumer.
DEEPSEEK_DEFAULT_STREAM_QUEUE_SIZE = DEFAULT_STREAM_QUEUE_SIZE


__all__ = [
    "DEEPSEEK_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_TIMEOUT",
    "DEEPSEEK_DEFAULT_STREAM_QUEUE_SIZE",
]
