"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``deepseek_client.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError, StreamDecodeError
from .errors_parts.classification import classify_exception, classify_status

__all__ = ["ErrorCode", "ProviderError", "StreamDecodeError", "classify_exception", "classify_status"]
