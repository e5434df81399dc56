"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `deepseek_client.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError, StreamDecodeError
from .classification import classify_exception, classify_status

__all__ = ["ErrorCode", "ProviderError", "StreamDecodeError", "classify_exception", "classify_status"]
