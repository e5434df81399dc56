"""
Structured error exception types.

`ProviderError` wraps a failure with a normalized `ErrorCode`. Transport
failures are *recorded* as `ProviderError` instances on the client (never
raised); decode failures are raised as the `StreamDecodeError` subclass.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..constants import PROVIDER_NAME
from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated.
        model: Optional model name associated with the failure.
        status_code: HTTP status when the failure came from a response.
        body: Raw response body text for HTTP failures.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str = PROVIDER_NAME
    model: Optional[str] = None
    status_code: Optional[int] = None
    body: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class StreamDecodeError(ProviderError):
    """Raised when a response body or SSE frame is not valid JSON.

    Attributes:
        frame: The offending (prefix-stripped) frame text, if known.
    """

    code: ErrorCode = ErrorCode.DECODE
    message: str = "malformed JSON payload"
    frame: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError", "StreamDecodeError"]
