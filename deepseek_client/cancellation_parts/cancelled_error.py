"""Cancellation error type.

Defines the public ``CancelledError`` raised when an operation observes a
cancellation request.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinguishes cooperative cancellation from other runtime failures so
    callers can handle it separately (e.g., suppress log noise).
    """


__all__ = ["CancelledError"]
