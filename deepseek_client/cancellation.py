"""Cooperative cancellation primitives (public API facade).

Concrete implementations live under ``cancellation_parts``.

- ``CancellationToken`` signals cancellation to streaming reads.
- ``CancelledError`` is raised by operations that observe a cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
