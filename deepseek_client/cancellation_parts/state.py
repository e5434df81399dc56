"""Internal state holder for cancellation tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
import threading
from typing import Optional


@dataclass
class State:
    """Internal state for cooperative cancellation tokens."""

    event: threading.Event = field(default_factory=threading.Event)
    reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self.event.is_set()


__all__ = ["State"]
