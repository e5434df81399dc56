"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used to stop streaming reads early.
Observers either poll (``cancelled`` / ``raise_if_cancelled``), block with a
timeout (``wait``), or register a callback that runs once on cancellation.
"""

from __future__ import annotations

from contextlib import suppress
from threading import Lock
from typing import Callable, List

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """A thread-safe cooperative cancellation token with cascading children.

    Child tokens inherit cancellation when the parent is cancelled. Callbacks
    registered with :meth:`register` run exactly once, on the cancelling
    thread, or immediately when registered on an already-cancelled token.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        self._callbacks: List[Callable[[], None]] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation, run callbacks and cascade to children. Idempotent."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.reason = reason
            self._state.event.set()
            children = list(self._children)
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        for cb in callbacks:
            # Callbacks are cleanup hooks; one failing must not block the rest.
            with suppress(Exception):
                cb()
        for child in children:
            child.cancel(reason)

    def register(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register ``callback`` to run on cancellation.

        Returns a zero-argument function that unregisters the callback.
        """
        with self._lock:
            if not self._state.cancelled:
                self._callbacks.append(callback)

                def _unregister() -> None:
                    with self._lock, suppress(ValueError):
                        self._callbacks.remove(callback)

                return _unregister
        callback()
        return lambda: None

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return ``cancelled``."""
        return self._state.event.wait(timeout)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if the token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
