"""Consumer side of a streaming chat completion.

:class:`ChoiceStream` is the object returned by ``DeepSeekClient.chat_stream``.
It is a lazy, single-pass iterator of :class:`~deepseek_client.models.Choice`
values decoded by a :class:`StreamProducer` thread, and a context manager
that releases the HTTP response on exit.

Termination paths:

* ``[DONE]`` sentinel or end of body -> ``StopIteration``.
* Malformed frame -> :class:`StreamDecodeError` raised from ``next()``.
* Cancellation token fired -> :class:`CancelledError` raised from ``next()``.
* ``close()`` (or garbage collection) before the end -> the reader thread is
  told to stop and the response is closed.
"""
from __future__ import annotations

import logging
import queue
import threading
import time
from typing import Callable, Iterable, Iterator, Optional

import httpx

from ..cancellation import CancellationToken, CancelledError
from ..constants import DEFAULT_STREAM_QUEUE_SIZE
from ..errors import classify_exception
from ..logging import LogContext, get_logger, log_event
from ..models import Choice
from .producer import (
    ITEM_CHOICE,
    ITEM_END,
    ITEM_ERROR,
    ITEM_USAGE,
    POLL_INTERVAL_SECONDS,
    QueueItem,
    StreamProducer,
)
from .stream_metrics import StreamMetrics
from .stream_state import StreamState

_logger = get_logger("streaming")


class ChoiceStream:
    """Cancellable, closeable iterator over streamed choices.

    Parameters
    ----------
    response:
        An ``httpx.Response`` opened with ``stream=True`` and a 2xx status.
    token:
        Optional :class:`CancellationToken`. A private token is created when
        omitted so :meth:`cancel` always works.
    queue_size:
        Capacity of the producer/consumer handoff. ``0`` means unbounded.
    ctx:
        Logging context (model, request id) attached to terminal events.
    """

    def __init__(
        self,
        response: httpx.Response,
        *,
        token: CancellationToken | None = None,
        queue_size: int = DEFAULT_STREAM_QUEUE_SIZE,
        ctx: LogContext | None = None,
    ) -> None:
        if queue_size < 0:
            raise ValueError("queue_size must be >= 0")
        self._response = response
        self._token = token or CancellationToken()
        self._ctx = ctx or LogContext()
        self._items: "queue.Queue[QueueItem]" = queue.Queue(maxsize=queue_size)
        self._stop = threading.Event()
        self._state = StreamState.READING
        self._error: Optional[BaseException] = None
        self._metrics = StreamMetrics()
        self._started = time.perf_counter()
        self._lock = threading.Lock()
        self._producer = StreamProducer(response, self._items, self._stop)
        self._unregister: Callable[[], None] = self._token.register(
            _make_cancel_hook(self._stop, response)
        )
        self._producer.start()

    # Iteration -------------------------------------------------------------
    def __iter__(self) -> Iterator[Choice]:
        return self

    def __next__(self) -> Choice:
        while True:
            if self._state.terminal:
                raise StopIteration
            if self._token.cancelled:
                self._finish(StreamState.CANCELLED)
                raise CancelledError(self._token.reason or "stream cancelled")
            try:
                kind, value = self._items.get(timeout=POLL_INTERVAL_SECONDS)
            except queue.Empty:
                continue
            if kind == ITEM_CHOICE:
                if value.usage is not None:
                    self._metrics.apply_usage(value.usage)
                self._record_emit()
                return value.choice
            if kind == ITEM_USAGE:
                self._metrics.apply_usage(value)
                continue
            if kind == ITEM_END:
                self._finish(value)
                raise StopIteration
            if kind == ITEM_ERROR:
                exc, state = value
                self._error = exc
                self._finish(state, exc)
                raise exc

    # API -------------------------------------------------------------------
    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation; the next ``next()`` raises ``CancelledError``."""
        self._token.cancel(reason)

    def close(self) -> None:
        """Stop reading and release the response. Idempotent."""
        if not self._state.terminal:
            self._finish(StreamState.ABANDONED)
        self._stop.set()
        self._response.close()

    def text(self) -> str:
        """Drain the stream and return the concatenated delta content."""
        return accumulate_content(self)

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def finished(self) -> bool:  # noqa: D401 - short property
        """Whether the stream reached a terminal state."""
        return self._state.terminal

    @property
    def metrics(self) -> StreamMetrics:
        return self._metrics

    @property
    def error(self) -> Optional[BaseException]:
        """Exception that ended the stream, if any."""
        return self._error

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def token(self) -> CancellationToken:
        return self._token

    def __enter__(self) -> "ChoiceStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # The reader thread must not outlive an unreferenced stream.
        unregister = getattr(self, "_unregister", None)
        if unregister is not None:
            unregister()
        stop = getattr(self, "_stop", None)
        if stop is not None:
            stop.set()
            self._response.close()

    # Internals -------------------------------------------------------------
    def _record_emit(self) -> None:
        if self._metrics.emitted == 0:
            self._metrics.time_to_first_choice_ms = _elapsed_ms(self._started)
        self._metrics.emitted += 1

    def _finish(self, state: StreamState, exc: BaseException | None = None) -> None:
        with self._lock:
            if self._state.terminal:
                return
            self._state = state
        self._metrics.total_duration_ms = _elapsed_ms(self._started)
        self._unregister()
        self._stop.set()
        self._response.close()
        fields = self._metrics.to_log_fields()
        if state is StreamState.CANCELLED:
            log_event(_logger, "stream.cancelled", self._ctx, reason=self._token.reason, **fields)
        elif exc is not None:
            log_event(
                _logger,
                "stream.error",
                self._ctx,
                level=logging.WARNING,
                state=state.value,
                error_code=classify_exception(exc).value if isinstance(exc, Exception) else None,
                error=str(exc),
                **fields,
            )
        else:
            log_event(_logger, "stream.end", self._ctx, state=state.value, **fields)


def _make_cancel_hook(stop: threading.Event, response: httpx.Response) -> Callable[[], None]:
    """Build the cancellation callback without capturing the stream object."""

    def _hook() -> None:
        stop.set()
        response.close()

    return _hook


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)


def accumulate_content(choices: Iterable[Choice]) -> str:
    """Concatenate the text of each choice's delta (or message)."""
    parts = []
    for choice in choices:
        msg = choice.content_message
        if msg is not None and msg.content:
            parts.append(msg.content)
    return "".join(parts)


__all__ = ["ChoiceStream", "accumulate_content"]
