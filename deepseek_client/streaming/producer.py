"""Background reader feeding a bounded queue.

The producer thread owns the HTTP response while it runs: it reads lines,
decodes frames and hands the results to the consumer through a bounded
``queue.Queue``. A full queue blocks the producer (backpressure). Every
blocking ``put`` polls the shared stop event, so a consumer that stops
reading never strands the thread.
"""
from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Tuple

import httpx

from ..errors import StreamDecodeError
from ..logging import get_logger, log_event
from .sse import FrameKind, parse_frame
from .stream_state import StreamState

# Queue item tags.
ITEM_CHOICE = "choice"
ITEM_USAGE = "usage"
ITEM_END = "end"
ITEM_ERROR = "error"

POLL_INTERVAL_SECONDS = 0.05

QueueItem = Tuple[str, Any]

_logger = get_logger("streaming")


class StreamProducer(threading.Thread):
    """Daemon thread that turns response lines into queue items.

    The thread holds no reference to the consumer object, only to the queue
    and the stop event, so an abandoned consumer can be garbage collected.
    """

    def __init__(
        self,
        response: httpx.Response,
        items: "queue.Queue[QueueItem]",
        stop: threading.Event,
        *,
        name: str = "deepseek-stream",
    ) -> None:
        super().__init__(name=name, daemon=True)
        self._response = response
        self._items = items
        self._stop_event = stop

    def _put(self, item: QueueItem) -> bool:
        """Blocking put that gives up once the stop event is set."""
        while not self._stop_event.is_set():
            try:
                self._items.put(item, timeout=POLL_INTERVAL_SECONDS)
                return True
            except queue.Full:
                continue
        return False

    def _pump(self) -> None:
        for line in self._response.iter_lines():
            if self._stop_event.is_set():
                return
            frame = parse_frame(line)
            if frame.kind is FrameKind.DONE:
                # Bytes after the sentinel are never read.
                self._put((ITEM_END, StreamState.DONE_SENTINEL))
                return
            if frame.usage is not None and frame.kind is FrameKind.SKIP:
                if not self._put((ITEM_USAGE, frame.usage)):
                    return
                continue
            if frame.kind is FrameKind.CHOICE and not self._put((ITEM_CHOICE, frame)):
                return
        self._put((ITEM_END, StreamState.EOF))

    def run(self) -> None:
        try:
            self._pump()
        except StreamDecodeError as exc:
            self._put((ITEM_ERROR, (exc, StreamState.DECODE_ERROR)))
        except Exception as exc:  # transport failures surface on the consumer
            if self._stop_event.is_set():
                # Response was closed under us by close() or cancellation.
                log_event(_logger, "stream.reader.stopped", level=logging.DEBUG, error_type=type(exc).__name__)
            else:
                self._put((ITEM_ERROR, (exc, StreamState.TRANSPORT_ERROR)))
        finally:
            self._response.close()


__all__ = [
    "StreamProducer",
    "QueueItem",
    "ITEM_CHOICE",
    "ITEM_USAGE",
    "ITEM_END",
    "ITEM_ERROR",
    "POLL_INTERVAL_SECONDS",
]
