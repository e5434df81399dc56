"""DeepSeek HTTP client.

``DeepSeekClient`` wraps one long-lived ``httpx.Client`` and exposes the three
API operations (model listing, blocking chat, streaming chat).

Failure policy:
- Non-2xx responses are never raised. The call returns ``None`` and the
  failure is recorded in :attr:`DeepSeekClient.error_message`
  (``"HTTP {status}: {body}"``) and :attr:`DeepSeekClient.last_error`.
  Both are a single shared slot; concurrent failing calls overwrite each
  other and the last writer wins.
- Malformed JSON bodies raise :class:`StreamDecodeError`.
- Network exceptions raised by ``httpx`` propagate unchanged.

Streaming:
- ``chat_stream`` returns a :class:`ChoiceStream` backed by a background
  reader thread; see :mod:`deepseek_client.streaming`.
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from .cancellation import CancellationToken
from .config import get_client_config
from .constants import (
    BASE_ADDRESS,
    COMPLETION_ENDPOINT,
    DEFAULT_STREAM_QUEUE_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
    MODELS_ENDPOINT,
)
from .errors import ProviderError, StreamDecodeError, classify_status
from .http import build_http_client, configure_http_client
from .logging import LogContext, get_logger, log_event
from .models import ChatRequest, ChatResponse, ModelResponse
from .streaming import ChoiceStream
from .streaming.sse import decode_chat_response

_logger = get_logger("client")


class DeepSeekClient:
    """Synchronous client for the DeepSeek chat completion API.

    Parameters
    ----------
    api_key:
        Bearer token sent with every request. Must be non-empty.
    base_url:
        API root; defaults to ``https://api.deepseek.com``.
    timeout:
        Request timeout in seconds; defaults to 60.
    http_client:
        Optional caller-owned ``httpx.Client``. It is pointed at ``base_url``
        and given the auth header, and is left open by :meth:`close` unless
        ``owns_client`` is set.
    stream_queue_size:
        Capacity of the per-stream handoff queue (``0`` for unbounded).
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
        owns_client: bool = False,
        stream_queue_size: int = DEFAULT_STREAM_QUEUE_SIZE,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ValueError("api_key must be a non-empty string")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be greater than zero")
        if stream_queue_size < 0:
            raise ValueError("stream_queue_size must be >= 0")
        self._base_url = base_url or BASE_ADDRESS
        self._stream_queue_size = stream_queue_size
        self._error_message: Optional[str] = None
        self._last_error: Optional[ProviderError] = None
        self._closed = False
        if http_client is None:
            self._timeout = float(timeout or DEFAULT_TIMEOUT_SECONDS)
            self._client = build_http_client(self._base_url, api_key, self._timeout)
            self._owns_client = True
        else:
            self._client = configure_http_client(http_client, self._base_url, api_key)
            self._owns_client = owns_client
            if timeout is not None:
                self._client.timeout = httpx.Timeout(timeout)
            self._timeout = float(self._client.timeout.read or timeout or DEFAULT_TIMEOUT_SECONDS)

    @classmethod
    def from_config(cls, overrides: Optional[Dict[str, Any]] = None, **kwargs: Any) -> "DeepSeekClient":
        """Build a client from :func:`get_client_config` (defaults, file, env, overrides).

        Extra keyword arguments (``http_client``, ``owns_client``) are passed
        through to the constructor.
        """
        cfg = get_client_config(overrides)
        return cls(
            cfg.get("api_key"),
            base_url=cfg["base_url"],
            timeout=cfg["timeout"],
            stream_queue_size=cfg["stream_queue_size"],
            **kwargs,
        )

    # ----- Properties -----
    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        """Current request timeout in seconds."""
        return self._timeout

    @property
    def error_message(self) -> Optional[str]:
        """Last recorded transport failure as ``"HTTP {status}: {body}"``."""
        return self._error_message

    @property
    def last_error(self) -> Optional[ProviderError]:
        """Structured form of :attr:`error_message`."""
        return self._last_error

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def set_timeout(self, seconds: float) -> None:
        """Set the request timeout. ``seconds <= 0`` raises ``ValueError``."""
        if seconds is None or seconds <= 0:
            raise ValueError("timeout must be greater than zero")
        self._client.timeout = httpx.Timeout(seconds)
        self._timeout = float(seconds)

    # ----- Operations -----
    def list_models(self) -> Optional[ModelResponse]:
        """``GET /models``; ``None`` on a non-2xx status."""
        ctx = LogContext(request_id=_new_request_id())
        log_event(_logger, "models.start", ctx)
        started = time.perf_counter()
        response = self._client.get(MODELS_ENDPOINT)
        if not response.is_success:
            self._record_error(response, ctx, "models.error")
            return None
        result = _decode_models(response.content)
        log_event(
            _logger,
            "models.end",
            ctx,
            count=len(result.data),
            duration_ms=_elapsed_ms(started),
        )
        return result

    def chat(self, request: ChatRequest) -> Optional[ChatResponse]:
        """Blocking completion (``stream`` forced to ``False``); ``None`` on failure."""
        payload = request.to_payload(stream=False)
        ctx = LogContext(model=request.model, request_id=_new_request_id())
        log_event(_logger, "chat.start", ctx, messages=len(request.messages), stream=False)
        started = time.perf_counter()
        response = self._client.post(COMPLETION_ENDPOINT, json=payload)
        if not response.is_success:
            self._record_error(response, ctx, "chat.error")
            return None
        result = decode_chat_response(response.content)
        ctx.response_id = result.id or None
        first = result.first_choice()
        log_event(
            _logger,
            "chat.end",
            ctx,
            finish_reason=first.finish_reason if first else None,
            total_tokens=result.usage.total_tokens if result.usage else None,
            duration_ms=_elapsed_ms(started),
        )
        return result

    def chat_stream(
        self,
        request: ChatRequest,
        cancellation_token: CancellationToken | None = None,
    ) -> Optional[ChoiceStream]:
        """Streaming completion (``stream`` forced to ``True``).

        Returns a :class:`ChoiceStream` once response headers arrive with a
        2xx status. On a non-2xx status the error body is read in full,
        recorded, the response is closed and ``None`` is returned.

        Raises:
            CancelledError: ``cancellation_token`` was cancelled before send.
        """
        if cancellation_token is not None:
            cancellation_token.raise_if_cancelled()
        payload = request.to_payload(stream=True)
        ctx = LogContext(model=request.model, request_id=_new_request_id())
        http_request = self._client.build_request(
            "POST",
            COMPLETION_ENDPOINT,
            json=payload,
            headers={"Accept": "text/event-stream"},
        )
        response = self._client.send(http_request, stream=True)
        if not response.is_success:
            try:
                response.read()
                self._record_error(response, ctx, "stream.error")
            finally:
                response.close()
            return None
        log_event(_logger, "stream.start", ctx, messages=len(request.messages), stream=True)
        return ChoiceStream(
            response,
            token=cancellation_token,
            queue_size=self._stream_queue_size,
            ctx=ctx,
        )

    # ----- Lifecycle -----
    def close(self) -> None:
        """Release the owned ``httpx.Client``. Idempotent."""
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "DeepSeekClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ----- helpers -----
    def _record_error(self, response: httpx.Response, ctx: LogContext, event: str) -> None:
        body = response.text
        message = f"HTTP {response.status_code}: {body}"
        code = classify_status(response.status_code)
        self._error_message = message
        self._last_error = ProviderError(
            code=code,
            message=message,
            model=ctx.model,
            status_code=response.status_code,
            body=body,
        )
        log_event(
            _logger,
            event,
            ctx,
            level=logging.WARNING,
            status_code=response.status_code,
            error_code=code.value,
        )

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"DeepSeekClient(base_url={self._base_url!r}, timeout={self._timeout!r})"


def _decode_models(content: bytes) -> ModelResponse:
    try:
        return ModelResponse.model_validate_json(content)
    except ValidationError as exc:
        raise StreamDecodeError(
            message="malformed JSON payload: model listing",
            frame=content.decode("utf-8", "replace"),
            raw=exc,
        ) from exc


def _new_request_id() -> str:
    return uuid.uuid4().hex[:16]


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 3)


__all__ = ["DeepSeekClient"]
