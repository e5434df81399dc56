"""DeepSeekChatClient: vendor-neutral chat surface over ``DeepSeekClient``.

The wrapped client reports transport failures by returning ``None``; this
adapter turns that into a raised :class:`ProviderError` so callers of the
neutral protocols always get either a response or an exception.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Iterator, Optional, Sequence

from ..cancellation import CancellationToken
from ..client import DeepSeekClient
from ..config.defaults import DEEPSEEK_DEFAULT_MODEL
from ..constants import PROVIDER_NAME
from ..errors import ErrorCode, ProviderError
from ..logging import LogContext, get_logger, log_event
from .chat_parts import (
    ChatClientMetadata,
    ChatClientResponse,
    ChatMessage,
    ChatOptions,
    ChatResponseUpdate,
)
from .mapping import build_request, to_client_response, to_update

_FAILURE_PREFIX = "Failed to get response"


class DeepSeekChatClient:
    """Implements ``ChatClient`` and ``SupportsStreamingResponse`` for DeepSeek.

    Parameters:
        client: The transport client. It is shared, not owned, unless
            ``owns_client`` is set.
        model: Default model id used when options carry none. Falls back to
            ``deepseek-chat``, so every request names a model explicitly
            instead of leaving it to the server.
    """

    def __init__(
        self,
        client: DeepSeekClient,
        model: Optional[str] = None,
        *,
        owns_client: bool = False,
    ) -> None:
        self._client = client
        self._model = model or DEEPSEEK_DEFAULT_MODEL
        self._owns_client = owns_client
        self._logger = get_logger("chat")
        self._metadata = ChatClientMetadata(
            provider_name=PROVIDER_NAME,
            provider_uri=client.base_url,
            default_model_id=self._model,
        )

    @property
    def metadata(self) -> ChatClientMetadata:
        return self._metadata

    @property
    def client(self) -> DeepSeekClient:
        return self._client

    def get_response(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
    ) -> ChatClientResponse:
        """Blocking chat. Raises ``ProviderError`` when the call failed."""
        request = build_request(messages, options, self._model)
        response = self._client.chat(request)
        if response is None:
            raise self._failure(request.model)
        return to_client_response(response)

    def get_streaming_response(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Iterator[ChatResponseUpdate]:
        """Stream updates lazily; every update carries the same fresh response id.

        Closing the returned generator closes the underlying stream.
        """
        request = build_request(messages, options, self._model)
        stream = self._client.chat_stream(request, cancellation_token)
        if stream is None:
            raise self._failure(request.model)
        response_id = uuid.uuid4().hex
        with stream:
            for choice in stream:
                yield to_update(choice, response_id)

    def get_service(self, service_type: type, service_key: Any = None) -> Any:
        """Return metadata, this adapter, or ``None``.

        Keyed lookups are not supported; any non-``None`` key yields ``None``.
        """
        if service_key is not None:
            return None
        if service_type is ChatClientMetadata:
            return self._metadata
        if isinstance(service_type, type) and isinstance(self, service_type):
            return self
        return None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "DeepSeekChatClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _failure(self, model: Optional[str]) -> ProviderError:
        message = self._client.error_message
        last = self._client.last_error
        err = ProviderError(
            code=last.code if last is not None else ErrorCode.UNKNOWN,
            message=f"{_FAILURE_PREFIX}: {message}" if message else _FAILURE_PREFIX,
            model=model,
            status_code=last.status_code if last is not None else None,
            body=last.body if last is not None else None,
            raw=last,
        )
        log_event(
            self._logger,
            "chat.adapter.error",
            LogContext(model=model),
            level=logging.WARNING,
            error_code=err.code.value,
            status_code=err.status_code,
        )
        return err


__all__ = ["DeepSeekChatClient"]
