"""Translation between DeepSeek wire models and the vendor-neutral chat types.

Role rules:
- Outgoing: ``user``/``assistant``/``system`` map to their wire strings; any
  other role (``tool``) is dropped, as are messages with blank text.
- Incoming: ``"user"`` -> USER, ``"system"`` -> SYSTEM, anything else
  (including a missing role) -> ASSISTANT.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from ..models import (
    ROLE_ASSISTANT,
    ROLE_SYSTEM,
    ROLE_USER,
    ChatRequest,
    ChatResponse,
    Choice,
    Message,
    Usage,
)
from .chat_parts import (
    ChatClientResponse,
    ChatFinishReason,
    ChatMessage,
    ChatOptions,
    ChatResponseUpdate,
    ChatRole,
    UsageDetails,
)

_OUTGOING_ROLES: Dict[ChatRole, str] = {
    ChatRole.USER: ROLE_USER,
    ChatRole.ASSISTANT: ROLE_ASSISTANT,
    ChatRole.SYSTEM: ROLE_SYSTEM,
}

# (ChatOptions attribute, ChatRequest field)
_OPTION_FIELDS = (
    ("model_id", "model"),
    ("frequency_penalty", "frequency_penalty"),
    ("presence_penalty", "presence_penalty"),
    ("max_output_tokens", "max_tokens"),
    ("stop_sequences", "stop"),
    ("temperature", "temperature"),
    ("top_p", "top_p"),
)


def role_from_wire(role: Optional[str]) -> ChatRole:
    if role == ROLE_USER:
        return ChatRole.USER
    if role == ROLE_SYSTEM:
        return ChatRole.SYSTEM
    return ChatRole.ASSISTANT


def to_request_messages(messages: Sequence[ChatMessage]) -> List[Message]:
    out: List[Message] = []
    for msg in messages:
        role = _OUTGOING_ROLES.get(msg.role)
        if role is None or not msg.text or not msg.text.strip():
            continue
        out.append(Message(role=role, content=msg.text))
    return out


def build_request(
    messages: Sequence[ChatMessage],
    options: Optional[ChatOptions] = None,
    default_model: Optional[str] = None,
) -> ChatRequest:
    """Build a validated ``ChatRequest``; only non-``None`` options override defaults.

    Raises:
        ValueError: an option is outside the accepted range.
    """
    fields: Dict[str, Any] = {"messages": to_request_messages(messages)}
    if default_model:
        fields["model"] = default_model
    if options is None:
        return ChatRequest(**fields)
    for attr, key in _OPTION_FIELDS:
        value = getattr(options, attr)
        if value is not None:
            fields[key] = list(value) if key == "stop" else value
    extras = options.additional_properties or {}
    logprobs = extras.get("logprobs")
    if isinstance(logprobs, bool):
        fields["logprobs"] = logprobs
    top_logprobs = extras.get("top_logprobs")
    if isinstance(top_logprobs, int) and not isinstance(top_logprobs, bool):
        fields["top_logprobs"] = top_logprobs
    return ChatRequest(**fields)


def _choice_properties(choice: Choice, message: Optional[Message]) -> Dict[str, Any]:
    props: Dict[str, Any] = {}
    if choice.logprobs is not None:
        props["logprobs"] = choice.logprobs
    if message is not None and message.reasoning_content:
        props["reasoning_content"] = message.reasoning_content
    return props


def to_chat_message(choice: Choice) -> ChatMessage:
    message = choice.content_message
    return ChatMessage(
        role=role_from_wire(message.role if message else None),
        text=message.content if message else "",
        raw_representation=choice,
        additional_properties=_choice_properties(choice, message),
    )


def to_usage_details(usage: Optional[Usage]) -> Optional[UsageDetails]:
    if usage is None:
        return None
    return UsageDetails(
        input_token_count=usage.prompt_tokens,
        output_token_count=usage.completion_tokens,
        total_token_count=usage.total_tokens,
        additional_counts={
            "prompt_cache_hit_tokens": usage.prompt_cache_hit_tokens,
            "prompt_cache_miss_tokens": usage.prompt_cache_miss_tokens,
        },
    )


def to_client_response(response: ChatResponse) -> ChatClientResponse:
    """Map a blocking ``ChatResponse``; only the first choice is used."""
    first = response.first_choice()
    return ChatClientResponse(
        messages=[to_chat_message(first)] if first is not None else [],
        response_id=response.id or None,
        model_id=response.model or None,
        created_at=datetime.fromtimestamp(response.created, tz=timezone.utc),
        finish_reason=ChatFinishReason.parse(first.finish_reason) if first is not None else None,
        usage=to_usage_details(response.usage),
        raw_representation=response,
    )


def to_update(choice: Choice, response_id: str) -> ChatResponseUpdate:
    message = choice.content_message
    return ChatResponseUpdate(
        role=role_from_wire(message.role if message else None),
        text=message.content if message else "",
        finish_reason=ChatFinishReason.parse(choice.finish_reason),
        response_id=response_id,
        raw_representation=choice,
        additional_properties=_choice_properties(choice, message),
    )


__all__ = [
    "role_from_wire",
    "to_request_messages",
    "build_request",
    "to_chat_message",
    "to_usage_details",
    "to_client_response",
    "to_update",
]
