"""Unit tests for the wire DTOs (construction, validation, serialization)."""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from deepseek_client.models import (
    ChatRequest,
    ChatResponse,
    Choice,
    Message,
    ModelResponse,
    Usage,
)

from .helpers import completion


def test_message_factories_fix_roles():
    assert Message.new_user_message("hi").role == "user"  # nosec B101 - pytest assert in tests
    assert Message.new_system_message("be brief").role == "system"  # nosec B101 - pytest assert in tests
    assert Message.new_assistant_message("ok").role == "assistant"  # nosec B101 - pytest assert in tests


def test_message_is_immutable():
    msg = Message.new_user_message("hi")
    with pytest.raises(ValidationError):
        msg.content = "changed"  # type: ignore[misc]


def test_message_null_content_decodes_as_empty():
    msg = Message.model_validate({"role": "assistant", "content": None})
    assert msg.content == ""
    assert msg.reasoning_content is None


def test_request_defaults():
    req = ChatRequest()
    assert req.messages == []
    assert req.max_tokens == 4096
    assert req.temperature == 1.0 and req.top_p == 1.0
    assert req.frequency_penalty == 0.0 and req.presence_penalty == 0.0
    assert req.logprobs is False and req.top_logprobs is None
    assert req.stream is False


def test_stream_is_not_a_constructor_field():
    req = ChatRequest(stream=True)  # unknown keys are ignored
    assert req.stream is False
    payload = req.to_payload(stream=True)
    assert payload["stream"] is True and req.stream is True
    payload = req.to_payload(stream=False)
    assert payload["stream"] is False and req.stream is False


def test_payload_omits_unset_optionals_and_uses_snake_case():
    req = ChatRequest(messages=[Message.new_user_message("hi")], model="deepseek-chat")
    payload = req.to_payload(stream=False)
    assert "top_logprobs" not in payload
    assert payload["max_tokens"] == 4096
    assert payload["messages"] == [{"content": "hi", "role": "user"}]
    # round-trips through JSON without custom encoders
    assert json.loads(json.dumps(payload))["model"] == "deepseek-chat"


@pytest.mark.parametrize(
    "field,value",
    [
        ("frequency_penalty", 2.5),
        ("presence_penalty", -2.1),
        ("temperature", 2.01),
        ("top_p", 1.5),
        ("max_tokens", 0),
        ("top_logprobs", 21),
    ],
)
def test_request_rejects_out_of_range_values(field, value):
    with pytest.raises(ValueError):
        ChatRequest(**{field: value})


def test_request_accepts_at_most_four_stop_sequences():
    ChatRequest(stop=["a", "b", "c", "d"])
    with pytest.raises(ValidationError):
        ChatRequest(stop=["a", "b", "c", "d", "e"])


def test_top_logprobs_without_logprobs_is_reported_not_rejected():
    req = ChatRequest(top_logprobs=5)
    assert req.has_consistent_logprobs() is False
    assert ChatRequest(logprobs=True, top_logprobs=5).has_consistent_logprobs() is True
    assert ChatRequest().has_consistent_logprobs() is True


def test_response_decodes_and_ignores_unknown_fields():
    body = completion("Hi there")
    body["unexpected"] = {"nested": True}
    body["choices"][0]["message"]["tool_calls"] = []
    resp = ChatResponse.model_validate(body)
    first = resp.first_choice()
    assert first is not None and first.message is not None
    assert first.message.content == "Hi there"
    assert first.finish_reason == "stop"
    assert resp.usage is not None and resp.usage.is_consistent()
    assert resp.usage.prompt_cache_hit_tokens == 4


def test_first_choice_is_none_without_choices():
    assert ChatResponse.model_validate({"id": "x", "choices": []}).first_choice() is None
    assert ChatResponse().first_choice() is None


def test_usage_total_is_not_recomputed():
    usage = Usage(prompt_tokens=3, completion_tokens=4, total_tokens=9)
    assert usage.total_tokens == 9
    assert usage.is_consistent() is False


def test_content_message_prefers_delta():
    choice = Choice.model_validate(
        {"delta": {"content": "d"}, "message": {"content": "m", "role": "assistant"}}
    )
    assert choice.content_message is not None and choice.content_message.content == "d"
    assert Choice().content_message is None


def test_reasoning_content_is_decoded():
    choice = Choice.model_validate(
        {"message": {"role": "assistant", "content": "42", "reasoning_content": "thinking"}}
    )
    assert choice.message is not None and choice.message.reasoning_content == "thinking"


def test_logprobs_decode():
    choice = Choice.model_validate(
        {
            "delta": {"content": "Hi"},
            "logprobs": {
                "content": [
                    {
                        "token": "Hi",
                        "logprob": -0.1,
                        "bytes": [72, 105],
                        "top_logprobs": [{"token": "Hi", "logprob": -0.1, "bytes": [72, 105]}],
                    }
                ]
            },
        }
    )
    assert choice.logprobs is not None
    entry = choice.logprobs.content[0]
    assert entry.token == "Hi" and entry.bytes == [72, 105]
    assert entry.top_logprobs[0].logprob == pytest.approx(-0.1)


def test_model_listing_ids():
    listing = ModelResponse.model_validate(
        {
            "object": "list",
            "data": [
                {"id": "deepseek-chat", "object": "model", "owned_by": "deepseek"},
                {"id": "deepseek-reasoner", "object": "model", "owned_by": "deepseek"},
            ],
        }
    )
    assert listing.ids() == ["deepseek-chat", "deepseek-reasoner"]
