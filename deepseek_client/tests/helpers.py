"""Builders for wire payloads and SSE bodies used across the tests."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Iterator, List, Optional

API_KEY = "sk-unit-key"  # pragma: allowlist secret - fake key for mock transport


def chunk(
    content: Optional[str] = None,
    *,
    role: Optional[str] = None,
    finish_reason: Optional[str] = None,
    index: int = 0,
    **extra: Any,
) -> Dict[str, Any]:
    """Return a ``chat.completion.chunk`` object with a single delta choice."""
    delta: Dict[str, Any] = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    body: Dict[str, Any] = {
        "id": "chatcmpl-1",
        "object": "chat.completion.chunk",
        "created": 1_700_000_000,
        "model": "deepseek-chat",
        "choices": [{"index": index, "delta": delta, "finish_reason": finish_reason}],
    }
    body.update(extra)
    return body


def completion(
    content: str = "Hello!",
    *,
    role: str = "assistant",
    finish_reason: str = "stop",
    usage: Optional[Dict[str, int]] = None,
) -> Dict[str, Any]:
    """Return a blocking ``chat.completion`` object."""
    return {
        "id": "chatcmpl-42",
        "object": "chat.completion",
        "created": 1_700_000_000,
        "model": "deepseek-chat",
        "system_fingerprint": "fp_1",
        "choices": [
            {
                "index": 0,
                "message": {"role": role, "content": content},
                "finish_reason": finish_reason,
                "logprobs": None,
            }
        ],
        "usage": usage
        or {
            "prompt_tokens": 10,
            "completion_tokens": 5,
            "total_tokens": 15,
            "prompt_cache_hit_tokens": 4,
            "prompt_cache_miss_tokens": 6,
        },
    }


def data_line(obj: Any) -> str:
    payload = obj if isinstance(obj, str) else json.dumps(obj)
    return f"data: {payload}\n\n"


def sse_body(frames: Iterable[Any], *, done: bool = True) -> bytes:
    """Encode frames as an SSE body, optionally terminated by ``[DONE]``."""
    text = "".join(data_line(f) for f in frames)
    if done:
        text += "data: [DONE]\n\n"
    return text.encode("utf-8")


def split_chunks(body: bytes, size: int) -> List[bytes]:
    """Cut ``body`` into fixed-size pieces so lines straddle chunk boundaries."""
    return [body[i : i + size] for i in range(0, len(body), size)]


def iter_chunks(chunks: Iterable[bytes]) -> Iterator[bytes]:
    yield from chunks
