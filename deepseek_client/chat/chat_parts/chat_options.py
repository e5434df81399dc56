"""
Vendor-neutral per-call options.

Every field is optional; ``None`` means "keep the request default".
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ChatOptions:
    """Options applied on top of a default ``ChatRequest``.

    ``additional_properties`` carries vendor switches; the DeepSeek adapter
    reads ``"logprobs"`` (bool) and ``"top_logprobs"`` (int).
    """

    model_id: Optional[str] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    max_output_tokens: Optional[int] = None
    stop_sequences: Optional[List[str]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    additional_properties: Dict[str, Any] = field(default_factory=dict)


__all__ = ["ChatOptions"]
