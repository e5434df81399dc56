"""Structured logging context object.

Defines :class:`LogContext`, a dataclass carrying the common fields of client
log events (provider, model, request/response ids, extra metadata).
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional

from ..constants import PROVIDER_NAME


@dataclass
class LogContext:
    """Structured context for client logging events."""

    provider: Optional[str] = PROVIDER_NAME
    model: Optional[str] = None
    request_id: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten ``extra`` into the payload and drop ``None`` values."""
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
