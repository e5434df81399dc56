"""Descriptive metadata exposed through ``get_service``."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ChatClientMetadata:
    provider_name: str
    provider_uri: Optional[str] = None
    default_model_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ChatClientMetadata"]
