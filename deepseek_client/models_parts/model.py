"""
Model listing DTOs for ``GET /models``.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .wire_model import WireModel


class Model(WireModel):
    """A single model listing entry."""

    id: Optional[str] = None
    object: Optional[str] = None
    owned_by: Optional[str] = None


class ModelResponse(WireModel):
    """Envelope of the model listing."""

    object: Optional[str] = None
    data: List[Model] = Field(default_factory=list)

    def ids(self) -> List[str]:
        """Return the non-empty model ids in listing order."""
        return [m.id for m in self.data if m.id]


__all__ = ["Model", "ModelResponse"]
