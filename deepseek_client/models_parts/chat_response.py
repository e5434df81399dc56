"""
ChatResponse DTO: body of a blocking completion and of every SSE frame.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from .choice import Choice
from .usage import Usage
from .wire_model import WireModel


class ChatResponse(WireModel):
    """Decoded ``chat.completion`` / ``chat.completion.chunk`` object.

    Attributes:
        id: Server-assigned completion id.
        object: Object type tag.
        model: Model that produced the completion.
        created: Creation time in unix seconds.
        choices: Candidate outputs in server order.
        usage: Token counters; present on blocking responses and on the last
            streaming frame.
        system_fingerprint: Backend configuration fingerprint.
    """

    id: str = ""
    object: Optional[str] = None
    model: str = ""
    created: int = 0
    choices: List[Choice] = Field(default_factory=list)
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None

    @field_validator("choices", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def first_choice(self) -> Optional[Choice]:
        """Return ``choices[0]`` or ``None`` when there are no choices."""
        return self.choices[0] if self.choices else None


__all__ = ["ChatResponse"]
