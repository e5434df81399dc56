"""
Shared pydantic base for DeepSeek wire models.

All request/response shapes derive from :class:`WireModel`, which ignores
unknown JSON fields so newer server payloads keep decoding. Python field
names are already snake_case, matching the API's JSON names one-to-one.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Base model: tolerant of unknown fields, snake_case on the wire."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


__all__ = ["WireModel"]
