"""Vendor-neutral chat roles."""
from __future__ import annotations

from enum import Enum


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


__all__ = ["ChatRole"]
