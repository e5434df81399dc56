"""Vendor-neutral token usage."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class UsageDetails:
    input_token_count: Optional[int] = None
    output_token_count: Optional[int] = None
    total_token_count: Optional[int] = None
    additional_counts: Dict[str, int] = field(default_factory=dict)


__all__ = ["UsageDetails"]
