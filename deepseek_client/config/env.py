"""deepseek_client.config.env
==========================

Environment variable names and helpers for DeepSeek credentials.

Purpose
-------
- Provide a single source of truth for the environment variables the client
  reads (canonical names plus accepted aliases).
- Offer small utilities to look up the API key in a consistent way.

Failure Modes
-------------
- Helpers never raise on unset variables; they return ``None`` and let the
  caller decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Config field -> canonical env var
ENV_MAP: Dict[str, str] = {
    "api_key": "DEEPSEEK_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "base_url": "DEEPSEEK_BASE_URL",
    "model": "DEEPSEEK_MODEL",
    "timeout": "DEEPSEEK_TIMEOUT",
    "stream_queue_size": "DEEPSEEK_STREAM_QUEUE_SIZE",
}

# Field -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "base_url": ("DEEPSEEK_BASE_URL", "DEEPSEEK_API_BASE"),
}

CONFIG_FILE_ENV = "DEEPSEEK_CONFIG_FILE"
LOG_LEVEL_ENV = "DEEPSEEK_LOG_LEVEL"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_candidates(field: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a config field.

    The canonical name is yielded first, followed by any aliases.
    """
    canonical = ENV_MAP.get(field)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(field, ()):
        if alias != canonical:
            yield alias


def read_env_field(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first non-empty candidate."""
    for name in get_env_var_candidates(field):
        val = os.getenv(name)
        if val:
            return val, name
    return None, None


def resolve_api_key() -> Tuple[Optional[str], Optional[str]]:
    """Resolve the DeepSeek API key from the environment.

    Returns
    -------
    tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)``. Placeholder values are treated as absent
        and yield ``(None, None)``.
    """
    val, used = read_env_field("api_key")
    if val is None or is_placeholder(val):
        return None, None
    return val, used


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "CONFIG_FILE_ENV",
    "LOG_LEVEL_ENV",
    "is_placeholder",
    "get_env_var_candidates",
    "read_env_field",
    "resolve_api_key",
]
