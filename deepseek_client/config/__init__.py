"""Layered configuration for the DeepSeek client.

Goals
-----
* Centralize defaults (base URL, model, timeout, stream queue capacity).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``DEEPSEEK_CONFIG_FILE``
    3. Environment variables (``DEEPSEEK_API_KEY``, ``DEEPSEEK_BASE_URL``,
       ``DEEPSEEK_MODEL``, ``DEEPSEEK_TIMEOUT``, ``DEEPSEEK_STREAM_QUEUE_SIZE``)
    4. In-code overrides passed to :func:`get_client_config`
* Provide a single call site: ``get_client_config(overrides=None)``.

External Config File
--------------------
The file may hold the settings at top level or under a ``deepseek`` section::

    deepseek:
      model: deepseek-reasoner
      base_url: https://api.deepseek.com
      timeout: 120

JSON is attempted first; on failure the text is parsed as YAML.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_STREAM_QUEUE_SIZE,
    DEEPSEEK_DEFAULT_TIMEOUT,
)
from .env import CONFIG_FILE_ENV, ENV_MAP, is_placeholder, read_env_field, resolve_api_key

DEFAULTS: Dict[str, Any] = {
    "base_url": DEEPSEEK_DEFAULT_BASE_URL,
    "model": DEEPSEEK_DEFAULT_MODEL,
    "timeout": DEEPSEEK_DEFAULT_TIMEOUT,
    "stream_queue_size": DEEPSEEK_DEFAULT_STREAM_QUEUE_SIZE,
}

_FLOAT_FIELDS = ("timeout",)
_INT_FIELDS = ("stream_queue_size",)


def _load_external_config() -> Dict[str, Any]:
    """Read the optional config file; return ``{}`` when absent or unreadable."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        return {}
    section = data.get("deepseek")
    return dict(section) if isinstance(section, dict) else dict(data)


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_MAP:
        if field == "api_key":
            val, _ = resolve_api_key()
        else:
            val, _ = read_env_field(field)
        if val is not None:
            out[field] = val
    return out


def _coerce(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize numeric fields; unparsable or non-positive values fall back to defaults."""
    for name in _FLOAT_FIELDS:
        try:
            val = float(cfg[name])
            cfg[name] = val if val > 0 else DEFAULTS[name]
        except (TypeError, ValueError):
            cfg[name] = DEFAULTS[name]
    for name in _INT_FIELDS:
        try:
            val = int(cfg[name])
            cfg[name] = val if val > 0 else DEFAULTS[name]
        except (TypeError, ValueError):
            cfg[name] = DEFAULTS[name]
    return cfg


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    Override entries whose value is ``None`` are ignored. A placeholder-looking
    ``api_key`` from any source is dropped.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    if is_placeholder(cfg.get("api_key")):
        cfg.pop("api_key", None)
    return _coerce(cfg)


def get_model() -> str:
    """Convenience accessor for the configured default model."""
    return str(get_client_config()["model"])


__all__ = [
    "DEFAULTS",
    "get_client_config",
    "get_model",
]
