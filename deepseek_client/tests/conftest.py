"""Pytest configuration for the deepseek_client test suite.

HTTP is simulated with ``httpx.MockTransport``; no test touches the network.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterator, List

import httpx
import pytest

from deepseek_client import DeepSeekClient
from deepseek_client.config.env import CONFIG_FILE_ENV, ENV_ALIASES, ENV_MAP, LOG_LEVEL_ENV
from deepseek_client.logging import BASE_LOGGER_NAME

from .helpers import API_KEY


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from DEEPSEEK_* variables set on the host."""
    names = set(ENV_MAP.values()) | {CONFIG_FILE_ENV, LOG_LEVEL_ENV}
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for name in names:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def make_client() -> Iterator[Callable[..., DeepSeekClient]]:
    """Factory for clients bound to a mock transport handler."""
    created: List[DeepSeekClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> DeepSeekClient:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        client = DeepSeekClient(API_KEY, http_client=http, owns_client=True, **kwargs)
        created.append(client)
        return client

    yield _make
    for client in created:
        client.close()


@pytest.fixture()
def log_events() -> Iterator[List[dict]]:
    """Capture structured events emitted under the ``deepseek`` logger.

    Each entry is the decoded ``log_event`` payload plus the record level.
    """
    events: List[dict] = []

    def _emit(record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"msg": record.getMessage()}
        payload["level"] = record.levelname
        events.append(payload)

    handler = logging.Handler(level=logging.DEBUG)
    handler.emit = _emit  # type: ignore[method-assign]
    logger = logging.getLogger(BASE_LOGGER_NAME)
    previous = logger.level
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    try:
        yield events
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
