"""HTTP client construction for the DeepSeek client.

Purpose:
    Build (or configure a caller-supplied) ``httpx.Client`` with the API base
    URL, bearer-token header and request timeout. The client is long-lived
    and shared by every call made through one ``DeepSeekClient``;
    ``httpx.Client`` is safe for concurrent use from multiple threads.

Timeout strategy:
    A single timeout value applies to connect, read, write and pool phases.
    For streaming calls it bounds the wait for each network read; there is no
    separate per-frame idle timeout.
"""

from __future__ import annotations

from typing import Dict

import httpx


def auth_headers(api_key: str) -> Dict[str, str]:
    """Return the default headers sent with every request."""
    return {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }


def build_http_client(base_url: str, api_key: str, timeout: float) -> httpx.Client:
    """Create a new ``httpx.Client`` bound to ``base_url``."""
    return httpx.Client(
        base_url=base_url,
        headers=auth_headers(api_key),
        timeout=httpx.Timeout(timeout),
    )


def configure_http_client(client: httpx.Client, base_url: str, api_key: str) -> httpx.Client:
    """Point a caller-supplied client at ``base_url`` and add the auth header.

    The client's own timeout is kept. Returns the same instance.
    """
    client.base_url = httpx.URL(base_url)
    client.headers.update(auth_headers(api_key))
    return client


__all__ = ["auth_headers", "build_http_client", "configure_http_client"]
