"""HTTP client helpers (construction and configuration of ``httpx.Client``)."""

from .client import auth_headers, build_http_client, configure_http_client

__all__ = ["auth_headers", "build_http_client", "configure_http_client"]
