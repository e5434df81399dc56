from __future__ import annotations

import types

import httpx
import pytest

from deepseek_client.errors import (
    ErrorCode,
    ProviderError,
    StreamDecodeError,
    classify_exception,
    classify_status,
)


@pytest.mark.parametrize(
    "status,code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (402, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (408, ErrorCode.TIMEOUT),
        (422, ErrorCode.VALIDATION),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (502, ErrorCode.TRANSIENT),
        (503, ErrorCode.UNAVAILABLE),
        (504, ErrorCode.TIMEOUT),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_classify_status(status, code):
    assert classify_status(status) is code  # nosec B101 - assert is appropriate in unit tests


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.RATE_LIMIT, message="slow down")
    assert classify_exception(e) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert e.provider == "deepseek"  # nosec B101 - assert is appropriate in unit tests


def test_classify_httpx_errors():
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.TRANSIENT  # nosec B101


def test_classify_http_status_attributes():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(ValueError("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_stream_decode_error_defaults():
    err = StreamDecodeError(frame="{oops")
    assert isinstance(err, ProviderError)  # nosec B101 - assert is appropriate in unit tests
    assert err.code is ErrorCode.DECODE  # nosec B101 - assert is appropriate in unit tests
    assert err.frame == "{oops"  # nosec B101 - assert is appropriate in unit tests
    with pytest.raises(ProviderError):
        raise err
