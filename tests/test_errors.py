"""Tests for the API error type."""

import httpx

from cloudpan.errors import SESSION_EXPIRED_MESSAGE, ApiCode, ApiError, ApiErrorKind


def test_session_expired() -> None:
    err = ApiError.session_expired()
    assert err.kind is ApiErrorKind.SESSION_EXPIRED
    assert err.code is ApiCode.TOKEN_EXPIRED
    assert str(err) == SESSION_EXPIRED_MESSAGE
    assert err.cause is None
    assert err.is_session_expired


def test_transport_keeps_cause() -> None:
    cause = httpx.ReadTimeout("timed out")
    err = ApiError.transport(cause)
    assert err.kind is ApiErrorKind.TRANSPORT
    assert err.code is ApiCode.FAILED
    assert err.cause is cause
    assert err.message == "timed out"
    assert not err.is_session_expired


def test_decode_message_falls_back_to_type_name() -> None:
    err = ApiError.decode(ValueError())
    assert err.kind is ApiErrorKind.DECODE
    assert err.message == "ValueError"
    assert "DECODE" in repr(err)
