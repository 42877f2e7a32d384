"""Defines the error type raised by the Cloud189 API client.

Every failure of an API call surfaces as an :class:`ApiError`. The ``kind``
tag tells callers what went wrong:

- ``TRANSPORT``: the HTTP request itself failed (connection, TLS, status).
- ``SESSION_EXPIRED``: the server reported that the login session is no
  longer valid. Callers need to log in again and retry.
- ``DECODE``: the response body did not match the expected JSON shape.

Nothing is retried automatically.
"""

import enum


class ApiCode(enum.IntEnum):
    OK = 0
    TOKEN_EXPIRED = 11
    FAILED = 999


class ApiErrorKind(enum.Enum):
    TRANSPORT = "transport"
    SESSION_EXPIRED = "session_expired"
    DECODE = "decode"


SESSION_EXPIRED_MESSAGE = "Login session timed out, please log in again"


class ApiError(Exception):
    def __init__(
        self,
        kind: ApiErrorKind,
        message: str,
        code: ApiCode = ApiCode.FAILED,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.code = code
        self.message = message
        self.cause = cause

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.name}, code={self.code.value}, message={self.message!r})"

    @property
    def is_session_expired(self) -> bool:
        return self.kind is ApiErrorKind.SESSION_EXPIRED

    @classmethod
    def transport(cls, err: BaseException) -> "ApiError":
        return cls(ApiErrorKind.TRANSPORT, str(err) or type(err).__name__, cause=err)

    @classmethod
    def session_expired(cls) -> "ApiError":
        return cls(ApiErrorKind.SESSION_EXPIRED, SESSION_EXPIRED_MESSAGE, code=ApiCode.TOKEN_EXPIRED)

    @classmethod
    def decode(cls, err: BaseException) -> "ApiError":
        return cls(ApiErrorKind.DECODE, str(err) or type(err).__name__, cause=err)
