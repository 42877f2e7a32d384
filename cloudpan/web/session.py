"""Detects expired login sessions from Cloud189 response bodies."""

import logging

from pydantic import ValidationError

from cloudpan.errors import ApiError
from cloudpan.web.gen.api import ErrorResp

logger = logging.getLogger(__name__)

INVALID_SESSION_KEY = "InvalidSessionKey"

# Appears in the HTML login page the portal serves instead of JSON once the
# session cookie is no longer accepted.
LOGIN_PAGE_MARKER = "登录页页面"


def has_invalid_session_code(body: bytes) -> bool:
    """Returns whether the body is an error envelope for an invalid session."""
    try:
        error = ErrorResp.model_validate_json(body)
    except ValidationError:
        return False
    return error.error_code == INVALID_SESSION_KEY


def is_login_page(body: bytes) -> bool:
    """Returns whether the body is the login page rather than an API payload."""
    return LOGIN_PAGE_MARKER in body.decode("utf-8", errors="replace")


def check_session(body: bytes, *, login_page_check: bool = False) -> None:
    """Raises a session-expired error if the body says the session is gone.

    Args:
        body: The raw response body.
        login_page_check: Also treat a served login page as an expired session.

    Raises:
        ApiError: If the session has expired.
    """
    if has_invalid_session_code(body):
        logger.debug("Server reported %s", INVALID_SESSION_KEY)
        raise ApiError.session_expired()
    if login_page_check and is_login_page(body):
        logger.debug("Server returned the login page")
        raise ApiError.session_expired()
