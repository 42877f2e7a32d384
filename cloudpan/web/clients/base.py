"""Defines a base client for the Cloud189 web API."""

import logging
import os
from types import TracebackType
from typing import Self, Type

import httpx

from cloudpan.web.utils import get_timeout, get_web_url

logger = logging.getLogger(__name__)

# This is the name of the session cookie set by the Cloud189 login flow.
COOKIE_NAME = "COOKIE_LOGIN_USER"

COOKIE_ENV_VAR = "CLOUDPAN_COOKIE_LOGIN_USER"


class MissingCredentialsError(ValueError):
    """Raised when no session cookie is configured."""


def verbose_error() -> bool:
    return os.environ.get("CLOUDPAN_VERBOSE_ERROR", "0") == "1"


class BaseClient:
    def __init__(
        self,
        base_url: str | None = None,
        cookie_login_user: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = get_web_url() if base_url is None else base_url
        self.cookie_login_user = cookie_login_user
        self.timeout = get_timeout() if timeout is None else timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            cookie = self.cookie_login_user
            if cookie is None:
                if COOKIE_ENV_VAR not in os.environ:
                    raise MissingCredentialsError(f"{COOKIE_ENV_VAR} is not set! Log in to Cloud189 and copy the {COOKIE_NAME} cookie")
                cookie = os.environ[COOKIE_ENV_VAR]

            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                cookies={COOKIE_NAME: cookie},
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
            )
        return self._client

    def url(self, endpoint: str) -> str:
        return self.base_url.rstrip("/") + "/" + endpoint.lstrip("/")

    async def fetch(
        self,
        method: str,
        url: str,
        body: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        """Sends an authenticated request and returns the raw response body.

        Args:
            method: The HTTP method.
            url: The absolute URL, or a path relative to the base URL.
            body: The request body, if any.
            headers: Extra request headers.

        Returns:
            The response body.

        Raises:
            httpx.HTTPError: If the request fails or the server returns an
                error status.
        """
        client = await self.get_client()
        response = await client.request(method, url, content=body, headers=headers)

        if response.is_error:
            logger.error("Got error %d from the Cloud189 API for %s %s", response.status_code, method, url)
            if verbose_error():
                logger.error("  %s", response.text)
            else:
                logger.info("Use CLOUDPAN_VERBOSE_ERROR=1 to see the full error response")
            response.raise_for_status()

        return response.content

    async def get(self, url: str) -> bytes:
        return await self.fetch("GET", url)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
