"""Defines helpers for writing click commands against the async client."""

import asyncio
import logging
import sys
import textwrap
from functools import wraps
from typing import Any, Callable, Coroutine, ParamSpec, TypeVar

import click

from cloudpan.errors import ApiError
from cloudpan.web.clients.base import MissingCredentialsError

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = ParamSpec("P")


def coro(f: Callable[P, Coroutine[Any, Any, T]]) -> Callable[P, T]:
    """Runs an async command to completion, exiting with status 1 on API and credential errors."""

    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return asyncio.run(f(*args, **kwargs))
        except ApiError as e:
            logger.error("%s (code %d)", e.message, e.code)
            if e.is_session_expired:
                logger.error("Hint: refresh the session cookie and try again")
            sys.exit(1)
        except MissingCredentialsError as e:
            logger.error("%s", e)
            logger.error("Hint: set the cookie with `export CLOUDPAN_COOKIE_LOGIN_USER=...`")
            sys.exit(1)

    return wrapper


def recursive_help(cmd: click.Command, parent: click.Context | None = None, indent: int = 0) -> str:
    ctx = click.Context(cmd, info_name=cmd.name, parent=parent)
    text = cmd.get_help(ctx)
    for sub in getattr(cmd, "commands", {}).values():
        text += recursive_help(sub, ctx, indent + 2)
    return textwrap.indent(text, " " * indent)
