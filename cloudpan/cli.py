"""Defines the top-level cloudpan CLI."""

import logging

import click
import colorlogging

from cloudpan.utils.cli import recursive_help
from cloudpan.web.cli.user import cli as user_cli


@click.group()
def cli() -> None:
    """Command line interface for interacting with the Cloud189 web API."""
    colorlogging.configure()

    # Suppress per-request httpx logging
    logging.getLogger("httpx").setLevel(logging.WARNING)


cli.add_command(user_cli, "user")

if __name__ == "__main__":
    # python -m cloudpan.cli
    print(recursive_help(cli))
