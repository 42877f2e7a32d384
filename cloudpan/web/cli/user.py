"""Defines the CLI for getting information about the logged-in user."""

import logging

import click
from tabulate import tabulate

from cloudpan.utils.cli import coro
from cloudpan.web.clients.user import UserClient
from cloudpan.web.utils import format_size

logger = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Get information about the logged-in user."""
    pass


@cli.command()
@coro
async def me() -> None:
    """Show the account, quota and usage of the logged-in user."""
    async with UserClient() as client:
        info = await client.get_user_info()
    click.echo(
        tabulate(
            [
                ["User ID", info.user_id],
                ["Account", info.user_account],
                ["Nickname", info.nickname or "N/A"],
                ["Domain name", info.domain_name],
                ["Used", f"{info.used_size} ({format_size(info.used_size)})"],
                ["Quota", f"{info.quota} ({format_size(info.quota)})"],
                ["Mail used", f"{info.used189_size} ({format_size(info.used189_size)})"],
            ],
            headers=["Key", "Value"],
            tablefmt="simple",
            disable_numparse=True,
        )
    )


@cli.command()
@coro
async def detail() -> None:
    """Show the contact and locale details of the logged-in user."""
    async with UserClient() as client:
        info = await client.get_user_detail_info()
    click.echo(
        tabulate(
            [
                ["Account", info.user_account],
                ["Nickname", info.nickname or "N/A"],
                ["Domain name", info.domain_name],
                ["Gender", info.gender or "N/A"],
                ["Province", info.province_code or "N/A"],
                ["City", info.city_code or "N/A"],
                ["Mobile", info.safe_mobile or "N/A"],
                ["Email", info.email or "N/A"],
            ],
            headers=["Key", "Value"],
            tablefmt="simple",
            disable_numparse=True,
        )
    )


if __name__ == "__main__":
    cli()
