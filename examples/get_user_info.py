"""Shows an example of getting the logged-in user's quota from the Cloud189 web API."""

import asyncio
import logging

import colorlogging

from cloudpan import PanClient
from cloudpan.web.utils import format_size

logger = logging.getLogger(__name__)


async def main() -> None:
    colorlogging.configure()

    async with PanClient() as client:
        info = await client.get_user_info()
        logger.info("%s has used %s of %s", info.user_account, format_size(info.used_size), format_size(info.quota))


if __name__ == "__main__":
    # CLOUDPAN_COOKIE_LOGIN_USER=... python -m examples.get_user_info
    asyncio.run(main())
