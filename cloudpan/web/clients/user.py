"""Defines the client for the Cloud189 user profile endpoints."""

import logging
import re

import httpx
from pydantic import ValidationError

from cloudpan.errors import ApiError
from cloudpan.web.clients.base import BaseClient
from cloudpan.web.gen.api import UserDetailInfoResp, UserInfoForPortal
from cloudpan.web.session import check_session
from cloudpan.web.types import UserDetailInfo, UserInfo

logger = logging.getLogger(__name__)

USER_INFO_ENDPOINT = "/api/open/user/getUserInfoForPortal.action"
USER_DETAIL_INFO_ENDPOINT = "/v2/getUserDetailInfo.action"

USER_ID_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


def parse_user_id(domain_name: str) -> int:
    """Parses the numeric user ID from the domain name, or 0 if it isn't one."""
    if USER_ID_RE.fullmatch(domain_name) is None:
        logger.debug("Domain name %r is not a numeric user ID", domain_name)
        return 0
    # Out-of-range values saturate at the int64 bounds.
    return min(max(int(domain_name), INT64_MIN), INT64_MAX)


def to_user_info(portal: UserInfoForPortal) -> UserInfo:
    return UserInfo(
        user_id=parse_user_id(portal.domain_name),
        user_account=portal.login_name,
        nickname=portal.user_ext_resp.nick_name,
        domain_name=portal.domain_name,
        used189_size=portal.mail189_used_size,
        used_size=portal.capacity - portal.available,
        quota=portal.capacity,
    )


class UserClient(BaseClient):
    async def get_user_info(self) -> UserInfo:
        """Gets the summary profile of the logged-in user.

        Returns:
            The account, nickname, quota and usage of the user.

        Raises:
            ApiError: If the request fails, the session has expired or the
                response can't be decoded.
        """
        headers = {"accept": "application/json;charset=UTF-8"}
        try:
            body = await self.fetch("GET", self.url(USER_INFO_ENDPOINT), None, headers)
        except httpx.HTTPError as e:
            logger.debug("get user info failed")
            raise ApiError.transport(e) from e

        check_session(body, login_page_check=True)

        try:
            portal = UserInfoForPortal.model_validate_json(body)
        except ValidationError as e:
            logger.debug("get user info failed")
            raise ApiError.decode(e) from e

        return to_user_info(portal)

    async def get_user_detail_info(self) -> UserDetailInfo:
        """Gets the detailed profile of the logged-in user.

        Returns:
            The contact and locale fields of the user.

        Raises:
            ApiError: If the request fails, the session has expired or the
                response can't be decoded.
        """
        try:
            body = await self.get(self.url(USER_DETAIL_INFO_ENDPOINT))
        except httpx.HTTPError as e:
            logger.debug("get user detail info failed")
            raise ApiError.transport(e) from e

        check_session(body)

        try:
            detail = UserDetailInfoResp.model_validate_json(body)
        except ValidationError as e:
            logger.debug("get user detail info failed")
            raise ApiError.decode(e) from e

        return UserDetailInfo.model_validate(detail.model_dump())
