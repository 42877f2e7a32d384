"""Shared fixtures for the client tests."""

import json
from typing import Any, Callable

import httpx
import pytest

from cloudpan.conf import Settings
from cloudpan.web import utils
from cloudpan.web.clients.client import PanClient

WEB_URL = "https://cloud.test"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Any:
    monkeypatch.setenv("CLOUDPAN_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("CLOUDPAN_COOKIE_LOGIN_USER", raising=False)
    monkeypatch.delenv("CLOUDPAN_VERBOSE_ERROR", raising=False)
    Settings.load.cache_clear()
    utils.get_web_url.cache_clear()
    utils.get_timeout.cache_clear()
    yield tmp_path / "config"
    Settings.load.cache_clear()
    utils.get_web_url.cache_clear()
    utils.get_timeout.cache_clear()


@pytest.fixture
def make_client() -> Callable[[Handler], PanClient]:
    def factory(handler: Handler) -> PanClient:
        return PanClient(
            base_url=WEB_URL,
            cookie_login_user="session-cookie",
            timeout=5.0,
            transport=httpx.MockTransport(handler),
        )

    return factory


def json_response(payload: Any) -> httpx.Response:
    return httpx.Response(200, content=json.dumps(payload, ensure_ascii=False).encode("utf-8"))


PORTAL_PAYLOAD = {
    "res_code": 0,
    "res_message": "成功",
    "available": 3000,
    "capacity": 10000,
    "domainName": "123456789",
    "extPicAvailable": 0,
    "extPicCapacity": 0,
    "extPicUsed": 0,
    "hasFamily": 1,
    "loginName": "someone@189.cn",
    "mail189UsedSize": 42,
    "maxFilesize": 2147483648,
    "orderAmount": 0,
    "provinceCode": "600101",
    "userExtResp": {
        "domainSpaceAccount": "",
        "gender": "M",
        "nickName": "tester",
        "safeQustion": 0,
    },
}

DETAIL_PAYLOAD = {
    "gender": "F",
    "provinceCode": "600101",
    "cityCode": "8441900",
    "userAccount": "someone@189.cn",
    "safeMobile": "138****0000",
    "domainName": "123456789",
    "nickname": "tester",
    "email": "someone@example.com",
}
