"""Tests for the user profile records."""

import pydantic
import pytest

from cloudpan.web.gen.api import UserDetailInfoResp, WireModel
from cloudpan.web.types import UserDetailInfo, UserInfo, UserVip


def test_user_vip_codes() -> None:
    assert [int(v) for v in UserVip] == [0, 99, 100, 199, 200]
    assert UserVip(100) is UserVip.GOLD


def test_user_info_is_frozen() -> None:
    info = UserInfo(user_id=1, quota=10)
    with pytest.raises(pydantic.ValidationError):
        info.quota = 20  # type: ignore[misc]


def test_user_info_serializes_with_upstream_names() -> None:
    info = UserInfo(user_id=1, user_account="a@189.cn", used189_size=2, used_size=3, quota=4)
    assert info.model_dump(by_alias=True) == {
        "userId": 1,
        "userAccount": "a@189.cn",
        "nickname": "",
        "domainName": "",
        "used189Size": 2,
        "usedSize": 3,
        "quota": 4,
    }


def test_detail_wire_schema_null_fields_are_empty() -> None:
    detail = UserDetailInfoResp.model_validate({"gender": None, "email": "a@example.com"})
    assert detail.gender == ""
    assert detail.email == "a@example.com"


def test_public_records_are_independent_of_wire_schemas() -> None:
    assert not issubclass(UserInfo, WireModel)
    assert not issubclass(UserDetailInfo, WireModel)
    assert UserDetailInfo(user_account="a@189.cn").user_account == "a@189.cn"


def test_detail_wire_schema_maps_to_public_record() -> None:
    wire = UserDetailInfoResp.model_validate_json(b'{"provinceCode": "600101", "safeMobile": null}')
    detail = UserDetailInfo.model_validate(wire.model_dump())
    assert detail.province_code == "600101"
    assert detail.safe_mobile == ""
