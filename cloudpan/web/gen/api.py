"""Defines the wire schemas returned by the Cloud189 web API.

These mirror the upstream JSON payloads field for field. They are kept apart
from the public records in :mod:`cloudpan.web.types` so that changes to the
upstream payloads only touch this module and the mapping code.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Upstream sends `null` for unset fields; treat it like a missing field.
        if value is None:
            field_info = cls.model_fields[info.field_name]
            return field_info.get_default(call_default_factory=True)
        return value


class ErrorResp(WireModel):
    error_code: str = Field(default="", alias="errorCode")
    error_msg: str = Field(default="", alias="errorMsg")


class UserExtResp(WireModel):
    domain_space_account: str = Field(default="", alias="domainSpaceAccount")
    gender: str = Field(default="", alias="gender")
    nick_name: str = Field(default="", alias="nickName")
    safe_qustion: int = Field(default=0, alias="safeQustion")


class UserInfoForPortal(WireModel):
    res_code: int = Field(default=0, alias="res_code")
    res_message: str = Field(default="", alias="res_message")
    available: int = Field(default=0, alias="available")
    capacity: int = Field(default=0, alias="capacity")
    domain_name: str = Field(default="", alias="domainName")
    ext_pic_available: int = Field(default=0, alias="extPicAvailable")
    ext_pic_capacity: int = Field(default=0, alias="extPicCapacity")
    ext_pic_used: int = Field(default=0, alias="extPicUsed")
    has_family: int = Field(default=0, alias="hasFamily")
    login_name: str = Field(default="", alias="loginName")
    mail189_used_size: int = Field(default=0, alias="mail189UsedSize")
    max_filesize: int = Field(default=0, alias="maxFilesize")
    order_amount: int = Field(default=0, alias="orderAmount")
    province_code: str = Field(default="", alias="provinceCode")
    user_ext_resp: UserExtResp = Field(default_factory=UserExtResp, alias="userExtResp")


class UserDetailInfoResp(WireModel):
    gender: str = Field(default="", alias="gender")
    province_code: str = Field(default="", alias="provinceCode")
    city_code: str = Field(default="", alias="cityCode")
    user_account: str = Field(default="", alias="userAccount")
    safe_mobile: str = Field(default="", alias="safeMobile")
    domain_name: str = Field(default="", alias="domainName")
    nickname: str = Field(default="", alias="nickname")
    email: str = Field(default="", alias="email")
