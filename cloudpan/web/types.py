"""Defines the user profile records returned by the client."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class UserVip(enum.IntEnum):
    USER = 0
    FAMILY_GOLD = 99
    GOLD = 100
    FAMILY_PLATINUM = 199
    PLATINUM = 200


class UserInfo(Record):
    """Summary profile of the logged-in user.

    Sizes are in bytes. ``used_size`` is ``capacity - available`` as reported
    by the portal endpoint and is not clamped, so it may be negative.
    """

    user_id: int = Field(default=0, alias="userId")
    user_account: str = Field(default="", alias="userAccount")
    nickname: str = Field(default="", alias="nickname")
    domain_name: str = Field(default="", alias="domainName")
    used189_size: int = Field(default=0, alias="used189Size")
    used_size: int = Field(default=0, alias="usedSize")
    quota: int = Field(default=0, alias="quota")


class UserDetailInfo(Record):
    """Detailed profile of the logged-in user; unset fields are empty strings."""

    # F for female, M for male.
    gender: str = Field(default="", alias="gender")
    province_code: str = Field(default="", alias="provinceCode")
    city_code: str = Field(default="", alias="cityCode")
    user_account: str = Field(default="", alias="userAccount")
    # Masked, e.g. 138****0000.
    safe_mobile: str = Field(default="", alias="safeMobile")
    domain_name: str = Field(default="", alias="domainName")
    nickname: str = Field(default="", alias="nickname")
    email: str = Field(default="", alias="email")
