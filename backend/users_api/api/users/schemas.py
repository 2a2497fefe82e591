"""Pydantic request/response schemas for Users API."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email


def _checked_email(value: str | None) -> str | None:
    # Validate like EmailStr but keep the address as sent (EmailStr lowercases the domain).
    if value is not None:
        validate_email(value)
    return value


class UserCreateIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    email: str

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _checked_email(value)


class UserUpdateIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _checked_email(value)


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: str
    name: str
    email: str
    email_verified_at: datetime | None = None
