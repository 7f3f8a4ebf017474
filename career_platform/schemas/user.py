# user.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _validate_email_like(v: str) -> str:
    value = (v or "").strip()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


class UserBase(BaseModel):
    email: str
    full_name: str = Field(min_length=1)
    education_level: Optional[str] = None
    experience_level: Optional[str] = None
    career_track: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        return _validate_email_like(v)

    @field_validator("full_name")
    @classmethod
    def _check_full_name(cls, v: str) -> str:
        value = (v or "").strip()
        if not value:
            raise ValueError("full_name must not be blank")
        return value


class UserCreate(UserBase):
    password: str = Field(min_length=6)


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserRead(UserBase):
    id: int
    is_admin: bool = False

    model_config = ConfigDict(from_attributes=True)


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    user_id: int
