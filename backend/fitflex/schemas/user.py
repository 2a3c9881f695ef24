from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator
from fitflex.schemas.common import CamelModel

NameStr = Annotated[str, Field(strip_whitespace=True, max_length=120)]

class UserRegister(BaseModel):
    email: EmailStr = Field(max_length=255)
    password: Annotated[str, Field(min_length=6, max_length=128)]
    name: NameStr | None = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("name")
    @classmethod
    def blank_name_is_none(cls, v: str | None) -> str | None:
        return v or None

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

class UserRead(CamelModel):
    id: str
    email: str
    name: str | None = None
    created_at: datetime

class TokenRead(CamelModel):
    access_token: str
    token_type: str = "bearer"
