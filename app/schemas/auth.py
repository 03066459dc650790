# app/schemas/auth.py
from __future__ import annotations
from typing import Optional
from pydantic import EmailStr, Field

from app.schemas.base import ApiModel


class LoginIn(ApiModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserOut(ApiModel):
    id: int
    username: str
    email: str


class UserUpdate(ApiModel):
    username: Optional[str] = Field(None, min_length=1, max_length=80)
    email: Optional[EmailStr] = None


class PasswordChangeIn(ApiModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)
