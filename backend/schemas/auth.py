"""Pydantic schemas for registration and login."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from schemas.base import CamelModel


class UserRegister(CamelModel):
    """Request body for registering a user."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=6)
    name: Optional[str] = None


class UserLogin(CamelModel):
    """Request body for logging in."""

    email: str
    password: str


class UserResponse(CamelModel):
    """Public view of a user (never includes the password hash)."""

    id: str
    email: str
    name: Optional[str] = None
    role: str
    created_at: datetime


class LoginResponse(CamelModel):
    """Login result carrying the bearer token."""

    message: str
    token: str
    user: UserResponse
