"""
Pydantic models for user data.

Defines schemas for registering users, logging in and reading user
information.  Passwords are accepted on input but never returned by
the API: ``UserRead`` has no password field.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..models import UserType

# Intentionally loose: one ``@`` with something on both sides.
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserBase(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["alice@example.com"])
    username: str = Field(..., min_length=1, examples=["alice"])
    full_name: str = Field(..., min_length=1, examples=["Alice Smith"])
    user_type: UserType = Field(..., examples=["customer"])


class UserCreate(UserBase):
    """Schema for registering a user.

    ``external_auth_id`` links the account to an external identity
    provider and may be omitted for password‑only accounts.
    """

    password: str = Field(..., min_length=1)
    external_auth_id: Optional[str] = Field(None, description="Identifier issued by the external identity provider")


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class UserLogin(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    success: bool
    user: UserRead
