"""Authentication schemas."""

from typing import Self

from pydantic import BaseModel, EmailStr, Field, model_validator

from portfolio_api.core.permissions import Role, has_role
from portfolio_api.models.base import CamelModel
from portfolio_api.models.user import User
from portfolio_api.schemas.common import OptionalHttpUrlStr

PASSWORD_MIN_LENGTH = 6


class UserCreate(BaseModel):
    """Schema for user registration."""

    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=128)


class UserLogin(BaseModel):
    """Schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)


class ProfileUpdate(CamelModel):
    """Schema for updating the signed-in user's profile."""

    name: str | None = Field(None, min_length=2, max_length=100)
    email: EmailStr | None = None
    photo: OptionalHttpUrlStr = None
    old_password: str | None = None
    new_password: str | None = Field(None, min_length=PASSWORD_MIN_LENGTH, max_length=128)

    @model_validator(mode="after")
    def check_password_pair(self) -> Self:
        if self.old_password and not self.new_password:
            raise ValueError("New password is required when old password is provided")
        if self.new_password and not self.old_password:
            raise ValueError("Old password is required to set a new password")
        return self


class UserResponse(CamelModel):
    """Public view of a user account."""

    id: str
    name: str
    email: str
    role: Role
    photo: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            photo=user.photo,
        )


class AuthResponse(BaseModel):
    """Schema for login and registration responses."""

    user: UserResponse
    token: str


class TokenPayload(BaseModel):
    """Claims of a verified access token; the per-request auth context."""

    sub: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return has_role(self.role, Role.ADMIN)
