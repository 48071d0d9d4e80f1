"""Authentication endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from portfolio_api.api.deps import get_current_user
from portfolio_api.config import settings
from portfolio_api.core.permissions import Role
from portfolio_api.core.security import create_access_token, hash_password, verify_password
from portfolio_api.models.base import utcnow
from portfolio_api.models.user import User
from portfolio_api.schemas.auth import (
    AuthResponse,
    ProfileUpdate,
    UserCreate,
    UserLogin,
    UserResponse,
)
from portfolio_api.schemas.common import Envelope
from portfolio_api.services.stores import users

logger = logging.getLogger(__name__)

router = APIRouter()


def issue_token(user: User) -> str:
    return create_access_token(
        user.id, additional_claims={"email": user.email, "role": user.role}
    )


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


@router.post(
    "/register",
    response_model=Envelope[AuthResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(user_data: UserCreate, response: Response) -> Envelope:
    """Register an account; the very first account becomes the administrator."""
    email = user_data.email.lower()
    if await users.find_one({"email": email}):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User already exists",
        )

    role = Role.ADMIN if await users.count() == 0 else Role.USER
    user = await users.insert(
        User(
            email=email,
            password=hash_password(user_data.password),
            name=user_data.name,
            role=role,
        )
    )
    logger.info(f"Registered user {user.id} with role {user.role}")

    token = issue_token(user)
    set_auth_cookie(response, token)
    return Envelope(
        data=AuthResponse(user=UserResponse.from_user(user), token=token),
        message="User registered successfully",
    )


@router.post(
    "/login",
    response_model=Envelope[AuthResponse],
    response_model_exclude_none=True,
    summary="Login and get an access token",
)
async def login(credentials: UserLogin, response: Response) -> Envelope:
    user = await users.find_one({"email": credentials.email.lower()})

    if user is None or not verify_password(credentials.password, user.password):
        logger.warning("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    user = await users.update(user.id, {"lastLogin": utcnow()}, touch=False)

    token = issue_token(user)
    set_auth_cookie(response, token)
    return Envelope(
        data=AuthResponse(user=UserResponse.from_user(user), token=token),
        message="Login successful",
    )


@router.get(
    "/me",
    response_model=Envelope[UserResponse],
    response_model_exclude_none=True,
    summary="Get current user profile",
)
async def get_me(current_user: User = Depends(get_current_user)) -> Envelope:
    return Envelope(data=UserResponse.from_user(current_user))


@router.put(
    "/update",
    response_model=Envelope[UserResponse],
    response_model_exclude_none=True,
    summary="Update current user profile",
)
async def update_me(
    profile_data: ProfileUpdate,
    response: Response,
    current_user: User = Depends(get_current_user),
) -> Envelope:
    """Update name, email, photo or password of the signed-in user."""
    to_set: dict[str, Any] = {}
    to_unset: dict[str, Any] = {}

    if profile_data.name:
        to_set["name"] = profile_data.name

    if profile_data.email and profile_data.email.lower() != current_user.email:
        email = profile_data.email.lower()
        if await users.find_one({"email": email}):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already in use",
            )
        to_set["email"] = email

    if "photo" in profile_data.model_fields_set:
        if profile_data.photo is None:
            to_unset["photo"] = ""
        else:
            to_set["photo"] = profile_data.photo

    if profile_data.new_password:
        if not verify_password(profile_data.old_password, current_user.password):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Old password is incorrect",
            )
        to_set["password"] = hash_password(profile_data.new_password)

    if not to_set and not to_unset:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )

    user = await users.update(
        current_user.id, to_set, to_unset, conflict_detail="Email already in use"
    )
    if "email" in to_set:
        # The token carries the email claim
        set_auth_cookie(response, issue_token(user))

    logger.info(f"Updated profile of user {user.id}")
    return Envelope(data=UserResponse.from_user(user), message="Profile updated successfully")


@router.post(
    "/logout",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Logout",
)
async def logout(response: Response) -> Envelope:
    """Clear the auth cookie."""
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
    return Envelope(message="Logged out successfully")
