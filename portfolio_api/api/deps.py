"""API dependencies for dependency injection."""

from typing import Optional

from bson import ObjectId
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio_api.config import settings
from portfolio_api.core.permissions import Role, has_role
from portfolio_api.core.security import verify_access_token
from portfolio_api.models.user import User
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.services.stores import users

# Security scheme; the cookie fallback means the header is optional
security = HTTPBearer(auto_error=False)


def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Extract the raw token from the bearer header or the auth cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.AUTH_COOKIE_NAME) or None


def get_token_payload(token: Optional[str] = Depends(get_token)) -> TokenPayload:
    """Verify the token and return its claims."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = verify_access_token(token)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return TokenPayload(sub=payload["sub"], email=payload["email"], role=payload["role"])


def get_optional_payload(token: Optional[str] = Depends(get_token)) -> Optional[TokenPayload]:
    """Get the token claims if a valid token was sent, otherwise None."""
    if not token:
        return None

    try:
        payload = verify_access_token(token)
    except ValueError:
        return None

    return TokenPayload(sub=payload["sub"], email=payload["email"], role=payload["role"])


async def get_current_user(
    payload: TokenPayload = Depends(get_token_payload),
) -> User:
    """Load the account behind the token."""
    if not ObjectId.is_valid(payload.sub):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await users.find_one({"_id": ObjectId(payload.sub)})
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    return user


class RoleRequirement:
    """Dependency that admits only tokens whose role claim is high enough."""

    def __init__(self, required_role: Role):
        self.required_role = required_role

    def __call__(self, payload: TokenPayload = Depends(get_token_payload)) -> TokenPayload:
        if not has_role(payload.role, self.required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Administrator privileges required",
            )
        return payload


# Common role dependencies
require_admin = RoleRequirement(Role.ADMIN)
