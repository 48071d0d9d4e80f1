"""User account documents."""

from datetime import datetime

from portfolio_api.core.permissions import Role
from portfolio_api.models.base import TimestampedDocument


class User(TimestampedDocument):
    """Account that can sign in to the admin dashboard."""

    email: str
    password: str
    name: str
    role: Role = Role.USER
    photo: str | None = None
    is_active: bool = True
    last_login: datetime | None = None
