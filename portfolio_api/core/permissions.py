"""Role-based access control (RBAC) for the application."""

from enum import Enum


class Role(str, Enum):
    """Account roles carried in the token's role claim."""

    ADMIN = "admin"
    USER = "user"


# Higher ranks include every privilege of the lower ones
ROLE_HIERARCHY: dict[Role, int] = {
    Role.USER: 0,
    Role.ADMIN: 1,
}


def parse_role(value: str | Role | None) -> Role | None:
    """Convert a raw role claim to a Role, or None when unknown."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        return None


def has_role(role: str | Role | None, required: Role) -> bool:
    """Check whether a role meets or exceeds the required role."""
    parsed = parse_role(role)
    if parsed is None:
        return False
    return ROLE_HIERARCHY[parsed] >= ROLE_HIERARCHY[required]
