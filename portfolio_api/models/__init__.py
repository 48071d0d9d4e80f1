"""MongoDB document models package."""

from portfolio_api.models.contact import Contact, ContactReply, ContactStatus, ProjectType
from portfolio_api.models.content import (
    Certification,
    ContentStatus,
    Experience,
    Post,
    Project,
    Relationship,
    Testimonial,
)
from portfolio_api.models.user import User

__all__ = [
    "Certification",
    "Contact",
    "ContactReply",
    "ContactStatus",
    "ContentStatus",
    "Experience",
    "Post",
    "Project",
    "ProjectType",
    "Relationship",
    "Testimonial",
    "User",
]
