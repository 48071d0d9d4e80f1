"""Contact message documents."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from portfolio_api.models.base import CamelModel, MongoDocument, utcnow


class ContactStatus(str, Enum):
    """Inbox state of a contact message."""

    NEW = "new"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


class ProjectType(str, Enum):
    """Engagement type chosen on the hire-me form."""

    FREELANCE = "freelance"
    FULLTIME = "fulltime"
    CONTRACT = "contract"
    OTHER = "other"
    STUDENT = "student"


class ContactReply(CamelModel):
    """Reply recorded by an admin."""

    message: str
    subject: str | None = None
    sent_at: datetime = Field(default_factory=utcnow)
    admin: str


class Contact(MongoDocument):
    """Message submitted through the contact or hire-me form."""

    name: str
    email: str
    subject: str | None = None
    message: str
    project_type: ProjectType | None = None
    budget: str | None = None
    company: str | None = None
    status: ContactStatus = ContactStatus.NEW
    reply: ContactReply | None = None
    created_at: datetime = Field(default_factory=utcnow)
    ip_address: str | None = None
    user_agent: str | None = None
