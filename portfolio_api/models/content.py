"""Portfolio content documents."""

from enum import Enum

from pydantic import Field

from portfolio_api.models.base import TimestampedDocument


class ContentStatus(str, Enum):
    """Publication state of a content document."""

    DRAFT = "draft"
    PUBLISHED = "published"


class Relationship(str, Enum):
    """How a testimonial author worked with the portfolio owner."""

    SUPERVISOR = "supervisor"
    MENTOR = "mentor"
    COLLEAGUE = "colleague"
    CLIENT = "client"
    MANAGER = "manager"
    TEAM_LEAD = "teamLead"
    STAKEHOLDER = "stakeholder"
    PARTNER = "partner"


class Project(TimestampedDocument):
    """Project showcase entry."""

    title: str
    slug: str
    description: str
    excerpt: str
    technologies: list[str] = Field(default_factory=list)
    category: str
    image: str
    github_url: str | None = None
    live_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    featured: bool = False
    status: ContentStatus = ContentStatus.DRAFT
    views: int = 0
    likes: int = 0


class Post(TimestampedDocument):
    """Blog post."""

    title: str
    slug: str
    content: str
    excerpt: str
    category: str
    tags: list[str] = Field(default_factory=list)
    image: str
    featured: bool = False
    status: ContentStatus = ContentStatus.DRAFT
    read_time: str
    views: int = 0
    likes: int = 0
    comments: int = 0


class Testimonial(TimestampedDocument):
    name: str
    role: str
    company: str
    image: str
    content: str
    rating: int
    relationship: Relationship
    project: str | None = None
    featured: bool = False
    status: ContentStatus = ContentStatus.DRAFT


class Experience(TimestampedDocument):
    company: str
    position: str
    start_date: str
    end_date: str
    location: str
    description: str
    technologies: list[str] = Field(default_factory=list)
    logo: str | None = None


class Certification(TimestampedDocument):
    title: str
    organization: str
    issue_date: str
    description: str | None = None
    badge: str
    color: str
    credential_id: str | None = None
    link: str | None = None
