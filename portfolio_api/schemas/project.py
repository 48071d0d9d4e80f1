"""Project schemas."""

from pydantic import Field

from portfolio_api.models.base import CamelModel
from portfolio_api.models.content import ContentStatus
from portfolio_api.schemas.common import HttpUrlStr, NonEmptyStr, OptionalHttpUrlStr


class ProjectCreate(CamelModel):
    """Schema for creating a project."""

    title: NonEmptyStr = Field(..., max_length=200)
    description: NonEmptyStr
    excerpt: NonEmptyStr = Field(..., max_length=500)
    technologies: list[NonEmptyStr]
    category: NonEmptyStr
    image: HttpUrlStr
    github_url: OptionalHttpUrlStr = None
    live_url: OptionalHttpUrlStr = None
    tags: list[NonEmptyStr]
    featured: bool = False
    status: ContentStatus = ContentStatus.DRAFT


class ProjectUpdate(CamelModel):
    """Schema for updating a project; only supplied fields change."""

    title: NonEmptyStr | None = Field(None, max_length=200)
    description: NonEmptyStr | None = None
    excerpt: NonEmptyStr | None = Field(None, max_length=500)
    technologies: list[NonEmptyStr] | None = None
    category: NonEmptyStr | None = None
    image: HttpUrlStr | None = None
    github_url: OptionalHttpUrlStr = None
    live_url: OptionalHttpUrlStr = None
    tags: list[NonEmptyStr] | None = None
    featured: bool | None = None
    status: ContentStatus | None = None
