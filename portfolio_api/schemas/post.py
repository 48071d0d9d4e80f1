"""Blog post schemas."""

from pydantic import Field

from portfolio_api.models.base import CamelModel
from portfolio_api.models.content import ContentStatus
from portfolio_api.schemas.common import HttpUrlStr, NonEmptyStr


class PostCreate(CamelModel):
    """Schema for creating a blog post."""

    title: NonEmptyStr = Field(..., max_length=200)
    content: NonEmptyStr = Field(..., max_length=100_000)
    excerpt: NonEmptyStr = Field(..., max_length=500)
    category: NonEmptyStr
    tags: list[NonEmptyStr]
    image: HttpUrlStr
    featured: bool = False
    status: ContentStatus = ContentStatus.DRAFT
    read_time: NonEmptyStr


class PostUpdate(CamelModel):
    """Schema for updating a blog post."""

    title: NonEmptyStr | None = Field(None, max_length=200)
    content: NonEmptyStr | None = Field(None, max_length=100_000)
    excerpt: NonEmptyStr | None = Field(None, max_length=500)
    category: NonEmptyStr | None = None
    tags: list[NonEmptyStr] | None = None
    image: HttpUrlStr | None = None
    featured: bool | None = None
    status: ContentStatus | None = None
    read_time: NonEmptyStr | None = None
