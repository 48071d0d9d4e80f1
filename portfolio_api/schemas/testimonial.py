"""Testimonial schemas."""

from typing import Annotated

from pydantic import BeforeValidator, Field, StringConstraints

from portfolio_api.models.base import CamelModel
from portfolio_api.models.content import ContentStatus, Relationship
from portfolio_api.schemas.common import HttpUrlStr, blank_to_none

ShortText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
ProjectName = Annotated[ShortText | None, BeforeValidator(blank_to_none)]


class TestimonialCreate(CamelModel):
    """Schema for creating a testimonial."""

    name: ShortText
    role: ShortText
    company: ShortText
    image: HttpUrlStr
    content: str = Field(..., min_length=10, max_length=1000)
    rating: int = Field(..., ge=1, le=5)
    relationship: Relationship
    project: ProjectName = None
    featured: bool = False
    status: ContentStatus = ContentStatus.DRAFT


class TestimonialUpdate(CamelModel):
    """Schema for updating a testimonial."""

    name: ShortText | None = None
    role: ShortText | None = None
    company: ShortText | None = None
    image: HttpUrlStr | None = None
    content: str | None = Field(None, min_length=10, max_length=1000)
    rating: int | None = Field(None, ge=1, le=5)
    relationship: Relationship | None = None
    project: ProjectName = None
    featured: bool | None = None
    status: ContentStatus | None = None
