"""Certification schemas."""

from pydantic import Field

from portfolio_api.models.base import CamelModel
from portfolio_api.schemas.common import NonEmptyStr, OptionalHttpUrlStr, OptionalStr


class CertificationCreate(CamelModel):
    """Schema for creating a certification."""

    title: NonEmptyStr = Field(..., max_length=100)
    organization: NonEmptyStr = Field(..., max_length=100)
    issue_date: NonEmptyStr = Field(..., max_length=10)
    description: OptionalStr = None
    badge: NonEmptyStr
    color: NonEmptyStr
    credential_id: OptionalStr = None
    link: OptionalHttpUrlStr = None


class CertificationUpdate(CamelModel):
    """Schema for updating a certification."""

    title: NonEmptyStr | None = Field(None, max_length=100)
    organization: NonEmptyStr | None = Field(None, max_length=100)
    issue_date: NonEmptyStr | None = Field(None, max_length=10)
    description: OptionalStr = None
    badge: NonEmptyStr | None = None
    color: NonEmptyStr | None = None
    credential_id: OptionalStr = None
    link: OptionalHttpUrlStr = None
