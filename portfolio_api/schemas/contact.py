"""Contact and hire-me form schemas."""

from typing import Literal, Self

from pydantic import EmailStr, Field, model_validator

from portfolio_api.models.base import CamelModel
from portfolio_api.models.contact import ContactStatus, ProjectType
from portfolio_api.schemas.common import NonEmptyStr, OptionalStr

HIRE_ME_MAX_MESSAGE = 500


class ContactCreate(CamelModel):
    """Public submission from either the contact or the hire-me form.

    The contact form sends a ``subject``; the hire-me form sends a
    ``projectType`` and keeps its message short.
    """

    name: NonEmptyStr = Field(..., max_length=100)
    email: EmailStr
    subject: OptionalStr = Field(None, max_length=200)
    message: str = Field(..., min_length=10, max_length=5000)
    project_type: ProjectType | None = None
    budget: OptionalStr = None
    company: OptionalStr = None

    @model_validator(mode="after")
    def check_form_kind(self) -> Self:
        if self.subject is None and self.project_type is None:
            raise ValueError("Either subject or projectType is required")
        if self.subject is None and len(self.message) > HIRE_ME_MAX_MESSAGE:
            raise ValueError(
                f"Message must be at most {HIRE_ME_MAX_MESSAGE} characters."
            )
        return self


class ContactUpdate(CamelModel):
    """Admin edits to a stored message."""

    name: NonEmptyStr | None = None
    email: EmailStr | None = None
    subject: OptionalStr = None
    message: str | None = Field(None, min_length=10, max_length=5000)
    project_type: ProjectType | None = None
    budget: OptionalStr = None
    company: OptionalStr = None
    status: ContactStatus | None = None


class ContactBulkAction(CamelModel):
    """Bulk delete or status change over several messages."""

    ids: list[NonEmptyStr] = Field(..., min_length=1)
    action: Literal["delete", "update"]
    status: ContactStatus | None = None

    @model_validator(mode="after")
    def require_status_for_update(self) -> Self:
        if self.action == "update" and self.status is None:
            raise ValueError("Status is required for 'update' action.")
        return self


class ContactReplyCreate(CamelModel):
    admin: NonEmptyStr
    message: NonEmptyStr
    subject: OptionalStr = None


class ContactCreated(CamelModel):
    id: str


class AIReplyDraft(CamelModel):
    generated_reply: str
