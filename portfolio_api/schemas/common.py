"""Shared schema types and the response envelope."""

from typing import Annotated, Generic, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

from portfolio_api.models.base import CamelModel

DataT = TypeVar("DataT")

_http_url = TypeAdapter(HttpUrl)


def validate_http_url(value: str) -> str:
    """Reject anything that is not an absolute http(s) URL."""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL")
    return value


HttpUrlStr = Annotated[str, AfterValidator(validate_http_url)]

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def blank_to_none(value: str | None) -> str | None:
    """Treat empty form fields as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalHttpUrlStr = Annotated[HttpUrlStr | None, BeforeValidator(blank_to_none)]
OptionalStr = Annotated[str | None, BeforeValidator(blank_to_none)]


class Envelope(BaseModel, Generic[DataT]):
    """Wrapper returned by every JSON endpoint."""

    success: bool = True
    data: DataT | None = None
    message: str | None = None


class AffectedCount(CamelModel):
    """Result of a bulk operation."""

    affected_count: int
