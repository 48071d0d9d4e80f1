"""Experience schemas."""

from portfolio_api.models.base import CamelModel
from portfolio_api.schemas.common import NonEmptyStr, OptionalStr


class ExperienceCreate(CamelModel):
    company: NonEmptyStr
    position: NonEmptyStr
    start_date: NonEmptyStr
    end_date: NonEmptyStr
    location: NonEmptyStr
    description: NonEmptyStr
    technologies: list[NonEmptyStr]
    logo: OptionalStr = None


class ExperienceUpdate(CamelModel):
    company: NonEmptyStr | None = None
    position: NonEmptyStr | None = None
    start_date: NonEmptyStr | None = None
    end_date: NonEmptyStr | None = None
    location: NonEmptyStr | None = None
    description: NonEmptyStr | None = None
    technologies: list[NonEmptyStr] | None = None
    logo: OptionalStr = None
