"""Upload response schemas."""

from portfolio_api.models.base import CamelModel


class UploadedFile(CamelModel):
    url: str
