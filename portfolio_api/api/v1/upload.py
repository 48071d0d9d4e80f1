"""Image upload endpoints."""

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import FileResponse

from portfolio_api.api.deps import require_admin
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import Envelope
from portfolio_api.schemas.media import UploadedFile
from portfolio_api.services.media import local_image_path, store_image

router = APIRouter()


@router.post(
    "/upload",
    response_model=Envelope[UploadedFile],
    response_model_exclude_none=True,
    summary="Upload an image",
)
async def upload_image(
    request: Request,
    file: UploadFile = File(...),
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Store a JPEG, PNG or WebP image and return its public URL."""
    url = await store_image(file, str(request.base_url))
    return Envelope(data=UploadedFile(url=url), message="Image uploaded successfully.")


@router.get(
    "/upload",
    response_model=Envelope,
    response_model_exclude_none=True,
    summary="Upload route status",
)
async def upload_status() -> Envelope:
    return Envelope(message="Upload route active")


@router.get(
    "/uploads/{filename}",
    response_class=FileResponse,
    summary="Serve a locally stored image",
)
async def serve_image(filename: str) -> FileResponse:
    return FileResponse(local_image_path(filename))
