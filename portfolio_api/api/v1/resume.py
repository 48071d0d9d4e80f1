"""Resume download and upload."""

from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.responses import FileResponse

from portfolio_api.api.deps import require_admin
from portfolio_api.config import settings
from portfolio_api.schemas.auth import TokenPayload
from portfolio_api.schemas.common import Envelope
from portfolio_api.schemas.media import UploadedFile
from portfolio_api.services.media import PDF_TYPE, resume_path, store_resume

router = APIRouter()


@router.get(
    "",
    response_class=FileResponse,
    summary="Download the resume",
)
async def download_resume() -> FileResponse:
    path = resume_path()
    if not path.is_file():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resume not found.",
        )

    return FileResponse(
        path,
        media_type=PDF_TYPE,
        filename=settings.RESUME_FILENAME,
        headers={"Cache-Control": "public, max-age=3600"},
    )


@router.post(
    "",
    response_model=Envelope[UploadedFile],
    response_model_exclude_none=True,
    summary="Replace the resume",
)
async def upload_resume(
    request: Request,
    file: Optional[UploadFile] = File(None),
    resume: Optional[UploadFile] = File(None),
    admin: TokenPayload = Depends(require_admin),
) -> Envelope:
    """Accept a PDF under the ``file`` or ``resume`` form field."""
    upload = file if file is not None else resume
    if upload is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded.",
        )

    await store_resume(upload)
    url = f"{str(request.base_url).rstrip('/')}{settings.API_PREFIX}/resume"
    return Envelope(data=UploadedFile(url=url), message="Resume uploaded successfully.")
