"""Image and resume storage."""

import hashlib
import logging
import time
from pathlib import Path
from uuid import uuid4

import aiofiles
import httpx
from fastapi import HTTPException, UploadFile, status

from portfolio_api.config import settings

logger = logging.getLogger(__name__)

IMAGE_TYPES = {
    "image/jpeg": {".jpg", ".jpeg"},
    "image/png": {".png"},
    "image/webp": {".webp"},
}
IMAGE_EXTENSIONS = set().union(*IMAGE_TYPES.values())
PDF_TYPE = "application/pdf"

CLOUDINARY_UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _size_limit_mb() -> int:
    return settings.MAX_UPLOAD_SIZE // (1024 * 1024)


async def read_limited(file: UploadFile) -> bytes:
    """Read an upload, rejecting empty files and files over the size limit."""
    content = await file.read(settings.MAX_UPLOAD_SIZE + 1)
    if not content:
        raise _bad_request("Uploaded file is empty.")
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise _bad_request(f"File size exceeds {_size_limit_mb()}MB limit.")
    return content


def image_extension(file: UploadFile) -> str:
    """Validate an image upload by content type and extension."""
    extension = Path(file.filename or "").suffix.lower()
    allowed = IMAGE_TYPES.get(file.content_type or "")
    if not allowed or extension not in allowed:
        raise _bad_request("Only JPEG, PNG, and WebP images are allowed.")
    return extension


async def upload_to_cloudinary(content: bytes, filename: str, content_type: str) -> str:
    """Push an image through Cloudinary's signed upload API."""
    params = {"folder": settings.CLOUDINARY_FOLDER, "timestamp": int(time.time())}
    to_sign = "&".join(f"{key}={value}" for key, value in sorted(params.items()))
    signature = hashlib.sha1(
        f"{to_sign}{settings.CLOUDINARY_API_SECRET}".encode()
    ).hexdigest()

    url = CLOUDINARY_UPLOAD_URL.format(cloud_name=settings.CLOUDINARY_CLOUD_NAME)
    try:
        async with httpx.AsyncClient(timeout=30.0) as client:
            response = await client.post(
                url,
                data={**params, "api_key": settings.CLOUDINARY_API_KEY, "signature": signature},
                files={"file": (filename, content, content_type)},
            )
            response.raise_for_status()
        return response.json()["secure_url"]
    except (httpx.HTTPError, KeyError, ValueError) as e:
        logger.error(f"Cloudinary upload failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload image to Cloudinary.",
        )


async def save_local_image(content: bytes, extension: str) -> str:
    """Write an image to the upload directory and return its stored name."""
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    filename = f"{uuid4().hex}{extension}"
    async with aiofiles.open(upload_dir / filename, "wb") as f:
        await f.write(content)
    return filename


async def store_image(file: UploadFile, base_url: str) -> str:
    """Validate and store an uploaded image, returning its public URL."""
    extension = image_extension(file)
    content = await read_limited(file)

    if settings.cloudinary_enabled:
        url = await upload_to_cloudinary(content, file.filename, file.content_type)
    else:
        filename = await save_local_image(content, extension)
        url = f"{base_url.rstrip('/')}{settings.API_PREFIX}/uploads/{filename}"

    logger.info(f"Stored image {file.filename} ({len(content)} bytes)")
    return url


def local_image_path(filename: str) -> Path:
    """Resolve a stored image name to its path on disk."""
    if Path(filename).name != filename or Path(filename).suffix.lower() not in IMAGE_EXTENSIONS:
        raise _bad_request("Invalid file name.")

    path = Path(settings.UPLOAD_DIR) / filename
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found.")
    return path


def resume_path() -> Path:
    return Path(settings.RESUME_DIR) / settings.RESUME_FILENAME


async def store_resume(file: UploadFile) -> Path:
    """Validate a PDF upload and replace the stored resume with it."""
    if file.content_type != PDF_TYPE:
        raise _bad_request("Only PDF files are allowed.")
    content = await read_limited(file)

    path = resume_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        async with aiofiles.open(path, "wb") as f:
            await f.write(content)
    except OSError as e:
        logger.error(f"Failed to save resume: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save resume.",
        )

    logger.info(f"Stored resume ({len(content)} bytes)")
    return path
