"""Admin image upload endpoint."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from blog.application.schemas import UploadResponse
from blog.application.services import UploadService
from blog.domain.exceptions import InvalidUploadError, StorageError
from blog.infrastructure.auth import require_admin
from blog.infrastructure.dependencies import get_upload_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.post("/upload", response_model=UploadResponse)
async def upload_image(
    file: UploadFile | None = File(None),
    service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """Store one image (multipart field ``file``) and return its public URL."""
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded.")

    # one byte past the limit is enough for the size check to reject it
    content = await file.read(service.max_bytes + 1)
    try:
        stored = await service.upload_image(content, file.filename, file.content_type)
    except InvalidUploadError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Upload failed: {e.message}")

    return UploadResponse(
        message="File uploaded successfully!",
        url=stored.url,
        filename=stored.filename,
    )
