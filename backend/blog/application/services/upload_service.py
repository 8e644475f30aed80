"""Image upload service — validates an uploaded image and hands it to object storage."""

import mimetypes
import re
from datetime import datetime, timezone
from pathlib import Path

from blog.application.interfaces import FileStorage, StoredObject
from blog.domain.exceptions import InvalidUploadError
from blog.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("UploadService")

IMAGE_MIMES = frozenset({
    "image/png",
    "image/jpeg",
    "image/webp",
    "image/gif",
    "image/svg+xml",
    "image/avif",
})


def _datetime_stamp(now: datetime | None = None) -> str:
    """Return a UTC datetime stamp suitable for filenames: YYYYMMDD_HHmmss_ffffff."""
    return (now or datetime.now(timezone.utc)).strftime("%Y%m%d_%H%M%S_%f")


def _sanitise(name: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", name)[:max_len].strip("_") or "image"


def build_object_key(filename: str, now: datetime | None = None) -> str:
    """``images/<YYYY>/<MM>/<stamp>-<stem>.<ext>`` — unique per upload, keeps the extension."""
    now = now or datetime.now(timezone.utc)
    path = Path(filename or "untitled")
    stem = _sanitise(path.stem)
    suffix = path.suffix.lower()
    if not re.fullmatch(r"\.[a-z0-9]{1,8}", suffix):
        suffix = ""
    return f"images/{now:%Y}/{now:%m}/{_datetime_stamp(now)}-{stem}{suffix}"


class UploadService:
    """Orchestrates: validate → build key → store → return public URL."""

    def __init__(self, storage: FileStorage, max_bytes: int):
        self._storage = storage
        self._max_bytes = max_bytes

    @property
    def max_bytes(self) -> int:
        """Largest accepted upload, in bytes."""
        return self._max_bytes

    async def upload_image(
        self, content: bytes, filename: str | None, content_type: str | None
    ) -> StoredObject:
        filename = filename or "untitled"
        plog.step_start(PipelineStage.UPLOAD, f"Received '{filename}'", size_bytes=len(content))

        mime = self._validate(content, filename, content_type)
        key = build_object_key(filename)

        with plog.timed_step(PipelineStage.STORAGE, f"Storing '{key}'", backend=self._storage.backend_name):
            stored = await self._storage.store(key, content, mime)

        plog.step_complete(PipelineStage.COMPLETE, f"Public URL {stored.url}")
        return stored

    def _validate(self, content: bytes, filename: str, content_type: str | None) -> str:
        if not content:
            plog.step_error(PipelineStage.VALIDATE, f"'{filename}' is empty")
            raise InvalidUploadError(400, "No file uploaded.")

        if len(content) > self._max_bytes:
            plog.step_error(PipelineStage.VALIDATE, f"'{filename}' exceeds {self._max_bytes} bytes")
            raise InvalidUploadError(413, "File size limit exceeded.")

        mime = (content_type or "").split(";")[0].strip().lower()
        if not mime or mime == "application/octet-stream":
            mime = (mimetypes.guess_type(filename)[0] or "").lower()
        if mime not in IMAGE_MIMES:
            plog.step_error(PipelineStage.VALIDATE, f"'{filename}' has type '{mime or 'unknown'}'")
            raise InvalidUploadError(415, "Only image uploads are allowed.")

        plog.detail("Validated", mime_type=mime)
        return mime
