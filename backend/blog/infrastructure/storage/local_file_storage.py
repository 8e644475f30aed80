"""Local filesystem storage for uploaded images.

Storage layout:
    <upload_dir>/<key>        e.g. uploads/images/2025/05/20250528_101500_123456-cover.png

The app serves ``upload_dir`` at ``url_prefix`` so the returned URL is public.
"""

import logging
from pathlib import Path

from blog.application.interfaces import FileStorage, StoredObject
from blog.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class LocalFileStorage(FileStorage):
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str, url_prefix: str = "/uploads"):
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        self._url_prefix = "/" + url_prefix.strip("/")

    @property
    def backend_name(self) -> str:
        return "local"

    def _path_for(self, key: str) -> Path:
        root = self._upload_dir.resolve()
        path = (root / key).resolve()
        if root not in path.parents:
            raise StorageError(self.backend_name, f"Key escapes upload directory: {key}")
        return path

    async def store(self, key: str, content: bytes, content_type: str) -> StoredObject:
        """Write ``content`` to ``<upload_dir>/<key>``, creating parent folders."""
        dest_path = self._path_for(key)
        try:
            dest_path.parent.mkdir(parents=True, exist_ok=True)
            dest_path.write_bytes(content)
        except OSError as exc:
            raise StorageError(self.backend_name, str(exc)) from exc

        logger.info("Stored file: %s (%d bytes)", dest_path, len(content))

        return StoredObject(
            key=key,
            filename=dest_path.name,
            url=self.public_url(key),
            size=len(content),
            content_type=content_type,
        )

    def public_url(self, key: str) -> str:
        return f"{self._url_prefix}/{key.lstrip('/')}"
