"""Unit tests for image upload validation and object key building."""

import io
from datetime import datetime, timezone

import pytest
from fastapi import HTTPException, UploadFile
from starlette.datastructures import Headers

from blog.application.interfaces import FileStorage, StoredObject
from blog.application.services import UploadService
from blog.application.services.upload_service import build_object_key
from blog.domain.exceptions import InvalidUploadError, StorageError
from blog.presentation.api.v1.endpoints.uploads import upload_image

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class FakeStorage(FileStorage):
    """Keeps uploads in a dict; can be told to fail."""

    def __init__(self, fail: bool = False):
        self.objects: dict[str, bytes] = {}
        self._fail = fail

    @property
    def backend_name(self) -> str:
        return "fake"

    async def store(self, key: str, content: bytes, content_type: str) -> StoredObject:
        if self._fail:
            raise StorageError(self.backend_name, "bucket unavailable")
        self.objects[key] = content
        return StoredObject(
            key=key,
            filename=key.rsplit("/", 1)[-1],
            url=self.public_url(key),
            size=len(content),
            content_type=content_type,
        )

    def public_url(self, key: str) -> str:
        return f"https://cdn.example.com/{key}"


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def service(storage: FakeStorage) -> UploadService:
    return UploadService(storage=storage, max_bytes=1024)


# ── build_object_key ──


def test_object_key_layout():
    now = datetime(2025, 5, 28, 10, 15, 0, 123456, tzinfo=timezone.utc)
    key = build_object_key("My Cover.PNG", now=now)
    assert key == "images/2025/05/20250528_101500_123456-My_Cover.png"


def test_object_key_sanitises_path_segments():
    now = datetime(2025, 1, 2, tzinfo=timezone.utc)
    key = build_object_key("../../etc/passwd.jpg", now=now)
    assert key.startswith("images/2025/01/")
    assert ".." not in key
    assert key.endswith("-passwd.jpg")


def test_object_key_without_name():
    key = build_object_key("", now=datetime(2025, 1, 2, tzinfo=timezone.utc))
    assert key.endswith("-untitled")


# ── upload_image ──


@pytest.mark.asyncio
async def test_upload_stores_image_and_returns_public_url(service: UploadService, storage: FakeStorage):
    stored = await service.upload_image(PNG_BYTES, "cover.png", "image/png")

    assert stored.url.startswith("https://cdn.example.com/images/")
    assert stored.filename.endswith("-cover.png")
    assert stored.content_type == "image/png"
    assert storage.objects[stored.key] == PNG_BYTES


@pytest.mark.asyncio
async def test_upload_empty_file_is_rejected(service: UploadService):
    with pytest.raises(InvalidUploadError) as exc_info:
        await service.upload_image(b"", "cover.png", "image/png")
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_upload_too_large_is_rejected(service: UploadService):
    with pytest.raises(InvalidUploadError) as exc_info:
        await service.upload_image(b"x" * 2048, "big.png", "image/png")
    assert exc_info.value.status_code == 413


@pytest.mark.asyncio
async def test_upload_non_image_is_rejected(service: UploadService, storage: FakeStorage):
    with pytest.raises(InvalidUploadError) as exc_info:
        await service.upload_image(b"%PDF-1.7", "doc.pdf", "application/pdf")
    assert exc_info.value.status_code == 415
    assert storage.objects == {}


@pytest.mark.asyncio
async def test_upload_octet_stream_falls_back_to_extension(service: UploadService):
    stored = await service.upload_image(PNG_BYTES, "photo.jpg", "application/octet-stream")
    assert stored.content_type == "image/jpeg"


@pytest.mark.asyncio
async def test_upload_storage_failure_propagates():
    service = UploadService(storage=FakeStorage(fail=True), max_bytes=1024)
    with pytest.raises(StorageError):
        await service.upload_image(PNG_BYTES, "cover.png", "image/png")


# ── upload endpoint ──


@pytest.mark.asyncio
async def test_endpoint_reads_at_most_one_byte_past_the_limit(service: UploadService, storage: FakeStorage):
    upload = UploadFile(
        file=io.BytesIO(b"x" * 5000),
        filename="huge.png",
        headers=Headers({"content-type": "image/png"}),
    )

    with pytest.raises(HTTPException) as exc_info:
        await upload_image(file=upload, service=service)

    assert exc_info.value.status_code == 413
    assert upload.file.tell() == service.max_bytes + 1
    assert storage.objects == {}


@pytest.mark.asyncio
async def test_endpoint_accepts_image_at_the_limit(service: UploadService):
    content = PNG_BYTES + b"\x00" * (service.max_bytes - len(PNG_BYTES))
    upload = UploadFile(
        file=io.BytesIO(content),
        filename="exact.png",
        headers=Headers({"content-type": "image/png"}),
    )

    response = await upload_image(file=upload, service=service)

    assert response.filename.endswith("-exact.png")
