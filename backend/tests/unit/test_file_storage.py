"""Unit tests for the local and S3-compatible storage adapters."""

import pytest
from botocore.exceptions import ClientError

from blog.application.interfaces import FileStorage
from blog.domain.exceptions import StorageError
from blog.infrastructure.storage.local_file_storage import LocalFileStorage
from blog.infrastructure.storage.s3_object_storage import S3ObjectStorage


# ── LocalFileStorage ──


@pytest.mark.asyncio
async def test_local_store_writes_file_and_builds_url(tmp_path):
    storage = LocalFileStorage(upload_dir=str(tmp_path), url_prefix="/uploads/")

    stored = await storage.store("images/2025/05/a-cover.png", b"data", "image/png")

    assert (tmp_path / "images/2025/05/a-cover.png").read_bytes() == b"data"
    assert stored.url == "/uploads/images/2025/05/a-cover.png"
    assert stored.filename == "a-cover.png"
    assert stored.size == 4


@pytest.mark.asyncio
async def test_local_rejects_keys_outside_upload_dir(tmp_path):
    storage = LocalFileStorage(upload_dir=str(tmp_path / "uploads"))
    with pytest.raises(StorageError):
        await storage.store("../escape.png", b"data", "image/png")


# ── S3ObjectStorage ──


class FakeS3Client:
    """Records boto3 calls; ``fail`` makes put_object raise like a denied bucket."""

    def __init__(self, fail: bool = False):
        self.objects: dict[str, dict] = {}
        self._fail = fail

    def put_object(self, **kwargs):
        if self._fail:
            raise ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")
        self.objects[kwargs["Key"]] = kwargs
        return {"ETag": '"abc"'}


def _s3(client: FakeS3Client, **kwargs) -> S3ObjectStorage:
    return S3ObjectStorage(
        "blog-images",
        access_key_id="key",
        secret_access_key="secret",
        client=client,
        **kwargs,
    )


@pytest.mark.asyncio
async def test_s3_store_puts_object_with_content_type():
    client = FakeS3Client()
    storage = _s3(client, public_base_url="https://img.example.com/")

    stored = await storage.store("images/2025/05/a.webp", b"data", "image/webp")

    assert client.objects["images/2025/05/a.webp"]["ContentType"] == "image/webp"
    assert client.objects["images/2025/05/a.webp"]["Bucket"] == "blog-images"
    assert stored.url == "https://img.example.com/images/2025/05/a.webp"


@pytest.mark.asyncio
async def test_s3_store_failure_raises_storage_error():
    with pytest.raises(StorageError):
        await _s3(FakeS3Client(fail=True)).store("images/a.png", b"data", "image/png")


def test_s3_public_url_fallbacks():
    assert _s3(FakeS3Client(), endpoint_url="https://r2.example.com").public_url("a.png") == (
        "https://r2.example.com/blog-images/a.png"
    )
    assert _s3(FakeS3Client()).public_url("/a.png") == "https://blog-images.s3.amazonaws.com/a.png"


def test_s3_requires_bucket():
    with pytest.raises(StorageError):
        S3ObjectStorage("", access_key_id="k", secret_access_key="s", client=FakeS3Client())


def test_storage_port_only_stores_and_resolves_urls():
    assert FileStorage.__abstractmethods__ == {"backend_name", "store", "public_url"}
    assert not hasattr(LocalFileStorage, "delete")
    assert not hasattr(S3ObjectStorage, "delete")
