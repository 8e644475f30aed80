"""S3-compatible hosted object storage (AWS S3, Cloudflare R2, Supabase Storage S3 API)."""

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from blog.application.interfaces import FileStorage, StoredObject
from blog.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class S3ObjectStorage(FileStorage):
    """Uploads objects with boto3 and builds their public URL from ``public_base_url``.

    boto3 is blocking, so every call runs in a worker thread.
    """

    def __init__(
        self,
        bucket: str,
        *,
        access_key_id: str,
        secret_access_key: str,
        endpoint_url: str | None = None,
        region: str = "auto",
        public_base_url: str = "",
        client=None,
    ):
        if not bucket:
            raise StorageError("s3", "S3_BUCKET is not configured")
        self._bucket = bucket
        self._endpoint_url = endpoint_url
        self._public_base_url = public_base_url.rstrip("/")
        self._client = client or boto3.client(
            "s3",
            endpoint_url=endpoint_url or None,
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    @property
    def backend_name(self) -> str:
        return "s3"

    async def store(self, key: str, content: bytes, content_type: str) -> StoredObject:
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=content,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.exception("S3 upload failed for %s", key)
            raise StorageError(self.backend_name, f"Upload failed: {exc}") from exc

        logger.info("Uploaded s3://%s/%s (%d bytes)", self._bucket, key, len(content))
        return StoredObject(
            key=key,
            filename=key.rsplit("/", 1)[-1],
            url=self.public_url(key),
            size=len(content),
            content_type=content_type,
        )

    def public_url(self, key: str) -> str:
        key = key.lstrip("/")
        if self._public_base_url:
            return f"{self._public_base_url}/{key}"
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{self._bucket}/{key}"
        return f"https://{self._bucket}.s3.amazonaws.com/{key}"
