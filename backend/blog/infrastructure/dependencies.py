"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog.config import get_settings
from blog.application.interfaces import FileStorage, Translator
from blog.application.services import (
    ArticleService,
    LikeService,
    TranslationService,
    UploadService,
)
from blog.infrastructure.database.session import get_db_session
from blog.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyLikeRepository,
)
from blog.infrastructure.storage.local_file_storage import LocalFileStorage
from blog.infrastructure.storage.s3_object_storage import S3ObjectStorage
from blog.infrastructure.translation import GoogleTranslateClient


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_like_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LikeService, None]:
    """Provides a LikeService sharing one session between articles and likes."""
    yield LikeService(
        article_repository=SQLAlchemyArticleRepository(session),
        like_repository=SQLAlchemyLikeRepository(session),
    )


@lru_cache
def get_file_storage() -> FileStorage:
    """Storage backend chosen by STORAGE_BACKEND (``local`` or ``s3``)."""
    settings = get_settings()
    if settings.storage_backend.lower() == "s3":
        return S3ObjectStorage(
            settings.s3_bucket,
            access_key_id=settings.s3_access_key_id,
            secret_access_key=settings.s3_secret_access_key,
            endpoint_url=settings.s3_endpoint_url,
            region=settings.s3_region,
            public_base_url=settings.s3_public_base_url,
        )
    return LocalFileStorage(upload_dir=settings.upload_dir, url_prefix=settings.upload_url_prefix)


async def get_upload_service(
    storage: FileStorage = Depends(get_file_storage),
) -> AsyncGenerator[UploadService, None]:
    """Provides an UploadService bound to the configured storage backend."""
    settings = get_settings()
    yield UploadService(storage=storage, max_bytes=settings.max_upload_bytes)


def get_translator() -> Translator:
    settings = get_settings()
    return GoogleTranslateClient(
        api_key=settings.google_translate_api_key,
        base_url=settings.google_translate_base_url,
        timeout=settings.translate_timeout,
    )


async def get_translation_service(
    translator: Translator = Depends(get_translator),
) -> AsyncGenerator[TranslationService, None]:
    """Provides a TranslationService backed by Google Translate."""
    yield TranslationService(translator)
