from .article_service import ArticleService
from .like_service import LikeService
from .translation_service import TranslationService
from .upload_service import UploadService

__all__ = [
    "ArticleService",
    "LikeService",
    "TranslationService",
    "UploadService",
]
