from .article_repository import ArticleRepository
from .like_repository import LikeRepository
from .file_storage import FileStorage, StoredObject
from .translator import Translator

__all__ = [
    "ArticleRepository",
    "LikeRepository",
    "FileStorage",
    "StoredObject",
    "Translator",
]
