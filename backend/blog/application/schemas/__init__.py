from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleCardResponse,
    ArticleDetailResponse,
    ArticlePageResponse,
)
from .auth import SessionUser, SessionStatusResponse
from .like import LikeRequest, LikeResponse
from .translate import TranslateRequest, TranslateResponse
from .upload import UploadResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleCardResponse",
    "ArticleDetailResponse",
    "ArticlePageResponse",
    "SessionUser",
    "SessionStatusResponse",
    "LikeRequest",
    "LikeResponse",
    "TranslateRequest",
    "TranslateResponse",
    "UploadResponse",
]
