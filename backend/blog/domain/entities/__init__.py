from .article import Article
from .like import Like, LikeResult

__all__ = [
    "Article",
    "Like",
    "LikeResult",
]
