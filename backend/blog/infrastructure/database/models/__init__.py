from .article import ArticleModel, ArticleLikeModel

__all__ = [
    "ArticleModel",
    "ArticleLikeModel",
]
