"""Application service for anonymous likes."""

import logging

from blog.application.interfaces import ArticleRepository, LikeRepository
from blog.domain.entities import Like, LikeResult
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class LikeService:
    """Registers at most one like per (article, anonymous id).

    A repeat call returns the current counter instead of incrementing it.
    """

    def __init__(self, article_repository: ArticleRepository, like_repository: LikeRepository):
        self._articles = article_repository
        self._likes = like_repository

    async def register_like(self, article_id: int, anonymous_id: str) -> LikeResult:
        article = await self._articles.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)

        if await self._likes.exists(article_id, anonymous_id):
            return LikeResult(article_id=article_id, like_count=article.like_count, already_liked=True)

        try:
            await self._likes.add(Like(article_id=article_id, anonymous_id=anonymous_id))
        except DuplicateEntityError:
            # lost a race against a concurrent request with the same id
            current = await self._articles.get_by_id(article_id)
            count = current.like_count if current else article.like_count
            return LikeResult(article_id=article_id, like_count=count, already_liked=True)

        count = await self._articles.increment_like_count(article_id)
        logger.info("Article %s liked by %s, count=%d", article_id, anonymous_id, count)
        return LikeResult(article_id=article_id, like_count=count, already_liked=False)
