"""SQLAlchemy implementation of the LikeRepository port."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import LikeRepository
from blog.domain.entities import Like
from blog.domain.exceptions import DuplicateEntityError
from blog.infrastructure.database.models import ArticleLikeModel


class SQLAlchemyLikeRepository(LikeRepository):
    """Relies on the (article_id, anonymous_id) unique constraint for deduplication."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def exists(self, article_id: int, anonymous_id: str) -> bool:
        stmt = (
            select(ArticleLikeModel.id)
            .where(
                ArticleLikeModel.article_id == article_id,
                ArticleLikeModel.anonymous_id == anonymous_id,
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def add(self, like: Like) -> Like:
        model = ArticleLikeModel(
            article_id=like.article_id,
            anonymous_id=like.anonymous_id,
            created_at=like.created_at,
        )
        try:
            # savepoint so a constraint violation leaves the outer transaction usable
            async with self._session.begin_nested():
                self._session.add(model)
        except IntegrityError as exc:
            raise DuplicateEntityError("Like", "anonymous_id", like.anonymous_id) from exc
        like.id = model.id
        return like
