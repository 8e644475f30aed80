"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article
from blog.domain.exceptions import EntityNotFoundError
from blog.infrastructure.database.models import ArticleLikeModel, ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            genre=model.genre,
            content=model.content,
            published=model.published,
            thumbnail_url=model.thumbnail_url,
            slug=model.slug,
            like_count=model.like_count,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            genre=entity.genre,
            content=entity.content,
            published=entity.published,
            thumbnail_url=entity.thumbnail_url,
            slug=entity.slug,
            like_count=entity.like_count,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id, populate_existing=True)
        return self._to_entity(result) if result else None

    async def get_by_slug(self, slug: str) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self, *, published_only: bool = False) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.updated_at.desc(), ArticleModel.id.desc())
        if published_only:
            stmt = stmt.where(ArticleModel.published.is_(True))
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def slug_exists(self, slug: str, exclude_id: int | None = None) -> bool:
        stmt = select(ArticleModel.id).where(ArticleModel.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(ArticleModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id or 0)
        model.title = article.title
        model.genre = article.genre
        model.content = article.content
        model.published = article.published
        model.thumbnail_url = article.thumbnail_url
        model.slug = article.slug
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.execute(
            delete(ArticleLikeModel).where(ArticleLikeModel.article_id == article_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def increment_like_count(self, article_id: int) -> int:
        # single UPDATE so concurrent likes cannot overwrite each other
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(like_count=ArticleModel.like_count + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise EntityNotFoundError("Article", article_id)
        count = await self._session.scalar(
            select(ArticleModel.like_count).where(ArticleModel.id == article_id)
        )
        return int(count or 0)
