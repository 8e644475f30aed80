"""Application service (use case) for Article operations."""

import logging

from blog.application.interfaces import ArticleRepository
from blog.application.schemas import ArticleCreate, ArticleUpdate
from blog.domain.entities import Article
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from blog.domain.feed import FeedPage, build_feed, distinct_genres, pick_related
from blog.domain.text import slugify

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    # ── Admin ────────────────────────────────────────────────────────

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def list_genres(self, *, published_only: bool = False) -> list[str]:
        articles = await self._repository.get_all(published_only=published_only)
        return distinct_genres(articles)

    async def create_article(self, data: ArticleCreate) -> Article:
        slug = await self._resolve_slug(data.slug, data.title)
        article = Article(
            title=data.title,
            genre=data.genre,
            content=data.content,
            published=data.published,
            thumbnail_url=data.thumbnail_url or None,
            slug=slug,
        )
        created = await self._repository.create(article)
        logger.info("Created article %s (slug=%s, published=%s)", created.id, created.slug, created.published)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        sent = data.model_fields_set

        kwargs: dict = {
            "title": data.title,
            "genre": data.genre,
            "content": data.content,
            "published": data.published,
        }
        if "thumbnail_url" in sent:
            kwargs["thumbnail_url"] = data.thumbnail_url or None
        if "slug" in sent:
            slug = slugify(data.slug) if data.slug else ""
            if slug and await self._repository.slug_exists(slug, exclude_id=article_id):
                raise DuplicateEntityError("Article", "slug", slug)
            kwargs["slug"] = slug or None

        article.update(**kwargs)
        updated = await self._repository.update(article)
        logger.info("Updated article %s (fields=%s)", article_id, sorted(sent))
        return updated

    async def delete_article(self, article_id: int) -> bool:
        exists = await self._repository.get_by_id(article_id)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        deleted = await self._repository.delete(article_id)
        logger.info("Deleted article %s", article_id)
        return deleted

    # ── Public ───────────────────────────────────────────────────────

    async def get_published_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None or not article.published:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_published_by_slug(self, slug: str) -> Article:
        article = await self._repository.get_by_slug(slug)
        if article is None or not article.published:
            raise EntityNotFoundError("Article", slug)
        return article

    async def feed(
        self,
        *,
        genre: str | None = None,
        query: str | None = None,
        page: int = 1,
        per_page: int = 10,
    ) -> FeedPage:
        articles = await self._repository.get_all(published_only=True)
        return build_feed(articles, genre=genre, query=query, page=page, per_page=per_page)

    async def related_articles(self, article: Article, limit: int = 3) -> list[Article]:
        if limit <= 0:
            return []
        articles = await self._repository.get_all(published_only=True)
        return pick_related(article, articles, limit=limit)

    # ── Helpers ──────────────────────────────────────────────────────

    async def _resolve_slug(self, requested: str | None, title: str) -> str | None:
        """Explicit slugs must be free; derived ones get a numeric suffix until free.

        A requested slug with nothing sluggable in it counts as not given.
        """
        slug = slugify(requested) if requested else ""
        if slug:
            if await self._repository.slug_exists(slug):
                raise DuplicateEntityError("Article", "slug", slug)
            return slug

        base = slugify(title)
        if not base:
            return None
        slug = base
        suffix = 2
        while await self._repository.slug_exists(slug):
            slug = f"{base}-{suffix}"
            suffix += 1
        return slug
