"""Integration tests for the like repository against the test SQLite database."""

import pytest

from blog.domain.entities import Article, Like
from blog.domain.exceptions import DuplicateEntityError
from blog.infrastructure.database import async_session_factory
from blog.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyLikeRepository,
)


async def _create_article() -> int:
    async with async_session_factory() as session:
        article = await SQLAlchemyArticleRepository(session).create(
            Article(title="Liked", genre="tech", content="x", published=True, slug="liked")
        )
        await session.commit()
    return article.id


@pytest.mark.asyncio
async def test_duplicate_like_raises_and_session_stays_usable(tables: None):
    article_id = await _create_article()

    async with async_session_factory() as session:
        likes = SQLAlchemyLikeRepository(session)
        assert not await likes.exists(article_id, "anon-1")

        first = await likes.add(Like(article_id=article_id, anonymous_id="anon-1"))
        assert first.id is not None

        with pytest.raises(DuplicateEntityError):
            await likes.add(Like(article_id=article_id, anonymous_id="anon-1"))

        await likes.add(Like(article_id=article_id, anonymous_id="anon-2"))
        await session.commit()

    async with async_session_factory() as session:
        likes = SQLAlchemyLikeRepository(session)
        assert await likes.exists(article_id, "anon-1")
        assert await likes.exists(article_id, "anon-2")


@pytest.mark.asyncio
async def test_rolled_back_session_keeps_no_likes(tables: None):
    article_id = await _create_article()

    async with async_session_factory() as session:
        likes = SQLAlchemyLikeRepository(session)
        assert not await likes.exists(article_id, "anon-1")
        await likes.add(Like(article_id=article_id, anonymous_id="anon-1"))
        await session.rollback()

    async with async_session_factory() as session:
        assert not await SQLAlchemyLikeRepository(session).exists(article_id, "anon-1")
