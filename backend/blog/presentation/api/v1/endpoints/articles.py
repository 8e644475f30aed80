"""Public article endpoints — published articles only."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blog.application.schemas import (
    ArticleCardResponse,
    ArticleDetailResponse,
    ArticlePageResponse,
)
from blog.application.services import ArticleService
from blog.config import Settings, get_settings
from blog.domain.entities import Article
from blog.domain.exceptions import EntityNotFoundError
from blog.domain.text import make_excerpt
from blog.infrastructure.dependencies import get_article_service
from blog.infrastructure.rendering.markdown_renderer import render_markdown

router = APIRouter(prefix="/articles", tags=["Articles"])


def to_card(article: Article, excerpt_length: int) -> ArticleCardResponse:
    return ArticleCardResponse(
        id=article.id,
        title=article.title,
        genre=article.genre,
        slug=article.slug,
        thumbnail_url=article.thumbnail_url,
        excerpt=make_excerpt(article.content, excerpt_length),
        like_count=article.like_count,
        created_at=article.created_at,
        updated_at=article.updated_at,
    )


async def _to_detail(
    article: Article, service: ArticleService, settings: Settings
) -> ArticleDetailResponse:
    related = await service.related_articles(article, limit=settings.related_articles_limit)
    card = to_card(article, settings.excerpt_length)
    return ArticleDetailResponse(
        **card.model_dump(),
        content=article.content,
        content_html=render_markdown(article.content),
        related=[to_card(a, settings.excerpt_length) for a in related],
    )


@router.get("", response_model=ArticlePageResponse)
async def list_articles(
    genre: str | None = Query(None, max_length=100, description="Genre label; 'all' disables the filter"),
    q: str | None = Query(None, max_length=200, description="Search in title, genre and body"),
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1, le=50),
    service: ArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_settings),
) -> ArticlePageResponse:
    """Paginated feed of published articles, newest update first."""
    feed = await service.feed(
        genre=genre,
        query=q,
        page=page,
        per_page=per_page or settings.feed_page_size,
    )
    return ArticlePageResponse(
        items=[to_card(a, settings.excerpt_length) for a in feed.items],
        total=feed.total,
        page=feed.page,
        per_page=feed.per_page,
        total_pages=feed.total_pages,
        genre=genre,
        q=q,
    )


@router.get("/genres", response_model=list[str])
async def list_genres(
    service: ArticleService = Depends(get_article_service),
) -> list[str]:
    """Genres that have at least one published article."""
    return await service.list_genres(published_only=True)


@router.get("/slug/{slug}", response_model=ArticleDetailResponse)
async def get_article_by_slug(
    slug: str,
    service: ArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_settings),
) -> ArticleDetailResponse:
    """Retrieve a published article by its slug."""
    try:
        article = await service.get_published_by_slug(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return await _to_detail(article, service, settings)


@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_settings),
) -> ArticleDetailResponse:
    """Retrieve a published article with rendered HTML and related articles."""
    try:
        article = await service.get_published_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return await _to_detail(article, service, settings)
