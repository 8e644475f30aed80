"""Admin article CRUD endpoints — every route requires the admin session."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import ArticleCreate, ArticleUpdate, ArticleResponse
from blog.application.services import ArticleService
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from blog.infrastructure.auth import require_admin
from blog.infrastructure.dependencies import get_article_service

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/articles", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """All articles, drafts included, most recently updated first."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/genres", response_model=list[str])
async def list_genres(
    service: ArticleService = Depends(get_article_service),
) -> list[str]:
    """Genres already in use, for the editor's genre picker."""
    return await service.list_genres()


@router.get("/articles/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID, published or not."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("/articles", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    try:
        article = await service.create_article(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/articles/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article; omitted fields keep their value."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
