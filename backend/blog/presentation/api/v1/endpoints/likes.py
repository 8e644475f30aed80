"""Anonymous like endpoint — idempotent per anonymous id."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import LikeRequest, LikeResponse
from blog.application.services import LikeService
from blog.domain.exceptions import EntityNotFoundError
from blog.infrastructure.dependencies import get_like_service

router = APIRouter(prefix="/likes", tags=["Likes"])


@router.post("/{article_id}", response_model=LikeResponse)
async def like_article(
    article_id: int,
    data: LikeRequest,
    service: LikeService = Depends(get_like_service),
) -> LikeResponse:
    """Register a like; a repeat from the same anonymous id returns the current count."""
    try:
        result = await service.register_like(article_id, data.anonymous_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return LikeResponse(
        message="Already liked." if result.already_liked else "Like registered.",
        article_id=result.article_id,
        like_count=result.like_count,
        already_liked=result.already_liked,
    )
