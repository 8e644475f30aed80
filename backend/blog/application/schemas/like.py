"""Pydantic DTOs for anonymous likes."""

from pydantic import BaseModel, Field


class LikeRequest(BaseModel):
    """Body of a like call — the browser's locally stored anonymous id."""

    anonymous_id: str = Field(..., min_length=1, max_length=128, pattern=r"\S")


class LikeResponse(BaseModel):
    message: str
    article_id: int
    like_count: int
    already_liked: bool
