"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["初めての読書記録：夏目漱石「こころ」"])
    genre: str = Field(..., min_length=1, max_length=100, examples=["読書記録"])
    content: str = Field(..., min_length=1, examples=["## はじめに\n\n人間のエゴイズムと向き合った作品。"])
    published: bool = False
    thumbnail_url: str | None = Field(None, max_length=2048)
    slug: str | None = Field(None, max_length=255)

    @field_validator("title", "genre", "content")
    @classmethod
    def _not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("title", "genre")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    ``thumbnail_url`` and ``slug`` can be sent as ``null`` to clear them;
    leaving them out keeps the stored value.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    genre: str | None = Field(None, min_length=1, max_length=100)
    content: str | None = Field(None, min_length=1)
    published: bool | None = None
    thumbnail_url: str | None = Field(None, max_length=2048)
    slug: str | None = Field(None, max_length=255)

    @field_validator("title", "genre", "content")
    @classmethod
    def _not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("title", "genre")
    @classmethod
    def _strip(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None


class ArticleResponse(BaseModel):
    """Full article as seen by the admin dashboard."""

    id: int
    title: str
    genre: str
    content: str
    published: bool
    thumbnail_url: str | None = None
    slug: str | None = None
    like_count: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleCardResponse(BaseModel):
    """Feed card — everything but the body, plus a plaintext excerpt."""

    id: int
    title: str
    genre: str
    slug: str | None = None
    thumbnail_url: str | None = None
    excerpt: str
    like_count: int = 0
    created_at: datetime
    updated_at: datetime


class ArticleDetailResponse(ArticleCardResponse):
    """Public article page: Markdown source, rendered HTML and related cards."""

    content: str
    content_html: str
    related: list[ArticleCardResponse] = []


class ArticlePageResponse(BaseModel):
    """One page of the public feed."""

    items: list[ArticleCardResponse]
    total: int
    page: int
    per_page: int
    total_pages: int
    genre: str | None = None
    q: str | None = None
