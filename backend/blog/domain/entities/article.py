"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Article:
    """Core domain entity representing a blog post written in Markdown."""

    title: str
    genre: str
    content: str
    published: bool = False
    thumbnail_url: str | None = None
    slug: str | None = None
    like_count: int = 0
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        title: str | None = None,
        genre: str | None = None,
        content: str | None = None,
        published: bool | None = None,
        thumbnail_url: str | None = ...,  # type: ignore[assignment]
        slug: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Update article fields and refresh the updated_at timestamp.

        ``thumbnail_url`` and ``slug`` use ``...`` for "leave as is" so that
        an explicit ``None`` clears them.
        """
        if title is not None:
            self.title = title
        if genre is not None:
            self.genre = genre
        if content is not None:
            self.content = content
        if published is not None:
            self.published = published
        if thumbnail_url is not ...:
            self.thumbnail_url = thumbnail_url
        if slug is not ...:
            self.slug = slug
        self.updated_at = datetime.now(timezone.utc)
