"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None:
        """Retrieve a single article by its slug."""
        ...

    @abstractmethod
    async def get_all(self, *, published_only: bool = False) -> list[Article]:
        """Retrieve every article, newest update first."""
        ...

    @abstractmethod
    async def slug_exists(self, slug: str, exclude_id: int | None = None) -> bool:
        """Whether another article already uses ``slug``."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def increment_like_count(self, article_id: int) -> int:
        """Atomically add one to the like counter and return the new value."""
        ...
