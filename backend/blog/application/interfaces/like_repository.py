"""Port for anonymous like records."""

from abc import ABC, abstractmethod

from blog.domain.entities import Like


class LikeRepository(ABC):
    """Stores one row per (article, anonymous id) pair."""

    @abstractmethod
    async def exists(self, article_id: int, anonymous_id: str) -> bool:
        """Whether this anonymous id has already liked the article."""
        ...

    @abstractmethod
    async def add(self, like: Like) -> Like:
        """Persist a like.

        Raises DuplicateEntityError when the pair is already stored.
        """
        ...
