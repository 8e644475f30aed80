"""Domain entity — one anonymous visitor liking one article."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Like:
    """Associates a browser-generated anonymous id with an article.

    At most one Like exists per (article_id, anonymous_id) pair.
    """

    article_id: int
    anonymous_id: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class LikeResult:
    """Outcome of a like request: the counter after it and whether it was a repeat."""

    article_id: int
    like_count: int
    already_liked: bool
