"""Public feed pipeline — filter, search, sort and paginate an in-memory article list."""

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from blog.domain.entities import Article
from blog.domain.text import markdown_to_plaintext

ALL_GENRES = "all"


@dataclass
class FeedPage:
    """One page of the public feed plus the numbers a pager needs."""

    items: list[Article]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))


def only_published(articles: Iterable[Article]) -> list[Article]:
    return [a for a in articles if a.published]


def filter_by_genre(articles: Iterable[Article], genre: str | None) -> list[Article]:
    """Keep articles whose genre equals ``genre``; ``None``/blank/``all`` keep everything."""
    if genre is None or not genre.strip() or genre == ALL_GENRES:
        return list(articles)
    return [a for a in articles if a.genre == genre]


def search(articles: Iterable[Article], query: str | None) -> list[Article]:
    """Case-insensitive substring match over title, genre and plaintext content."""
    if query is None or not query.strip():
        return list(articles)
    needle = query.strip().casefold()
    return [
        a
        for a in articles
        if needle in a.title.casefold()
        or needle in a.genre.casefold()
        or needle in markdown_to_plaintext(a.content).casefold()
    ]


def newest_first(articles: Iterable[Article]) -> list[Article]:
    return sorted(articles, key=lambda a: a.updated_at, reverse=True)


def paginate(articles: Sequence[Article], page: int, per_page: int) -> FeedPage:
    """Slice out ``page`` (1-based). Pages past the end are empty, not an error."""
    if page < 1:
        raise ValueError("page must be >= 1")
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    start = (page - 1) * per_page
    return FeedPage(
        items=list(articles[start : start + per_page]),
        total=len(articles),
        page=page,
        per_page=per_page,
    )


def build_feed(
    articles: Iterable[Article],
    *,
    genre: str | None = None,
    query: str | None = None,
    page: int = 1,
    per_page: int = 10,
) -> FeedPage:
    """Published articles → genre filter → search → newest first → page slice."""
    selected = only_published(articles)
    selected = filter_by_genre(selected, genre)
    selected = search(selected, query)
    return paginate(newest_first(selected), page, per_page)


def distinct_genres(articles: Iterable[Article]) -> list[str]:
    """Sorted unique non-blank genre labels."""
    return sorted({a.genre.strip() for a in articles if a.genre and a.genre.strip()})


def pick_related(
    current: Article,
    articles: Iterable[Article],
    limit: int = 3,
    rng: random.Random | None = None,
) -> list[Article]:
    """Up to ``limit`` other published articles of the same genre, in random order."""
    candidates = [
        a
        for a in articles
        if a.id != current.id and a.published and a.genre == current.genre
    ]
    (rng or random).shuffle(candidates)
    return candidates[:limit]
