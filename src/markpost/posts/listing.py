"""Public blog listing: search, category filtering and related posts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Collection, Iterable, List, Optional

from .drafts import STATUS_PUBLISHED


@dataclass(frozen=True, slots=True)
class PostSummary:
    id: str
    title: str
    slug: str
    excerpt: Optional[str] = None
    category_slug: Optional[str] = None
    status: str = STATUS_PUBLISHED
    published_at: Optional[datetime] = None
    reading_time: int = 1

    def matches(self, search: str) -> bool:
        needle = search.casefold()
        haystacks = (self.title, self.excerpt or "")
        return any(needle in hay.casefold() for hay in haystacks)


def _newest_first(post: PostSummary) -> float:
    return post.published_at.timestamp() if post.published_at else float("-inf")


def filter_posts(
    posts: Iterable[PostSummary],
    *,
    search: Optional[str] = None,
    category: Optional[str] = None,
    known_categories: Optional[Collection[str]] = None,
) -> List[PostSummary]:
    """Published posts matching ``search`` and ``category``, newest first.

    An unknown category slug is ignored rather than emptying the listing.
    """

    selected = [post for post in posts if post.status == STATUS_PUBLISHED]
    if category and (known_categories is None or category in known_categories):
        selected = [post for post in selected if post.category_slug == category]
    if search:
        selected = [post for post in selected if post.matches(search)]
    return sorted(selected, key=_newest_first, reverse=True)


def related_posts(
    posts: Iterable[PostSummary], current_id: str, *, limit: int = 3
) -> List[PostSummary]:
    related = [
        post
        for post in posts
        if post.status == STATUS_PUBLISHED and post.id != current_id
    ]
    return related[:limit]


__all__ = ["PostSummary", "filter_posts", "related_posts"]
