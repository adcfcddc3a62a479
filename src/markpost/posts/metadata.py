"""Derived post metadata: slugs, reading time, tags and public URLs."""

from __future__ import annotations

import math
import re
from typing import List, Optional

from markpost.runtime.settings import site_url

WORDS_PER_MINUTE = 200

_NON_SLUG = re.compile(r"[^a-z0-9]+")
_EDGE_DASH = re.compile(r"^-|-$")
_WHITESPACE = re.compile(r"\s+")


def slugify(title: str) -> str:
    return _EDGE_DASH.sub("", _NON_SLUG.sub("-", title.lower()))


def tag_slug(name: str) -> str:
    return _NON_SLUG.sub("-", name.lower())


def word_count(content: str) -> int:
    # leading/trailing whitespace still yields an (empty) word
    return len(_WHITESPACE.split(content))


def reading_time(content: str, *, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Whole minutes needed to read ``content``, rounded up."""

    return math.ceil(word_count(content) / words_per_minute)


def parse_tags(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def post_url(slug: str, *, base_url: Optional[str] = None) -> str:
    base = (base_url or site_url()).rstrip("/")
    return f"{base}/post/{slug}"


__all__ = [
    "WORDS_PER_MINUTE",
    "parse_tags",
    "post_url",
    "reading_time",
    "slugify",
    "tag_slug",
    "word_count",
]
