"""Post metadata, draft validation and listing helpers."""

from .drafts import STATUS_DRAFT, STATUS_PUBLISHED, PostDraft, PostValidationError
from .listing import PostSummary, filter_posts, related_posts
from .metadata import (
    WORDS_PER_MINUTE,
    parse_tags,
    post_url,
    reading_time,
    slugify,
    tag_slug,
    word_count,
)

__all__ = [
    "PostDraft",
    "PostSummary",
    "PostValidationError",
    "STATUS_DRAFT",
    "STATUS_PUBLISHED",
    "WORDS_PER_MINUTE",
    "filter_posts",
    "parse_tags",
    "post_url",
    "reading_time",
    "related_posts",
    "slugify",
    "tag_slug",
    "word_count",
]
