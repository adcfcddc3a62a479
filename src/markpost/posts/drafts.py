"""Validation of the post editor form into a storable draft."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Mapping, Optional

from .metadata import parse_tags, reading_time, slugify

STATUS_DRAFT = "draft"
STATUS_PUBLISHED = "published"


class PostValidationError(ValueError):
    """Raised when the submitted form is missing required fields."""

    def __init__(self, message: str, *, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


def _field(form: Mapping[str, Optional[str]], name: str) -> Optional[str]:
    value = form.get(name)
    return None if value is None else str(value)


@dataclass(slots=True)
class PostDraft:
    title: str
    content: str
    slug: str
    reading_time: int
    status: str = STATUS_DRAFT
    excerpt: Optional[str] = None
    category_id: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    published_at: Optional[datetime] = None

    @property
    def is_published(self) -> bool:
        return self.status == STATUS_PUBLISHED

    @classmethod
    def from_form(
        cls, form: Mapping[str, Optional[str]], *, now: Optional[datetime] = None
    ) -> "PostDraft":
        title = _field(form, "title")
        content = _field(form, "content")
        missing = tuple(
            name for name, value in (("title", title), ("content", content)) if not value
        )
        if missing:
            raise PostValidationError("Title and content are required", fields=missing)

        status = _field(form, "status") or STATUS_DRAFT
        published_at = None
        if status == STATUS_PUBLISHED:
            published_at = now or datetime.now(timezone.utc)

        return cls(
            title=title,
            content=content,
            slug=slugify(title),
            reading_time=reading_time(content),
            status=status,
            excerpt=_field(form, "excerpt"),
            category_id=_field(form, "categoryId") or None,
            meta_title=_field(form, "metaTitle"),
            meta_description=_field(form, "metaDescription"),
            tags=parse_tags(_field(form, "tags")),
            published_at=published_at,
        )


__all__ = ["PostDraft", "PostValidationError", "STATUS_DRAFT", "STATUS_PUBLISHED"]
