"""Compose ready-to-send share text for a published post."""

from __future__ import annotations

from enum import Enum
from typing import Optional

SHARE_BUDGET = 280
URL_SLACK = 20
ELLIPSIS = "..."
SHARE_PREFIX = "📝 "
READ_MORE = "\n\nRead more:"


class ShareTarget(str, Enum):
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    CLIPBOARD = "clipboard"

    @property
    def budgeted(self) -> bool:
        return self is not ShareTarget.LINKEDIN


def compose_full_text(
    title: str,
    url: str,
    excerpt: Optional[str] = None,
    author: Optional[str] = None,
) -> str:
    text = f"{SHARE_PREFIX}{title}"
    if excerpt:
        text += f"\n\n{excerpt}"
    if author:
        text += f"\n\nBy {author}"
    return text + READ_MORE + url


def truncate_share_text(
    text: str, *, title: str, url: str, max_length: int = SHARE_BUDGET
) -> str:
    """Fit ``text`` into ``max_length`` characters.

    When the URL leaves no room, the title alone is returned (trimmed with an
    ellipsis if it is itself too long); otherwise the head of ``text`` is kept
    and the URL's reserved room is given up to the ellipsis.
    """

    if len(text) <= max_length:
        return text

    available = max_length - (len(url) + URL_SLACK)
    if available <= 0:
        if len(title) > max_length:
            return title[: max_length - len(ELLIPSIS)] + ELLIPSIS
        return title

    return text[: max(0, available - len(ELLIPSIS))] + ELLIPSIS


def compose(
    target: ShareTarget | str,
    title: str,
    url: str,
    excerpt: Optional[str] = None,
    author: Optional[str] = None,
) -> str:
    target = ShareTarget(target)
    full_text = compose_full_text(title, url, excerpt, author)
    if not target.budgeted:
        return full_text
    return truncate_share_text(full_text, title=title, url=url)


__all__ = [
    "ELLIPSIS",
    "READ_MORE",
    "SHARE_BUDGET",
    "SHARE_PREFIX",
    "ShareTarget",
    "URL_SLACK",
    "compose",
    "compose_full_text",
    "truncate_share_text",
]
