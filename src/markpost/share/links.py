"""Platform share URLs and the character-count summary shown next to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from .composer import SHARE_BUDGET, ShareTarget, compose

TWITTER_INTENT_URL = "https://twitter.com/intent/tweet"
LINKEDIN_SHARE_URL = "https://www.linkedin.com/sharing/share-offsite/"
COPY_FEEDBACK_SECONDS = 2.0

# Same unreserved set as JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def twitter_share_url(
    title: str,
    url: str,
    excerpt: Optional[str] = None,
    author: Optional[str] = None,
) -> str:
    text = compose(ShareTarget.TWITTER, title, url, excerpt, author)
    return f"{TWITTER_INTENT_URL}?text={encode_uri_component(text)}"


def linkedin_share_url(title: str, url: str, excerpt: Optional[str] = None) -> str:
    query = f"url={encode_uri_component(url)}&title={encode_uri_component(title)}"
    if excerpt:
        query += f"&summary={encode_uri_component(excerpt)}"
    return f"{LINKEDIN_SHARE_URL}?{query}"


@dataclass(frozen=True, slots=True)
class ShareSummary:
    """Everything a share bar needs for one post."""

    twitter_text: str
    linkedin_text: str
    twitter_url: str
    linkedin_url: str
    budget: int = SHARE_BUDGET

    @property
    def clipboard_text(self) -> str:
        return self.twitter_text

    @property
    def twitter_length(self) -> int:
        return len(self.twitter_text)

    @property
    def linkedin_length(self) -> int:
        return len(self.linkedin_text)

    @property
    def over_budget(self) -> bool:
        return self.twitter_length > self.budget

    def counter_labels(self) -> tuple[str, str]:
        return (
            f"X: {self.twitter_length}/{self.budget}",
            f"LinkedIn: {self.linkedin_length} chars",
        )


def build_share_summary(
    title: str,
    url: str,
    excerpt: Optional[str] = None,
    author: Optional[str] = None,
) -> ShareSummary:
    return ShareSummary(
        twitter_text=compose(ShareTarget.TWITTER, title, url, excerpt, author),
        linkedin_text=compose(ShareTarget.LINKEDIN, title, url, excerpt, author),
        twitter_url=twitter_share_url(title, url, excerpt, author),
        linkedin_url=linkedin_share_url(title, url, excerpt),
    )


__all__ = [
    "COPY_FEEDBACK_SECONDS",
    "LINKEDIN_SHARE_URL",
    "ShareSummary",
    "TWITTER_INTENT_URL",
    "build_share_summary",
    "encode_uri_component",
    "linkedin_share_url",
    "twitter_share_url",
]
