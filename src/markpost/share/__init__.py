"""Share-text composition and platform share links."""

from .composer import (
    SHARE_BUDGET,
    ShareTarget,
    compose,
    compose_full_text,
    truncate_share_text,
)
from .links import (
    COPY_FEEDBACK_SECONDS,
    ShareSummary,
    build_share_summary,
    encode_uri_component,
    linkedin_share_url,
    twitter_share_url,
)

__all__ = [
    "COPY_FEEDBACK_SECONDS",
    "SHARE_BUDGET",
    "ShareSummary",
    "ShareTarget",
    "build_share_summary",
    "compose",
    "compose_full_text",
    "encode_uri_component",
    "linkedin_share_url",
    "truncate_share_text",
    "twitter_share_url",
]
