"""Environment-driven settings shared by the runtime and the demo host."""

from __future__ import annotations

import os
from typing import Optional

ENV_PREFIX = "MARKPOST_"
DEFAULT_SITE_URL = "http://localhost:3000"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def env_int(name: str, fallback: int) -> int:
    raw = env(name)
    if raw is None:
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


def site_url() -> str:
    """Base URL used when building public post links."""

    return (env("SITE_URL") or DEFAULT_SITE_URL).rstrip("/")


__all__ = [
    "ENV_PREFIX",
    "DEFAULT_SITE_URL",
    "env",
    "env_flag",
    "env_int",
    "site_url",
]
