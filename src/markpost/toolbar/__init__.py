"""Declarative toolbar registry, default buttons and the session runner."""

from .defaults import DEFAULT_ACTIONS, IMAGE_PROMPT, LINK_PROMPT, load_default_toolbar
from .models import ToolbarAction
from .registry import RegistryStats, ToolbarConflictError, ToolbarRegistry
from .session import ToolbarSession, UrlProvider

__all__ = [
    "DEFAULT_ACTIONS",
    "IMAGE_PROMPT",
    "LINK_PROMPT",
    "RegistryStats",
    "ToolbarAction",
    "ToolbarConflictError",
    "ToolbarRegistry",
    "ToolbarSession",
    "UrlProvider",
    "load_default_toolbar",
]
