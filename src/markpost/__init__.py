"""UI-agnostic markdown authoring and sharing engine for a single-author blog."""

__all__ = [
    "adapters",
    "buffer",
    "editor",
    "posts",
    "runtime",
    "share",
    "toolbar",
]

__version__ = "0.1.0"
