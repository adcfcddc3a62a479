"""Textual host integration."""

from .controller import TextualToolbarAdapter, TextualUIHooks

__all__ = ["TextualToolbarAdapter", "TextualUIHooks"]
