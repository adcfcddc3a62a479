"""Built-in toolbar buttons in their on-screen order."""

from __future__ import annotations

from typing import Iterable

from markpost.editor.operations import OperationKind

from .models import ToolbarAction
from .registry import ToolbarRegistry

LINK_PROMPT = "Enter URL"
IMAGE_PROMPT = "Enter image URL (or Cancel to open Media tab)"

DEFAULT_ACTIONS: tuple[ToolbarAction, ...] = (
    ToolbarAction(id="format.bold", label="Bold", kind=OperationKind.BOLD),
    ToolbarAction(id="format.italic", label="Italic", kind=OperationKind.ITALIC),
    ToolbarAction(
        id="format.inline_code", label="Inline code", kind=OperationKind.INLINE_CODE
    ),
    ToolbarAction(
        id="block.code", label="Code block", kind=OperationKind.CODE_BLOCK
    ),
    ToolbarAction(
        id="block.heading1", label="Heading 1", kind=OperationKind.HEADING, level=1
    ),
    ToolbarAction(
        id="block.heading2", label="Heading 2", kind=OperationKind.HEADING, level=2
    ),
    ToolbarAction(
        id="block.bullet_list", label="Bulleted list", kind=OperationKind.BULLET_LIST
    ),
    ToolbarAction(
        id="block.numbered_list",
        label="Numbered list",
        kind=OperationKind.NUMBERED_LIST,
    ),
    ToolbarAction(id="block.quote", label="Quote", kind=OperationKind.QUOTE),
    ToolbarAction(
        id="insert.link",
        label="Link",
        kind=OperationKind.LINK,
        prompt=LINK_PROMPT,
        description="Wrap the selection in a markdown link",
    ),
    ToolbarAction(
        id="insert.image",
        label="Image",
        kind=OperationKind.IMAGE,
        prompt=IMAGE_PROMPT,
        description="Embed an image by URL or pick one from the media library",
    ),
    ToolbarAction(
        id="insert.horizontal_rule",
        label="Horizontal rule",
        kind=OperationKind.HORIZONTAL_RULE,
    ),
)


def load_default_toolbar(
    registry: ToolbarRegistry,
    *,
    actions: Iterable[ToolbarAction] = DEFAULT_ACTIONS,
) -> ToolbarRegistry:
    for action in actions:
        registry.register_action(action, replace=True)
    return registry


__all__ = ["DEFAULT_ACTIONS", "IMAGE_PROMPT", "LINK_PROMPT", "load_default_toolbar"]
