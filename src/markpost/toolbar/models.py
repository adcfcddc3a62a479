"""Dataclasses describing toolbar buttons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from markpost.editor.operations import MAX_HEADING_LEVEL, Operation, OperationKind

URL_KINDS = frozenset({OperationKind.LINK, OperationKind.IMAGE})


@dataclass(frozen=True, slots=True)
class ToolbarAction:
    """One toolbar button: a label plus the operation it triggers.

    Actions whose kind needs a URL carry the ``prompt`` shown to the user.
    """

    id: str
    label: str
    kind: OperationKind
    level: int = 1
    prompt: Optional[str] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ToolbarAction id cannot be empty")
        if not self.label:
            raise ValueError("ToolbarAction label cannot be empty")
        object.__setattr__(self, "kind", OperationKind(self.kind))
        if self.kind is OperationKind.MEDIA:
            raise ValueError("media embedding is not a toolbar action")
        if self.kind is OperationKind.HEADING and not (
            1 <= self.level <= MAX_HEADING_LEVEL
        ):
            raise ValueError(
                f"heading level must be between 1 and {MAX_HEADING_LEVEL}"
            )
        if self.kind in URL_KINDS and not self.prompt:
            raise ValueError(f"Action '{self.id}' needs a URL prompt")

    @property
    def needs_url(self) -> bool:
        return self.kind in URL_KINDS

    def build_operation(self, url: Optional[str] = None) -> Operation:
        return Operation(self.kind, level=self.level, url=url or None)


__all__ = ["ToolbarAction", "URL_KINDS"]
