"""Dataclasses describing the formatting operations the engine understands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .media import MediaFile

MAX_HEADING_LEVEL = 6


class OperationKind(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    INLINE_CODE = "inline_code"
    HEADING = "heading"
    BULLET_LIST = "bullet_list"
    NUMBERED_LIST = "numbered_list"
    QUOTE = "quote"
    LINK = "link"
    IMAGE = "image"
    CODE_BLOCK = "code_block"
    HORIZONTAL_RULE = "horizontal_rule"
    MEDIA = "media"


@dataclass(frozen=True, slots=True)
class Operation:
    """A single toolbar-style edit request.

    ``url`` feeds link/image operations and ``media`` feeds media embedding;
    ``level`` only matters for headings.
    """

    kind: OperationKind
    level: int = 1
    url: Optional[str] = None
    media: Optional[MediaFile] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", OperationKind(self.kind))
        if self.kind is OperationKind.HEADING and not (
            1 <= self.level <= MAX_HEADING_LEVEL
        ):
            raise ValueError(
                f"heading level must be between 1 and {MAX_HEADING_LEVEL}"
            )
        if self.kind is OperationKind.MEDIA and self.media is None:
            raise ValueError("media operation requires a MediaFile")

    @classmethod
    def bold(cls) -> "Operation":
        return cls(OperationKind.BOLD)

    @classmethod
    def italic(cls) -> "Operation":
        return cls(OperationKind.ITALIC)

    @classmethod
    def inline_code(cls) -> "Operation":
        return cls(OperationKind.INLINE_CODE)

    @classmethod
    def heading(cls, level: int) -> "Operation":
        return cls(OperationKind.HEADING, level=level)

    @classmethod
    def bullet_list(cls) -> "Operation":
        return cls(OperationKind.BULLET_LIST)

    @classmethod
    def numbered_list(cls) -> "Operation":
        return cls(OperationKind.NUMBERED_LIST)

    @classmethod
    def quote(cls) -> "Operation":
        return cls(OperationKind.QUOTE)

    @classmethod
    def link(cls, url: Optional[str]) -> "Operation":
        return cls(OperationKind.LINK, url=url)

    @classmethod
    def image(cls, url: Optional[str] = None) -> "Operation":
        return cls(OperationKind.IMAGE, url=url)

    @classmethod
    def code_block(cls) -> "Operation":
        return cls(OperationKind.CODE_BLOCK)

    @classmethod
    def horizontal_rule(cls) -> "Operation":
        return cls(OperationKind.HORIZONTAL_RULE)

    @classmethod
    def embed(cls, media: MediaFile) -> "Operation":
        return cls(OperationKind.MEDIA, media=media)


__all__ = ["MAX_HEADING_LEVEL", "Operation", "OperationKind"]
