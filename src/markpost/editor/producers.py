"""Pure producers mapping a selected substring to replacement text.

Every producer takes the selected text (empty for a bare caret) and returns a
``TransformResult`` whose selection offsets are relative to the produced
text. ``None`` offsets mean "caret after the produced text".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from .media import MediaFile, media_markdown

HEADING_PLACEHOLDER = "Heading"
LINK_PLACEHOLDER = "link text"
IMAGE_PLACEHOLDER = "alt text"
CODE_PLACEHOLDER = "code here"
HORIZONTAL_RULE = "\n\n---\n\n"

_HEADING_RUN = re.compile(r"^#+\s*")
_NUMBERED_LINE = re.compile(r"^\d+\.\s", re.ASCII)


@dataclass(frozen=True, slots=True)
class TransformResult:
    text: str
    select_start: Optional[int] = None
    select_end: Optional[int] = None

    def relative_selection(self) -> tuple[int, int]:
        end_of_text = len(self.text)
        start = end_of_text if self.select_start is None else self.select_start
        end = end_of_text if self.select_end is None else self.select_end
        return start, end


Producer = Callable[[str], TransformResult]


def wrap_inline(
    prefix: str, suffix: Optional[str] = None, placeholder: str = ""
) -> Producer:
    closing = prefix if suffix is None else suffix

    def produce(selected: str) -> TransformResult:
        content = selected or placeholder
        return TransformResult(
            text=f"{prefix}{content}{closing}",
            select_start=len(prefix),
            select_end=len(prefix) + len(content),
        )

    return produce


def heading(level: int) -> Producer:
    marker = "#" * level + " "

    def produce(selected: str) -> TransformResult:
        lines = (selected or HEADING_PLACEHOLDER).split("\n")
        updated = [
            _HEADING_RUN.sub(marker, line, count=1)
            if line.startswith("#")
            else f"{marker}{line}"
            for line in lines
        ]
        return TransformResult(text="\n".join(updated))

    return produce


def bullet_list() -> Producer:
    def produce(selected: str) -> TransformResult:
        prefixed = []
        for line in selected.split("\n"):
            if line.strip() == "":
                prefixed.append("- ")
            elif line.startswith("- "):
                prefixed.append(line)
            else:
                prefixed.append(f"- {line}")
        return TransformResult(text="\n".join(prefixed))

    return produce


def numbered_list() -> Producer:
    def produce(selected: str) -> TransformResult:
        counter = 1
        prefixed = []
        for line in selected.split("\n"):
            if line.strip() == "":
                # blank lines reuse the current number without consuming it
                prefixed.append(f"{counter}. ")
            elif _NUMBERED_LINE.match(line):
                prefixed.append(line)
            else:
                prefixed.append(f"{counter}. {line}")
                counter += 1
        return TransformResult(text="\n".join(prefixed))

    return produce


def line_prefix_all(prefix: str) -> Producer:
    bare = prefix.rstrip()

    def produce(selected: str) -> TransformResult:
        lines = selected.split("\n")
        prefixed = [f"{prefix}{line}" if line else bare for line in lines]
        return TransformResult(text="\n".join(prefixed))

    return produce


def link(url: str) -> Producer:
    def produce(selected: str) -> TransformResult:
        label = selected or LINK_PLACEHOLDER
        return TransformResult(
            text=f"[{label}]({url})", select_start=1, select_end=1 + len(label)
        )

    return produce


def image(url: str) -> Producer:
    def produce(selected: str) -> TransformResult:
        alt = selected or IMAGE_PLACEHOLDER
        return TransformResult(text=f"![{alt}]({url})")

    return produce


def code_block() -> Producer:
    def produce(selected: str) -> TransformResult:
        body = selected or CODE_PLACEHOLDER
        return TransformResult(text="```\n" + body + "\n```")

    return produce


def horizontal_rule() -> Producer:
    def produce(selected: str) -> TransformResult:
        del selected  # replaced wholesale
        return TransformResult(text=HORIZONTAL_RULE)

    return produce


def embed_media(media: MediaFile) -> Producer:
    """Insert the media snippet in front of the selection, keeping it."""

    snippet = media_markdown(media)

    def produce(selected: str) -> TransformResult:
        return TransformResult(
            text=snippet + selected,
            select_start=len(snippet),
            select_end=len(snippet),
        )

    return produce


__all__ = [
    "CODE_PLACEHOLDER",
    "HEADING_PLACEHOLDER",
    "HORIZONTAL_RULE",
    "IMAGE_PLACEHOLDER",
    "LINK_PLACEHOLDER",
    "Producer",
    "TransformResult",
    "bullet_list",
    "code_block",
    "embed_media",
    "heading",
    "horizontal_rule",
    "image",
    "line_prefix_all",
    "link",
    "numbered_list",
    "wrap_inline",
]
