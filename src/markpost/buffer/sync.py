"""Adapter boundary type for syncing buffers with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field

from markpost.editor.selection import SelectionRange


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    selection: SelectionRange
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)
