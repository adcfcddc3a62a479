"""Selection and change tracking state for buffers."""

from __future__ import annotations

from dataclasses import dataclass, field

from markpost.editor.selection import SelectionRange


@dataclass(slots=True)
class BufferState:
    """Mutable selection info tied to a buffer version."""

    selection: SelectionRange = field(default_factory=lambda: SelectionRange(0, 0))
    last_change_tick: int = 0
