"""Caller-held buffer façade combining text, selection and undo history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from markpost.editor.engine import AppliedEdit, EditOutcome, transform
from markpost.editor.operations import Operation
from markpost.editor.selection import SelectionRange
from markpost.runtime import telemetry

from .state import BufferState
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    selection: SelectionRange
    label: str


class Buffer:
    """Owns the authoritative text and selection between engine calls.

    The engine itself is pure; this class is the caller that feeds it the
    current state and adopts whatever it returns.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "content",
        state: Optional[BufferState] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.text = text
        self.version = 0
        self.state = state or BufferState()
        self.state.selection = self.state.selection.clamp(len(text))
        self.undo_timeline = undo or UndoTimeline()

    @property
    def selection(self) -> SelectionRange:
        return self.state.selection

    def select(self, start: int, end: int) -> SelectionRange:
        self.state.selection = SelectionRange(start, end).clamp(len(self.text))
        return self.state.selection

    def selected_text(self) -> str:
        selection = self.state.selection
        return self.text[selection.start : selection.end]

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            selection=self.state.selection,
            version=self.version,
            attributes=dict(attributes or {}),
        )

    def sync_from_host(self, mirror: BufferMirror) -> None:
        """Adopt a host edit (typing, paste) and drop undo history older than it."""

        if mirror.text != self.text:
            self.text = mirror.text
            self.version += 1
            self.state.last_change_tick = self.version
            self.undo_timeline.clear()
        self.select(mirror.selection.start, mirror.selection.end)

    def apply(self, operation: Operation) -> EditOutcome:
        outcome = transform(self.text, self.state.selection, operation)
        if isinstance(outcome, AppliedEdit):
            self._commit(outcome.text, outcome.selection, label=operation.kind.value)
        else:
            self.state.selection = outcome.selection
        return outcome

    def replace_range(self, start: int, end: int, text: str, *, label: str) -> BufferDelta:
        span_range = SelectionRange(start, end).clamp(len(self.text))
        new_text = self.text[: span_range.start] + text + self.text[span_range.end :]
        caret = SelectionRange.caret(span_range.start + len(text))
        self._commit(new_text, caret, label=label)
        return BufferDelta(
            version=self.version,
            text=self.text,
            selection=self.state.selection,
            label=label,
        )

    def insert_text(self, text: str) -> BufferDelta:
        selection = self.state.selection
        return self.replace_range(selection.start, selection.end, text, label="insert_text")

    def undo(self) -> Optional[UndoEntry]:
        entry = self.undo_timeline.undo()
        if entry is not None:
            self._restore(entry.before_text, entry.selection_before)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        entry = self.undo_timeline.redo()
        if entry is not None:
            self._restore(entry.after_text, entry.selection_after)
        return entry

    def _commit(self, new_text: str, selection: SelectionRange, *, label: str) -> None:
        with Transaction(self, label) as tx:
            before_text = self.text
            before_selection = self.state.selection
            self.text = new_text
            self.version += 1
            self.state.selection = selection.clamp(len(new_text))
            self.state.last_change_tick = self.version
            tx.commit(before_text, new_text, before_selection, self.state.selection)

    def _restore(self, text: str, selection: SelectionRange) -> None:
        self.text = text
        self.version += 1
        self.state.selection = selection.clamp(len(text))
        self.state.last_change_tick = self.version


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def commit(
        self,
        before_text: str,
        after_text: str,
        selection_before: SelectionRange,
        selection_after: SelectionRange,
    ) -> None:
        self.buffer.undo_timeline.push(
            UndoEntry(
                label=self.label,
                before_text=before_text,
                after_text=after_text,
                selection_before=selection_before,
                selection_after=selection_after,
            )
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
