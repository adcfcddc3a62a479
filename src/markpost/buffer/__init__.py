"""Caller-side buffer state, undo history and host sync types."""

from .buffer import Buffer, BufferDelta, Transaction
from .state import BufferState
from .sync import BufferMirror
from .undo import UndoEntry, UndoTimeline

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferMirror",
    "BufferState",
    "Transaction",
    "UndoEntry",
    "UndoTimeline",
]
