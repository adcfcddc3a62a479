"""Textual-facing adapter that wires a ToolbarSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from markpost.buffer import Buffer, BufferMirror
from markpost.editor import (
    AppliedEdit,
    Cancelled,
    DeferToMediaPicker,
    EditOutcome,
    Location,
    MediaFile,
    SelectionRange,
    location_for_offset,
    offset_for_location,
)
from markpost.runtime.telemetry import record_event
from markpost.toolbar import ToolbarRegistry, ToolbarSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def _no_url(_prompt: str) -> Optional[str]:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    prompt_url: Callable[[str], Optional[str]] = _no_url
    open_media: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualToolbarAdapter:
    """Bridges toolbar presses and host selections to a Textual surface."""

    def __init__(
        self, buffer: Buffer, registry: ToolbarRegistry, hooks: TextualUIHooks
    ) -> None:
        self.buffer = buffer
        self.registry = registry
        self.hooks = hooks
        self.session = ToolbarSession(
            buffer,
            registry,
            url_provider=hooks.prompt_url,
            open_media=self._open_media,
        )
        self._refresh_buffer()

    def sync_from_host(
        self, text: str, start: Location, end: Location
    ) -> SelectionRange:
        """Adopt the widget's text and its (row, column) selection."""

        lo, hi = sorted((offset_for_location(text, start), offset_for_location(text, end)))
        self.buffer.sync_from_host(BufferMirror(text=text, selection=SelectionRange(lo, hi)))
        return self.buffer.selection

    def selection_locations(self) -> tuple[Location, Location]:
        selection = self.buffer.selection
        text = self.buffer.text
        return (
            location_for_offset(text, selection.start),
            location_for_offset(text, selection.end),
        )

    def press(self, action_id: str) -> EditOutcome:
        self._log_state("press ->", action=action_id)
        outcome = self.session.trigger(action_id)
        self._after_outcome(outcome)
        return outcome

    def insert_media(self, media: MediaFile) -> EditOutcome:
        self._log_state("media ->", media=media.filename, type=media.type)
        outcome = self.session.insert_media(media)
        self._after_outcome(outcome)
        return outcome

    def undo(self) -> bool:
        entry = self.buffer.undo()
        if entry is None:
            return False
        self.hooks.update_status(f"undo:{entry.label}")
        self._refresh_buffer()
        return True

    def redo(self) -> bool:
        entry = self.buffer.redo()
        if entry is None:
            return False
        self.hooks.update_status(f"redo:{entry.label}")
        self._refresh_buffer()
        return True

    def _open_media(self) -> None:
        self._log_state("event ->", event="media.open")
        self.hooks.open_media()

    def _after_outcome(self, outcome: EditOutcome) -> None:
        if isinstance(outcome, AppliedEdit):
            self.hooks.update_status(outcome.operation.kind.value)
            self._refresh_buffer()
        elif isinstance(outcome, DeferToMediaPicker):
            self.hooks.update_status("media_picker")
        elif isinstance(outcome, Cancelled):
            self.hooks.update_status(f"cancelled:{outcome.reason}")
        self._log_state("result <-", outcome=type(outcome).__name__)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.buffer.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        try:
            snapshot = self._state_metadata()
            snapshot.update({k: v for k, v in fields.items() if v is not None})
            parts = [prefix]
            for key, value in snapshot.items():
                parts.append(f"{key}={value!r}")
            self.hooks.log(" ".join(parts))
        except Exception as exc:
            record_event(
                "adapter.log_failed",
                level="debug",
                data={"prefix": prefix, "error": repr(exc)},
            )

    def _state_metadata(self) -> Dict[str, object]:
        selection = self.buffer.selection
        return {
            "buffer": self.buffer.name,
            "buffer_version": self.buffer.version,
            "selection": (selection.start, selection.end),
        }


__all__ = ["TextualToolbarAdapter", "TextualUIHooks"]
