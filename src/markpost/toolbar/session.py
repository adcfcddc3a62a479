"""Wires toolbar buttons to a buffer plus the host's prompt and media picker."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from markpost.buffer import Buffer
from markpost.editor.engine import AppliedEdit, DeferToMediaPicker, EditOutcome
from markpost.editor.media import MediaFile
from markpost.editor.operations import Operation
from markpost.runtime.telemetry import record_event

from .registry import ToolbarRegistry


class UrlProvider(Protocol):
    def __call__(self, prompt: str) -> Optional[str]:
        """Ask the user for a URL; ``None`` or ``""`` means cancelled."""
        ...


def _no_url(prompt: str) -> Optional[str]:
    del prompt
    return None


def _noop() -> None:
    return None


class ToolbarSession:
    """Runs toolbar actions against a ``Buffer``.

    URL prompting and the media picker stay with the host; the session only
    decides when to call them.
    """

    def __init__(
        self,
        buffer: Buffer,
        registry: ToolbarRegistry,
        *,
        url_provider: UrlProvider = _no_url,
        open_media: Callable[[], None] = _noop,
    ) -> None:
        self.buffer = buffer
        self.registry = registry
        self.url_provider = url_provider
        self.open_media = open_media

    def trigger(self, action_id: str) -> EditOutcome:
        action = self.registry.get_action(action_id)
        url: Optional[str] = None
        if action.needs_url and action.prompt:
            url = self.url_provider(action.prompt)

        outcome = self.buffer.apply(action.build_operation(url))
        if isinstance(outcome, DeferToMediaPicker):
            self.open_media()
        self._record(action_id, outcome)
        return outcome

    def insert_media(self, media: MediaFile) -> EditOutcome:
        outcome = self.buffer.apply(Operation.embed(media))
        self._record("media.embed", outcome)
        return outcome

    def _record(self, action_id: str, outcome: EditOutcome) -> None:
        record_event(
            "toolbar.trigger",
            level="debug",
            data={
                "action": action_id,
                "outcome": type(outcome).__name__,
                "applied": isinstance(outcome, AppliedEdit),
                "version": self.buffer.version,
            },
        )


__all__ = ["ToolbarSession", "UrlProvider"]
