"""Toolbar registry responsible for storing buttons in display order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from markpost.runtime.telemetry import span

from .models import ToolbarAction


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    kinds: tuple[str, ...]


class ToolbarConflictError(RuntimeError):
    """Raised when a new action reuses an existing id."""

    def __init__(self, action: ToolbarAction, existing: ToolbarAction):
        super().__init__(
            f"Toolbar action '{action.id}' conflicts with '{existing.label}'"
        )
        self.action = action
        self.existing = existing


class ToolbarRegistry:
    """Owns toolbar actions; iteration follows registration order."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ToolbarAction] = {}
        self._logger_name = logger_name
        self._revision = 0

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ToolbarAction:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Toolbar action '{action_id}' is not registered") from exc

    def register_action(
        self, action: ToolbarAction, *, replace: bool = False
    ) -> ToolbarAction:
        with span(
            "toolbar::register_action",
            logger_name=self._logger_name,
            component="toolbar",
            metadata={"action_id": action.id},
        ) as handle:
            existing = self._actions.get(action.id)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.id)
                raise ToolbarConflictError(action, existing)
            self._actions[action.id] = action
            self._revision += 1
            return action

    def unregister_action(self, action_id: str) -> Optional[ToolbarAction]:
        with span(
            "toolbar::unregister_action",
            logger_name=self._logger_name,
            component="toolbar",
            metadata={"action_id": action_id},
        ):
            action = self._actions.pop(action_id, None)
            if action is not None:
                self._revision += 1
            return action

    def iter_actions(self) -> Iterator[ToolbarAction]:
        yield from self._actions.values()

    def stats(self) -> RegistryStats:
        kinds = sorted({action.kind.value for action in self._actions.values()})
        return RegistryStats(action_count=len(self._actions), kinds=tuple(kinds))


__all__ = ["RegistryStats", "ToolbarConflictError", "ToolbarRegistry"]
