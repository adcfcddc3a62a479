from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from markpost.adapters.textual import TextualToolbarAdapter, TextualUIHooks
from markpost.buffer import Buffer
from markpost.editor import MediaFile
from markpost.toolbar import ToolbarRegistry, load_default_toolbar


@dataclass
class Recorder:
    updates: List[str] = field(default_factory=list)
    statuses: List[str] = field(default_factory=list)
    opened: List[bool] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)


def make_adapter(
    text: str, recorder: Recorder, *, url: Optional[str] = None
) -> TextualToolbarAdapter:
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: recorder.updates.append(mirror.text),
        update_status=recorder.statuses.append,
        prompt_url=lambda _prompt: url,
        open_media=lambda: recorder.opened.append(True),
        log=recorder.logs.append,
    )
    registry = load_default_toolbar(ToolbarRegistry())
    return TextualToolbarAdapter(Buffer(text), registry, hooks)


def test_adapter_applies_toolbar_press_to_host_selection() -> None:
    recorder = Recorder()
    adapter = make_adapter("hello world", recorder)

    adapter.sync_from_host("hello world", (0, 5), (0, 0))
    adapter.press("format.bold")

    assert recorder.updates[-1] == "**hello** world"
    assert "bold" in recorder.statuses
    assert adapter.selection_locations() == ((0, 2), (0, 7))


def test_adapter_maps_multiline_selection() -> None:
    recorder = Recorder()
    adapter = make_adapter("a\nb\nc", recorder)

    adapter.sync_from_host("a\nb\nc", (0, 0), (2, 1))
    adapter.press("block.numbered_list")

    assert recorder.updates[-1] == "1. a\n2. b\n3. c"
    assert adapter.selection_locations() == ((2, 4), (2, 4))


def test_adapter_opens_media_picker_for_image_without_url() -> None:
    recorder = Recorder()
    adapter = make_adapter("text", recorder)

    adapter.press("insert.image")

    assert recorder.opened == [True]
    assert recorder.statuses[-1] == "media_picker"


def test_adapter_inserts_media_and_supports_undo() -> None:
    recorder = Recorder()
    adapter = make_adapter("ab", recorder)
    adapter.sync_from_host("ab", (0, 1), (0, 1))

    adapter.insert_media(
        MediaFile(id="1", url="/cat.png", filename="cat.png", type="image/png")
    )
    assert recorder.updates[-1] == "a![cat.png](/cat.png)\n\nb"

    assert adapter.undo() is True
    assert recorder.updates[-1] == "ab"
    assert adapter.redo() is True
    assert adapter.undo() is True
    assert adapter.undo() is False


def test_adapter_emits_log_lines() -> None:
    recorder = Recorder()
    adapter = make_adapter("x", recorder, url="https://example.com")

    adapter.press("insert.link")

    assert any(line.startswith("press ->") for line in recorder.logs)
    assert any("outcome='AppliedEdit'" in line for line in recorder.logs)


def test_failing_log_hook_does_not_break_toolbar_press() -> None:
    updates: List[str] = []

    def broken_log(_line: str) -> None:
        raise RuntimeError("log sink closed")

    hooks = TextualUIHooks(
        update_buffer=lambda mirror: updates.append(mirror.text),
        log=broken_log,
    )
    adapter = TextualToolbarAdapter(
        Buffer("hello world"), load_default_toolbar(ToolbarRegistry()), hooks
    )
    adapter.sync_from_host("hello world", (0, 0), (0, 5))

    adapter.press("format.bold")

    assert updates[-1] == "**hello** world"
    assert adapter.buffer.text == "**hello** world"
