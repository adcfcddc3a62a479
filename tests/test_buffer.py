from __future__ import annotations

from markpost.buffer import Buffer, BufferMirror, UndoEntry, UndoTimeline
from markpost.editor import AppliedEdit, DeferToMediaPicker, Operation, SelectionRange


def make_entry(label: str) -> UndoEntry:
    caret = SelectionRange.caret(0)
    return UndoEntry(
        label=label,
        before_text="",
        after_text=label,
        selection_before=caret,
        selection_after=caret,
    )


def test_apply_updates_text_selection_and_version() -> None:
    buffer = Buffer("hello world")
    buffer.select(0, 5)

    outcome = buffer.apply(Operation.bold())

    assert isinstance(outcome, AppliedEdit)
    assert buffer.text == "**hello** world"
    assert buffer.selection == SelectionRange(2, 7)
    assert buffer.selected_text() == "hello"
    assert buffer.version == 1


def test_undo_and_redo_restore_text_and_selection() -> None:
    buffer = Buffer("hello world")
    buffer.select(0, 5)
    buffer.apply(Operation.bold())

    undone = buffer.undo()

    assert undone is not None and undone.label == "bold"
    assert buffer.text == "hello world"
    assert buffer.selection == SelectionRange(0, 5)

    redone = buffer.redo()

    assert redone is not None
    assert buffer.text == "**hello** world"
    assert buffer.selection == SelectionRange(2, 7)


def test_deferred_image_leaves_text_and_history_alone() -> None:
    buffer = Buffer("abc")
    buffer.select(1, 2)

    outcome = buffer.apply(Operation.image())

    assert isinstance(outcome, DeferToMediaPicker)
    assert buffer.text == "abc"
    assert buffer.undo() is None


def test_select_clamps_to_text_bounds() -> None:
    buffer = Buffer("abc")

    assert buffer.select(5, -1) == SelectionRange(0, 3)


def test_insert_text_replaces_selection() -> None:
    buffer = Buffer("abc")
    buffer.select(1, 2)

    delta = buffer.insert_text("XY")

    assert delta.text == "aXYc"
    assert delta.selection == SelectionRange.caret(3)
    assert delta.label == "insert_text"


def test_sync_from_host_does_not_record_history() -> None:
    buffer = Buffer("abc")

    buffer.sync_from_host(BufferMirror(text="abcdef", selection=SelectionRange(4, 10)))

    assert buffer.text == "abcdef"
    assert buffer.selection == SelectionRange(4, 6)
    assert buffer.undo() is None


def test_undo_after_host_typing_keeps_typed_text() -> None:
    buffer = Buffer("abc")
    buffer.select(0, 3)
    buffer.apply(Operation.bold())
    typed = "**abc** typed later"

    buffer.sync_from_host(BufferMirror(text=typed, selection=SelectionRange.caret(len(typed))))

    assert buffer.undo() is None
    assert buffer.text == typed
    assert buffer.selection == SelectionRange.caret(len(typed))


def test_host_selection_change_keeps_history() -> None:
    buffer = Buffer("abc")
    buffer.select(0, 3)
    buffer.apply(Operation.bold())

    buffer.sync_from_host(BufferMirror(text="**abc**", selection=SelectionRange.caret(0)))

    assert buffer.undo() is not None
    assert buffer.text == "abc"


def test_mirror_reports_current_state() -> None:
    buffer = Buffer("abc", name="content")
    buffer.select(1, 1)

    mirror = buffer.mirror(attributes={"tab": "write"})

    assert mirror.text == "abc"
    assert mirror.selection == SelectionRange.caret(1)
    assert mirror.attributes == {"tab": "write"}


def test_undo_timeline_drops_redo_tail_and_respects_limit() -> None:
    timeline = UndoTimeline(limit=2)
    timeline.push(make_entry("a"))
    timeline.push(make_entry("b"))
    timeline.undo()
    timeline.push(make_entry("c"))

    assert not timeline.can_redo()
    timeline.push(make_entry("d"))

    assert len(timeline) == 2
    labels = [timeline.undo().label, timeline.undo().label]  # type: ignore[union-attr]
    assert labels == ["d", "c"]
    assert timeline.undo() is None
