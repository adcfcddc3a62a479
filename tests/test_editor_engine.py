from __future__ import annotations

import pytest

from markpost.editor import (
    AppliedEdit,
    Cancelled,
    DeferToMediaPicker,
    MediaFile,
    Operation,
    OperationKind,
    SelectionRange,
    location_for_offset,
    offset_for_location,
    transform,
)

ALL_APPLIED = [
    Operation.bold(),
    Operation.italic(),
    Operation.inline_code(),
    Operation.heading(1),
    Operation.heading(2),
    Operation.bullet_list(),
    Operation.numbered_list(),
    Operation.quote(),
    Operation.link("https://example.com"),
    Operation.image("https://example.com/a.png"),
    Operation.code_block(),
    Operation.horizontal_rule(),
]


def test_bold_wraps_selection_and_selects_inner_text() -> None:
    outcome = transform("hello world", SelectionRange(0, 5), Operation.bold())

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text == "**hello** world"
    assert outcome.selection == SelectionRange(2, 7)
    assert outcome.prefix_length == 0


def test_numbered_list_over_full_buffer() -> None:
    text = "a\nb\nc"
    outcome = transform(text, SelectionRange(0, len(text)), Operation.numbered_list())

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text == "1. a\n2. b\n3. c"
    assert outcome.selection.is_caret
    assert outcome.selection.start == len(outcome.text)


def test_horizontal_rule_drops_selected_text() -> None:
    text = "A selected B"
    outcome = transform(text, SelectionRange(2, 10), Operation.horizontal_rule())

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text == "A \n\n---\n\n B"
    assert outcome.selection == SelectionRange.caret(2 + len("\n\n---\n\n"))


def test_link_selection_is_offset_by_prefix() -> None:
    outcome = transform("see docs", SelectionRange(4, 8), Operation.link("/docs"))

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text == "see [docs](/docs)"
    assert outcome.text[outcome.selection.start : outcome.selection.end] == "docs"


def test_image_without_url_defers_to_media_picker() -> None:
    outcome = transform("abc", SelectionRange(1, 2), Operation.image(None))

    assert isinstance(outcome, DeferToMediaPicker)
    assert outcome.selection == SelectionRange(1, 2)


def test_link_without_url_is_cancelled() -> None:
    outcome = transform("abc", SelectionRange(0, 3), Operation.link(""))

    assert isinstance(outcome, Cancelled)
    assert outcome.reason == "missing_url"


@pytest.mark.parametrize("operation", ALL_APPLIED, ids=lambda op: op.kind.value)
def test_untouched_prefix_and_suffix_survive(operation: Operation) -> None:
    text = "intro\nmiddle part\noutro"
    selection = SelectionRange(6, 17)

    outcome = transform(text, selection, operation)

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text.startswith(text[: selection.start])
    assert outcome.text.endswith(text[selection.end :])
    assert 0 <= outcome.selection.start <= outcome.selection.end <= len(outcome.text)


def test_out_of_range_selection_is_clamped() -> None:
    outcome = transform("abc", SelectionRange(-4, 99), Operation.italic())

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text == "*abc*"
    assert outcome.selection == SelectionRange(1, 4)


def test_reversed_selection_is_reordered() -> None:
    outcome = transform("hello world", SelectionRange(5, 0), Operation.inline_code())

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text == "`hello` world"


def test_media_embed_inserts_before_selection() -> None:
    media = MediaFile(id="1", url="/m/cat.png", filename="cat.png", type="image/png")
    outcome = transform("ab", SelectionRange(1, 1), Operation.embed(media))

    assert isinstance(outcome, AppliedEdit)
    assert outcome.text == "a![cat.png](/m/cat.png)\n\nb"
    assert outcome.selection == SelectionRange.caret(len("a![cat.png](/m/cat.png)\n\n"))


def test_heading_level_is_validated() -> None:
    with pytest.raises(ValueError):
        Operation.heading(7)


def test_operation_kind_accepts_string_values() -> None:
    assert Operation("quote").kind is OperationKind.QUOTE


def test_location_round_trip_on_multiline_text() -> None:
    text = "ab\ncde\n"

    assert location_for_offset(text, 4) == (1, 1)
    assert offset_for_location(text, (1, 1)) == 4
    assert location_for_offset(text, len(text)) == (2, 0)
