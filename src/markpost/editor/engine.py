"""Selection-aware transform engine.

``transform`` splits a buffer into ``before``/``selected``/``after``, runs the
operation's producer over ``selected`` and stitches the result back together,
translating the producer's relative selection into absolute offsets. It
performs no I/O and never raises for a well-formed ``Operation``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Union

from . import producers
from .operations import Operation, OperationKind
from .producers import Producer, TransformResult
from .selection import SelectionRange


@dataclass(frozen=True, slots=True)
class AppliedEdit:
    """Outcome of a successful transform."""

    text: str
    selection: SelectionRange
    result: TransformResult
    prefix_length: int
    operation: Operation


@dataclass(frozen=True, slots=True)
class DeferToMediaPicker:
    """Image requested without a URL: the caller should open the media picker."""

    selection: SelectionRange
    operation: Operation


@dataclass(frozen=True, slots=True)
class Cancelled:
    """Nothing was applied; the buffer is unchanged."""

    selection: SelectionRange
    operation: Operation
    reason: str


EditOutcome = Union[AppliedEdit, DeferToMediaPicker, Cancelled]

_PRODUCER_FACTORIES: Dict[OperationKind, Callable[[Operation], Producer]] = {
    OperationKind.BOLD: lambda op: producers.wrap_inline("**"),
    OperationKind.ITALIC: lambda op: producers.wrap_inline("*"),
    OperationKind.INLINE_CODE: lambda op: producers.wrap_inline("`"),
    OperationKind.HEADING: lambda op: producers.heading(op.level),
    OperationKind.BULLET_LIST: lambda op: producers.bullet_list(),
    OperationKind.NUMBERED_LIST: lambda op: producers.numbered_list(),
    OperationKind.QUOTE: lambda op: producers.line_prefix_all("> "),
    OperationKind.LINK: lambda op: producers.link(op.url or ""),
    OperationKind.IMAGE: lambda op: producers.image(op.url or ""),
    OperationKind.CODE_BLOCK: lambda op: producers.code_block(),
    OperationKind.HORIZONTAL_RULE: lambda op: producers.horizontal_rule(),
    OperationKind.MEDIA: lambda op: producers.embed_media(op.media),  # type: ignore[arg-type]
}


def producer_for(operation: Operation) -> Producer:
    return _PRODUCER_FACTORIES[operation.kind](operation)


def apply_producer(
    text: str, selection: SelectionRange, producer: Producer
) -> tuple[str, SelectionRange, TransformResult, int]:
    """Splice ``producer``'s output over ``selection`` (already clamped)."""

    before = text[: selection.start]
    selected = text[selection.start : selection.end]
    after = text[selection.end :]

    result = producer(selected)
    rel_start, rel_end = result.relative_selection()
    offset = len(before)
    new_text = before + result.text + after
    new_selection = SelectionRange(offset + rel_start, offset + rel_end).clamp(
        len(new_text)
    )
    return new_text, new_selection, result, offset


def transform(
    text: str, selection: SelectionRange, operation: Operation
) -> EditOutcome:
    selection = selection.clamp(len(text))

    if operation.kind is OperationKind.IMAGE and not operation.url:
        return DeferToMediaPicker(selection=selection, operation=operation)
    if operation.kind is OperationKind.LINK and not operation.url:
        return Cancelled(selection=selection, operation=operation, reason="missing_url")

    new_text, new_selection, result, offset = apply_producer(
        text, selection, producer_for(operation)
    )
    return AppliedEdit(
        text=new_text,
        selection=new_selection,
        result=result,
        prefix_length=offset,
        operation=operation,
    )


__all__ = [
    "AppliedEdit",
    "Cancelled",
    "DeferToMediaPicker",
    "EditOutcome",
    "apply_producer",
    "producer_for",
    "transform",
]
