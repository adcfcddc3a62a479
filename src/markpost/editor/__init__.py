"""Selection-aware markdown transforms."""

from .engine import (
    AppliedEdit,
    Cancelled,
    DeferToMediaPicker,
    EditOutcome,
    apply_producer,
    producer_for,
    transform,
)
from .media import MediaFile, media_markdown
from .operations import MAX_HEADING_LEVEL, Operation, OperationKind
from .producers import Producer, TransformResult
from .selection import (
    Location,
    SelectionRange,
    location_for_offset,
    offset_for_location,
)

__all__ = [
    "AppliedEdit",
    "Cancelled",
    "DeferToMediaPicker",
    "EditOutcome",
    "Location",
    "MAX_HEADING_LEVEL",
    "MediaFile",
    "Operation",
    "OperationKind",
    "Producer",
    "SelectionRange",
    "TransformResult",
    "apply_producer",
    "location_for_offset",
    "media_markdown",
    "offset_for_location",
    "producer_for",
    "transform",
]
