"""Markdown/HTML snippets for embedding media library items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MediaFile:
    """A file stored in the media library."""

    id: str
    url: str
    filename: str
    type: str
    size: int = 0

    @property
    def is_image(self) -> bool:
        return self.type.startswith("image/")

    @property
    def is_video(self) -> bool:
        return self.type.startswith("video/")


def media_markdown(media: MediaFile) -> str:
    """Return the snippet to embed ``media``; empty for unsupported types."""

    if media.is_image:
        return f"![{media.filename}]({media.url})\n\n"
    if media.is_video:
        return (
            '<video controls width="100%">\n'
            f'  <source src="{media.url}" type="{media.type}">\n'
            "  Your browser does not support the video tag.\n"
            "</video>\n\n"
        )
    return ""


__all__ = ["MediaFile", "media_markdown"]
