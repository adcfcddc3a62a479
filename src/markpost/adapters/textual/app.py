"""Executable Textual app hosting the markdown toolbar and share bar."""

from __future__ import annotations

import argparse
import webbrowser
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Button, Footer, Header, Input, Static, TextArea
    from textual.widgets.text_area import Selection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markpost.adapters.textual.app"
    ) from exc

from markpost.buffer import Buffer, BufferMirror
from markpost.posts import post_url, slugify
from markpost.runtime.settings import env
from markpost.runtime.telemetry import PRESET_NAMES, configure, get_logger
from markpost.share import COPY_FEEDBACK_SECONDS, ShareSummary, build_share_summary
from markpost.toolbar import ToolbarRegistry, load_default_toolbar

from .controller import TextualToolbarAdapter, TextualUIHooks


def create_default_registry() -> ToolbarRegistry:
    return load_default_toolbar(ToolbarRegistry())


@dataclass
class ShareDetails:
    title: str = ""
    url: str = ""
    excerpt: Optional[str] = None
    author: Optional[str] = None


class MarkpostEditorApp(App[None]):
    """Minimal Textual UI embedding the markdown toolbar."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#toolbar {
		height: auto;
	}

	#toolbar Button {
		min-width: 6;
		margin: 0 1 0 0;
	}

	#content {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#share-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+z", "undo_toolbar", "Undo"),
        ("ctrl+y", "redo_toolbar", "Redo"),
        ("ctrl+s", "copy_share", "Copy share text"),
        ("ctrl+t", "open_twitter", "Share on X"),
        ("ctrl+l", "open_linkedin", "Share on LinkedIn"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "", share: Optional[ShareDetails] = None) -> None:
        super().__init__()
        self._initial_text = text
        self._share = share or ShareDetails()
        self._logger = get_logger("markpost.app")
        self.registry = create_default_registry()
        self.adapter: TextualToolbarAdapter | None = None
        self._button_actions: Dict[str, str] = {}
        self._text_area: TextArea | None = None
        self._url_input: Input | None = None
        self._status_widget: Static | None = None
        self._share_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="toolbar"):
            for action in self.registry.iter_actions():
                button_id = "tool-" + action.id.replace(".", "-")
                self._button_actions[button_id] = action.id
                yield Button(action.label, id=button_id)
        self._url_input = Input(placeholder="URL for Link / Image", id="url-input")
        yield self._url_input
        with Vertical():
            self._text_area = TextArea(self._initial_text, id="content")
            yield self._text_area
        self._status_widget = Static("", id="status-line")
        self._share_widget = Static("", id="share-line")
        yield self._status_widget
        yield self._share_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            prompt_url=self._take_url,
            open_media=self._open_media,
            log=self._log_line,
        )
        self.adapter = TextualToolbarAdapter(
            Buffer(self._initial_text), self.registry, hooks
        )
        self._refresh_share_line()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        action_id = self._button_actions.get(event.button.id or "")
        if action_id is None or self.adapter is None:
            return
        self._pull_selection()
        self.adapter.press(action_id)
        event.stop()

    def action_undo_toolbar(self) -> None:
        if self.adapter:
            self._pull_selection()
            self.adapter.undo()

    def action_redo_toolbar(self) -> None:
        if self.adapter:
            self.adapter.redo()

    def action_copy_share(self) -> None:
        summary = self._share_summary()
        if summary is None:
            self._update_status("share: pass --title and --url to enable sharing")
            return
        self.copy_to_clipboard(summary.clipboard_text)
        self._update_status("Copied!")
        self.set_timer(COPY_FEEDBACK_SECONDS, lambda: self._update_status(""))

    def action_open_twitter(self) -> None:
        summary = self._share_summary()
        if summary is not None:
            webbrowser.open(summary.twitter_url)

    def action_open_linkedin(self) -> None:
        summary = self._share_summary()
        if summary is not None:
            webbrowser.open(summary.linkedin_url)

    def _pull_selection(self) -> None:
        if self._text_area is None or self.adapter is None:
            return
        selection = self._text_area.selection
        self.adapter.sync_from_host(self._text_area.text, selection.start, selection.end)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._text_area is None or self.adapter is None:
            return
        if self._text_area.text != mirror.text:
            self._text_area.load_text(mirror.text)
        start, end = self.adapter.selection_locations()
        self._text_area.selection = Selection(start, end)
        self._text_area.focus()

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _take_url(self, prompt: str) -> Optional[str]:
        if self._url_input is None:
            return None
        value = self._url_input.value.strip()
        self._url_input.value = ""
        if not value:
            self._update_status(f"{prompt}: fill in the URL field first")
            return None
        return value

    def _open_media(self) -> None:
        self._update_status("media: choose a file from the media library")

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)

    def _share_summary(self) -> Optional[ShareSummary]:
        if not (self._share.title and self._share.url):
            return None
        return build_share_summary(
            self._share.title,
            self._share.url,
            self._share.excerpt,
            self._share.author,
        )

    def _refresh_share_line(self) -> None:
        summary = self._share_summary()
        if self._share_widget is None or summary is None:
            return
        x_label, linkedin_label = summary.counter_labels()
        self._share_widget.update(f"{x_label}  {linkedin_label}")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the markpost Textual editor.")
    parser.add_argument("path", nargs="?", help="Markdown file to load")
    parser.add_argument("--title", default="", help="Post title used for sharing")
    parser.add_argument(
        "--url",
        default="",
        help="Public post URL (defaults to MARKPOST_SITE_URL/post/<slug of title>)",
    )
    parser.add_argument("--excerpt", default=None, help="Excerpt included in shares")
    parser.add_argument(
        "--author",
        default=env("AUTHOR"),
        help="Author shown in shares (default: MARKPOST_AUTHOR)",
    )
    parser.add_argument(
        "--log-preset",
        choices=PRESET_NAMES,
        default=None,
        help="telelog preset to run with (default: MARKPOST_LOG_PRESET)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        configure(preset=args.log_preset)
    text = ""
    if args.path:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    url = args.url or (post_url(slugify(args.title)) if args.title else "")
    share = ShareDetails(
        title=args.title, url=url, excerpt=args.excerpt, author=args.author
    )
    MarkpostEditorApp(text=text, share=share).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
