"""Executable Textual app that hosts the text editing engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textpad_engine.adapters.textual.app"
    ) from exc

from textpad_engine.buffer import EditorMirror
from textpad_engine.runtime import telemetry
from textpad_engine.runtime.settings import EngineSettings
from textpad_engine.session import EditorSession
from textpad_engine.text.case import CaseStyle

from .controller import TextualEditorAdapter, TextualUIHooks
from .render import render_mirror

# keys the app keeps for itself instead of forwarding to the engine
_APP_KEYS = {"ctrl+q", "ctrl+s", "ctrl+f", "ctrl+n", "f5", "f6", "f7", "f8", "f9"}

_CASE_KEYS = {
    "f6": CaseStyle.UPPER,
    "f7": CaseStyle.LOWER,
    "f8": CaseStyle.SNAKE,
    "f9": CaseStyle.CAMEL,
}


class BufferView(Static, can_focus=True):
    """Document view; receives keys while focused."""


def create_session(
    settings: EngineSettings, *, file: Optional[Path] = None
) -> EditorSession:
    """Build a session seeded from ``file`` or the configured initial text."""

    text = settings.initial_text
    if file is not None and file.exists():
        text = file.read_text(encoding="utf-8")
    return EditorSession(text, settings=settings)


@dataclass
class UIState:
    status_text: str = ""
    dictionary_ready: bool = False


class TextpadApp(App[None]):
    """Minimal Textual UI embedding the editing engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#search-input {
		height: 3;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+s", "save", "Save"),
        ("ctrl+n", "new_document", "New"),
        ("ctrl+f", "focus_search", "Find"),
        ("f5", "toggle_column", "Column mode"),
    ]

    def __init__(
        self,
        *,
        settings: EngineSettings | None = None,
        file: Optional[Path] = None,
        load_dictionary: bool = True,
    ) -> None:
        super().__init__()
        self.settings = settings or EngineSettings.from_env()
        self.file = file
        self._load_dictionary = load_dictionary
        self._state = UIState()
        self.session: EditorSession | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: BufferView | None = None
        self._status_widget: Static | None = None
        self._search_widget: Input | None = None
        self.logger = telemetry.get_logger("textpad_engine.app")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = BufferView("", id="buffer-view")
            yield self._buffer_widget
        self._search_widget = Input(placeholder="Find (Enter: next)", id="search-input")
        self._status_widget = Static("", id="status-line")
        yield self._search_widget
        yield self._status_widget
        yield Footer()

    async def on_mount(self) -> None:
        self.session = create_session(self.settings, file=self.file)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            handle_event=self._handle_event,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        if self._buffer_widget:
            self._buffer_widget.focus()
        if self._load_dictionary:
            self.run_worker(self._fetch_dictionary(), exclusive=True)

    async def _fetch_dictionary(self) -> None:
        if not self.session:
            return
        dictionary = await self.session.load_dictionary()
        self._state.dictionary_ready = True
        self._update_status(f"dictionary: {len(dictionary)} words")

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter or not self.session:
            return
        if self.focused is self._search_widget:
            if event.key == "escape" and self._buffer_widget:
                self._buffer_widget.focus()
                event.stop()
            return
        if event.key in _CASE_KEYS:
            self.adapter.run_command(
                lambda: self.session.convert_selection_case(_CASE_KEYS[event.key])
            )
            event.stop()
            return
        if event.key in _APP_KEYS:
            return
        text = event.character if event.is_printable else None
        await self.adapter.handle_textual_key(event.key, text=text)
        event.stop()

    def on_input_submitted(self, message: Input.Submitted) -> None:
        if not self.adapter or not self.session:
            return
        term = message.value
        self.adapter.run_command(lambda: self.session.find_next(term))

    def action_focus_search(self) -> None:
        if self._search_widget:
            self._search_widget.focus()

    def action_toggle_column(self) -> None:
        if self.adapter and self.session:
            self.adapter.run_command(self.session.toggle_column_mode)

    def action_new_document(self) -> None:
        if self.session:
            self.session.new_document()
            self._update_status(f"new | {self.session.stats().summary}")

    def action_save(self) -> None:
        if not self.session:
            return
        if self.file is None:
            self._update_status("no --file given; nothing saved")
            return
        self.file.write_text(self.session.get_content(), encoding="utf-8")
        self.session.mark_saved()
        self._update_status(f"saved {self.file}")

    def _update_buffer(self, mirror: EditorMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror))
        self.sub_title = f"{mirror.mode}{' *' if mirror.stats.dirty else ''}"

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "case.dictionary_required":
            self._update_status(f"{payload} needs the dictionary; still loading")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the textpad engine Textual demo.")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Text file to open (Ctrl+S writes it back)",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=None,
        help="Newline-separated word list used for case conversion",
    )
    parser.add_argument(
        "--no-dictionary",
        action="store_true",
        help="Skip loading the word list (dictionary-based case styles stay disabled)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=None,
        help="Named telelog preset; defaults to TEXTPAD_ENGINE_* environment settings",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    settings = EngineSettings.from_env()
    if args.dictionary is not None:
        settings = EngineSettings(
            page_size=settings.page_size,
            dictionary_path=args.dictionary,
            initial_text=settings.initial_text,
        )
    app = TextpadApp(
        settings=settings, file=args.file, load_dictionary=not args.no_dictionary
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
