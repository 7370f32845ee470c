"""Editor session: the single entry point hosts drive the engine through.

The session owns the buffer (document, selection state, history), the
search terms, the optional dictionary, the clipboard backend and the mode
manager. Key events go through the active mode's keymap; menu-style
commands (search dialog, case menu, column toggle) are plain methods.
After every operation an :class:`~textpad_engine.buffer.EditorMirror` is
emitted on the ``render`` bus event.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from textpad_engine.actions import column as column_actions
from textpad_engine.actions import core as core_actions
from textpad_engine.actions import linear as linear_actions
from textpad_engine.buffer import (
    Buffer,
    ClipboardBackend,
    EditorMirror,
    EditorStats,
    EditorSync,
    LineCol,
    LinearSelection,
    MemoryClipboard,
)
from textpad_engine.buffer.clipboard import payload_or_none
from textpad_engine.editing.search import SearchState
from textpad_engine.errors import ClipboardUnavailableError
from textpad_engine.keymaps import KeymapRegistry, load_default_keymaps
from textpad_engine.modes import (
    CLIPBOARD_READ,
    ColumnMode,
    KeyInput,
    LinearMode,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeResult,
)
from textpad_engine.modes.keymap_helpers import run_action
from textpad_engine.runtime import telemetry
from textpad_engine.runtime.settings import EngineSettings, bundled_dictionary_path
from textpad_engine.text.case import CaseStyle
from textpad_engine.text.dictionary import Dictionary, load_dictionary


class EditorSession:
    def __init__(
        self,
        text: str = "",
        *,
        settings: EngineSettings | None = None,
        clipboard: ClipboardBackend | None = None,
        dictionary: Optional[Dictionary] = None,
        keymap_registry: KeymapRegistry | None = None,
        name: str = "default",
    ) -> None:
        self.settings = settings or EngineSettings()
        self.clipboard: ClipboardBackend = clipboard or MemoryClipboard()
        self.logger = telemetry.get_logger("textpad_engine.session")
        self.buffer = Buffer.from_text(text, name=name)
        self.bus = ModeBus()
        self.context = ModeContext(
            buffer=self.buffer,
            bus=self.bus,
            settings=self.settings,
            dictionary=dictionary,
        )
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="textpad_engine.keymaps")
            load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        self.manager = ModeManager(self.context, keymap_registry=keymap_registry)
        self.manager.register_mode(LinearMode)
        self.manager.register_mode(ColumnMode)
        self.last_status = "ready"

    # ------------------------------------------------------------------ state
    @property
    def mode(self) -> str:
        return self.manager.active_name or LinearMode.name

    @property
    def column_active(self) -> bool:
        return self.mode == ColumnMode.name

    @property
    def search(self) -> SearchState:
        return self.context.search

    @property
    def dictionary(self) -> Optional[Dictionary]:
        return self.context.dictionary

    @property
    def dirty(self) -> bool:
        return self.buffer.dirty

    def mark_saved(self) -> None:
        self.buffer.dirty = False
        self._render()

    def stats(self) -> EditorStats:
        return self.buffer.stats()

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self.bus.subscribe(event, callback)

    def attach(self, sync: EditorSync) -> None:
        """Route every render snapshot to ``sync``, starting with the current one."""

        def _forward(payload: object) -> None:
            if isinstance(payload, EditorMirror):
                sync.render(payload)

        self.bus.subscribe("render", _forward)
        sync.render(self.mirror())

    def mirror(self) -> EditorMirror:
        return self.buffer.mirror(
            self.mode,
            rectangle=self.buffer.state.rectangle,
            attributes={"status": self.last_status},
        )

    # --------------------------------------------------------------- content
    def get_content(self) -> str:
        return self.buffer.text

    def set_content(self, text: str) -> None:
        """Load ``text`` as a fresh document (file open): history restarts."""

        if self.column_active:
            self.manager.switch_mode(LinearMode.name)
        self.buffer.load(text)
        self.last_status = "loaded"
        self._render()

    def new_document(self) -> None:
        self.set_content(self.settings.initial_text)

    def get_selection(self) -> LinearSelection:
        return self.buffer.state.selection

    def set_selection(self, start: int, end: int) -> LinearSelection:
        selection = self.buffer.set_selection(start, end)
        self._render()
        return selection

    # ---------------------------------------------------------------- keys
    async def handle_key(self, key: KeyInput) -> ModeResult:
        result = self.manager.handle_key(key)
        return await self._settle(result)

    async def paste(self) -> ModeResult:
        return self._finish(await self._paste_from_clipboard())

    async def copy(self) -> ModeResult:
        return await self._settle(self._run(f"{self.mode}.copy"))

    async def cut(self) -> ModeResult:
        return await self._settle(self._run(f"{self.mode}.cut"))

    def insert_text(self, text: str) -> ModeResult:
        """Insert ``text`` the way typing would (character picker)."""

        return self._finish(self._run(f"{self.mode}.type_text", text))

    def undo(self) -> ModeResult:
        return self._finish(core_actions.undo(self.context))

    def redo(self) -> ModeResult:
        return self._finish(core_actions.redo(self.context))

    # --------------------------------------------------------------- search
    def set_search_terms(
        self, search_term: Optional[str] = None, replace_term: Optional[str] = None
    ) -> None:
        if search_term is not None:
            self.search.search_term = search_term
        if replace_term is not None:
            self.search.replace_term = replace_term

    def find(self, term: Optional[str] = None) -> ModeResult:
        return self._linear_only(linear_actions.find, search_term=term)

    def find_next(self, term: Optional[str] = None) -> ModeResult:
        return self._linear_only(linear_actions.find_next, search_term=term)

    def find_previous(self, term: Optional[str] = None) -> ModeResult:
        return self._linear_only(linear_actions.find_previous, search_term=term)

    def replace(
        self, term: Optional[str] = None, replacement: Optional[str] = None
    ) -> ModeResult:
        return self._linear_only(
            linear_actions.replace, search_term=term, replace_term=replacement
        )

    def replace_all(
        self, term: Optional[str] = None, replacement: Optional[str] = None
    ) -> ModeResult:
        return self._linear_only(
            linear_actions.replace_all, search_term=term, replace_term=replacement
        )

    # ----------------------------------------------------------------- case
    def change_case_at_match(
        self, style: CaseStyle | str, term: Optional[str] = None
    ) -> ModeResult:
        return self._linear_only(
            lambda context: linear_actions.change_case_at_match(context, style),
            search_term=term,
        )

    def convert_selection_case(self, style: CaseStyle | str) -> ModeResult:
        return self._linear_only(
            lambda context: linear_actions.convert_selection_case(context, style)
        )

    async def load_dictionary(self, path: str | Path | None = None) -> Dictionary:
        source = path or self.settings.dictionary_path or bundled_dictionary_path()
        dictionary = await load_dictionary(source)
        self.context.dictionary = dictionary
        self.last_status = "dictionary_loaded"
        self._render()
        return dictionary

    # --------------------------------------------------------------- column
    def toggle_column_mode(self) -> ModeResult:
        """Enter column mode at the caret, or leave it with whitespace cleanup."""

        if self.column_active:
            result = column_actions.exit_column_mode(self.context)
        else:
            result = linear_actions.enter_column_mode(self.context)
        return self._finish(self.manager.dispatch(result))

    def click(self, position: LineCol) -> ModeResult:
        """Pointer press at ``position``: cancels an active rectangle."""

        return self._finish(self.manager.click(position))

    # ------------------------------------------------------------- internals
    def _run(self, action_id: str, payload: object = None) -> ModeResult:
        return self.manager.dispatch(run_action(self.context, action_id, payload))

    def _linear_only(
        self,
        action: Callable[[ModeContext], ModeResult],
        *,
        search_term: Optional[str] = None,
        replace_term: Optional[str] = None,
    ) -> ModeResult:
        if self.column_active:
            return self._finish(ModeResult(consumed=False, status="column_mode"))
        self.set_search_terms(search_term, replace_term)
        return self._finish(action(self.context))

    async def _settle(self, result: ModeResult) -> ModeResult:
        if result.clipboard_text is not None:
            await self._write_clipboard(result.clipboard_text)
        if result.request == CLIPBOARD_READ:
            result = await self._paste_from_clipboard()
        return self._finish(result)

    async def _write_clipboard(self, text: str) -> None:
        try:
            await self.clipboard.write_text(text)
        except (ClipboardUnavailableError, OSError) as exc:
            telemetry.record_event(
                "clipboard.write_failed",
                level="warning",
                data={"error": str(exc), "length": len(text)},
            )

    async def _paste_from_clipboard(self) -> ModeResult:
        try:
            text = payload_or_none(await self.clipboard.read_text())
        except (ClipboardUnavailableError, OSError) as exc:
            telemetry.record_event(
                "clipboard.read_failed", level="warning", data={"error": str(exc)}
            )
            return ModeResult(consumed=True, status="paste_failed")
        if text is None:
            return ModeResult(consumed=True, status="paste_empty")
        return self.manager.paste(text)

    def _finish(self, result: ModeResult) -> ModeResult:
        self.last_status = result.status
        self._render()
        return result

    def _render(self) -> None:
        self.bus.emit("render", self.mirror())


__all__ = ["EditorSession"]
