"""Minimal Textual adapter that wires EditorSession events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from textpad_engine.buffer import EditorMirror
from textpad_engine.modes import KeyInput, ModeResult
from textpad_engine.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names -> engine key names
_KEY_NAMES = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
    "home": "HOME",
    "end": "END",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "tab": "TAB",
}

_FORWARDED_EVENTS = (
    "buffer.changed",
    "linear.selection",
    "column.selection",
    "history.undo",
    "history.redo",
    "mode.changed",
    "case.dictionary_required",
)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[EditorMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def translate_key(
    key: str, *, text: Optional[str] = None, modifiers: Iterable[str] = ()
) -> KeyInput:
    """Turn a Textual key name such as ``"shift+left"`` into a :class:`KeyInput`.

    Modifiers embedded in ``key`` are merged with ``modifiers``. Printable
    characters keep their ``text`` so unbound keys type themselves.
    """

    parts = key.split("+") if len(key) > 1 else [key]
    if key.endswith("+") and len(key) > 1:
        parts = parts[:-2] + ["+"]
    base = parts[-1]
    merged = [m.lower() for m in (*parts[:-1], *modifiers)]
    if base == "space":
        base = " "
        text = text or " "
    name = _KEY_NAMES.get(base.lower())
    if name is None and len(base) > 1 and base.lower().startswith("f") and base[1:].isdigit():
        name = base.upper()
    if name is not None:
        return KeyInput(key=name, modifiers=tuple(merged), text=None)
    if text is None and len(base) == 1 and not merged:
        text = base
    if len(base) == 1 and merged == ["shift"]:
        # Textual reports shifted characters already in their final form
        merged.remove("shift")
    return KeyInput(key=base, modifiers=tuple(merged), text=text)


class TextualEditorAdapter:
    """Bridges EditorSession + bus events to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        session.attach(self)

    async def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        key_input = translate_key(key, text=text, modifiers=modifiers)
        self._log_state(
            "key ->", key=key_input.key, text=key_input.text, mods=key_input.modifiers
        )
        result = await self.session.handle_key(key_input)
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def run_command(self, command: Callable[[], ModeResult]) -> ModeResult:
        """Run a menu-style session call and surface its status."""

        result = command()
        self._after_mode_result(result)
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        status = result.status
        if result.message:
            status = f"{status}:{result.message}"
        self.hooks.update_status(f"{status} | {self.session.stats().summary}")

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in _FORWARDED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "mode.changed" and isinstance(payload, str):
            self.hooks.update_status(f"mode::{payload}")

    def render(self, mirror: EditorMirror) -> None:
        self.hooks.update_buffer(mirror)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "mode": self.session.mode,
            "selection": buffer.state.selection,
            "rectangle": buffer.state.rectangle,
            "buffer": buffer.name,
            "buffer_version": buffer.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
