"""Base classes and shared services for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Callable, Dict, Optional, Tuple

from textpad_engine.buffer import Buffer, LineCol
from textpad_engine.editing.search import SearchState
from textpad_engine.runtime.settings import EngineSettings

CLIPBOARD_READ = "clipboard.read"


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def is_printable(self) -> bool:
        if not self.text:
            return False
        if {"ctrl", "alt", "meta"} & {m.lower() for m in self.modifiers}:
            return False
        return self.text.isprintable()


@dataclass(slots=True)
class ModeResult:
    """Outcome of one command.

    ``clipboard_text`` asks the host to store text; ``request`` asks it to
    perform an async step (currently only a clipboard read for paste) and
    hand the result back.
    """

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None
    changed: bool = False
    clipboard_text: Optional[str] = None
    request: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    buffer: Buffer
    bus: "ModeBus"
    search: SearchState = field(default_factory=SearchState)
    settings: EngineSettings = field(default_factory=EngineSettings)
    dictionary: Optional[AbstractSet[str]] = None
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:  # pragma: no cover
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:  # pragma: no cover
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover
        raise NotImplementedError

    def paste(self, text: str) -> ModeResult:  # pragma: no cover
        raise NotImplementedError

    def click(self, position: LineCol) -> ModeResult:  # pragma: no cover
        raise NotImplementedError


__all__ = [
    "CLIPBOARD_READ",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
]
