"""Clipboard boundary between the engine and the host's system clipboard."""

from __future__ import annotations

from typing import Optional, Protocol

from textpad_engine.errors import ClipboardUnavailableError


class ClipboardBackend(Protocol):
    """Async clipboard access supplied by the host. Either call may raise."""

    async def read_text(self) -> str:
        ...

    async def write_text(self, text: str) -> None:
        ...


class MemoryClipboard:
    """In-process clipboard used by tests and hosts without a system clipboard.

    ``denied`` simulates a host that refuses clipboard permission.
    """

    def __init__(self, text: str = "", *, denied: bool = False) -> None:
        self._text = text
        self.denied = denied
        self.writes: list[str] = []

    @property
    def text(self) -> str:
        return self._text

    async def read_text(self) -> str:
        if self.denied:
            raise ClipboardUnavailableError("clipboard read denied")
        return self._text

    async def write_text(self, text: str) -> None:
        if self.denied:
            raise ClipboardUnavailableError("clipboard write denied")
        self._text = text
        self.writes.append(text)


def payload_or_none(text: Optional[str]) -> Optional[str]:
    """Normalise a clipboard read: empty or missing payloads mean "nothing"."""

    if not text:
        return None
    return text


__all__ = ["ClipboardBackend", "MemoryClipboard", "payload_or_none"]
