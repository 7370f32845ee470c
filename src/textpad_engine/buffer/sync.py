"""Render snapshots handed to host widgets after every operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .state import ColumnSelection, LineCol, LinearSelection


@dataclass(frozen=True, slots=True)
class EditorStats:
    line_count: int
    char_count: int
    history_position: int
    history_length: int
    dirty: bool = False

    @property
    def summary(self) -> str:
        return (
            f"Lines: {self.line_count} | Characters: {self.char_count} | "
            f"History: {self.history_position}/{self.history_length}"
        )


@dataclass(slots=True)
class EditorMirror:
    """Host-friendly snapshot: text plus whichever selection the mode owns."""

    text: str
    mode: str
    selection: LinearSelection
    rectangle: Optional[ColumnSelection]
    column_caret: Optional[LineCol]
    stats: EditorStats
    attributes: dict[str, str] = field(default_factory=dict)


class EditorSync(Protocol):
    """How a front end consumes engine snapshots."""

    def render(self, mirror: EditorMirror) -> None:
        """Draw ``mirror``; presentation (colouring, fonts) is up to the host."""
        ...


__all__ = ["EditorMirror", "EditorStats", "EditorSync"]
