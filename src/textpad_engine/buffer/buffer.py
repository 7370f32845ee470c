"""Buffer façade combining the document, selection state, and history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from textpad_engine.runtime import telemetry

from .document import TextDocument, clamp_offset
from .state import BufferState, ColumnSelection, LineCol, LinearSelection
from .sync import EditorMirror, EditorStats
from .undo import HistoryStack


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    label: str
    changed: bool


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[TextDocument] = None,
        state: Optional[BufferState] = None,
        history: Optional[HistoryStack] = None,
    ) -> None:
        self.name = name
        self.document = document or TextDocument()
        self.state = state or BufferState()
        self.history = history or HistoryStack(self.document.text)
        self.dirty = False

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=TextDocument(text))

    @property
    def text(self) -> str:
        return self.document.text

    def commit(self, text: str, *, label: str) -> BufferDelta:
        """Install ``text`` as the new document, pushing history if it changed."""

        with Transaction(self, label) as tx:
            changed = text != self.document.text
            if changed:
                self.document = self.document.replace(text)
                tx.push(text)
                self.dirty = True
        return BufferDelta(
            version=self.document.version,
            text=self.document.text,
            label=label,
            changed=changed,
        )

    def undo(self) -> Optional[str]:
        text = self.history.undo()
        if text is not None:
            self._restore(text, "history.undo")
        return text

    def redo(self) -> Optional[str]:
        text = self.history.redo()
        if text is not None:
            self._restore(text, "history.redo")
        return text

    def load(self, text: str) -> None:
        """Replace the document wholesale and restart history from it."""

        self.document = TextDocument(text, version=self.document.version + 1)
        self.history.reset(text)
        self.state.set_caret(0)
        self.state.clear_rectangle()
        self.state.column_caret = LineCol()
        self.dirty = False
        telemetry.record_event(
            "history.reset", data={"buffer": self.name, "length": len(text)}
        )

    def set_selection(self, start: int, end: int) -> LinearSelection:
        text = self.document.text
        self.state.set_selection(clamp_offset(text, start), clamp_offset(text, end))
        return self.state.selection

    def stats(self) -> EditorStats:
        position, length = self.history.position
        return EditorStats(
            line_count=self.document.line_count,
            char_count=len(self.document),
            history_position=position,
            history_length=length,
            dirty=self.dirty,
        )

    def mirror(
        self,
        mode: str,
        *,
        rectangle: Optional[ColumnSelection] = None,
        attributes: Optional[dict[str, str]] = None,
    ) -> EditorMirror:
        column = mode == "column"
        return EditorMirror(
            text=self.document.text,
            mode=mode,
            selection=self.state.selection,
            rectangle=rectangle if column else None,
            column_caret=self.state.column_caret if column else None,
            stats=self.stats(),
            attributes=dict(attributes or {}),
        )

    def _restore(self, text: str, event: str) -> None:
        self.document = self.document.replace(text)
        self.dirty = True
        selection = self.state.selection
        self.state.set_selection(
            clamp_offset(text, selection.start), clamp_offset(text, selection.end)
        )
        position, length = self.history.position
        telemetry.record_event(
            event,
            level="debug",
            data={"buffer": self.name, "position": position, "length": length},
        )


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def push(self, text: str) -> None:
        self.buffer.history.push(text)
        position, _ = self.buffer.history.position
        telemetry.record_event(
            "history.push",
            level="debug",
            data={"label": self.label, "position": position, "length": len(text)},
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "Transaction"]
