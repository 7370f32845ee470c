"""Buffer abstractions: document, selection state, history, clipboard boundary."""

from .buffer import Buffer, BufferDelta, Transaction
from .clipboard import ClipboardBackend, MemoryClipboard
from .document import (
    TextDocument,
    clamp_offset,
    line_col_to_offset,
    lines,
    offset_to_line_col,
    pad_line_to_column,
    strip_trailing_whitespace,
)
from .state import BufferState, ColumnSelection, LineCol, LinearSelection
from .sync import EditorMirror, EditorStats, EditorSync
from .undo import HistoryStack

__all__ = [
    "Buffer",
    "BufferDelta",
    "Transaction",
    "BufferState",
    "ClipboardBackend",
    "MemoryClipboard",
    "ColumnSelection",
    "EditorMirror",
    "EditorStats",
    "EditorSync",
    "HistoryStack",
    "LineCol",
    "LinearSelection",
    "TextDocument",
    "clamp_offset",
    "line_col_to_offset",
    "lines",
    "offset_to_line_col",
    "pad_line_to_column",
    "strip_trailing_whitespace",
]
