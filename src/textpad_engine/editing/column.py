"""Rectangular (column) block editing over whole-document strings.

Every function takes the document and the rectangle and returns the new
pair; nothing is mutated. Lines are padded with spaces as soon as the
rectangle grows past them so that later edits always hit a true rectangle.
"""

from __future__ import annotations

from typing import List, Literal, Sequence, Tuple

from textpad_engine.buffer.document import (
    join_lines,
    lines,
    pad_line_to_column,
    strip_trailing_whitespace,
)
from textpad_engine.buffer.state import ColumnSelection, LineCol

Direction = Literal["up", "down", "left", "right", "page_up", "page_down"]
ColumnEdit = Tuple[str, ColumnSelection]

DIRECTIONS: Tuple[Direction, ...] = (
    "up",
    "down",
    "left",
    "right",
    "page_up",
    "page_down",
)


def _covered(parts: Sequence[str], rectangle: ColumnSelection) -> range:
    last = min(rectangle.max_line, len(parts) - 1)
    return range(rectangle.min_line, last + 1)


def _splice(line: str, start: int, end: int, text: str) -> str:
    return line[:start] + text + line[end:]


def enter(position: LineCol) -> ColumnSelection:
    return ColumnSelection.at(position)


def move_end(
    rectangle: ColumnSelection,
    direction: Direction,
    *,
    line_count: int,
    page_size: int = 10,
) -> ColumnSelection:
    """Move the rectangle's free corner; lines clamp, columns only floor at 0."""

    last_line = max(0, line_count - 1)
    end_line, end_col = rectangle.end_line, rectangle.end_col
    if direction == "up":
        end_line -= 1
    elif direction == "down":
        end_line += 1
    elif direction == "page_up":
        end_line -= page_size
    elif direction == "page_down":
        end_line += page_size
    elif direction == "left":
        end_col -= 1
    elif direction == "right":
        end_col += 1
    else:
        raise ValueError(f"Unknown direction '{direction}'")
    return ColumnSelection(
        rectangle.start_line,
        max(0, min(end_line, last_line)),
        rectangle.start_col,
        max(0, end_col),
    )


def pad_and_recompute(rectangle: ColumnSelection, doc: str) -> ColumnEdit:
    """Pad every covered line out to the right edge, then re-fit the rectangle.

    The rectangle's rows are clamped to the lines the document actually has,
    which matters after an undo shortened the text underneath it.
    """

    parts = lines(doc)
    target = rectangle.max_col
    for index in _covered(parts, rectangle):
        parts[index] = pad_line_to_column(parts[index], target)
    last_line = len(parts) - 1
    fitted = ColumnSelection(
        min(rectangle.start_line, last_line),
        min(rectangle.end_line, last_line),
        rectangle.start_col,
        rectangle.end_col,
    )
    return join_lines(parts), fitted


def extend(
    doc: str,
    rectangle: ColumnSelection,
    direction: Direction,
    *,
    page_size: int = 10,
) -> ColumnEdit:
    moved = move_end(
        rectangle, direction, line_count=len(lines(doc)), page_size=page_size
    )
    if moved == rectangle:
        return doc, rectangle
    return pad_and_recompute(moved, doc)


def insert_text(doc: str, rectangle: ColumnSelection, text: str) -> ColumnEdit:
    """Type ``text`` over the rectangle on every covered row."""

    parts = lines(doc)
    lo, hi = rectangle.min_col, rectangle.max_col
    for index in _covered(parts, rectangle):
        padded = pad_line_to_column(parts[index], hi)
        parts[index] = _splice(padded, lo, hi, text)
    return join_lines(parts), rectangle.collapsed_to(lo + len(text))


def delete_rectangle(doc: str, rectangle: ColumnSelection) -> ColumnEdit:
    parts = lines(doc)
    lo, hi = rectangle.min_col, rectangle.max_col
    for index in _covered(parts, rectangle):
        parts[index] = _splice(parts[index], lo, hi, "")
    return join_lines(parts), rectangle.collapsed_to(lo)


def backspace(doc: str, rectangle: ColumnSelection) -> ColumnEdit:
    if not rectangle.is_degenerate:
        return delete_rectangle(doc, rectangle)
    col = rectangle.min_col
    if col == 0:
        return doc, rectangle
    parts = lines(doc)
    for index in _covered(parts, rectangle):
        parts[index] = _splice(parts[index], col - 1, col, "")
    return join_lines(parts), rectangle.collapsed_to(col - 1)


def delete_forward(doc: str, rectangle: ColumnSelection) -> ColumnEdit:
    if not rectangle.is_degenerate:
        return delete_rectangle(doc, rectangle)
    col = rectangle.min_col
    parts = lines(doc)
    for index in _covered(parts, rectangle):
        parts[index] = _splice(parts[index], col, col + 1, "")
    return join_lines(parts), rectangle


def copy_text(doc: str, rectangle: ColumnSelection) -> str:
    parts = lines(doc)
    fragments: List[str] = [
        parts[index][rectangle.min_col : rectangle.max_col]
        for index in _covered(parts, rectangle)
    ]
    return join_lines(fragments)


def cut(doc: str, rectangle: ColumnSelection) -> Tuple[str, str, ColumnSelection]:
    """Return the copied text alongside the document with the block removed."""

    copied = copy_text(doc, rectangle)
    updated, collapsed = delete_rectangle(doc, rectangle)
    return copied, updated, collapsed


def paste(doc: str, rectangle: ColumnSelection, payload: str) -> ColumnEdit:
    """Paste over the rectangle.

    A single-line payload fills every covered row. A multi-line payload fills
    one row per line starting at the top row; lines past the rectangle are
    dropped and rows past the payload are left alone.
    """

    if not payload:
        return doc, rectangle
    parts = lines(doc)
    fragments = lines(payload)
    rows = list(_covered(parts, rectangle))
    if len(fragments) == 1:
        assignments = [(index, fragments[0]) for index in rows]
    else:
        assignments = list(zip(rows, fragments))
    lo, hi = rectangle.min_col, rectangle.max_col
    for index, fragment in assignments:
        padded = pad_line_to_column(parts[index], lo)
        parts[index] = _splice(padded, lo, hi, fragment)
    return join_lines(parts), rectangle


def exit_cleanup(doc: str) -> str:
    """Drop trailing whitespace left behind by padding, document-wide."""

    return strip_trailing_whitespace(doc)


__all__ = [
    "ColumnEdit",
    "DIRECTIONS",
    "Direction",
    "backspace",
    "copy_text",
    "cut",
    "delete_forward",
    "delete_rectangle",
    "enter",
    "exit_cleanup",
    "extend",
    "insert_text",
    "move_end",
    "pad_and_recompute",
    "paste",
]
