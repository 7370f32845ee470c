"""Offset-range editing: every mutation is a ``replace_selection`` call."""

from __future__ import annotations

from typing import AbstractSet, Literal, Optional, Tuple

from textpad_engine.buffer.document import (
    clamp_offset,
    line_col_to_offset,
    lines,
    offset_to_line_col,
)
from textpad_engine.buffer.state import LineCol, LinearSelection
from textpad_engine.text.case import CaseStyle, convert_case

Edit = Tuple[str, LinearSelection]
CaretMove = Literal["left", "right", "up", "down", "line_start", "line_end"]


def get_selected_text(doc: str, selection: LinearSelection) -> str:
    return doc[selection.lower : selection.upper]


def replace_selection(doc: str, selection: LinearSelection, replacement: str) -> Edit:
    """Swap the normalised range for ``replacement`` and select what went in."""

    lower = clamp_offset(doc, selection.lower)
    upper = clamp_offset(doc, selection.upper)
    updated = doc[:lower] + replacement + doc[upper:]
    return updated, LinearSelection(lower, lower + len(replacement))


def select_all(doc: str) -> LinearSelection:
    return LinearSelection(0, len(doc))


def insert_text(doc: str, selection: LinearSelection, text: str) -> Edit:
    """Typed input: like ``replace_selection`` but the caret lands after ``text``."""

    updated, inserted = replace_selection(doc, selection, text)
    return updated, LinearSelection.caret(inserted.upper)


def delete_selection(doc: str, selection: LinearSelection) -> Edit:
    return replace_selection(doc, selection, "")


def delete_backward(doc: str, selection: LinearSelection) -> Edit:
    if not selection.is_caret:
        return delete_selection(doc, selection)
    if selection.lower == 0:
        return doc, selection
    return delete_selection(doc, LinearSelection(selection.lower - 1, selection.lower))


def delete_forward(doc: str, selection: LinearSelection) -> Edit:
    if not selection.is_caret:
        return delete_selection(doc, selection)
    if selection.upper >= len(doc):
        return doc, selection
    return delete_selection(doc, LinearSelection(selection.upper, selection.upper + 1))


def move_caret(
    doc: str,
    selection: LinearSelection,
    direction: CaretMove,
    *,
    extend: bool = False,
) -> LinearSelection:
    """Move the caret (or the selection's moving end when ``extend``)."""

    if not extend and not selection.is_caret and direction in ("left", "right"):
        edge = selection.lower if direction == "left" else selection.upper
        return LinearSelection.caret(edge)

    head = selection.end
    if direction == "left":
        target = head - 1
    elif direction == "right":
        target = head + 1
    else:
        position = offset_to_line_col(doc, head)
        if direction == "up":
            target = (
                0
                if position.line == 0
                else line_col_to_offset(doc, LineCol(position.line - 1, position.col))
            )
        elif direction == "down":
            last_line = len(lines(doc)) - 1
            target = (
                len(doc)
                if position.line >= last_line
                else line_col_to_offset(doc, LineCol(position.line + 1, position.col))
            )
        elif direction == "line_start":
            target = head - position.col
        else:
            target = line_col_to_offset(doc, LineCol(position.line, len(doc)))
    target = clamp_offset(doc, target)
    if extend:
        return LinearSelection(selection.start, target)
    return LinearSelection.caret(target)


def convert_selection_case(
    doc: str,
    selection: LinearSelection,
    style: CaseStyle | str,
    dictionary: Optional[AbstractSet[str]] = None,
) -> Edit:
    """Replace the selected text with its case-converted form.

    A caret converts nothing. Segmenting styles raise
    ``DictionaryRequiredError`` while ``dictionary`` is ``None``.
    """

    selected = get_selected_text(doc, selection)
    if not selected:
        return doc, selection
    return replace_selection(doc, selection, convert_case(selected, style, dictionary))


def caret_line_col(doc: str, selection: LinearSelection) -> LineCol:
    """Where column mode should start when entered from this selection."""

    return offset_to_line_col(doc, selection.lower)


__all__ = [
    "CaretMove",
    "Edit",
    "caret_line_col",
    "convert_selection_case",
    "delete_backward",
    "delete_forward",
    "delete_selection",
    "get_selected_text",
    "insert_text",
    "move_caret",
    "replace_selection",
    "select_all",
]
