"""Actions for rectangular (column) selection editing."""

from __future__ import annotations

from typing import Optional

from textpad_engine.buffer.document import line_col_to_offset
from textpad_engine.buffer.state import ColumnSelection, LineCol
from textpad_engine.editing import column as block
from textpad_engine.modes.base_mode import CLIPBOARD_READ, ModeContext, ModeResult

from .common import commit


def _rectangle(context: ModeContext) -> Optional[ColumnSelection]:
    return context.buffer.state.rectangle


def _apply(context: ModeContext, text: str, rectangle: ColumnSelection, label: str) -> ModeResult:
    result = commit(context, text, label=label)
    _set_rectangle(context, rectangle)
    return result


def _set_rectangle(context: ModeContext, rectangle: ColumnSelection) -> None:
    state = context.buffer.state
    state.rectangle = rectangle
    state.column_caret = LineCol(rectangle.end_line, rectangle.end_col)
    context.bus.emit("column.selection", rectangle)


def _no_rectangle() -> ModeResult:
    return ModeResult(consumed=True, status="no_rectangle")


def extend(context: ModeContext, match: object = None, *, direction: block.Direction) -> ModeResult:
    """Grow or shrink the rectangle, padding lines it now reaches past."""

    del match
    rectangle = _rectangle(context)
    if rectangle is None:
        rectangle = block.enter(context.buffer.state.column_caret)
        _set_rectangle(context, rectangle)
    text, updated = block.extend(
        context.buffer.text,
        rectangle,
        direction,
        page_size=context.settings.page_size,
    )
    if updated == rectangle:
        return ModeResult(consumed=True, status="column_boundary")
    result = _apply(context, text, updated, "column_pad")
    result.status = "column_extend"
    return result


def type_text(context: ModeContext, text: str) -> ModeResult:
    rectangle = _rectangle(context)
    if rectangle is None:
        return _no_rectangle()
    updated_text, updated = block.insert_text(context.buffer.text, rectangle, text)
    return _apply(context, updated_text, updated, "column_insert")


def backspace(context: ModeContext, match: object = None) -> ModeResult:
    del match
    rectangle = _rectangle(context)
    if rectangle is None:
        return _no_rectangle()
    text, updated = block.backspace(context.buffer.text, rectangle)
    return _apply(context, text, updated, "column_backspace")


def delete_forward(context: ModeContext, match: object = None) -> ModeResult:
    del match
    rectangle = _rectangle(context)
    if rectangle is None:
        return _no_rectangle()
    text, updated = block.delete_forward(context.buffer.text, rectangle)
    return _apply(context, text, updated, "column_delete")


def copy_block(context: ModeContext, match: object = None) -> ModeResult:
    del match
    rectangle = _rectangle(context)
    if rectangle is None:
        return _no_rectangle()
    copied = block.copy_text(context.buffer.text, rectangle)
    return ModeResult(consumed=True, status="column_copy", clipboard_text=copied)


def cut_block(context: ModeContext, match: object = None) -> ModeResult:
    del match
    rectangle = _rectangle(context)
    if rectangle is None:
        return _no_rectangle()
    copied, text, updated = block.cut(context.buffer.text, rectangle)
    result = _apply(context, text, updated, "column_cut")
    result.clipboard_text = copied
    return result


def request_paste(context: ModeContext, match: object = None) -> ModeResult:
    del match
    if _rectangle(context) is None:
        return _no_rectangle()
    return ModeResult(consumed=True, status="paste_pending", request=CLIPBOARD_READ)


def apply_paste(context: ModeContext, text: str) -> ModeResult:
    rectangle = _rectangle(context)
    if rectangle is None:
        return _no_rectangle()
    if not text:
        return ModeResult(consumed=True, status="paste_empty")
    updated_text, updated = block.paste(context.buffer.text, rectangle, text)
    return _apply(context, updated_text, updated, "column_paste")


def exit_column_mode(context: ModeContext, match: object = None) -> ModeResult:
    """Strip padding whitespace document-wide and hand control back to linear mode."""

    del match
    buffer = context.buffer
    caret = buffer.state.column_caret
    result = commit(context, block.exit_cleanup(buffer.text), label="column_exit")
    buffer.state.clear_rectangle()
    buffer.state.set_caret(line_col_to_offset(buffer.text, caret))
    result.switch_to = "linear"
    result.status = "exit_column"
    return result


def click(context: ModeContext, position: LineCol) -> ModeResult:
    """Cancel the rectangle and park the caret at ``position`` (no cleanup)."""

    state = context.buffer.state
    state.clear_rectangle()
    state.column_caret = LineCol(max(0, position.line), max(0, position.col))
    context.bus.emit("column.selection", None)
    return ModeResult(consumed=True, status="column_click")


__all__ = [
    "apply_paste",
    "backspace",
    "click",
    "copy_block",
    "cut_block",
    "delete_forward",
    "exit_column_mode",
    "extend",
    "request_paste",
    "type_text",
]
