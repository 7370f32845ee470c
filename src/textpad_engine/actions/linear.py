"""Actions for the linear (offset-range) selection mode."""

from __future__ import annotations

from typing import Optional

from textpad_engine.buffer.document import line_col_to_offset
from textpad_engine.buffer.state import LineCol, LinearSelection
from textpad_engine.editing import column as block
from textpad_engine.editing import linear as edits
from textpad_engine.editing import search
from textpad_engine.errors import DictionaryRequiredError, UnknownCaseStyleError
from textpad_engine.modes.base_mode import CLIPBOARD_READ, ModeContext, ModeResult
from textpad_engine.text.case import CaseStyle

from . import column as column_actions
from .common import commit, dictionary_required, unknown_style


def _selection(context: ModeContext) -> LinearSelection:
    return context.buffer.state.selection


def _replace(context: ModeContext, replacement: str, *, label: str) -> ModeResult:
    text, selection = edits.replace_selection(
        context.buffer.text, _selection(context), replacement
    )
    return commit(context, text, label=label, selection=selection)


def _select(context: ModeContext, selection: Optional[LinearSelection], status: str) -> ModeResult:
    if selection is None:
        return ModeResult(consumed=True, status="not_found")
    context.buffer.set_selection(selection.start, selection.end)
    context.bus.emit("linear.selection", selection)
    return ModeResult(consumed=True, status=status)


def type_text(context: ModeContext, text: str) -> ModeResult:
    updated, selection = edits.insert_text(context.buffer.text, _selection(context), text)
    return commit(context, updated, label="insert_text", selection=selection)


def insert_newline(context: ModeContext, match: object = None) -> ModeResult:
    del match
    return type_text(context, "\n")


def select_all(context: ModeContext, match: object = None) -> ModeResult:
    del match
    return _select(context, edits.select_all(context.buffer.text), "select_all")


def move(
    context: ModeContext,
    match: object = None,
    *,
    direction: edits.CaretMove,
    extend: bool = False,
) -> ModeResult:
    del match
    selection = edits.move_caret(
        context.buffer.text, _selection(context), direction, extend=extend
    )
    return _select(context, selection, "caret_move")


def copy_selection(context: ModeContext, match: object = None) -> ModeResult:
    del match
    selected = edits.get_selected_text(context.buffer.text, _selection(context))
    if not selected:
        return ModeResult(consumed=True, status="nothing_selected")
    return ModeResult(consumed=True, status="copy", clipboard_text=selected)


def cut_selection(context: ModeContext, match: object = None) -> ModeResult:
    del match
    selected = edits.get_selected_text(context.buffer.text, _selection(context))
    if not selected:
        return ModeResult(consumed=True, status="nothing_selected")
    result = _replace(context, "", label="cut")
    result.clipboard_text = selected
    return result


def request_paste(context: ModeContext, match: object = None) -> ModeResult:
    del match
    return ModeResult(consumed=True, status="paste_pending", request=CLIPBOARD_READ)


def apply_paste(context: ModeContext, text: str) -> ModeResult:
    if not text:
        return ModeResult(consumed=True, status="paste_empty")
    return _replace(context, text, label="paste")


def click(context: ModeContext, position: LineCol) -> ModeResult:
    offset = line_col_to_offset(context.buffer.text, position)
    return _select(context, LinearSelection.caret(offset), "caret_move")


def delete_backward(context: ModeContext, match: object = None) -> ModeResult:
    del match
    text, selection = edits.delete_backward(context.buffer.text, _selection(context))
    return commit(context, text, label="delete", selection=selection)


def delete_forward(context: ModeContext, match: object = None) -> ModeResult:
    del match
    text, selection = edits.delete_forward(context.buffer.text, _selection(context))
    return commit(context, text, label="delete", selection=selection)


def convert_selection_case(context: ModeContext, style: CaseStyle | str) -> ModeResult:
    if _selection(context).is_caret:
        return ModeResult(consumed=True, status="nothing_selected")
    try:
        text, selection = edits.convert_selection_case(
            context.buffer.text, _selection(context), style, context.dictionary
        )
    except DictionaryRequiredError as exc:
        return dictionary_required(context, exc.style)
    except UnknownCaseStyleError as exc:
        return unknown_style(context, exc.style)
    return commit(context, text, label="case_convert", selection=selection)


def find(context: ModeContext, match: object = None) -> ModeResult:
    del match
    if not context.search.search_term:
        return ModeResult(consumed=True, status="search_empty")
    found = search.find_first(context.buffer.text, context.search.search_term)
    return _select(context, found, "find")


def find_next(context: ModeContext, match: object = None) -> ModeResult:
    del match
    term = context.search.search_term
    if not term:
        return ModeResult(consumed=True, status="search_empty")
    found = search.find_next(context.buffer.text, _selection(context).upper, term)
    return _select(context, found, "find_next")


def find_previous(context: ModeContext, match: object = None) -> ModeResult:
    del match
    term = context.search.search_term
    if not term:
        return ModeResult(consumed=True, status="search_empty")
    found = search.find_previous(context.buffer.text, _selection(context).lower, term)
    return _select(context, found, "find_previous")


def replace(context: ModeContext, match: object = None) -> ModeResult:
    del match
    state = context.search
    if not state.search_term:
        return ModeResult(consumed=True, status="search_empty")
    text, selection = search.replace(
        context.buffer.text, _selection(context), state.search_term, state.replace_term
    )
    if text == context.buffer.text:
        return _select(context, selection, "find_next")
    return commit(context, text, label="replace", selection=selection)


def replace_all(context: ModeContext, match: object = None) -> ModeResult:
    del match
    state = context.search
    if not state.search_term:
        return ModeResult(consumed=True, status="search_empty")
    text = search.replace_all(context.buffer.text, state.search_term, state.replace_term)
    caret = min(_selection(context).lower, len(text))
    return commit(
        context, text, label="replace_all", selection=LinearSelection.caret(caret)
    )


def change_case_at_match(context: ModeContext, style: CaseStyle | str) -> ModeResult:
    term = context.search.search_term
    if not term:
        return ModeResult(consumed=True, status="search_empty")
    try:
        text, selection = search.change_case_at_match(
            context.buffer.text, _selection(context), term, style, context.dictionary
        )
    except DictionaryRequiredError as exc:
        return dictionary_required(context, exc.style)
    except UnknownCaseStyleError as exc:
        return unknown_style(context, exc.style)
    if text == context.buffer.text:
        return _select(context, selection, "find_next")
    return commit(context, text, label="case_at_match", selection=selection)


def enter_column_mode(
    context: ModeContext,
    match: object = None,
    *,
    direction: Optional[block.Direction] = None,
) -> ModeResult:
    """Start a rectangle at the caret's line/column, optionally extending it."""

    del match
    state = context.buffer.state
    position = edits.caret_line_col(context.buffer.text, state.selection)
    state.column_caret = position
    state.rectangle = block.enter(position)
    changed = False
    if direction is not None:
        changed = column_actions.extend(context, direction=direction).changed
    return ModeResult(
        consumed=True,
        switch_to="column",
        status="enter_column",
        changed=changed,
    )


__all__ = [
    "apply_paste",
    "change_case_at_match",
    "click",
    "convert_selection_case",
    "copy_selection",
    "cut_selection",
    "delete_backward",
    "delete_forward",
    "enter_column_mode",
    "find",
    "find_next",
    "find_previous",
    "insert_newline",
    "move",
    "replace",
    "replace_all",
    "request_paste",
    "select_all",
    "type_text",
]
