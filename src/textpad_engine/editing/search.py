"""Literal, case-sensitive substring search and replace over raw offsets.

Only plain matching is implemented. Match-case, whole-word and regex toggles
a front end may show are not wired into matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Optional, Tuple

from textpad_engine.buffer.state import LinearSelection
from textpad_engine.text.case import CaseStyle, convert_case

from .linear import get_selected_text, replace_selection

Edit = Tuple[str, LinearSelection]


@dataclass(slots=True)
class SearchState:
    search_term: str = ""
    replace_term: str = ""


def _match(index: int, term: str) -> Optional[LinearSelection]:
    if index < 0:
        return None
    return LinearSelection(index, index + len(term))


def find_first(doc: str, term: str) -> Optional[LinearSelection]:
    if not term:
        return None
    return _match(doc.find(term), term)


def find_next(doc: str, from_offset: int, term: str) -> Optional[LinearSelection]:
    """First match at or after ``from_offset``, wrapping to the top."""

    if not term:
        return None
    index = doc.find(term, max(0, from_offset))
    if index < 0:
        index = doc.find(term)
    return _match(index, term)


def find_previous(doc: str, from_offset: int, term: str) -> Optional[LinearSelection]:
    """Last match starting at or before ``from_offset - 1``, wrapping to the end."""

    if not term:
        return None
    index = -1
    limit = from_offset - 1
    if limit >= 0:
        index = doc.rfind(term, 0, limit + len(term))
    if index < 0:
        index = doc.rfind(term)
    return _match(index, term)


def replace(
    doc: str, selection: LinearSelection, term: str, replacement: str
) -> Edit:
    """Replace the selection only if it is exactly ``term``, then advance.

    An unrelated selection is never replaced; it just moves to the next match.
    """

    if not term:
        return doc, selection
    if get_selected_text(doc, selection) != term:
        found = find_next(doc, selection.upper, term)
        return doc, found or selection
    updated, inserted = replace_selection(doc, selection, replacement)
    found = find_next(updated, inserted.upper, term)
    return updated, found or inserted


def replace_all(doc: str, term: str, replacement: str) -> str:
    if not term:
        return doc
    return doc.replace(term, replacement)


def change_case_at_match(
    doc: str,
    selection: LinearSelection,
    term: str,
    style: CaseStyle | str,
    dictionary: Optional[AbstractSet[str]] = None,
) -> Edit:
    """Convert the selected match of ``term``, then select the next one.

    Repeated calls walk every occurrence of the original term. May raise
    ``DictionaryRequiredError`` for segmenting styles.
    """

    if not term:
        return doc, selection
    if get_selected_text(doc, selection) != term:
        found = find_next(doc, selection.upper, term)
        return doc, found or selection
    converted = convert_case(term, style, dictionary)
    updated, inserted = replace_selection(doc, selection, converted)
    index = updated.find(term, inserted.upper)
    if index < 0:
        index = updated.find(term)
    return updated, _match(index, term) or LinearSelection.caret(inserted.upper)


__all__ = [
    "SearchState",
    "change_case_at_match",
    "find_first",
    "find_next",
    "find_previous",
    "replace",
    "replace_all",
]
