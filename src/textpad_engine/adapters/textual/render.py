"""Turn engine snapshots into rich ``Text`` with the selection highlighted."""

from __future__ import annotations

from rich.text import Text

from textpad_engine.buffer import EditorMirror, LineCol
from textpad_engine.buffer.document import line_col_to_offset, lines

SELECTION_STYLE = "reverse"
CARET_STYLE = "underline"


def render_mirror(mirror: EditorMirror) -> Text:
    """Linear mode shows the selection or caret; column mode the rectangle."""

    text = Text(mirror.text, no_wrap=True, end="")
    if mirror.rectangle is not None:
        _stylize_rectangle(text, mirror)
        return text

    selection = mirror.selection
    if selection.is_caret:
        _stylize_caret(text, selection.lower)
    else:
        text.stylize(SELECTION_STYLE, selection.lower, selection.upper)
    return text


def _stylize_caret(text: Text, offset: int) -> None:
    if offset >= len(text.plain):
        text.append(" ", style=SELECTION_STYLE)
    elif text.plain[offset] == "\n":
        text.stylize(SELECTION_STYLE, offset, offset + 1)
    else:
        text.stylize(CARET_STYLE, offset, offset + 1)


def _stylize_rectangle(text: Text, mirror: EditorMirror) -> None:
    rectangle = mirror.rectangle
    if rectangle is None:
        return
    doc_lines = lines(mirror.text)
    last = len(doc_lines) - 1
    for line in range(rectangle.min_line, min(rectangle.max_line, last) + 1):
        line_length = len(doc_lines[line])
        start_col = min(rectangle.min_col, line_length)
        end_col = min(rectangle.max_col, line_length)
        start = line_col_to_offset(mirror.text, LineCol(line, start_col))
        if start_col == end_col:
            if start_col < line_length:
                text.stylize(CARET_STYLE, start, start + 1)
            continue
        text.stylize(SELECTION_STYLE, start, start + (end_col - start_col))


__all__ = ["render_mirror", "SELECTION_STYLE", "CARET_STYLE"]
