"""Document storage plus the pure line/offset helpers every editor relies on."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Sequence

from .state import LineCol


@dataclass(frozen=True)
class TextDocument:
    """A single text value with a lazily derived tuple of lines.

    Edits never touch an existing document; they build a new one through
    :meth:`replace` so older snapshots stay valid for history and renderers.
    """

    text: str = ""
    version: int = 0

    @cached_property
    def lines(self) -> Sequence[str]:
        return tuple(lines(self.text))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def replace(self, text: str) -> "TextDocument":
        return TextDocument(text=text, version=self.version + 1)

    def __len__(self) -> int:
        return len(self.text)


def lines(doc: str) -> list[str]:
    return doc.split("\n")


def join_lines(parts: Sequence[str]) -> str:
    return "\n".join(parts)


def clamp_offset(doc: str, offset: int) -> int:
    return max(0, min(offset, len(doc)))


def offset_to_line_col(doc: str, offset: int) -> LineCol:
    offset = clamp_offset(doc, offset)
    before = doc[:offset]
    line = before.count("\n")
    col = offset - (before.rfind("\n") + 1)
    return LineCol(line, col)


def line_col_to_offset(doc: str, position: LineCol) -> int:
    """Map ``position`` to an offset, clamping line and column to the text."""

    parts = lines(doc)
    line = max(0, min(position.line, len(parts) - 1))
    col = max(0, min(position.col, len(parts[line])))
    return sum(len(part) + 1 for part in parts[:line]) + col


def pad_line_to_column(line: str, col: int) -> str:
    if len(line) >= col:
        return line
    return line + " " * (col - len(line))


def strip_trailing_whitespace(doc: str) -> str:
    return join_lines([part.rstrip() for part in lines(doc)])


__all__ = [
    "TextDocument",
    "lines",
    "join_lines",
    "clamp_offset",
    "offset_to_line_col",
    "line_col_to_offset",
    "pad_line_to_column",
    "strip_trailing_whitespace",
]
