"""Selection value types and the mutable selection state tied to a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class LineCol:
    """Zero-based line and column; ``col`` may run past the end of the line."""

    line: int = 0
    col: int = 0


@dataclass(frozen=True, slots=True)
class LinearSelection:
    """Offset range given in either order; ``start == end`` is a caret."""

    start: int = 0
    end: int = 0

    @classmethod
    def caret(cls, offset: int) -> "LinearSelection":
        return cls(offset, offset)

    @property
    def lower(self) -> int:
        return min(self.start, self.end)

    @property
    def upper(self) -> int:
        return max(self.start, self.end)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class ColumnSelection:
    """Rectangle anchored at ``start_*``; directional commands move ``end_*``."""

    start_line: int
    end_line: int
    start_col: int
    end_col: int

    @classmethod
    def at(cls, position: LineCol) -> "ColumnSelection":
        return cls(position.line, position.line, position.col, position.col)

    @property
    def min_line(self) -> int:
        return min(self.start_line, self.end_line)

    @property
    def max_line(self) -> int:
        return max(self.start_line, self.end_line)

    @property
    def min_col(self) -> int:
        return min(self.start_col, self.end_col)

    @property
    def max_col(self) -> int:
        return max(self.start_col, self.end_col)

    @property
    def is_degenerate(self) -> bool:
        """True when the column span is empty (a caret on every covered row)."""

        return self.start_col == self.end_col

    def collapsed_to(self, col: int) -> "ColumnSelection":
        return ColumnSelection(self.min_line, self.max_line, col, col)


@dataclass(slots=True)
class BufferState:
    """Mutable selection info for whichever mode is active."""

    selection: LinearSelection = field(default_factory=LinearSelection)
    rectangle: Optional[ColumnSelection] = None
    column_caret: LineCol = field(default_factory=LineCol)

    def set_selection(self, start: int, end: int) -> None:
        self.selection = LinearSelection(start, end)

    def set_caret(self, offset: int) -> None:
        self.selection = LinearSelection.caret(offset)

    def clear_rectangle(self) -> None:
        self.rectangle = None


__all__ = ["LineCol", "LinearSelection", "ColumnSelection", "BufferState"]
