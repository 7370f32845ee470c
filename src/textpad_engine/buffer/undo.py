"""Linear undo/redo history of whole-document snapshots."""

from __future__ import annotations

from typing import List, Optional, Tuple


class HistoryStack:
    """Snapshot log where ``entries[cursor]`` is always the displayed text.

    Pushing drops everything after the cursor, so history never branches.
    """

    def __init__(self, initial: str = "") -> None:
        self._entries: List[str] = [initial]
        self._cursor: int = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> str:
        return self._entries[self._cursor]

    @property
    def position(self) -> Tuple[int, int]:
        """1-based cursor and total entry count, as shown on a status line."""

        return self._cursor + 1, len(self._entries)

    def push(self, doc: str) -> None:
        del self._entries[self._cursor + 1 :]
        self._entries.append(doc)
        self._cursor = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def undo(self) -> Optional[str]:
        if not self.can_undo():
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def redo(self) -> Optional[str]:
        if not self.can_redo():
            return None
        self._cursor += 1
        return self._entries[self._cursor]

    def reset(self, doc: str) -> None:
        self._entries = [doc]
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["HistoryStack"]
