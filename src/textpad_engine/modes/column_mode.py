"""Column mode: rectangular selection across lines."""

from __future__ import annotations

from typing import Optional

from textpad_engine.buffer.state import LineCol
from textpad_engine.editing import column as block
from textpad_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_registry, run_action


class ColumnMode(Mode):
    """Routes keys to block actions while a rectangle is active.

    Typed characters and pastes always apply to every covered row; once a
    click cancels the rectangle they are ignored until an arrow key starts
    a new one from the clicked position.
    """

    name = "column"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("textpad_engine.modes.column")
        self._registry = require_keymap_registry(context)

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        state = self.context.buffer.state
        if state.rectangle is None:
            state.rectangle = block.enter(state.column_caret)

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self.context.buffer.state.clear_rectangle()

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = self._registry.resolve(self.name, key_to_token(key))
        if match is not None:
            return execute_match(self.context, match)

        if key.is_printable:
            return run_action(self.context, "column.type_text", key.text)

        return ModeResult(consumed=False, status="miss")

    def paste(self, text: str) -> ModeResult:
        return run_action(self.context, "column.apply_paste", text)

    def click(self, position: LineCol) -> ModeResult:
        return run_action(self.context, "column.click", position)


__all__ = ["ColumnMode"]
