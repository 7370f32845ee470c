"""Linear mode: offset-range selection over the flat text."""

from __future__ import annotations

from textpad_engine.buffer.state import LineCol
from textpad_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_registry, run_action


class LinearMode(Mode):
    name = "linear"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("textpad_engine.modes.linear")
        self._registry = require_keymap_registry(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = self._registry.resolve(self.name, key_to_token(key))
        if match is not None:
            return execute_match(self.context, match)

        if key.is_printable:
            return run_action(self.context, "linear.type_text", key.text)

        return ModeResult(consumed=False, status="miss")

    def paste(self, text: str) -> ModeResult:
        return run_action(self.context, "linear.apply_paste", text)

    def click(self, position: LineCol) -> ModeResult:
        return run_action(self.context, "linear.click", position)


__all__ = ["LinearMode"]
