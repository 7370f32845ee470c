"""Mode manager coordinating the linear and column pipelines."""

from __future__ import annotations

from typing import Dict, Optional, Type

from textpad_engine.buffer.state import LineCol
from textpad_engine.keymaps.registry import KeymapRegistry
from textpad_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Owns active mode, handles transitions, and dispatches key events."""

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.logger = telemetry.get_logger("textpad_engine.modes")
        self.keymap_registry = keymap_registry
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def active_name(self) -> Optional[str]:
        return self._active

    def get_mode(self, name: str) -> Mode:
        try:
            return self._modes[name]
        except KeyError as exc:
            raise KeyError(f"Unknown mode '{name}'") from exc

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.changed", name)
        telemetry.record_event("mode.switch", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self._require_active()
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        return self._after_mode_result(result)

    def paste(self, text: str) -> ModeResult:
        """Deliver clipboard text fetched by the host to the active mode."""

        mode = self._require_active()
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"paste_length": len(text), "mode": mode.name},
        ):
            result = mode.paste(text)
        return self._after_mode_result(result)

    def click(self, position: LineCol) -> ModeResult:
        """Deliver a pointer press at ``position`` to the active mode."""

        mode = self._require_active()
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"click": (position.line, position.col), "mode": mode.name},
        ):
            result = mode.click(position)
        return self._after_mode_result(result)

    def dispatch(self, result: ModeResult) -> ModeResult:
        """Apply the transition carried by a result produced outside ``handle_key``."""

        return self._after_mode_result(result)

    def _require_active(self) -> Mode:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        return mode

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
