"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from textpad_engine.keymaps.models import make_token
from textpad_engine.keymaps.registry import KeymapRegistry, ResolutionMatch
from textpad_engine.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    return make_token(key.key, key.modifiers)


def require_keymap_registry(context: ModeContext) -> KeymapRegistry:
    registry = context.extras.get("keymap_registry")
    if not isinstance(registry, KeymapRegistry):
        raise RuntimeError("ModeContext.extras missing 'keymap_registry'")
    return registry


def _as_result(outcome: object) -> ModeResult:
    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ) as handle:
        result = _as_result(match.action(context, match))
        handle.add_metadata("status", result.status)
    return result


def run_action(context: ModeContext, action_id: str, payload: object) -> ModeResult:
    """Invoke a registered action directly with a payload instead of a match."""

    action = require_keymap_registry(context).get_action(action_id)
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"action": action_id},
    ) as handle:
        result = _as_result(action(context, payload))
        handle.add_metadata("status", result.status)
    return result


__all__ = [
    "execute_match",
    "key_to_token",
    "require_keymap_registry",
    "run_action",
]
