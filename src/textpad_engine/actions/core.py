"""Actions shared by both modes."""

from __future__ import annotations

from textpad_engine.modes.base_mode import ModeContext, ModeResult


def undo(context: ModeContext, match: object = None) -> ModeResult:
    del match
    if context.buffer.undo() is None:
        return ModeResult(consumed=True, status="undo_empty")
    context.bus.emit("history.undo", context.buffer.history.cursor)
    return ModeResult(consumed=True, status="undo", changed=True)


def redo(context: ModeContext, match: object = None) -> ModeResult:
    del match
    if context.buffer.redo() is None:
        return ModeResult(consumed=True, status="redo_empty")
    context.bus.emit("history.redo", context.buffer.history.cursor)
    return ModeResult(consumed=True, status="redo", changed=True)


def noop_action(context: ModeContext, match: object = None) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = ["undo", "redo", "noop_action"]
