"""Helpers shared by action modules."""

from __future__ import annotations

from typing import Optional

from textpad_engine.buffer.state import LinearSelection
from textpad_engine.modes.base_mode import ModeContext, ModeResult
from textpad_engine.runtime import telemetry


def commit(
    context: ModeContext,
    text: str,
    *,
    label: str,
    selection: Optional[LinearSelection] = None,
) -> ModeResult:
    """Install ``text`` (pushing history only on change) and report it."""

    delta = context.buffer.commit(text, label=label)
    if selection is not None:
        context.buffer.set_selection(selection.start, selection.end)
    if delta.changed:
        context.bus.emit("buffer.changed", {"label": label, "version": delta.version})
    return ModeResult(
        consumed=True,
        status=label if delta.changed else "unchanged",
        changed=delta.changed,
    )


def dictionary_required(context: ModeContext, style: str) -> ModeResult:
    telemetry.record_event(
        "case.dictionary_required", level="warning", data={"style": style}
    )
    context.bus.emit("case.dictionary_required", style)
    return ModeResult(consumed=True, status="dictionary_required", message=style)


def unknown_style(context: ModeContext, style: object) -> ModeResult:
    telemetry.record_event(
        "case.unknown_style", level="warning", data={"style": str(style)}
    )
    context.bus.emit("case.unknown_style", str(style))
    return ModeResult(consumed=True, status="unknown_style", message=str(style))


__all__ = ["commit", "dictionary_required", "unknown_style"]
