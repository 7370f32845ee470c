"""Built-in keymaps that seed the linear and column modes."""

from __future__ import annotations

from functools import partial
from typing import Iterable, Sequence

from textpad_engine.actions import column as column_actions
from textpad_engine.actions import core as core_actions
from textpad_engine.actions import linear as linear_actions
from textpad_engine.editing.column import DIRECTIONS

from .models import ActionRef, Binding
from .registry import KeymapRegistry

_DIRECTION_KEYS = {
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "page_up": "PAGEUP",
    "page_down": "PAGEDOWN",
}

_CARET_KEYS = {
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "line_start": "HOME",
    "line_end": "END",
}


def _core_actions() -> list[ActionRef]:
    return [
        ActionRef("core.undo", core_actions.undo, "Undo the last edit"),
        ActionRef("core.redo", core_actions.redo, "Redo the next edit"),
        ActionRef("core.noop", core_actions.noop_action, "Do nothing"),
    ]


def _linear_actions() -> list[ActionRef]:
    actions = [
        ActionRef("linear.type_text", linear_actions.type_text, "Type text"),
        ActionRef("linear.apply_paste", linear_actions.apply_paste, "Paste text"),
        ActionRef("linear.click", linear_actions.click, "Place the caret at a position"),
        ActionRef("linear.insert_newline", linear_actions.insert_newline, "New line"),
        ActionRef("linear.select_all", linear_actions.select_all, "Select all"),
        ActionRef("linear.copy", linear_actions.copy_selection, "Copy selection"),
        ActionRef("linear.cut", linear_actions.cut_selection, "Cut selection"),
        ActionRef("linear.paste", linear_actions.request_paste, "Paste clipboard"),
        ActionRef(
            "linear.delete_backward",
            linear_actions.delete_backward,
            "Delete selection or previous character",
        ),
        ActionRef(
            "linear.delete_forward",
            linear_actions.delete_forward,
            "Delete selection or next character",
        ),
        ActionRef("linear.find_next", linear_actions.find_next, "Find next match"),
        ActionRef(
            "linear.find_previous", linear_actions.find_previous, "Find previous match"
        ),
    ]
    for direction in _CARET_KEYS:
        actions.append(
            ActionRef(
                f"linear.move_{direction}",
                partial(linear_actions.move, direction=direction),
                f"Move caret {direction}",
            )
        )
        actions.append(
            ActionRef(
                f"linear.extend_{direction}",
                partial(linear_actions.move, direction=direction, extend=True),
                f"Extend selection {direction}",
            )
        )
    for direction in DIRECTIONS:
        actions.append(
            ActionRef(
                f"linear.enter_column_{direction}",
                partial(linear_actions.enter_column_mode, direction=direction),
                f"Enter column mode and extend {direction}",
            )
        )
    return actions


def _column_actions() -> list[ActionRef]:
    actions = [
        ActionRef("column.type_text", column_actions.type_text, "Type over block"),
        ActionRef("column.apply_paste", column_actions.apply_paste, "Paste into block"),
        ActionRef("column.backspace", column_actions.backspace, "Backspace in block"),
        ActionRef("column.delete", column_actions.delete_forward, "Delete in block"),
        ActionRef("column.copy", column_actions.copy_block, "Copy block"),
        ActionRef("column.cut", column_actions.cut_block, "Cut block"),
        ActionRef("column.paste", column_actions.request_paste, "Paste clipboard"),
        ActionRef("column.exit", column_actions.exit_column_mode, "Leave column mode"),
        ActionRef("column.click", column_actions.click, "Cancel block at a position"),
    ]
    for direction in DIRECTIONS:
        actions.append(
            ActionRef(
                f"column.extend_{direction}",
                partial(column_actions.extend, direction=direction),
                f"Extend block {direction}",
            )
        )
    return actions


def _default_bindings() -> list[Binding]:
    bindings = []
    for mode in ("linear", "column"):
        bindings.extend(
            [
                Binding.of(f"{mode}.undo", mode, "ctrl+z", "core.undo", "Undo"),
                Binding.of(f"{mode}.redo", mode, "ctrl+y", "core.redo", "Redo"),
                Binding.of(
                    f"{mode}.redo_alt", mode, "ctrl+shift+z", "core.redo", "Redo"
                ),
            ]
        )

    bindings.extend(
        [
            Binding.of("linear.select_all", "linear", "ctrl+a", "linear.select_all"),
            Binding.of("linear.copy", "linear", "ctrl+c", "linear.copy"),
            Binding.of("linear.cut", "linear", "ctrl+x", "linear.cut"),
            Binding.of("linear.paste", "linear", "ctrl+v", "linear.paste"),
            Binding.of("linear.backspace", "linear", "BACKSPACE", "linear.delete_backward"),
            Binding.of("linear.delete", "linear", "DELETE", "linear.delete_forward"),
            Binding.of("linear.enter", "linear", "ENTER", "linear.insert_newline"),
            Binding.of("linear.escape", "linear", "ESC", "core.noop"),
            Binding.of("linear.find_next", "linear", "F3", "linear.find_next"),
            Binding.of(
                "linear.find_previous", "linear", "shift+F3", "linear.find_previous"
            ),
        ]
    )
    for direction, key in _CARET_KEYS.items():
        bindings.append(
            Binding.of(f"linear.move_{direction}", "linear", key, f"linear.move_{direction}")
        )
        bindings.append(
            Binding.of(
                f"linear.extend_{direction}",
                "linear",
                f"shift+{key}",
                f"linear.extend_{direction}",
            )
        )
    for direction in DIRECTIONS:
        key = _DIRECTION_KEYS[direction]
        bindings.append(
            Binding.of(
                f"linear.enter_column_{direction}",
                "linear",
                f"alt+shift+{key}",
                f"linear.enter_column_{direction}",
            )
        )

    bindings.extend(
        [
            Binding.of("column.copy", "column", "ctrl+c", "column.copy"),
            Binding.of("column.cut", "column", "ctrl+x", "column.cut"),
            Binding.of("column.paste", "column", "ctrl+v", "column.paste"),
            Binding.of("column.backspace", "column", "BACKSPACE", "column.backspace"),
            Binding.of("column.delete", "column", "DELETE", "column.delete"),
            Binding.of("column.escape", "column", "ESC", "column.exit"),
        ]
    )
    for direction in DIRECTIONS:
        key = _DIRECTION_KEYS[direction]
        action_id = f"column.extend_{direction}"
        bindings.append(Binding.of(f"column.{direction}", "column", key, action_id))
        bindings.append(
            Binding.of(f"column.alt_{direction}", "column", f"alt+shift+{key}", action_id)
        )
    return bindings


def default_actions() -> tuple[ActionRef, ...]:
    """Build the action table; resolved on call since actions import the modes."""

    return tuple(_core_actions() + _linear_actions() + _column_actions())


DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(_default_bindings())


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for both modes."""

    excluded = set(exclude_bindings or ())
    for action in default_actions():
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "default_actions", "DEFAULT_BINDINGS"]
