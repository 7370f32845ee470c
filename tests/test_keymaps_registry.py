import pytest

from textpad_engine.keymaps import (
    ActionRef,
    Binding,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "linear",
    keys: str = "ctrl+k",
    action_id: str = "core.test",
) -> Binding:
    return Binding.of(binding_id, mode, keys, action_id)


def test_keystroke_parse_normalizes_modifiers() -> None:
    stroke = KeyStroke.parse("Shift+Alt+UP")

    assert stroke.modifiers == ("alt", "shift")
    assert stroke.token == "alt+shift+UP"
    assert KeyStroke.parse("ctrl++").key == "+"


def test_keystroke_parse_rejects_unknown_modifier() -> None:
    with pytest.raises(ValueError):
        KeyStroke.parse("hyper+x")


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="linear.k")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="linear")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="linear.k"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="linear.k.duplicate"))


def test_same_key_in_other_mode_is_not_a_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="linear.k"))
    registry.register_binding(make_binding(binding_id="column.k", mode="column"))

    assert registry.stats().modes == ("column", "linear")


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_register_binding_requires_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.resolve("linear", "ctrl+k") is None


def test_load_default_keymaps_covers_both_modes() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    undo = registry.resolve("linear", "ctrl+z")
    assert undo is not None and undo.action.id == "core.undo"
    redo = registry.resolve("column", "ctrl+shift+z")
    assert redo is not None and redo.action.id == "core.redo"
    enter = registry.resolve("linear", "alt+shift+DOWN")
    assert enter is not None and enter.action.id == "linear.enter_column_down"
    page = registry.resolve("column", "PAGEDOWN")
    assert page is not None and page.action.id == "column.extend_page_down"
    escape = registry.resolve("column", "ESC")
    assert escape is not None and escape.action.id == "column.exit"


def test_load_default_keymaps_exclude_filter() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, exclude_bindings=("linear.escape",))

    assert registry.resolve("linear", "ESC") is None
    assert registry.get_action("core.noop").id == "core.noop"


def test_load_default_keymaps_extra_binding() -> None:
    registry = KeymapRegistry()
    extra = Binding.of("linear.find_next_alt", "linear", "ctrl+g", "linear.find_next")

    load_default_keymaps(registry, extra_bindings=(extra,))

    assert registry.get_binding("linear.find_next_alt") == extra
