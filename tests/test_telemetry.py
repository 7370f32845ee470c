from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List

import pytest

from textpad_engine.adapters.textual import app as textual_app
from textpad_engine.buffer import Buffer
from textpad_engine.keymaps import KeymapRegistry, load_default_keymaps
from textpad_engine.modes import ModeBus, ModeContext
from textpad_engine.modes.keymap_helpers import run_action
from textpad_engine.runtime import telemetry


@pytest.fixture
def restore_telemetry() -> Iterator[None]:
    yield
    telemetry.configure()


def test_configure_with_development_preset(restore_telemetry: None) -> None:
    telemetry.configure(preset="development")

    assert telemetry.get_logger("textpad_engine.tests") is telemetry.get_logger(
        "textpad_engine.tests"
    )


def test_configure_rejects_unknown_preset(restore_telemetry: None) -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset(restore_telemetry: None) -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_main_applies_log_preset(monkeypatch: pytest.MonkeyPatch) -> None:
    presets: List[Any] = []
    monkeypatch.setattr(
        telemetry, "configure", lambda **kwargs: presets.append(kwargs.get("preset"))
    )
    monkeypatch.setattr(textual_app.TextpadApp, "run", lambda self: None)

    textual_app.main(["--log-preset", "development", "--no-dictionary"])
    textual_app.main(["--no-dictionary"])

    assert presets == ["development"]


def test_run_action_records_status_on_span(monkeypatch: pytest.MonkeyPatch) -> None:
    handles: List[telemetry.SpanHandle] = []

    @contextmanager
    def fake_span(name: str, **kwargs: Any) -> Iterator[telemetry.SpanHandle]:
        handle = telemetry.SpanHandle(logger=None, span_name=name)
        handles.append(handle)
        yield handle

    monkeypatch.setattr(telemetry, "span", fake_span)
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    context = ModeContext(
        buffer=Buffer.from_text("abc"),
        bus=ModeBus(),
        extras={"keymap_registry": registry},
    )

    run_action(context, "linear.type_text", "x")

    executed = [handle for handle in handles if handle.span_name == "keymaps::execute"]
    assert [handle.metadata["status"] for handle in executed] == ["insert_text"]
