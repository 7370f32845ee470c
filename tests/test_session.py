from __future__ import annotations

from typing import Any, Dict, List

import pytest

from textpad_engine.buffer import (
    ColumnSelection,
    EditorMirror,
    LineCol,
    LinearSelection,
    MemoryClipboard,
)
from textpad_engine.modes import KeyInput
from textpad_engine.runtime import EngineSettings, telemetry
from textpad_engine.session import EditorSession
from textpad_engine.text import CaseStyle, build_dictionary


def key(name: str, *modifiers: str) -> KeyInput:
    return KeyInput(key=name, modifiers=tuple(modifiers))


def capture_events(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    events: List[Dict[str, Any]] = []

    def fake_record_event(name: str, **kwargs: Any) -> None:
        events.append({"name": name, **kwargs})

    monkeypatch.setattr(telemetry, "record_event", fake_record_event)
    return events


@pytest.mark.asyncio
async def test_copy_then_paste_through_keys() -> None:
    clipboard = MemoryClipboard()
    session = EditorSession("hello world", clipboard=clipboard)
    session.set_selection(0, 5)

    await session.handle_key(key("c", "ctrl"))
    session.set_selection(11, 11)
    result = await session.handle_key(key("v", "ctrl"))

    assert clipboard.writes == ["hello"]
    assert result.status == "paste"
    assert session.get_content() == "hello worldhello"
    assert session.get_selection() == LinearSelection(11, 16)


@pytest.mark.asyncio
async def test_cut_tolerates_clipboard_write_failure(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    events = capture_events(monkeypatch)
    session = EditorSession("abc", clipboard=MemoryClipboard(denied=True))
    session.set_selection(0, 1)

    result = await session.cut()

    assert result.status == "cut"
    assert session.get_content() == "bc"
    assert [event["name"] for event in events if event.get("level") == "warning"] == [
        "clipboard.write_failed"
    ]


@pytest.mark.asyncio
async def test_failed_or_empty_paste_is_noop(monkeypatch: pytest.MonkeyPatch) -> None:
    events = capture_events(monkeypatch)
    denied = EditorSession("abc", clipboard=MemoryClipboard("zz", denied=True))
    empty = EditorSession("abc", clipboard=MemoryClipboard(""))

    failed = await denied.paste()
    nothing = await empty.handle_key(key("v", "ctrl"))

    assert failed.status == "paste_failed"
    assert nothing.status == "paste_empty"
    assert denied.get_content() == empty.get_content() == "abc"
    assert denied.stats().history_length == empty.stats().history_length == 1
    assert any(event["name"] == "clipboard.read_failed" for event in events)


@pytest.mark.asyncio
async def test_case_conversion_waits_for_dictionary() -> None:
    session = EditorSession("bookingpassengers")
    session.set_selection(0, 17)

    rejected = session.convert_selection_case("snake_case")

    assert rejected.status == "dictionary_required"
    assert rejected.message == "snake_case"
    assert session.get_content() == "bookingpassengers"

    await session.load_dictionary()
    session.set_selection(0, 17)
    accepted = session.convert_selection_case(CaseStyle.SNAKE)

    assert accepted.status == "case_convert"
    assert session.get_content() == "booking_passengers"


def test_convert_selection_case_keeps_converted_text_selected() -> None:
    session = EditorSession(
        "x bookingpassengers y", dictionary=build_dictionary(["booking", "passengers"])
    )
    session.set_selection(2, 19)

    result = session.convert_selection_case(CaseStyle.SNAKE)

    assert result.status == "case_convert"
    assert session.get_content() == "x booking_passengers y"
    assert session.get_selection() == LinearSelection(2, 20)


def test_unknown_case_style_is_reported_not_raised(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    events = capture_events(monkeypatch)
    session = EditorSession("abc", dictionary=build_dictionary(["abc"]))
    session.set_selection(0, 3)

    converted = session.convert_selection_case("kebab-case")
    at_match = session.change_case_at_match("kebab-case", term="abc")

    assert (converted.status, converted.message) == ("unknown_style", "kebab-case")
    assert at_match.status == "unknown_style"
    assert session.get_content() == "abc"
    assert [event["name"] for event in events].count("case.unknown_style") == 2


def test_upper_case_on_already_upper_selection_is_unchanged() -> None:
    session = EditorSession("ABC")
    session.set_selection(0, 3)

    result = session.convert_selection_case(CaseStyle.UPPER)

    assert result.status == "unchanged"
    assert session.stats().history_length == 1


def test_convert_selection_case_caret_reports_nothing_selected() -> None:
    session = EditorSession("abc", dictionary=build_dictionary(["abc"]))

    result = session.convert_selection_case(CaseStyle.UPPER)

    assert result.status == "nothing_selected"
    assert session.stats().history_length == 1


def test_find_next_wraps_and_empty_term_is_noop() -> None:
    session = EditorSession("abXcd")
    session.set_selection(3, 3)

    found = session.find_next("X")
    assert found.status == "find_next"
    assert (session.get_selection().lower, session.get_selection().upper) == (2, 3)

    empty = session.find_next("")
    assert empty.status == "search_empty"
    assert (session.get_selection().lower, session.get_selection().upper) == (2, 3)


def test_find_missing_term_keeps_selection() -> None:
    session = EditorSession("abc")
    session.set_selection(1, 2)

    result = session.find_next("zz")

    assert result.status == "not_found"
    assert (session.get_selection().start, session.get_selection().end) == (1, 2)


def test_find_previous_from_selection() -> None:
    session = EditorSession("aXbXc")
    session.set_selection(3, 4)

    session.find_previous("X")

    assert (session.get_selection().lower, session.get_selection().upper) == (1, 2)


def test_replace_walks_matches() -> None:
    session = EditorSession("aXbX")

    session.replace("X", "_")
    assert session.get_content() == "aXbX"

    session.replace()
    session.replace()

    assert session.get_content() == "a_b_"
    assert session.stats().history_length == 3


def test_replace_all_is_single_history_entry() -> None:
    session = EditorSession("aXbXc")

    result = session.replace_all("X", "_")

    assert result.status == "replace_all"
    assert session.get_content() == "a_b_c"
    assert session.stats().history_length == 2

    session.undo()
    assert session.get_content() == "aXbXc"


def test_change_case_at_match_uses_search_term() -> None:
    session = EditorSession("foo bar foo")
    session.set_selection(0, 3)

    session.change_case_at_match(CaseStyle.UPPER, term="foo")
    session.change_case_at_match(CaseStyle.UPPER)

    assert session.get_content() == "FOO bar FOO"


def test_toggle_column_mode_and_cleanup() -> None:
    session = EditorSession("abc\nd")
    session.set_selection(3, 3)

    session.toggle_column_mode()
    assert session.mode == "column"
    assert session.mirror().rectangle == ColumnSelection(0, 0, 3, 3)

    session.toggle_column_mode()

    assert session.mode == "linear"
    assert session.mirror().rectangle is None


@pytest.mark.asyncio
async def test_column_padding_and_exit_each_push_once() -> None:
    session = EditorSession("abc\nd")
    session.set_selection(3, 3)
    session.toggle_column_mode()

    await session.handle_key(key("DOWN"))
    assert session.get_content() == "abc\nd  "
    assert session.stats().history_position == 2

    await session.handle_key(key("ESC"))
    assert session.get_content() == "abc\nd"
    assert session.stats().history_position == 3
    assert session.mode == "linear"


def test_search_commands_disabled_in_column_mode() -> None:
    session = EditorSession("aXb")
    session.toggle_column_mode()

    result = session.replace_all("X", "_")

    assert result.status == "column_mode"
    assert session.get_content() == "aXb"


def test_undo_redo_work_in_column_mode() -> None:
    session = EditorSession("ab\ncd")
    session.toggle_column_mode()
    session.insert_text("Z")

    assert session.get_content() == "Zab\ncd"

    session.undo()
    assert session.get_content() == "ab\ncd"
    session.redo()
    assert session.get_content() == "Zab\ncd"


@pytest.mark.asyncio
async def test_click_cancels_rectangle_without_cleanup() -> None:
    session = EditorSession("ab\ncd")
    session.toggle_column_mode()
    await session.handle_key(key("RIGHT"))
    await session.handle_key(key("RIGHT"))
    await session.handle_key(key("RIGHT"))
    padded = session.get_content()

    clicked = session.click(LineCol(1, 1))
    typed = session.insert_text("x")

    assert clicked.status == "column_click"
    assert typed.status == "no_rectangle"
    assert session.get_content() == padded

    await session.handle_key(key("RIGHT"))
    assert session.mirror().rectangle == ColumnSelection(1, 1, 1, 2)


def test_click_in_linear_mode_places_caret() -> None:
    session = EditorSession("ab\ncd")
    session.set_selection(0, 2)

    result = session.click(LineCol(1, 1))

    assert result.status == "caret_move"
    assert session.get_selection() == LinearSelection.caret(4)


def test_dirty_flag_and_new_document() -> None:
    session = EditorSession("one", settings=EngineSettings(initial_text="blank"))
    assert session.dirty is False

    session.insert_text("!")
    assert session.dirty is True

    session.mark_saved()
    assert session.dirty is False

    session.insert_text("?")
    session.new_document()

    assert session.get_content() == "blank"
    assert session.dirty is False
    assert session.stats().history_length == 1


def test_set_content_resets_history_and_leaves_column_mode() -> None:
    session = EditorSession("a")
    session.insert_text("b")
    session.toggle_column_mode()

    session.set_content("fresh\ntext")

    assert session.mode == "linear"
    assert session.stats().summary == "Lines: 2 | Characters: 10 | History: 1/1"


def test_render_event_after_every_operation() -> None:
    session = EditorSession("")
    mirrors: List[EditorMirror] = []
    session.subscribe("render", mirrors.append)

    session.insert_text("hi")
    session.set_selection(0, 2)
    session.undo()

    assert [mirror.text for mirror in mirrors] == ["hi", "hi", ""]
    assert mirrors[0].attributes["status"] == "insert_text"
    assert mirrors[-1].stats.history_position == 1


class RecordingSync:
    def __init__(self) -> None:
        self.texts: List[str] = []

    def render(self, mirror: EditorMirror) -> None:
        self.texts.append(mirror.text)


def test_attach_renders_current_state_then_follows_edits() -> None:
    session = EditorSession("ab")
    sync = RecordingSync()

    session.attach(sync)
    session.insert_text("c")

    assert sync.texts == ["ab", "cab"]
