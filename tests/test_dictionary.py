from pathlib import Path

import pytest

from textpad_engine.runtime import EngineSettings, bundled_dictionary_path
from textpad_engine.text import load_dictionary, parse_word_list


def test_parse_word_list_lowercases_and_skips_blanks() -> None:
    assert parse_word_list("Apple\r\nbanana\n\n  Cherry \n") == frozenset(
        {"apple", "banana", "cherry"}
    )


@pytest.mark.asyncio
async def test_load_dictionary_reads_file(tmp_path: Path) -> None:
    source = tmp_path / "words.txt"
    source.write_text("booking\npassengers\n", encoding="utf-8")

    dictionary = await load_dictionary(source)

    assert dictionary == frozenset({"booking", "passengers"})


@pytest.mark.asyncio
async def test_bundled_dictionary_covers_common_words() -> None:
    dictionary = await load_dictionary(bundled_dictionary_path())

    assert {"booking", "passengers", "user", "name"} <= dictionary


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    words = tmp_path / "words.txt"
    monkeypatch.setenv("TEXTPAD_ENGINE_PAGE_SIZE", "5")
    monkeypatch.setenv("TEXTPAD_ENGINE_DICTIONARY", str(words))
    monkeypatch.setenv("TEXTPAD_ENGINE_INITIAL_TEXT", "hello")

    settings = EngineSettings.from_env()

    assert settings.page_size == 5
    assert settings.dictionary_path == words
    assert settings.initial_text == "hello"


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEXTPAD_ENGINE_PAGE_SIZE", raising=False)
    monkeypatch.delenv("TEXTPAD_ENGINE_DICTIONARY", raising=False)

    settings = EngineSettings.from_env()

    assert settings.page_size == 10
    assert settings.dictionary_path == bundled_dictionary_path()


def test_settings_reject_non_positive_page_size() -> None:
    with pytest.raises(ValueError):
        EngineSettings(page_size=0)


@pytest.mark.parametrize("raw", ["0", "-3", "ten"])
def test_settings_from_env_falls_back_on_bad_page_size(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("TEXTPAD_ENGINE_PAGE_SIZE", raw)

    assert EngineSettings.from_env().page_size == 10
