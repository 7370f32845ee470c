"""Engine settings resolved from ``TEXTPAD_ENGINE_*`` environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional

from .telemetry import env

DEFAULT_PAGE_SIZE = 10


def bundled_dictionary_path() -> Path:
    """Location of the word list shipped inside the package."""

    return Path(str(resources.files("textpad_engine") / "data" / "english.txt"))


@dataclass(frozen=True, slots=True)
class EngineSettings:
    page_size: int = DEFAULT_PAGE_SIZE
    dictionary_path: Optional[Path] = None
    initial_text: str = ""

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")

    @classmethod
    def from_env(cls) -> "EngineSettings":
        raw_page = env("PAGE_SIZE")
        try:
            page_size = int(raw_page) if raw_page else DEFAULT_PAGE_SIZE
        except ValueError:
            page_size = DEFAULT_PAGE_SIZE
        if page_size <= 0:
            page_size = DEFAULT_PAGE_SIZE
        raw_dictionary = env("DICTIONARY")
        dictionary_path = (
            Path(raw_dictionary) if raw_dictionary else bundled_dictionary_path()
        )
        return cls(
            page_size=page_size,
            dictionary_path=dictionary_path,
            initial_text=env("INITIAL_TEXT", "") or "",
        )


__all__ = ["EngineSettings", "DEFAULT_PAGE_SIZE", "bundled_dictionary_path"]
