"""Word-list loading for dictionary-driven segmentation."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import FrozenSet, Iterable

from textpad_engine.runtime import telemetry

Dictionary = FrozenSet[str]


def parse_word_list(text: str) -> Dictionary:
    """Build a dictionary from newline-separated words (CRLF tolerated)."""

    return build_dictionary(text.splitlines())


def build_dictionary(words: Iterable[str]) -> Dictionary:
    return frozenset(
        cleaned for cleaned in (word.strip().lower() for word in words) if cleaned
    )


async def load_dictionary(path: str | Path) -> Dictionary:
    """Read and parse the word list at ``path`` without blocking the loop."""

    source = Path(path)
    with telemetry.span(
        "dictionary::load", component="text", metadata={"path": str(source)}
    ):
        raw = await asyncio.to_thread(source.read_text, encoding="utf-8")
        dictionary = parse_word_list(raw)
    telemetry.record_event(
        "dictionary.loaded", data={"path": str(source), "words": len(dictionary)}
    )
    return dictionary


__all__ = ["Dictionary", "build_dictionary", "load_dictionary", "parse_word_list"]
