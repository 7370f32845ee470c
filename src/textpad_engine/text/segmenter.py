"""Minimum-word-count segmentation of run-together identifiers."""

from __future__ import annotations

from typing import AbstractSet, List, Optional


def normalize(text: str) -> str:
    """Lowercase and drop underscores; casing is re-applied by converters."""

    return text.lower().replace("_", "")


def segment_words(text: str, dictionary: AbstractSet[str]) -> List[str]:
    """Split ``text`` into the fewest dictionary words.

    ``best[j]`` holds the shortest word list covering ``text[:j]``. Positions
    are scanned left to right and a candidate only replaces an existing entry
    when it is strictly shorter, so among equally short splits the first one
    found wins. When nothing reaches the end the whole normalised input is
    returned as a single word.
    """

    normalized = normalize(text)
    size = len(normalized)
    if size == 0:
        return []

    best: List[Optional[List[str]]] = [None] * (size + 1)
    best[0] = []
    for start in range(size):
        prefix = best[start]
        if prefix is None:
            continue
        for end in range(start + 1, size + 1):
            word = normalized[start:end]
            if word not in dictionary:
                continue
            current = best[end]
            if current is None or len(prefix) + 1 < len(current):
                best[end] = prefix + [word]

    result = best[size]
    if result is None:
        return [normalized]
    return result


__all__ = ["normalize", "segment_words"]
