"""Case conversion styles built on dictionary segmentation."""

from __future__ import annotations

from enum import Enum
from typing import AbstractSet, Callable, Dict, Optional

from textpad_engine.errors import DictionaryRequiredError, UnknownCaseStyleError

from .segmenter import segment_words


class CaseStyle(str, Enum):
    SNAKE = "snake_case"
    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    UPPER = "UPPERCASE"
    LOWER = "lowercase"
    TITLE = "Title Case"
    SENTENCE = "Sentence case"

    @property
    def needs_dictionary(self) -> bool:
        return self not in (CaseStyle.UPPER, CaseStyle.LOWER)

    @classmethod
    def parse(cls, value: "CaseStyle | str") -> "CaseStyle":
        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownCaseStyleError(value) from exc


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_snake_case(text: str, dictionary: AbstractSet[str]) -> str:
    return "_".join(segment_words(text, dictionary))


def to_camel_case(text: str, dictionary: AbstractSet[str]) -> str:
    words = segment_words(text, dictionary)
    if not words:
        return ""
    return words[0] + "".join(_capitalize_first(word) for word in words[1:])


def to_pascal_case(text: str, dictionary: AbstractSet[str]) -> str:
    return "".join(_capitalize_first(word) for word in segment_words(text, dictionary))


def to_upper_case(text: str) -> str:
    return text.upper()


def to_lower_case(text: str) -> str:
    return text.lower()


def to_title_case(text: str, dictionary: AbstractSet[str]) -> str:
    return " ".join(_capitalize(word) for word in segment_words(text, dictionary))


def to_sentence_case(text: str, dictionary: AbstractSet[str]) -> str:
    words = segment_words(text, dictionary)
    if not words:
        return ""
    rest = " ".join(word.lower() for word in words[1:])
    return f"{_capitalize(words[0])} {rest}".strip()


_SEGMENTING: Dict[CaseStyle, Callable[[str, AbstractSet[str]], str]] = {
    CaseStyle.SNAKE: to_snake_case,
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.PASCAL: to_pascal_case,
    CaseStyle.TITLE: to_title_case,
    CaseStyle.SENTENCE: to_sentence_case,
}

_CHARWISE: Dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.UPPER: to_upper_case,
    CaseStyle.LOWER: to_lower_case,
}


def convert_case(
    text: str,
    style: CaseStyle | str,
    dictionary: Optional[AbstractSet[str]] = None,
) -> str:
    """Apply ``style`` to ``text``.

    Raises :class:`DictionaryRequiredError` for segmenting styles when no
    dictionary is available yet; callers can retry once it has loaded.
    """

    resolved = CaseStyle.parse(style)
    charwise = _CHARWISE.get(resolved)
    if charwise is not None:
        return charwise(text)
    if dictionary is None:
        raise DictionaryRequiredError(resolved.value)
    return _SEGMENTING[resolved](text, dictionary)


__all__ = [
    "CaseStyle",
    "convert_case",
    "to_camel_case",
    "to_lower_case",
    "to_pascal_case",
    "to_sentence_case",
    "to_snake_case",
    "to_title_case",
    "to_upper_case",
]
