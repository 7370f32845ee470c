import pytest

from textpad_engine.errors import DictionaryRequiredError, UnknownCaseStyleError
from textpad_engine.text import (
    CaseStyle,
    build_dictionary,
    convert_case,
    segment_words,
    to_camel_case,
    to_lower_case,
    to_pascal_case,
    to_sentence_case,
    to_snake_case,
    to_title_case,
    to_upper_case,
)

WORDS = build_dictionary(["booking", "passengers", "book", "in", "gpassengers"])


def test_segment_known_words() -> None:
    assert segment_words("bookingpassengers", WORDS) == ["booking", "passengers"]


def test_segment_normalizes_case_and_underscores() -> None:
    assert segment_words("Booking_Passengers", WORDS) == ["booking", "passengers"]


def test_segment_prefers_fewest_words() -> None:
    dictionary = build_dictionary(["a", "b", "ab"])

    assert segment_words("ab", dictionary) == ["ab"]


def test_segment_tie_keeps_first_split_found() -> None:
    dictionary = build_dictionary(["a", "ab", "bc", "c"])

    assert segment_words("abc", dictionary) == ["a", "bc"]


def test_segment_fallback_returns_normalized_input() -> None:
    assert segment_words("Xyz_Q", WORDS) == ["xyzq"]


def test_segment_empty_input() -> None:
    assert segment_words("", WORDS) == []


def test_segmenting_styles() -> None:
    text = "bookingpassengers"

    assert to_snake_case(text, WORDS) == "booking_passengers"
    assert to_camel_case(text, WORDS) == "bookingPassengers"
    assert to_pascal_case(text, WORDS) == "BookingPassengers"
    assert to_title_case(text, WORDS) == "Booking Passengers"
    assert to_sentence_case(text, WORDS) == "Booking passengers"


def test_segmenting_styles_on_empty_input() -> None:
    for style in (CaseStyle.SNAKE, CaseStyle.CAMEL, CaseStyle.PASCAL, CaseStyle.TITLE):
        assert convert_case("", style, WORDS) == ""
    assert to_sentence_case("", WORDS) == ""


def test_charwise_styles_need_no_dictionary() -> None:
    assert to_upper_case("MixedCase") == "MIXEDCASE"
    assert to_lower_case("MixedCase") == "mixedcase"
    assert convert_case("MixedCase", "UPPERCASE") == "MIXEDCASE"
    assert convert_case("MixedCase", CaseStyle.LOWER, None) == "mixedcase"


def test_convert_case_requires_dictionary() -> None:
    with pytest.raises(DictionaryRequiredError) as excinfo:
        convert_case("bookingpassengers", "snake_case")

    assert excinfo.value.style == "snake_case"


def test_unknown_style_rejected() -> None:
    with pytest.raises(UnknownCaseStyleError):
        convert_case("abc", "kebab-case", WORDS)

    with pytest.raises(ValueError):
        CaseStyle.parse("kebab-case")


def test_needs_dictionary_flags() -> None:
    assert CaseStyle.parse("camelCase") is CaseStyle.CAMEL
    assert CaseStyle.CAMEL.needs_dictionary is True
    assert CaseStyle.UPPER.needs_dictionary is False
