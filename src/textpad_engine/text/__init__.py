"""Word segmentation, case conversion, and dictionary loading."""

from .case import (
    CaseStyle,
    convert_case,
    to_camel_case,
    to_lower_case,
    to_pascal_case,
    to_sentence_case,
    to_snake_case,
    to_title_case,
    to_upper_case,
)
from .dictionary import Dictionary, build_dictionary, load_dictionary, parse_word_list
from .segmenter import normalize, segment_words

__all__ = [
    "CaseStyle",
    "Dictionary",
    "build_dictionary",
    "convert_case",
    "load_dictionary",
    "normalize",
    "parse_word_list",
    "segment_words",
    "to_camel_case",
    "to_lower_case",
    "to_pascal_case",
    "to_sentence_case",
    "to_snake_case",
    "to_title_case",
    "to_upper_case",
]
