"""Pronunciation dictionary and word-level kana lookup."""
from .converter import SOURCE_DICTIONARY, SOURCE_FALLBACK, PronunciationConverter, WordKana
from .dictionary import (
    DictionaryLoadError,
    MalformedDictionaryLineError,
    load_pronunciation_dictionary,
    parse_dictionary_line,
    parse_dictionary_lines,
)
from .fallback import romaji_to_katakana

__all__ = [
    "DictionaryLoadError",
    "MalformedDictionaryLineError",
    "PronunciationConverter",
    "SOURCE_DICTIONARY",
    "SOURCE_FALLBACK",
    "WordKana",
    "load_pronunciation_dictionary",
    "parse_dictionary_line",
    "parse_dictionary_lines",
    "romaji_to_katakana",
]
