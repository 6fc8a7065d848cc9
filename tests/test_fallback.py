"""Fallback romaji conversion tests."""
from __future__ import annotations

import pytest

from pronunciation.fallback import romaji_to_katakana


def test_romaji_word_becomes_katakana() -> None:
    assert romaji_to_katakana("mamisan") == "マミサン"


def test_case_is_ignored() -> None:
    assert romaji_to_katakana("MAMISAN") == romaji_to_katakana("mamisan")


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("dog", "ドッ"),
        ("hello", "ヘッロ"),
        ("xyz", "ッッッ"),
    ],
)
def test_stray_consonants_become_sokuon(word: str, expected: str) -> None:
    assert romaji_to_katakana(word) == expected


def test_digits_pass_through() -> None:
    assert romaji_to_katakana("unknownword123") == "ウンッノッンヲッッ123"
