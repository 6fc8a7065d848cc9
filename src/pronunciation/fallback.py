"""Generic romaji to katakana conversion for words missing from the dictionary."""
from __future__ import annotations

import jaconv


def romaji_to_katakana(word: str) -> str:
    """Read *word* as romaji and return its katakana spelling.

    A consonant letter that does not start a romaji syllable is written as
    ッ, so the letter itself is not kept. Digits and other non-letters are
    left as they are.
    """

    return jaconv.alphabet2kata(word.lower())
