"""Kana conversion public exports."""
from .mapping import (
    KanaConversionResult,
    Lookup,
    UncoverablePhonemePairError,
    find_uncovered_pairs,
    is_covered,
    lookup_fragment,
    phonemes_to_kana,
    to_kana_sequence,
)
from .table import DIGRAPH_TABLE, ISOLATED, VOWELS

__all__ = [
    "DIGRAPH_TABLE",
    "ISOLATED",
    "KanaConversionResult",
    "Lookup",
    "UncoverablePhonemePairError",
    "VOWELS",
    "find_uncovered_pairs",
    "is_covered",
    "lookup_fragment",
    "phonemes_to_kana",
    "to_kana_sequence",
]
