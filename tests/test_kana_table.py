"""Digraph table data checks."""
from __future__ import annotations

import pytest

from kana.table import DIGRAPH_TABLE, ISOLATED, VOWELS

CONSONANTS = [outer for outer in DIGRAPH_TABLE if outer not in VOWELS]
KATAKANA_RANGE = range(0x30A0, 0x3100)


def test_vowel_set_is_fixed() -> None:
    assert VOWELS == {
        "AA", "AH", "AE", "AW", "AY", "ER", "IY", "IH",
        "UH", "UW", "EH", "EY", "AO", "OW", "OY",
    }


def test_every_outer_key_has_isolated_form() -> None:
    missing = [outer for outer, inner in DIGRAPH_TABLE.items() if ISOLATED not in inner]
    assert missing == []


def test_table_covers_all_consonants() -> None:
    assert sorted(CONSONANTS) == sorted(
        [
            "B", "CH", "D", "DH", "F", "G", "HH", "JH", "K", "L", "M", "N",
            "NG", "P", "R", "S", "SH", "T", "TH", "V", "W", "Y", "Z", "ZH",
        ]
    )


@pytest.mark.parametrize("consonant", CONSONANTS)
def test_consonant_rows_cover_every_vowel(consonant: str) -> None:
    assert set(DIGRAPH_TABLE[consonant]) == set(VOWELS) | {ISOLATED}


def test_every_vowel_has_a_row() -> None:
    assert set(VOWELS) <= set(DIGRAPH_TABLE)


def test_vowel_rows_only_list_vowel_partners() -> None:
    for vowel in VOWELS:
        assert set(DIGRAPH_TABLE[vowel]) - {ISOLATED} <= set(VOWELS)


def test_fragments_are_non_empty_katakana() -> None:
    for inner in DIGRAPH_TABLE.values():
        for fragment in inner.values():
            assert fragment
            assert all(ord(ch) in KATAKANA_RANGE for ch in fragment), fragment


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DIGRAPH_TABLE["K"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        DIGRAPH_TABLE["K"]["AE"] = "ケ"  # type: ignore[index]


def test_representative_fragments() -> None:
    assert DIGRAPH_TABLE["K"]["AE"] == "カ"
    assert DIGRAPH_TABLE["T"]["AA"] == "トッ"
    assert DIGRAPH_TABLE["S"]["AA"] == "タ"
    assert DIGRAPH_TABLE["R"][ISOLATED] == "ー"
    assert DIGRAPH_TABLE["N"][ISOLATED] == "ン"
    assert DIGRAPH_TABLE["IY"]["IH"] == "ー"
    assert DIGRAPH_TABLE["OW"]["EH"] == "オフエ"
