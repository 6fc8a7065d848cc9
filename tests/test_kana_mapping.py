"""Kana transducer tests."""
from __future__ import annotations

import pytest

from kana.mapping import (
    Lookup,
    UncoverablePhonemePairError,
    find_uncovered_pairs,
    is_covered,
    lookup_fragment,
    phonemes_to_kana,
    to_kana_sequence,
)
from kana.table import ISOLATED, VOWELS


def test_cat_combines_consonant_with_vowel() -> None:
    result = to_kana_sequence(["K", "AE", "T"])
    assert result.text == "カト"
    assert result.tokens == ["カ", "ト"]
    assert result.lookups == [
        Lookup(outer="K", inner="AE", kana="カ"),
        Lookup(outer="T", inner=ISOLATED, kana="ト"),
    ]


def test_hello_sequence() -> None:
    assert phonemes_to_kana(["HH", "AH", "L", "OW"]) == "ハロー"


def test_consonant_cluster_uses_isolated_forms() -> None:
    # W+ER absorbs, L and D stand alone
    assert phonemes_to_kana(["W", "ER", "L", "D"]) == "ウィルド"


def test_vowel_followed_by_vowel_uses_vowel_pair() -> None:
    result = to_kana_sequence(["AY", "OW", "AH"])
    assert result.text == "アイオア"
    assert [(item.outer, item.inner) for item in result.lookups] == [
        ("AY", "OW"),
        ("AH", ISOLATED),
    ]


def test_vowel_after_absorbed_pair_stands_alone() -> None:
    assert phonemes_to_kana(["P", "IY", "AE", "N", "OW"]) == "ピアノ"


def test_isolated_r_is_long_vowel_mark() -> None:
    assert phonemes_to_kana(["EY", "AO", "R", "T", "AH"]) == "エイオータ"


def test_duplicate_vowel_rows_use_later_definition() -> None:
    assert lookup_fragment("AA", ISOLATED) == "アー"
    assert lookup_fragment("OW", ISOLATED) == "オー"
    assert lookup_fragment("EY", "AH") == "エイ"
    assert lookup_fragment("AW", ISOLATED) == "オウ"


def test_empty_sequence_yields_empty_text() -> None:
    result = to_kana_sequence([])
    assert result.text == ""
    assert result.tokens == []
    assert result.lookups == []


def test_single_vowel_is_isolated() -> None:
    assert phonemes_to_kana(["IY"]) == "イー"


def test_accepts_any_iterable() -> None:
    assert phonemes_to_kana(iter(["K", "AE", "T"])) == "カト"
    assert phonemes_to_kana(("Z", "UW")) == "ズ"


def test_conversion_is_deterministic() -> None:
    phonemes = ["K", "AH", "M", "P", "Y", "UW", "T", "ER"]
    first = phonemes_to_kana(phonemes)
    assert first == "カムプュタ"
    assert all(phonemes_to_kana(phonemes) == first for _ in range(5))


@pytest.mark.parametrize(
    "phonemes",
    [
        ["K", "AE", "T"],
        ["HH", "AH", "L", "OW"],
        ["M", "Y", "UW", "Z", "IH", "K"],
        ["V", "AY", "AH", "L", "IH", "N"],
        ["TH", "AE", "NG", "K"],
        ["AY", "D", "IY", "AH"],
    ],
)
def test_absorption_and_isolation_invariants(phonemes: list[str]) -> None:
    result = to_kana_sequence(phonemes)
    pairs = [(item.outer, item.inner) for item in result.lookups]

    for idx in range(len(phonemes) - 1):
        current, following = phonemes[idx], phonemes[idx + 1]
        if current not in VOWELS and following in VOWELS:
            assert (current, following) in pairs
            assert (current, ISOLATED) not in pairs

    last = phonemes[-1]
    if not (len(phonemes) > 1 and pairs[-1] == (phonemes[-2], last)):
        assert pairs[-1] == (last, ISOLATED)

    assert all(token for token in result.tokens)
    assert len(result.tokens) <= len(phonemes)


def test_missing_vowel_pair_raises() -> None:
    with pytest.raises(UncoverablePhonemePairError) as excinfo:
        phonemes_to_kana(["AE", "IY"])
    assert excinfo.value.outer == "AE"
    assert excinfo.value.inner == "IY"
    assert "(AE, IY)" in str(excinfo.value)


def test_unknown_phoneme_raises_with_isolated_pair() -> None:
    with pytest.raises(UncoverablePhonemePairError) as excinfo:
        phonemes_to_kana(["K", "XX"])
    assert excinfo.value.outer == "XX"
    assert excinfo.value.inner is ISOLATED
    assert "<isolated>" in str(excinfo.value)


def test_uncoverable_error_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        lookup_fragment("Q", ISOLATED)


def test_find_uncovered_pairs_reports_every_gap() -> None:
    assert find_uncovered_pairs(["AE", "IY", "XX"]) == [("AE", "IY"), ("XX", ISOLATED)]
    assert find_uncovered_pairs(["K", "AE", "T"]) == []
    assert is_covered(["K", "AE", "T"])
    assert not is_covered(["AE", "IY"])
