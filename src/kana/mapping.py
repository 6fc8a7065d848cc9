"""ARPAbet列を対応表に基づいてカタカナ列へ変換する。"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from kana.table import DIGRAPH_TABLE, ISOLATED, VOWELS


class UncoverablePhonemePairError(KeyError):
    """Raised when the digraph table has no fragment for a phoneme pair."""

    def __init__(self, outer: str, inner: str | None) -> None:
        super().__init__(outer, inner)
        self.outer = outer
        self.inner = inner

    def __str__(self) -> str:
        following = "<isolated>" if self.inner is ISOLATED else self.inner
        return f"no kana for phoneme pair ({self.outer}, {following})"


@dataclass(frozen=True)
class Lookup:
    """対応表の参照1回分。"""

    outer: str
    inner: str | None
    kana: str


@dataclass(frozen=True)
class KanaConversionResult:
    """変換結果。"""

    tokens: list[str]
    text: str
    lookups: list[Lookup] = field(default_factory=list)


def lookup_fragment(outer: str, inner: str | None) -> str:
    """(outer, inner) に対応するカタカナ断片を返す。"""

    try:
        return DIGRAPH_TABLE[outer][inner]
    except KeyError as exc:
        raise UncoverablePhonemePairError(outer, inner) from exc


def to_kana_sequence(phonemes: Iterable[str]) -> KanaConversionResult:
    """音素列をカタカナ断片の列と結合文字列へ変換する。"""

    tokens: list[str] = []
    lookups: list[Lookup] = []
    for outer, inner in _iter_pairs(list(phonemes)):
        kana = lookup_fragment(outer, inner)
        tokens.append(kana)
        lookups.append(Lookup(outer=outer, inner=inner, kana=kana))
    return KanaConversionResult(tokens=tokens, text="".join(tokens), lookups=lookups)


def phonemes_to_kana(phonemes: Iterable[str]) -> str:
    """音素列をカタカナ文字列へ変換する。"""

    return to_kana_sequence(phonemes).text


def find_uncovered_pairs(phonemes: Iterable[str]) -> list[tuple[str, str | None]]:
    """変換時に参照されるが対応表に無いペアを列挙する。"""

    missing: list[tuple[str, str | None]] = []
    for outer, inner in _iter_pairs(list(phonemes)):
        if inner not in DIGRAPH_TABLE.get(outer, {}):
            missing.append((outer, inner))
    return missing


def is_covered(phonemes: Iterable[str]) -> bool:
    return not find_uncovered_pairs(phonemes)


def _iter_pairs(phonemes: Sequence[str]) -> Iterator[tuple[str, str | None]]:
    # A phoneme followed by a vowel is held back and realised together with
    # that vowel; everything else is looked up in isolation.
    pending: str | None = None
    for idx, phoneme in enumerate(phonemes):
        following = phonemes[idx + 1] if idx + 1 < len(phonemes) else None
        if pending is None and following in VOWELS:
            pending = phoneme
            continue
        if pending is None:
            yield phoneme, ISOLATED
        else:
            yield pending, phoneme
            pending = None


__all__ = [
    "KanaConversionResult",
    "Lookup",
    "UncoverablePhonemePairError",
    "find_uncovered_pairs",
    "is_covered",
    "lookup_fragment",
    "phonemes_to_kana",
    "to_kana_sequence",
]
