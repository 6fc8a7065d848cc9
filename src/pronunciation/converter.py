"""単語からカタカナ表記を得るディスパッチャ。"""
from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from kana.mapping import find_uncovered_pairs, phonemes_to_kana
from pronunciation.dictionary import load_pronunciation_dictionary
from pronunciation.fallback import romaji_to_katakana

LOGGER = logging.getLogger(__name__)

SOURCE_DICTIONARY = "dictionary"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class WordKana:
    """単語1件の変換結果。"""

    word: str
    kana: str
    source: str
    phonemes: tuple[str, ...] | None = None


class PronunciationConverter:
    """発音辞書と対応表を用いて英単語をカタカナへ変換する。"""

    def __init__(
        self,
        entries: Mapping[str, tuple[str, ...]],
        *,
        fallback: Callable[[str], str] = romaji_to_katakana,
    ) -> None:
        self._entries = entries
        self._fallback = fallback

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike[str],
        *,
        encoding: str = "utf-8",
        fallback: Callable[[str], str] = romaji_to_katakana,
    ) -> PronunciationConverter:
        """辞書ファイルから変換器を構築する。"""

        return cls(load_pronunciation_dictionary(path, encoding=encoding), fallback=fallback)

    @property
    def entries(self) -> Mapping[str, tuple[str, ...]]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, word: str) -> tuple[str, ...] | None:
        """単語の音素列を返す。辞書に無ければ None。"""

        return self._entries.get(word.upper())

    def convert(self, phonemes: Iterable[str]) -> str:
        return phonemes_to_kana(phonemes)

    def kana_for(self, word: str) -> str:
        """辞書にあれば音素列から、無ければ綴りからカタカナを得る。"""

        return self.resolve(word).kana

    def resolve(self, word: str) -> WordKana:
        """変換結果を出典付きで返す。"""

        phonemes = self.lookup(word)
        if phonemes is None:
            LOGGER.debug("dictionary_miss word=%s", word)
            return WordKana(word=word, kana=self._fallback(word), source=SOURCE_FALLBACK)
        return WordKana(
            word=word,
            kana=phonemes_to_kana(phonemes),
            source=SOURCE_DICTIONARY,
            phonemes=phonemes,
        )

    def uncovered_words(self) -> dict[str, list[tuple[str, str | None]]]:
        """対応表で変換できない辞書項目を、欠けているペアと共に返す。"""

        uncovered: dict[str, list[tuple[str, str | None]]] = {}
        for word, phonemes in self._entries.items():
            missing = find_uncovered_pairs(phonemes)
            if missing:
                uncovered[word] = missing
        return uncovered


__all__ = [
    "PronunciationConverter",
    "SOURCE_DICTIONARY",
    "SOURCE_FALLBACK",
    "WordKana",
]
