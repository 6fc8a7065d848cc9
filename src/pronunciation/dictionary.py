"""発音辞書ファイルの読み込み。"""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

LOGGER = logging.getLogger(__name__)


class DictionaryLoadError(RuntimeError):
    """Raised when the pronunciation dictionary cannot be loaded."""

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        super().__init__(f"cannot load pronunciation dictionary {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class MalformedDictionaryLineError(DictionaryLoadError):
    """Raised for a dictionary line that has no word or no phonemes."""

    def __init__(self, path: str | os.PathLike[str], line_number: int, line: str) -> None:
        super().__init__(path, f"malformed line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line


def parse_dictionary_line(line: str) -> tuple[str, tuple[str, ...]] | None:
    """1行を (単語, 音素列) に分解する。音素が無い行は None。"""

    tokens = line.split()
    if len(tokens) < 2:
        return None
    return tokens[0], tuple(tokens[1:])


def parse_dictionary_lines(
    lines: Iterable[str],
    *,
    source: str | os.PathLike[str] = "<memory>",
) -> Mapping[str, tuple[str, ...]]:
    """行の列から読み取り専用の発音辞書を構築する。"""

    entries: dict[str, tuple[str, ...]] = {}
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        parsed = parse_dictionary_line(line)
        if parsed is None:
            raise MalformedDictionaryLineError(source, line_number, line)
        word, phonemes = parsed
        if word in entries:
            LOGGER.debug("duplicate_entry word=%s line=%d", word, line_number)
        entries[word] = phonemes
    return MappingProxyType(entries)


def load_pronunciation_dictionary(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
) -> Mapping[str, tuple[str, ...]]:
    """辞書ファイルを読み込む。失敗時は部分的な辞書を返さず例外を送出する。"""

    dict_path = Path(path)
    try:
        with dict_path.open("r", encoding=encoding) as handle:
            entries = parse_dictionary_lines(handle, source=dict_path)
    except OSError as exc:
        raise DictionaryLoadError(dict_path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DictionaryLoadError(dict_path, f"not valid {encoding}") from exc

    LOGGER.info("dictionary_loaded path=%s entries=%d", dict_path, len(entries))
    return entries


__all__ = [
    "DictionaryLoadError",
    "MalformedDictionaryLineError",
    "load_pronunciation_dictionary",
    "parse_dictionary_line",
    "parse_dictionary_lines",
]
