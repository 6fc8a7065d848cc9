"""FastAPI依存性の定義。"""
from __future__ import annotations

import logging

from common.config import get_settings
from pronunciation.converter import PronunciationConverter

LOGGER = logging.getLogger(__name__)


_CONVERTER: PronunciationConverter | None = None


def _new_converter() -> PronunciationConverter:
    settings = get_settings()
    converter = PronunciationConverter.from_file(
        settings.dictionary_path,
        encoding=settings.dictionary_encoding,
    )
    uncovered = converter.uncovered_words()
    if uncovered:
        LOGGER.warning(
            "dictionary_coverage uncovered_words=%d sample=%s",
            len(uncovered),
            sorted(uncovered)[:5],
        )
    return converter


def get_converter() -> PronunciationConverter:
    """シングルトンの変換器を返す。"""

    global _CONVERTER
    converter = _CONVERTER
    if converter is None:
        converter = _CONVERTER = _new_converter()
    return converter
