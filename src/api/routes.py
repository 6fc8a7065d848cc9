from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_converter
from api.schemas import (
    LookupOut,
    PhonemesRequest,
    PhonemesResponse,
    WordKanaOut,
    WordsRequest,
    WordsResponse,
)
from common.config import get_settings
from kana.mapping import UncoverablePhonemePairError, to_kana_sequence
from pronunciation.converter import PronunciationConverter

LOGGER = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/phonemes_to_kana",
    response_model=PhonemesResponse,
    summary="音素列をカタカナ表記へ変換する",
)
def phonemes_to_kana(request: PhonemesRequest) -> PhonemesResponse:
    """ARPAbet音素列を対応表で変換した結果を返す。"""

    try:
        result = to_kana_sequence(request.phonemes)
    except UncoverablePhonemePairError as exc:
        raise _uncoverable(exc) from exc
    return PhonemesResponse(
        kana=result.text,
        tokens=result.tokens,
        lookups=[
            LookupOut(outer=item.outer, inner=item.inner, kana=item.kana)
            for item in result.lookups
        ],
    )


@router.post(
    "/kana",
    response_model=WordsResponse,
    summary="英単語列をカタカナ表記へ変換する",
)
def words_to_kana(
    request: WordsRequest,
    converter: PronunciationConverter = Depends(get_converter),  # noqa: B008
) -> WordsResponse:
    """辞書引きまたは綴りからの変換で各単語のカタカナを返す。"""

    limit = get_settings().max_words_per_request
    if len(request.words) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail={"error": "too_many_words", "limit": limit},
        )
    results = [_resolve(converter, word) for word in request.words]
    LOGGER.info(
        "words=%d dictionary_hits=%d",
        len(results),
        sum(1 for item in results if item.source == "dictionary"),
    )
    return WordsResponse(results=results)


@router.get(
    "/kana/{word}",
    response_model=WordKanaOut,
    summary="英単語1語をカタカナ表記へ変換する",
)
def word_to_kana(
    word: str,
    converter: PronunciationConverter = Depends(get_converter),  # noqa: B008
) -> WordKanaOut:
    return _resolve(converter, word)


def _resolve(converter: PronunciationConverter, word: str) -> WordKanaOut:
    try:
        resolved = converter.resolve(word)
    except UncoverablePhonemePairError as exc:
        LOGGER.exception("kana conversion failed", extra={"word": word})
        raise _uncoverable(exc) from exc
    return WordKanaOut(
        word=resolved.word,
        kana=resolved.kana,
        source=resolved.source,
        phonemes=list(resolved.phonemes) if resolved.phonemes is not None else None,
    )


def _uncoverable(exc: UncoverablePhonemePairError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"error": "uncoverable_pair", "outer": exc.outer, "inner": exc.inner},
    )


__all__ = ["router"]
