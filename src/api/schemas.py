"""APIの入出力スキーマ。"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

MAX_PHONEMES = 256


class KanaSource(str, Enum):
    dictionary = "dictionary"
    fallback = "fallback"


class PhonemesRequest(BaseModel):
    phonemes: list[str] = Field(max_length=MAX_PHONEMES)


class LookupOut(BaseModel):
    outer: str
    inner: str | None
    kana: str


class PhonemesResponse(BaseModel):
    kana: str
    tokens: list[str]
    lookups: list[LookupOut]


class WordsRequest(BaseModel):
    words: list[str] = Field(min_length=1)


class WordKanaOut(BaseModel):
    word: str
    kana: str
    source: KanaSource
    phonemes: list[str] | None = None


class WordsResponse(BaseModel):
    results: list[WordKanaOut]
