"""環境変数ベースの設定管理。"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション全体の設定。"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    dictionary_path: Path = Field(
        default=Path("data/pronunciation_dict.txt"),
        validation_alias=AliasChoices("PRONUNCIATION_DICT", "DICT_PATH"),
    )
    dictionary_encoding: str = Field(
        default="utf-8",
        validation_alias=AliasChoices("PRONUNCIATION_DICT_ENCODING", "DICT_ENCODING"),
    )
    max_words_per_request: int = Field(
        default=1000,
        validation_alias=AliasChoices("MAX_WORDS_PER_REQUEST", "KANA_MAX_WORDS"),
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "KANA_LOG_LEVEL"),
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """設定をシングルトンで取得する。"""

    return Settings()
