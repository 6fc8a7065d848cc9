"""FastAPIアプリケーションのエントリポイント。"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from api.dependencies import get_converter
from api.routes import router
from common.config import get_settings
from pronunciation.dictionary import DictionaryLoadError

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """起動時に辞書を読み込む。読み込めなければ起動しない。"""

    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    converter = get_converter()
    LOGGER.info("converter ready entries=%d path=%s", len(converter), settings.dictionary_path)
    yield


app = FastAPI(title="Pronunciation to Kana API", version="0.1.0", lifespan=lifespan)
app.include_router(router)


@app.exception_handler(DictionaryLoadError)
async def dictionary_unavailable(request: Request, exc: DictionaryLoadError) -> JSONResponse:
    LOGGER.exception(
        "dictionary unavailable path=%s reason=%s", exc.path, exc.reason, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": {"error": "dictionary_unavailable"}},
    )


@app.get("/healthz", summary="ヘルスチェック")
def healthz() -> dict[str, str]:
    """サービスの状態を返す。"""

    return {"status": "ok"}
