# file: src/random_article_backend/main.py
import asyncio
import logging
import re
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import config
from .selector import pick_article
from .summary_service import SummaryResult, fetch_random_summary, fetch_summary
from .top_articles_service import TopArticlesCache, fetch_top_articles

logger = logging.getLogger("random_article_backend.main")

# ==========
# State
# ==========
# One cache for the whole process: created at import, never cleared.
top_articles_cache = TopArticlesCache()

# ASCII digits only, digits past the ninth are ignored.
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?[0-9]{1,9})")

# "en", "fi", "zh-min-nan", "be-tarask" ... it ends up in the URL host, nothing else is allowed.
_LANG_RE = re.compile(r"[a-z][a-z0-9-]{0,19}")


class ErrorResponse(BaseModel):
    error: str


def parse_top(raw: Optional[str]) -> Optional[int]:
    """
    Lenient integer parsing of the `top` query param: "50" -> 50, " 7abc" -> 7,
    "abc" / "" / None -> None.
    """
    if raw is None:
        return None
    m = _INT_PREFIX_RE.match(raw)
    if not m:
        return None
    return int(m.group(1))


def validate_lang(lang: str) -> str:
    if not _LANG_RE.fullmatch(lang):
        raise ValueError(f"invalid language code: {lang!r}")
    return lang


async def _random_summary(lang: str) -> SummaryResult:
    return await asyncio.to_thread(fetch_random_summary, lang)


async def _biased_summary(lang: str, top: int) -> SummaryResult:
    articles = await asyncio.to_thread(fetch_top_articles, lang, top_articles_cache)
    if not articles:
        logger.warning("Top list for lang=%s is empty after filtering -> random article instead", lang)
        return await _random_summary(lang)

    article = pick_article(articles, top)
    return await asyncio.to_thread(fetch_summary, lang, article)


# ==========
# App
# ==========
app = FastAPI(title="Random Wikipedia Article Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def _startup_log() -> None:
    logger.info(
        "FastAPI startup OK. PORT=%s DEFAULT_LANG=%s WIKIMEDIA_TIMEOUT=%ss",
        config.PORT,
        config.DEFAULT_LANG,
        config.WIKIMEDIA_TIMEOUT,
    )
    logger.info("WIKIMEDIA_USER_AGENT=%s", config.WIKIMEDIA_USER_AGENT)


@app.get(
    "/apiv1",
    response_model=SummaryResult,
    responses={500: {"model": ErrorResponse}},
)
async def api_v1(
    lang: Optional[str] = Query(None),
    top: Optional[str] = Query(None),
) -> Any:
    """
    Random article title + summary.
    - top=N (N > 0) -> among the N most viewed articles of last month
    - no top / top=0 / garbage -> any article (Wikipedia's own random)
    Every failure ends up as 500 {"error": ...}, the client always gets an answer.
    """
    lang = (lang or "").strip() or config.DEFAULT_LANG

    try:
        validate_lang(lang)
        top_n = parse_top(top)
        if top_n and top_n > 0:
            return await _biased_summary(lang, top_n)
        return await _random_summary(lang)
    except Exception:
        logger.exception("apiv1 failed (lang=%s top=%s)", lang, top)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=config.SERVER_ERROR_MESSAGE).model_dump(),
        )


def run() -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
