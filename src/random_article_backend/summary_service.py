# file: src/random_article_backend/summary_service.py
import re
from typing import Any, Dict
from urllib.parse import quote

from pydantic import BaseModel

from . import config
from .wikimedia_client import WikimediaError, get_json

# "Bonobo (Pan paniscus), great ape" -> "Bonobo"
TITLE_CLEAN_RE = re.compile(r"(,.*)|( *\([^)]*\) *)")


class SummaryResult(BaseModel):
    title: str
    summary: str


def clean_title(raw: str) -> str:
    """Cut everything from the first comma and any "(disambiguation)" part, in one pass."""
    return TITLE_CLEAN_RE.sub("", raw)


def build_summary_url(lang: str, article: str) -> str:
    return config.PAGE_SUMMARY_URL.format(lang=lang, article=quote(article, safe=""))


def build_random_summary_url(lang: str) -> str:
    return config.RANDOM_SUMMARY_URL.format(lang=lang)


def _to_result(data: Dict[str, Any], url: str) -> SummaryResult:
    title = data.get("title")
    if not isinstance(title, str):
        raise WikimediaError("Summary response has no title", url=url)
    extract = data.get("extract")
    return SummaryResult(title=clean_title(title), summary=extract if isinstance(extract, str) else "")


def fetch_summary(lang: str, article: str) -> SummaryResult:
    """Summary of a given article; redirects are resolved by Wikipedia."""
    url = build_summary_url(lang, article)
    return _to_result(get_json(url), url)


def fetch_random_summary(lang: str) -> SummaryResult:
    url = build_random_summary_url(lang)
    return _to_result(get_json(url), url)
