# file: src/random_article_backend/top_articles_service.py
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from . import config
from .article_filter import filter_articles
from .wikimedia_client import WikimediaError, get_json

logger = logging.getLogger(__name__)


class TopArticlesCache:
    """
    Filtered top lists keyed by pageviews URL (lang + year + month).

    Entries are never expired or replaced while the process lives.
    Not single-flight: two concurrent misses on the same key both run the
    producer; both store the same list, so the last write wins harmlessly.
    A failing producer stores nothing, the next call simply tries again.
    """

    def __init__(self) -> None:
        self._lists: Dict[str, List[str]] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def get(self, key: str) -> Optional[List[str]]:
        return self._lists.get(key)

    def get_or_populate(self, key: str, producer: Callable[[], List[str]]) -> List[str]:
        cached = self._lists.get(key)
        if cached is not None:
            return cached
        value = producer()
        self._lists[key] = value
        return value


def previous_month(now: datetime) -> Tuple[int, int]:
    """(year, month) of the last fully elapsed calendar month relative to `now`."""
    if now.month == 1:
        return now.year - 1, 12
    return now.year, now.month - 1


def build_top_articles_url(lang: str, year: int, month: int) -> str:
    return config.PAGEVIEWS_TOP_URL.format(lang=lang, yyyy=f"{year:04d}", mm=f"{month:02d}")


def _parse_top_articles(data: Dict[str, Any], url: str) -> List[str]:
    items = data.get("items")
    if not isinstance(items, list) or not items:
        raise WikimediaError("Pageviews response has no items", url=url)
    articles = (items[0] or {}).get("articles")
    if not isinstance(articles, list):
        raise WikimediaError("Pageviews response has no articles", url=url)

    out: List[str] = []
    for row in articles:
        article = row.get("article") if isinstance(row, dict) else None
        if not isinstance(article, str):
            raise WikimediaError("Pageviews article entry without 'article'", url=url)
        out.append(article)
    return out


def fetch_top_articles(lang: str, cache: TopArticlesCache, now: Optional[datetime] = None) -> List[str]:
    """
    Ranked, filtered top list of {lang}.wikipedia for the previous month.
    Blocking (requests); call it from a worker thread inside async code.
    """
    year, month = previous_month(now or datetime.now(timezone.utc))
    url = build_top_articles_url(lang, year, month)

    def _produce() -> List[str]:
        raw = _parse_top_articles(get_json(url), url)
        articles = filter_articles(raw)
        logger.info(
            "Cached top list lang=%s %04d-%02d: %d articles (%d before filter)",
            lang,
            year,
            month,
            len(articles),
            len(raw),
        )
        return articles

    return cache.get_or_populate(url, _produce)
