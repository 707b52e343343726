# file: src/random_article_backend/article_filter.py
import re
from typing import Iterable, List, Optional, Sequence

from .config import MAIN_PAGE, all_list_prefixes

# Special:Search, Talk:Foo, Wikipedia:Etusivu ... namespace names differ per edition,
# so match the shape instead of a fixed list.
NAMESPACE_RE = re.compile(r"^\w+:\w")


def is_content_article(article: str, list_prefixes: Sequence[str]) -> bool:
    if article == MAIN_PAGE:
        return False
    if NAMESPACE_RE.match(article):
        return False
    return not any(article.startswith(p) for p in list_prefixes)


def filter_articles(articles: Iterable[str], list_prefixes: Optional[Sequence[str]] = None) -> List[str]:
    """
    Drop non-content pages from a ranked top list:
    namespace pages, "List of ..." pages and Main_Page.
    Rank order of the remaining articles is kept.
    """
    prefixes = tuple(all_list_prefixes() if list_prefixes is None else list_prefixes)
    return [a for a in articles if is_content_article(a, prefixes)]
