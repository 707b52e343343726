# file: src/random_article_backend/config.py
import os
from typing import Dict, List, Tuple

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip() or default


def _env_int(name: str, default: int, lo: int = 1, hi: int = 65535) -> int:
    try:
        v = int(os.getenv(name, str(default)))
    except Exception:
        v = default
    return max(lo, min(hi, v))


# ==========
# Server
# ==========
HOST = _env("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3000, 1, 65535)
LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()

DEFAULT_LANG = _env("DEFAULT_LANG", "en")

# ==========
# Wikimedia
# ==========
WIKIMEDIA_USER_AGENT = _env(
    "WIKIMEDIA_USER_AGENT",
    "random-article-backend/0.1 (https://github.com/random-article-backend; contact: dev@localhost)",
)
WIKIMEDIA_TIMEOUT = _env_int("WIKIMEDIA_TIMEOUT", 12, 1, 60)

PAGEVIEWS_TOP_URL = (
    "https://wikimedia.org/api/rest_v1/metrics/pageviews/top/"
    "{lang}.wikipedia/all-access/{yyyy}/{mm}/all-days"
)
PAGE_SUMMARY_URL = "https://{lang}.wikipedia.org/api/rest_v1/page/summary/{article}?redirect=true"
RANDOM_SUMMARY_URL = "https://{lang}.wikipedia.org/api/rest_v1/page/random/summary"

# "List of ..." pages per language edition. Add a language here to filter its lists too.
LIST_PREFIXES_BY_LANG: Dict[str, Tuple[str, ...]] = {
    "en": ("List_of_",),
    "fi": ("Luettelo_",),
    "sv": ("Lista_över_",),
    "de": ("Liste_der_", "Liste_von_"),
    "fr": ("Liste_des_", "Liste_de_"),
    "nl": ("Lijst_van_",),
    "it": ("Lista_di_",),
    "pt": ("Lista_de_",),
    "ru": ("Список_",),
}


def all_list_prefixes() -> List[str]:
    out: List[str] = []
    for prefixes in LIST_PREFIXES_BY_LANG.values():
        for p in prefixes:
            if p not in out:
                out.append(p)
    return out


MAIN_PAGE = "Main_Page"

SERVER_ERROR_MESSAGE = "Server error :("
