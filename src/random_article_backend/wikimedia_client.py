# file: src/random_article_backend/wikimedia_client.py
import logging
from typing import Any, Dict, Optional

import requests

from . import config

logger = logging.getLogger(__name__)


class WikimediaError(Exception):
    """Upstream Wikimedia call failed (network, non-2xx, bad JSON or unexpected shape)."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


def _headers() -> Dict[str, str]:
    return {"User-Agent": config.WIKIMEDIA_USER_AGENT, "accept": "application/json"}


def get_json(url: str, timeout: Optional[int] = None) -> Dict[str, Any]:
    """
    GET url and return the decoded JSON object.
    Any failure is raised as WikimediaError; nothing is retried here.
    """
    timeout = timeout or config.WIKIMEDIA_TIMEOUT
    try:
        r = requests.get(url, headers=_headers(), timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as e:
        status = getattr(e.response, "status_code", None)
        logger.warning("Wikimedia HTTP %s for %s", status, url)
        raise WikimediaError(f"HTTP {status} from Wikimedia", status_code=status, url=url) from e
    except requests.RequestException as e:
        logger.warning("Wikimedia request failed for %s: %s", url, e)
        raise WikimediaError(f"Request failed: {e}", url=url) from e

    try:
        data = r.json()
    except ValueError as e:
        logger.warning("Wikimedia returned invalid JSON for %s", url)
        raise WikimediaError("Invalid JSON from Wikimedia", status_code=r.status_code, url=url) from e

    if not isinstance(data, dict):
        raise WikimediaError("Unexpected JSON payload from Wikimedia", status_code=r.status_code, url=url)
    return data
