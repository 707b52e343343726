# file: src/random_article_backend/selector.py
import random
from typing import Optional, Sequence


def pick_article(articles: Sequence[str], top: int, rng: Optional[random.Random] = None) -> str:
    """Uniform pick among the first min(len(articles), top) entries."""
    if not articles:
        raise ValueError("no articles to pick from")
    if top <= 0:
        raise ValueError("top must be a positive integer")

    bound = min(len(articles), top)
    rng = rng or random
    return articles[rng.randrange(bound)]
