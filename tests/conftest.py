import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def top_payload():
    """Minimal pageviews top response, already rank ordered."""
    def _make(articles):
        return {"items": [{"project": "en.wikipedia", "articles": [
            {"article": a, "views": 1000 - i, "rank": i + 1} for i, a in enumerate(articles)
        ]}]}
    return _make
