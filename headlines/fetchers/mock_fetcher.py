from __future__ import annotations

import time
from typing import List, Optional, Sequence

from ..models import ArticleRecord
from .base import BaseFetcher

SAMPLE_ARTICLES: Sequence[ArticleRecord] = (
    ArticleRecord(
        title="City council approves new cycling corridor",
        body=(
            "The council voted to fund a protected bike lane along the river, "
            "connecting three neighbourhoods to the city centre by next summer."
        ),
        url="https://example.com/cycling-corridor",
        source="Example News",
    ),
    ArticleRecord(
        title="Local library extends weekend opening hours",
        body=(
            "Starting next month the central library will stay open until 8pm on "
            "Saturdays and Sundays after a successful pilot."
        ),
        url="https://example.com/library-hours",
        source="Example News",
    ),
    ArticleRecord(
        title="Analysts split on quarterly retail figures",
        body=(
            "Retail sales were flat compared to last quarter, though online "
            "spending continued to grow at a steady pace."
        ),
        url="https://example.com/retail-figures",
        source="Market Watchers",
    ),
)


class MockFetcher(BaseFetcher):
    """Returns hard-coded articles for offline development."""

    source_label = "built-in sample articles"

    def __init__(self, articles: Optional[Sequence[ArticleRecord]] = None, delay: float = 0.0) -> None:
        self._articles = list(SAMPLE_ARTICLES if articles is None else articles)
        self._delay = delay

    def fetch(self) -> List[ArticleRecord]:
        if self._delay:
            time.sleep(self._delay)
        return list(self._articles)
