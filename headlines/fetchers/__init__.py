"""Article sources for the refresh worker."""

from __future__ import annotations

from ..config import ReaderConfig
from .base import BaseFetcher
from .mock_fetcher import MockFetcher
from .newsapi_fetcher import NewsAPIFetcher
from .rss_fetcher import RSSFeedFetcher


def build_fetcher(config: ReaderConfig) -> BaseFetcher:
    if config.feed_kind == "mock":
        return MockFetcher()
    if config.feed_kind == "rss":
        return RSSFeedFetcher(config.rss_url, timeout=config.timeout)
    return NewsAPIFetcher(
        base_url=config.base_url,
        endpoint=config.endpoint,
        region=config.region,
        timeout=config.timeout,
    )


__all__ = ["BaseFetcher", "MockFetcher", "NewsAPIFetcher", "RSSFeedFetcher", "build_fetcher"]
