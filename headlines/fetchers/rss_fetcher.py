from __future__ import annotations

import logging
import re
from typing import List, Mapping, Optional

import feedparser
import requests

from .. import __version__
from ..errors import ProtocolError, TransportError
from ..models import ArticleRecord
from .base import BaseFetcher, check_http_url

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")


class RSSFeedFetcher(BaseFetcher):
    """Fetches articles from a single RSS or Atom feed."""

    def __init__(self, url: Optional[str], timeout: float = 10.0, session: Optional[requests.Session] = None) -> None:
        self._host = check_http_url(url, "feed URL").netloc
        self._url = url
        self._timeout = timeout
        self.source_label = url
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": f"headlines/{__version__}"})

    def fetch(self) -> List[ArticleRecord]:
        try:
            response = self._session.get(self._url, timeout=self._timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(f"{self._url} answered HTTP {status}", status_code=status) from exc
        except requests.RequestException as exc:
            raise TransportError(f"Failed fetching {self._url}: {exc}") from exc
        feed = feedparser.parse(response.content)
        entries = feed.entries or []
        if not entries and (feed.get("bozo") or not feed.get("version")):
            raise ProtocolError(f"{self._url} is not a readable feed: {feed.get('bozo_exception')}")
        default_source = (feed.get("feed") or {}).get("title") or self._host
        return [_to_record(entry, default_source) for entry in entries]


def _to_record(entry: Mapping[str, object], default_source: str) -> ArticleRecord:
    # Atom entries carry full text under "content"; RSS items only have a summary.
    blocks = [block.get("value") for block in entry.get("content") or () if isinstance(block, Mapping)]
    text = " ".join(value for value in blocks if isinstance(value, str)) or entry.get("summary") or ""
    source = entry.get("source")
    source_title = source.get("title") if isinstance(source, Mapping) else None
    return ArticleRecord(
        title=str(entry.get("title") or "Untitled"),
        body=_clean_html(str(text)),
        url=str(entry.get("link") or ""),
        source=str(source_title or default_source),
    )


def _clean_html(raw_html: str) -> str:
    return " ".join(_TAG_RE.sub(" ", raw_html).split())
