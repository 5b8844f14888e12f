from __future__ import annotations

import logging
from typing import List, Mapping, Optional
from urllib.parse import quote

import requests

from .. import __version__
from ..errors import ConfigurationError, ProtocolError, TransportError
from ..models import ArticleRecord
from .base import BaseFetcher, check_http_url

DEFAULT_BASE_URL = "http://localhost:8080"
TOP_HEADLINES = "articles"

logger = logging.getLogger(__name__)


class NewsAPIFetcher(BaseFetcher):
    """Fetches the article list from a JSON news endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        endpoint: str = TOP_HEADLINES,
        region: str = "us",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url
        self._endpoint = endpoint
        self._region = region
        self._timeout = timeout
        # Fail on a bad endpoint now rather than on the first refresh.
        self.source_label = self.prepare_url()
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": f"headlines/{__version__}",
                "Accept": "application/json",
            }
        )

    def prepare_url(self) -> str:
        check_http_url(self._base_url, "base URL")
        if not self._endpoint or not self._endpoint.strip("/"):
            raise ConfigurationError("Endpoint path must not be empty")
        return f"{self._base_url.rstrip('/')}/{quote(self._endpoint.strip('/'))}"

    def fetch(self) -> List[ArticleRecord]:
        url = self.prepare_url()
        try:
            response = self._session.get(url, params={"country": self._region}, timeout=self._timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(f"{url} answered HTTP {status}", status_code=status) from exc
        except requests.Timeout as exc:
            raise TransportError(f"Timed out after {self._timeout}s fetching {url}") from exc
        except requests.RequestException as exc:
            raise TransportError(f"Failed fetching {url}: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise ProtocolError(f"Response from {url} is not valid JSON") from exc
        articles = parse_articles(payload)
        logger.debug("Parsed %d articles from %s", len(articles), url)
        return articles


def parse_articles(payload: object) -> List[ArticleRecord]:
    """Convert a decoded JSON payload into records, all or nothing."""
    if not isinstance(payload, list):
        raise ProtocolError(f"Expected a JSON array of articles, got {type(payload).__name__}")
    return [_parse_article(index, item) for index, item in enumerate(payload)]


def _parse_article(index: int, item: object) -> ArticleRecord:
    if not isinstance(item, Mapping):
        raise ProtocolError(f"Article {index} is not an object")
    fields = {}
    for name in ("title", "content", "source"):
        value = item.get(name)
        if not isinstance(value, str):
            raise ProtocolError(f"Article {index} is missing string field {name!r}")
        fields[name] = value
    url = item.get("url")
    if url is not None and not isinstance(url, str):
        raise ProtocolError(f"Article {index} has a non-string 'url'")
    return ArticleRecord(
        title=fields["title"],
        body=fields["content"],
        # The endpoint has no link field; content doubles as the link target.
        url=url or fields["content"],
        source=fields["source"],
    )
