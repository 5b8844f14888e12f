from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional
from urllib.parse import urlparse

from ..errors import ConfigurationError
from ..models import ArticleRecord


class BaseFetcher(ABC):
    """Abstract base class for article sources.

    A fetcher performs exactly one blocking round-trip per ``fetch`` call and
    either returns the complete list of records or raises a ``FetchError``.
    It is only ever called from the refresh worker, never concurrently.
    """

    #: Human readable description of where articles come from.
    source_label: str = ""

    @abstractmethod
    def fetch(self) -> List[ArticleRecord]:
        """Return the current articles, or raise ``FetchError``."""


def check_http_url(url: Optional[str], label: str = "URL"):
    """Parse ``url`` and reject anything that is not a usable http(s) address."""
    try:
        parsed = urlparse(url or "")
        # Accessing port validates it; hostname is empty for "http://:80".
        parsed.port
        hostname = parsed.hostname
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {label}: {url!r} ({exc})") from exc
    if parsed.scheme not in ("http", "https") or not hostname:
        raise ConfigurationError(f"Invalid {label}: {url!r}")
    return parsed
