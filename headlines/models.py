from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .errors import FetchError


@dataclass(frozen=True, slots=True)
class RefreshCommand:
    """Signal asking the worker to run one fetch cycle."""


@dataclass(frozen=True, slots=True)
class ArticleRecord:
    """A single article as shown in the reader."""

    title: str
    body: str
    url: str
    source: str


@dataclass(frozen=True, slots=True)
class FetchOutcome:
    """Result of one fetch cycle: either articles or an error."""

    articles: Tuple[ArticleRecord, ...] = ()
    error: Optional[FetchError] = None

    @classmethod
    def success(cls, articles: Iterable[ArticleRecord]) -> "FetchOutcome":
        return cls(articles=tuple(articles))

    @classmethod
    def failure(cls, error: FetchError) -> "FetchOutcome":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ClientConfig:
    """User preferences persisted between sessions."""

    dark_mode: bool = False

    @classmethod
    def from_dict(cls, data: object) -> "ClientConfig":
        if not isinstance(data, dict):
            return cls()
        dark_mode = data.get("dark_mode")
        # Only a real JSON boolean counts; "false" or 1 fall back to the default.
        return cls(dark_mode=dark_mode if isinstance(dark_mode, bool) else cls().dark_mode)

    def to_dict(self) -> dict:
        return {"dark_mode": self.dark_mode}
