from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

FEED_KINDS = ("newsapi", "rss", "mock")


def _parse_number(name: str, value: Optional[str], default: float, cast=float):
    if value is None or value.strip() == "":
        return cast(default)
    try:
        parsed = cast(value)
    except ValueError:
        raise ValueError(f"{name} must be a number if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed


@dataclass(slots=True)
class ReaderConfig:
    """Runtime configuration for the headlines reader."""

    base_url: str = "http://localhost:8080"
    endpoint: str = "articles"
    region: str = "us"
    feed_kind: str = "newsapi"
    rss_url: Optional[str] = None
    timeout: float = 10.0
    poll_interval_ms: int = 250
    settings_path: str = "~/.headlines.json"

    def __post_init__(self) -> None:
        if self.feed_kind not in FEED_KINDS:
            raise ValueError(f"Unknown feed kind {self.feed_kind!r}; expected one of {', '.join(FEED_KINDS)}")

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        import os

        defaults = cls()
        return cls(
            base_url=os.getenv("HEADLINES_BASE_URL", defaults.base_url),
            endpoint=os.getenv("HEADLINES_ENDPOINT", defaults.endpoint),
            region=os.getenv("HEADLINES_REGION", defaults.region),
            feed_kind=os.getenv("HEADLINES_FEED", defaults.feed_kind).strip().lower(),
            rss_url=os.getenv("HEADLINES_RSS_URL") or None,
            timeout=_parse_number("HEADLINES_TIMEOUT", os.getenv("HEADLINES_TIMEOUT"), defaults.timeout),
            poll_interval_ms=_parse_number(
                "HEADLINES_POLL_MS", os.getenv("HEADLINES_POLL_MS"), defaults.poll_interval_ms, cast=int
            ),
            settings_path=os.getenv("HEADLINES_SETTINGS", defaults.settings_path),
        )
