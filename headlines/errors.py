from __future__ import annotations

from typing import Optional


class FetchError(Exception):
    """A fetch cycle failed. Terminal for that cycle only."""

    kind = "fetch"


class TransportError(FetchError):
    """The request could not complete, or the server refused it."""

    kind = "transport"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(FetchError):
    """A response arrived but its payload is not a list of articles."""

    kind = "protocol"


class ConfigurationError(FetchError, ValueError):
    """The endpoint itself is malformed; raised before any network call."""

    kind = "configuration"
