"""Shared fakes for the test suite."""

import threading
import time
from unittest.mock import MagicMock

import requests

from headlines.fetchers.base import BaseFetcher
from headlines.models import ArticleRecord


def make_article(n):
    return ArticleRecord(title=f"Title {n}", body=f"Body {n}", url=f"https://example.com/{n}", source="Test Wire")


def wait_for(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


def json_session(payload=None, status_code=200, json_error=None, exc=None):
    """A ``requests.Session`` stand-in whose ``get`` returns one canned response."""
    session = MagicMock()
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if exc is not None:
        session.get.side_effect = exc
    else:
        session.get.return_value = response
    return session


class GatedFetcher(BaseFetcher):
    """Blocks inside ``fetch`` until ``release`` is set.

    ``results`` is consumed one entry per call; the last entry repeats.
    Exceptions in ``results`` are raised instead of returned.
    """

    source_label = "gated test fetcher"

    def __init__(self, results):
        self.calls = 0
        self.entered = threading.Event()
        self.release = threading.Event()
        self._results = list(results)

    def fetch(self):
        self.calls += 1
        self.entered.set()
        self.release.wait(5)
        result = self._results[min(self.calls, len(self._results)) - 1]
        if isinstance(result, Exception):
            raise result
        return list(result)


class FakeCoordinator:
    """Records what ``PresentationState`` asks of the coordinator."""

    def __init__(self):
        self.started = False
        self.requests = 0
        self.shutdowns = 0
        self.pending = []

    def start(self):
        self.started = True

    def request_refresh(self):
        self.requests += 1
        return True

    def drain_results(self):
        outcomes, self.pending = self.pending, []
        return outcomes

    def shutdown(self, timeout=None):
        self.shutdowns += 1
