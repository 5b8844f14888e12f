"""Background refresh worker and the two queues that connect it to the UI.

Commands travel UI -> worker over a queue of capacity one; outcomes travel
worker -> UI over an unbounded queue. Both queue objects are the only state
the two threads share.
"""

from __future__ import annotations

import logging
import queue
import threading
from enum import Enum
from typing import Dict, List, Optional

from .errors import FetchError
from .fetchers.base import BaseFetcher
from .models import FetchOutcome, RefreshCommand

logger = logging.getLogger(__name__)

_REFRESH = RefreshCommand()
_SHUTDOWN = object()


class CoordinatorState(Enum):
    IDLE = "idle"
    PENDING = "pending"
    FETCHING = "fetching"


class RefreshCoordinator:
    """Runs fetch cycles on a single worker thread.

    ``request_refresh`` and ``drain_results`` are meant for the UI thread and
    never block. At most one refresh can wait behind the running fetch; any
    further requests are coalesced into it.
    """

    def __init__(self, fetcher: BaseFetcher) -> None:
        self._fetcher = fetcher
        self._commands: "queue.Queue[object]" = queue.Queue(maxsize=1)
        self._results: "queue.Queue[FetchOutcome]" = queue.Queue()
        self._stop_flag = threading.Event()
        self._fetching = threading.Event()
        self._worker: Optional[threading.Thread] = None
        self.stats: Dict[str, int] = {
            "requested": 0,
            "coalesced": 0,
            "fetches": 0,
            "failures": 0,
        }

    @property
    def state(self) -> CoordinatorState:
        """Best-effort snapshot for display and diagnostics.

        The worker takes a command off the queue before it marks itself as
        fetching, so for that brief moment this may report IDLE. Never use it
        to decide whether to call ``request_refresh``.
        """
        if self._fetching.is_set():
            return CoordinatorState.FETCHING
        if not self._commands.empty():
            return CoordinatorState.PENDING
        return CoordinatorState.IDLE

    @property
    def running(self) -> bool:
        return self._worker is not None and self._worker.is_alive()

    def start(self) -> None:
        if self._worker is not None:
            raise RuntimeError("RefreshCoordinator already started")
        self._worker = threading.Thread(target=self._worker_loop, name="RefreshWorker", daemon=True)
        self._worker.start()
        logger.debug("Refresh worker started")

    def request_refresh(self) -> bool:
        """Queue a refresh. Returns False if it was merged into a pending one."""
        self.stats["requested"] += 1
        try:
            self._commands.put_nowait(_REFRESH)
        except queue.Full:
            self.stats["coalesced"] += 1
            logger.debug("Refresh already pending; request coalesced")
            return False
        return True

    def drain_results(self) -> List[FetchOutcome]:
        outcomes: List[FetchOutcome] = []
        while True:
            try:
                outcomes.append(self._results.get_nowait())
            except queue.Empty:
                return outcomes

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """Stop the worker once any in-flight fetch has been delivered."""
        self._stop_flag.set()
        try:
            self._commands.put_nowait(_SHUTDOWN)
        except queue.Full:
            # A queued refresh will wake the worker, which then sees the flag.
            pass
        if self._worker is not None:
            self._worker.join(timeout)
            if self._worker.is_alive():
                logger.warning("Refresh worker still busy after %.1fs", timeout)
        logger.debug("Refresh worker stopped")

    def _worker_loop(self) -> None:
        while not self._stop_flag.is_set():
            command = self._commands.get()
            if command is _SHUTDOWN or self._stop_flag.is_set():
                break
            self._fetching.set()
            try:
                self._results.put(self._run_fetch())
            finally:
                self._fetching.clear()

    def _run_fetch(self) -> FetchOutcome:
        self.stats["fetches"] += 1
        logger.info("Fetching articles from %s", self._fetcher.source_label or type(self._fetcher).__name__)
        try:
            articles = self._fetcher.fetch()
        except FetchError as exc:
            self.stats["failures"] += 1
            logger.error("Fetch failed (%s): %s", exc.kind, exc)
            return FetchOutcome.failure(exc)
        except Exception as exc:
            self.stats["failures"] += 1
            logger.exception("Fetcher raised an unexpected error")
            error = FetchError(f"Unexpected error: {exc}")
            error.__cause__ = exc
            return FetchOutcome.failure(error)
        logger.info("Fetched %d articles", len(articles))
        return FetchOutcome.success(articles)
