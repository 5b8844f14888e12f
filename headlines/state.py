from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .coordinator import RefreshCoordinator
from .errors import FetchError
from .models import ArticleRecord, ClientConfig, FetchOutcome

logger = logging.getLogger(__name__)

Notifier = Callable[[FetchError], None]


def log_fetch_error(error: FetchError) -> None:
    logger.warning("Could not refresh articles (%s error): %s", error.kind, error)


class PresentationState:
    """Everything the window shows, owned by the UI thread.

    The worker never touches this object. Results only arrive through
    ``tick``, which the UI loop calls periodically.
    """

    def __init__(
        self,
        coordinator: RefreshCoordinator,
        config: Optional[ClientConfig] = None,
        notifier: Notifier = log_fetch_error,
    ) -> None:
        self._coordinator = coordinator
        self.config = config or ClientConfig()
        self._notifier = notifier
        self._articles: List[ArticleRecord] = []
        self.last_error: Optional[FetchError] = None

    @property
    def articles(self) -> Tuple[ArticleRecord, ...]:
        return tuple(self._articles)

    @property
    def dark_mode(self) -> bool:
        return self.config.dark_mode

    @property
    def is_loading(self) -> bool:
        return not self._articles

    def start(self) -> None:
        self._coordinator.start()
        self._coordinator.request_refresh()

    def shutdown(self, timeout: Optional[float] = None) -> None:
        self._coordinator.shutdown(timeout)
        self.tick()

    def tick(self) -> int:
        """Apply outcomes delivered since the last tick; returns how many."""
        outcomes = self._coordinator.drain_results()
        for outcome in outcomes:
            self._apply(outcome)
        return len(outcomes)

    def refresh(self) -> None:
        self._articles.clear()
        self._coordinator.request_refresh()

    def toggle_theme(self) -> bool:
        self.config.dark_mode = not self.config.dark_mode
        return self.config.dark_mode

    def _apply(self, outcome: FetchOutcome) -> None:
        if not outcome.ok:
            self.last_error = outcome.error
            self._notifier(outcome.error)
            return
        self.last_error = None
        self._articles.clear()
        self._articles.extend(outcome.articles)
