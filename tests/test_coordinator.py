"""Unit tests for the refresh coordinator."""

import threading
import unittest

from headlines.coordinator import CoordinatorState, RefreshCoordinator
from headlines.errors import FetchError, TransportError
from tests.helpers import GatedFetcher, make_article, wait_for


class TestRefreshCoordinator(unittest.TestCase):
    def setUp(self):
        self.outcomes = []

    def _start(self, fetcher):
        coordinator = RefreshCoordinator(fetcher)
        coordinator.start()
        self.addCleanup(coordinator.shutdown, 5)
        self.addCleanup(fetcher.release.set)
        return coordinator

    def _collect(self, coordinator, count):
        def done():
            self.outcomes.extend(coordinator.drain_results())
            return len(self.outcomes) >= count

        self.assertTrue(wait_for(done), f"expected {count} outcomes, got {len(self.outcomes)}")
        return self.outcomes

    def test_drain_without_results_returns_empty_list(self):
        coordinator = RefreshCoordinator(GatedFetcher([[]]))
        self.assertEqual(coordinator.drain_results(), [])
        self.assertEqual(coordinator.state, CoordinatorState.IDLE)

    def test_requests_while_fetching_are_coalesced(self):
        fetcher = GatedFetcher([[make_article(1)]])
        coordinator = self._start(fetcher)

        self.assertTrue(coordinator.request_refresh())
        self.assertTrue(fetcher.entered.wait(5))
        self.assertEqual(coordinator.state, CoordinatorState.FETCHING)

        accepted = [coordinator.request_refresh() for _ in range(5)]
        self.assertEqual(accepted, [True, False, False, False, False])

        fetcher.release.set()
        self._collect(coordinator, 2)
        coordinator.shutdown(5)

        self.assertEqual(fetcher.calls, 2)
        self.assertEqual(len(self.outcomes), 2)
        self.assertEqual(coordinator.stats["coalesced"], 4)
        self.assertEqual(coordinator.stats["fetches"], 2)

    def test_requests_before_worker_picks_up_are_coalesced(self):
        fetcher = GatedFetcher([[make_article(1)]])
        coordinator = RefreshCoordinator(fetcher)
        self.addCleanup(coordinator.shutdown, 5)
        self.addCleanup(fetcher.release.set)

        self.assertTrue(coordinator.request_refresh())
        self.assertFalse(coordinator.request_refresh())
        self.assertEqual(coordinator.state, CoordinatorState.PENDING)

        fetcher.release.set()
        coordinator.start()
        self._collect(coordinator, 1)
        coordinator.shutdown(5)
        self.assertEqual(fetcher.calls, 1)

    def test_outcomes_arrive_in_fetch_order(self):
        first = [make_article(1), make_article(2)]
        second = [make_article(3)]
        fetcher = GatedFetcher([first, second])
        coordinator = self._start(fetcher)

        coordinator.request_refresh()
        self.assertTrue(fetcher.entered.wait(5))
        coordinator.request_refresh()
        fetcher.release.set()

        outcomes = self._collect(coordinator, 2)
        self.assertEqual(list(outcomes[0].articles), first)
        self.assertEqual(list(outcomes[1].articles), second)

    def test_fetch_error_does_not_stop_worker(self):
        fetcher = GatedFetcher([TransportError("connection refused"), [make_article(1)]])
        fetcher.release.set()
        coordinator = self._start(fetcher)

        coordinator.request_refresh()
        failed = self._collect(coordinator, 1)[0]
        self.assertFalse(failed.ok)
        self.assertIsInstance(failed.error, TransportError)

        coordinator.request_refresh()
        succeeded = self._collect(coordinator, 2)[1]
        self.assertTrue(succeeded.ok)
        self.assertEqual(succeeded.articles, (make_article(1),))
        self.assertTrue(coordinator.running)
        self.assertEqual(coordinator.stats["failures"], 1)

    def test_unexpected_exception_is_reported_as_fetch_error(self):
        fetcher = GatedFetcher([RuntimeError("boom")])
        fetcher.release.set()
        coordinator = self._start(fetcher)

        with self.assertLogs("headlines.coordinator", level="ERROR"):
            coordinator.request_refresh()
            outcome = self._collect(coordinator, 1)[0]

        self.assertIsInstance(outcome.error, FetchError)
        self.assertIsInstance(outcome.error.__cause__, RuntimeError)
        self.assertTrue(coordinator.running)

    def test_shutdown_waits_for_in_flight_fetch(self):
        fetcher = GatedFetcher([[make_article(1)]])
        coordinator = self._start(fetcher)

        coordinator.request_refresh()
        self.assertTrue(fetcher.entered.wait(5))
        timer = threading.Timer(0.1, fetcher.release.set)
        timer.start()
        self.addCleanup(timer.cancel)

        coordinator.shutdown(5)

        self.assertFalse(coordinator.running)
        outcomes = coordinator.drain_results()
        self.assertEqual(len(outcomes), 1)
        self.assertEqual(outcomes[0].articles, (make_article(1),))

    def test_shutdown_drops_refresh_queued_behind_in_flight_fetch(self):
        fetcher = GatedFetcher([[make_article(1)], [make_article(2)]])
        coordinator = self._start(fetcher)

        coordinator.request_refresh()
        self.assertTrue(fetcher.entered.wait(5))
        self.assertTrue(coordinator.request_refresh())
        self.assertEqual(coordinator.state, CoordinatorState.FETCHING)
        timer = threading.Timer(0.1, fetcher.release.set)
        timer.start()
        self.addCleanup(timer.cancel)

        coordinator.shutdown(5)

        self.assertFalse(coordinator.running)
        self.assertEqual(fetcher.calls, 1)
        outcomes = coordinator.drain_results()
        self.assertEqual(len(outcomes), 1)
        self.assertEqual(outcomes[0].articles, (make_article(1),))

    def test_shutdown_when_idle(self):
        coordinator = self._start(GatedFetcher([[]]))
        self.assertTrue(coordinator.running)
        coordinator.shutdown(5)
        self.assertFalse(coordinator.running)
        self.assertEqual(coordinator.drain_results(), [])

    def test_start_twice_raises(self):
        coordinator = self._start(GatedFetcher([[]]))
        with self.assertRaises(RuntimeError):
            coordinator.start()


if __name__ == "__main__":
    unittest.main()
