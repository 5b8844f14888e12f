from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from headlines import PresentationState, ReaderConfig, RefreshCoordinator
from headlines.errors import ConfigurationError
from headlines.fetchers import build_fetcher
from headlines.settings import SettingsStore

logger = logging.getLogger("headlines")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Desktop reader for top headlines.")
    parser.add_argument("--feed", choices=("newsapi", "rss", "mock"), help="article source to read from")
    parser.add_argument("--base-url", help="base URL of the article endpoint")
    parser.add_argument("--rss-url", help="feed URL when --feed=rss")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(threadName)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        config = ReaderConfig.from_env()
        if args.feed:
            config.feed_kind = args.feed
        if args.base_url:
            config.base_url = args.base_url
        if args.rss_url:
            config.rss_url = args.rss_url
        fetcher = build_fetcher(config)
    except (ConfigurationError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    import tkinter as tk

    from headlines.ui import HeadlinesWindow

    try:
        root = tk.Tk()
    except tk.TclError as exc:
        logger.error("Cannot open the window (is a display available?): %s", exc)
        return 1

    store = SettingsStore(config.settings_path)
    state = PresentationState(RefreshCoordinator(fetcher), config=store.load())
    window = HeadlinesWindow(root, state, fetcher.source_label, config.poll_interval_ms)
    try:
        window.run()
    finally:
        store.save(state.config)
        state.shutdown(timeout=config.timeout + 1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
