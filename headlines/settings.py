from __future__ import annotations

import json
import logging
import os
from typing import Optional

from .models import ClientConfig

SETTINGS_KEY = "headlines"

logger = logging.getLogger(__name__)


class SettingsStore:
    """Persists ``ClientConfig`` as JSON under a fixed key."""

    def __init__(self, path: str) -> None:
        self.path = os.path.expanduser(path)

    def load(self) -> ClientConfig:
        if not os.path.exists(self.path):
            return ClientConfig()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            return ClientConfig()
        section: Optional[object] = data.get(SETTINGS_KEY) if isinstance(data, dict) else None
        return ClientConfig.from_dict(section)

    def save(self, config: ClientConfig) -> None:
        data = {}
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    existing = json.load(f)
                if isinstance(existing, dict):
                    data = existing
            except (OSError, ValueError) as exc:
                logger.warning("Overwriting unreadable settings file %s: %s", self.path, exc)
        data[SETTINGS_KEY] = config.to_dict()
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.debug("Saved settings to %s", self.path)
