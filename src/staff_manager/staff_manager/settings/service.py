from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, Mapping

from .model import Settings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Get and partially update the singleton settings record.

    Settings changes are not written to the history ledger.
    """

    def __init__(self, repository: SettingsRepository, *, lock: threading.RLock):
        self._repository = repository
        self._lock = lock

    def get(self) -> Settings:
        return self._repository.load()

    def update(self, changes: Mapping[str, Any]) -> Settings:
        with self._lock:
            merged = replace(self._repository.load(), **dict(changes))
            self._repository.save(merged)
        logger.info("Settings updated: %s", ", ".join(sorted(changes)) or "no changes")
        return merged
