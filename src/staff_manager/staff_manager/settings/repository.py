from __future__ import annotations

from typing import Optional, Protocol

from .model import Settings


class SettingsRepository(Protocol):
    """Storage for the singleton settings record."""

    def load(self) -> Settings:
        raise NotImplementedError

    def save(self, settings: Settings) -> None:
        raise NotImplementedError


class InMemorySettingsRepository:
    def __init__(self, initial: Optional[Settings] = None):
        self._settings = initial or Settings()

    def load(self) -> Settings:
        return self._settings

    def save(self, settings: Settings) -> None:
        self._settings = settings
