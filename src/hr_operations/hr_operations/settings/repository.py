from __future__ import annotations

from typing import Dict, Optional, Protocol, Sequence


class SettingsRepository(Protocol):
    """Key/value settings store (`system_settings`)."""

    def get_many(self, keys: Sequence[str]) -> Dict[str, str]:
        """Only keys that exist are returned."""

        raise NotImplementedError

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def upsert(self, key: str, value: str, *, description: Optional[str] = None) -> None:
        raise NotImplementedError
