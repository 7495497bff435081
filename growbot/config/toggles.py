"""Feature switches and per-command toggles."""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

log = logging.getLogger(__name__)


class DickOfDaySelectionMode(Enum):
    """How the winner of the day is chosen."""

    WEIGHTS = "WEIGHTS"
    EXCLUSION = "EXCLUSION"
    RANDOM = "RANDOM"

    @classmethod
    def parse(cls, value: str) -> "DickOfDaySelectionMode":
        """Parse a mode by name, exactly or ignoring case."""
        try:
            return cls[value]
        except KeyError:
            pass
        for mode in cls:
            if mode.name.lower() == value.lower():
                return mode
        raise ValueError(f"unknown selection mode: {value!r}")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BattlesFeatureToggles:
    """Switches for battles between users."""

    check_acceptor_length: bool = False
    callback_locks: bool = False
    show_stats: bool = False
    show_stats_notice: bool = False


@dataclass(frozen=True)
class FeatureToggles:
    """Switches for optional features."""

    chats_merging: bool = False
    top_unlimited: bool = False
    multiple_loans: bool = False
    dod_selection_mode: DickOfDaySelectionMode = DickOfDaySelectionMode.RANDOM
    pvp: BattlesFeatureToggles = field(default_factory=BattlesFeatureToggles)


class CachedEnvToggles:
    """Command switches read from DISABLE_CMD_* variables and remembered."""

    def __init__(self) -> None:
        self._cache: Dict[str, bool] = {}
        self._lock = threading.Lock()

    def enabled(self, key: str) -> bool:
        """Tell whether the command with this key is enabled."""
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached
            enabled = f"DISABLE_CMD_{key.upper()}" not in os.environ
            log.debug("caching the toggle for key '%s': %s", key, enabled)
            self._cache[key] = enabled
            return enabled