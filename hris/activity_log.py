"""ActivityLog — append-only, date-stamped record of everything the HRIS does."""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class ActivityLog:
    """Ordered in-memory list of ``[<ISO date>] <message>`` entries.

    Shared instance accessed via ``ActivityLog.get()``.  Construct one
    directly (optionally with a fixed *clock*) for test isolation.

    Entries are never truncated or rotated.  Every entry is also emitted on
    the stdlib logger so it shows up alongside ordinary log output.
    """

    _instance: ActivityLog | None = None
    _instance_lock = threading.Lock()

    def __init__(self, clock: Callable[[], date] | None = None) -> None:
        self._clock = clock or date.today
        self._entries: list[str] = []
        self._lock = threading.Lock()

    @classmethod
    def get(cls) -> ActivityLog:
        """Return the shared instance, creating it if needed."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Reset singleton — for tests only."""
        with cls._instance_lock:
            cls._instance = None

    def log(self, message: str) -> str:
        """Append a date-stamped entry and return it."""
        entry = f"[{self._clock().isoformat()}] {message}"
        with self._lock:
            self._entries.append(entry)
        logger.info(entry)
        return entry

    def entries(self) -> list[str]:
        """Return a copy of all entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def tail(self, count: int) -> list[str]:
        """Return the last *count* entries (fewer if the log is shorter)."""
        if count <= 0:
            return []
        with self._lock:
            return self._entries[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
