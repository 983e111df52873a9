"""Simulated database connection.

There is no real storage behind this: the connection is a flag, and a
"save" only records in the activity log whether it would have succeeded.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from hris.activity_log import ActivityLog

if TYPE_CHECKING:
    from hris.employees.models import Employee

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Open/closed connection flag plus a simulated ``save_employee``.

    Shared instance accessed via ``DatabaseConnection.get()``.  Pass an
    explicit *activity_log* for test isolation.
    """

    _instance: DatabaseConnection | None = None
    _instance_lock = threading.Lock()

    def __init__(self, activity_log: ActivityLog | None = None) -> None:
        self._activity_log = activity_log if activity_log is not None else ActivityLog.get()
        self._connected = False

    @classmethod
    def get(cls) -> DatabaseConnection:
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

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        """Open the connection. Does nothing if it is already open."""
        if self._connected:
            return
        self._connected = True
        self._activity_log.log("Database connected successfully")

    def disconnect(self) -> None:
        """Close the connection. Does nothing if it is already closed."""
        if not self._connected:
            return
        self._connected = False
        self._activity_log.log("Database disconnected")

    def save_employee(self, employee: Employee) -> bool:
        """Pretend to persist *employee*. Returns True if the connection was open."""
        if not self._connected:
            logger.warning("save_employee called while disconnected (id=%s)", employee.employee_id)
            self._activity_log.log("Cannot save employee - database not connected")
            return False
        self._activity_log.log(f"Employee saved to database: {employee.name}")
        return True
