"""Shared test fixtures."""

from datetime import date

import pytest

from hris.activity_log import ActivityLog
from hris.database import DatabaseConnection
from hris.notifications.hub import NotificationHub
from hris.registry import EmployeeRegistry
from hris.salary.policies import StandardSalaryPolicy

FIXED_DATE = date(2024, 3, 15)


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Reset shared instances before and after each test."""
    ActivityLog._reset()
    DatabaseConnection._reset()
    EmployeeRegistry._reset()
    yield
    ActivityLog._reset()
    DatabaseConnection._reset()
    EmployeeRegistry._reset()


@pytest.fixture
def activity_log() -> ActivityLog:
    """An ActivityLog whose entries are always stamped 2024-03-15."""
    return ActivityLog(clock=lambda: FIXED_DATE)


@pytest.fixture
def database(activity_log: ActivityLog) -> DatabaseConnection:
    return DatabaseConnection(activity_log)


@pytest.fixture
def hub(activity_log: ActivityLog) -> NotificationHub:
    return NotificationHub(activity_log)


@pytest.fixture
def registry(
    activity_log: ActivityLog, database: DatabaseConnection, hub: NotificationHub
) -> EmployeeRegistry:
    """A started registry with fresh collaborators and the standard policy."""
    reg = EmployeeRegistry(
        activity_log=activity_log,
        database=database,
        hub=hub,
        policy=StandardSalaryPolicy(),
    )
    reg.start()
    return reg
