"""EmployeeRegistry — the central keyed store and entry point for HR operations."""

from __future__ import annotations

import logging
import sys
import threading
from typing import TYPE_CHECKING, TextIO

from hris.activity_log import ActivityLog
from hris.config import settings
from hris.database import DatabaseConnection
from hris.notifications.hub import NotificationHub
from hris.reports import DepartmentReport
from hris.salary.policies import build_policy

if TYPE_CHECKING:
    from hris.employees.models import Employee
    from hris.notifications.channels import NotificationChannel
    from hris.salary.policies import SalaryPolicy

logger = logging.getLogger(__name__)


class EmployeeRegistry:
    """Owns the employee map, the active salary policy and the notification hub.

    Shared instance accessed via ``EmployeeRegistry.get()``.  Pass explicit
    collaborators for test isolation; any that are omitted fall back to the
    shared ``ActivityLog`` / ``DatabaseConnection`` and a fresh hub.

    Construction does no I/O.  Call ``start()`` to open the database
    connection before adding employees, and ``shutdown()`` when done.
    """

    _instance: EmployeeRegistry | None = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        *,
        activity_log: ActivityLog | None = None,
        database: DatabaseConnection | None = None,
        hub: NotificationHub | None = None,
        policy: SalaryPolicy | None = None,
    ) -> None:
        self._activity_log = activity_log if activity_log is not None else ActivityLog.get()
        self._database = database if database is not None else DatabaseConnection.get()
        self._hub = hub if hub is not None else NotificationHub(self._activity_log)
        self._policy = policy or build_policy(
            settings.salary_policy,
            tax_rate=settings.tax_rate,
            bonus_multiplier=settings.bonus_multiplier,
        )
        self._employees: dict[str, Employee] = {}
        self._started = False

    @classmethod
    def get(cls) -> EmployeeRegistry:
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

    # -- Lifecycle -------------------------------------------------------------

    def start(self) -> None:
        """Open the database connection. Safe to call more than once."""
        if self._started:
            return
        self._database.connect()
        self._started = True
        self._activity_log.log("HRIS Manager initialized")

    def shutdown(self) -> None:
        """Close the database connection."""
        self._database.disconnect()
        self._started = False
        self._activity_log.log("HRIS Manager shutdown completed")

    # -- Employees -------------------------------------------------------------

    def add_employee(self, employee: Employee) -> None:
        """Store *employee*, replacing any record with the same ID.

        The in-memory add happens even if the database save fails.
        """
        if employee.employee_id in self._employees:
            logger.warning("Replacing existing employee record %s", employee.employee_id)
        self._employees[employee.employee_id] = employee
        self._database.save_employee(employee)
        self._hub.broadcast(f"New employee added: {employee.name}")
        self._activity_log.log(f"Employee added: {employee.employee_id}")

    def get_employee(self, employee_id: str) -> Employee | None:
        """Look up an employee by ID."""
        return self._employees.get(employee_id)

    def list_employees(self) -> list[Employee]:
        """Return a snapshot of every stored employee."""
        return list(self._employees.values())

    def remove_employee(self, employee_id: str) -> bool:
        """Remove an employee. Returns True if one was removed."""
        removed = self._employees.pop(employee_id, None)
        if removed is None:
            return False
        self._hub.broadcast(f"Employee removed: {removed.name}")
        self._activity_log.log(f"Employee removed: {employee_id}")
        return True

    def list_by_department(self, department: str) -> list[Employee]:
        """Employees whose department matches *department*, ignoring case."""
        wanted = department.casefold()
        return [e for e in self._employees.values() if e.department.casefold() == wanted]

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    # -- Salary ----------------------------------------------------------------

    @property
    def salary_policy(self) -> SalaryPolicy:
        return self._policy

    def set_salary_policy(self, policy: SalaryPolicy) -> None:
        """Switch the policy used by every later salary calculation."""
        self._policy = policy
        self._activity_log.log(f"Salary calculation strategy changed to: {policy.name}")

    def calculate_salary(self, employee_id: str) -> float:
        """Total salary under the active policy, or 0.0 for an unknown ID."""
        salary = self.find_salary(employee_id)
        return 0.0 if salary is None else salary

    def find_salary(self, employee_id: str) -> float | None:
        """Total salary under the active policy, or None for an unknown ID."""
        employee = self._employees.get(employee_id)
        if employee is None:
            return None
        return self._policy.calculate_total_salary(employee)

    # -- Reports ---------------------------------------------------------------

    def department_report(self, department: str) -> DepartmentReport:
        """Build a salary report for *department* under the active policy."""
        report = DepartmentReport(department=department, policy_name=self._policy.name)
        for employee in self.list_by_department(department):
            report.add(employee, self._policy.calculate_total_salary(employee))
        return report

    def print_department_report(
        self, department: str, file: TextIO | None = None
    ) -> DepartmentReport:
        """Print the department report and return it."""
        report = self.department_report(department)
        out = file or sys.stdout
        print(file=out)
        print(report.format(), file=out)
        return report

    # -- Notifications ---------------------------------------------------------

    @property
    def hub(self) -> NotificationHub:
        return self._hub

    def add_channel(self, channel: NotificationChannel) -> None:
        self._hub.add_channel(channel)

    def remove_channel(self, channel: NotificationChannel) -> bool:
        return self._hub.remove_channel(channel)
