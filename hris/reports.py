"""DepartmentReport — per-department salary cost summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hris.employees.models import Employee


@dataclass
class ReportLine:
    """One employee's total salary under the policy the report was built with."""

    employee_id: str
    name: str
    salary: float


@dataclass
class DepartmentReport:
    """Salary totals for one department.

    Attributes:
        department: Department name as requested by the caller.
        policy_name: Name of the salary policy used for every line.
        lines: One entry per matching employee.
    """

    department: str
    policy_name: str
    lines: list[ReportLine] = field(default_factory=list)

    @property
    def employee_count(self) -> int:
        return len(self.lines)

    @property
    def total(self) -> float:
        return sum(line.salary for line in self.lines)

    @property
    def average(self) -> float:
        """Mean salary, or 0.0 for an empty department."""
        if not self.lines:
            return 0.0
        return self.total / len(self.lines)

    def add(self, employee: Employee, salary: float) -> None:
        self.lines.append(ReportLine(employee.employee_id, employee.name, salary))

    def format(self) -> str:
        """Render the report as console text (no trailing newline)."""
        out = [
            f"=== DEPARTMENT REPORT: {self.department.upper()} ===",
            f"Total Employees: {self.employee_count}",
        ]
        out.extend(
            f"- {line.name} (ID: {line.employee_id}): ${line.salary:.2f}" for line in self.lines
        )
        out.append(f"Total Department Salary Cost: ${self.total:.2f}")
        out.append(f"Average Salary: ${self.average:.2f}")
        return "\n".join(out)
