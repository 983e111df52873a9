"""Employee record variants: Developer, Manager and QA Engineer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, ClassVar

_IMMUTABLE_FIELDS = frozenset({"employee_id", "joining_date", "_managed_projects"})

DEVELOPER_BONUS_RATE_PER_YEAR = 0.05
MANAGER_BONUS_RATE_PER_REPORT = 0.08
MANAGER_BONUS_PER_PROJECT = 1000
QA_BONUS_PER_BUG = 50


@dataclass(kw_only=True, eq=False)
class _EmployeeBase(ABC):
    """Attributes shared by every employee variant.

    Attributes:
        employee_id: Unique identifier. Cannot be reassigned.
        name: Display name.
        email: Contact e-mail address.
        department: Department name (matched case-insensitively in reports).
        base_salary: Yearly base salary. Not validated.
        joining_date: Defaults to today. Cannot be reassigned.
    """

    employee_type: ClassVar[str] = ""

    employee_id: str
    name: str
    email: str
    department: str
    base_salary: float
    joining_date: date = field(default_factory=date.today)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            msg = f"{name} cannot be changed after creation"
            raise AttributeError(msg)
        super().__setattr__(name, value)

    @abstractmethod
    def calculate_bonus(self) -> float:
        """Bonus under this variant's rule."""
        ...

    def __str__(self) -> str:
        return (
            f"ID: {self.employee_id}, Name: {self.name}, Type: {self.employee_type}, "
            f"Department: {self.department}, Salary: ${self.base_salary:.2f}"
        )


@dataclass(kw_only=True, eq=False)
class Developer(_EmployeeBase):
    """Software developer. Bonus grows with years of experience."""

    employee_type: ClassVar[str] = "Developer"

    programming_language: str
    experience_years: int

    def calculate_bonus(self) -> float:
        return self.base_salary * (self.experience_years * DEVELOPER_BONUS_RATE_PER_YEAR)


@dataclass(kw_only=True, eq=False)
class Manager(_EmployeeBase):
    """People manager. Bonus depends on team size and managed projects."""

    employee_type: ClassVar[str] = "Manager"

    team_size: int
    _managed_projects: list[str] = field(default_factory=list, init=False, repr=False)

    @property
    def managed_projects(self) -> tuple[str, ...]:
        """Projects in the order they were added."""
        return tuple(self._managed_projects)

    def add_project(self, project: str) -> None:
        """Append *project*. Duplicates are kept."""
        self._managed_projects.append(project)

    def calculate_bonus(self) -> float:
        return self.base_salary * (
            self.team_size * MANAGER_BONUS_RATE_PER_REPORT
        ) + len(self._managed_projects) * MANAGER_BONUS_PER_PROJECT


@dataclass(kw_only=True, eq=False)
class QAEngineer(_EmployeeBase):
    """QA engineer. Paid a flat amount per reported bug."""

    employee_type: ClassVar[str] = "QA Engineer"

    testing_tools: str
    _bugs_found: int = field(default=0, init=False, repr=False)

    @property
    def bugs_found(self) -> int:
        """Bugs reported so far. Only ``report_bug`` changes it."""
        return self._bugs_found

    def report_bug(self) -> None:
        self._bugs_found += 1

    def calculate_bonus(self) -> float:
        return float(self.bugs_found * QA_BONUS_PER_BUG)


Employee = Developer | Manager | QAEngineer
