"""Employee records and the factory that builds them."""

from hris.employees.factory import (
    DeveloperParams,
    EmployeeParams,
    ManagerParams,
    QAEngineerParams,
    create_employee,
)
from hris.employees.models import Developer, Employee, Manager, QAEngineer

__all__ = [
    "Developer",
    "DeveloperParams",
    "Employee",
    "EmployeeParams",
    "Manager",
    "ManagerParams",
    "QAEngineer",
    "QAEngineerParams",
    "create_employee",
]
