"""Employee factory — builds the right record variant from a type tag."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hris.activity_log import ActivityLog
from hris.employees.models import Developer, Manager, QAEngineer
from hris.errors import InvalidArgumentError, InvalidEmployeeParamsError

if TYPE_CHECKING:
    from hris.employees.models import Employee

logger = logging.getLogger(__name__)


class EmployeeParams(BaseModel):
    """Base class for the type-specific parameters of each employee variant.

    Field order matters: positional extras passed to ``create_employee`` are
    matched to fields in declaration order.
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)


class DeveloperParams(EmployeeParams):
    programming_language: str = Field(description="Primary programming language")
    experience_years: int = Field(description="Years of professional experience")


class ManagerParams(EmployeeParams):
    team_size: int = Field(description="Number of direct reports")


class QAEngineerParams(EmployeeParams):
    testing_tools: str = Field(description="Main testing tool or framework")


_PARAMS_BY_TAG: dict[str, type[EmployeeParams]] = {
    "developer": DeveloperParams,
    "manager": ManagerParams,
    "qa": QAEngineerParams,
    "qaengineer": QAEngineerParams,
}


def _resolve_params(
    tag: str,
    params_model: type[EmployeeParams],
    extras: tuple[Any, ...],
    params: EmployeeParams | None,
) -> EmployeeParams:
    """Turn either an explicit params model or positional extras into *params_model*."""
    if params is not None:
        if extras:
            msg = "Pass type-specific parameters either positionally or as params=, not both"
            raise InvalidEmployeeParamsError(msg)
        if not isinstance(params, params_model):
            msg = f"{type(params).__name__} does not apply to employee type: {tag}"
            raise InvalidEmployeeParamsError(msg)
        return params

    field_names = list(params_model.model_fields)
    if len(extras) != len(field_names):
        msg = (
            f"Employee type {tag!r} expects {len(field_names)} extra parameter(s) "
            f"({', '.join(field_names)}), got {len(extras)}"
        )
        raise InvalidEmployeeParamsError(msg)
    try:
        return params_model(**dict(zip(field_names, extras, strict=True)))
    except ValidationError as exc:
        msg = f"Invalid parameters for employee type {tag!r}: {exc.error_count()} error(s)"
        raise InvalidEmployeeParamsError(msg) from exc


def create_employee(
    employee_type: str,
    employee_id: str,
    name: str,
    email: str,
    department: str,
    base_salary: float,
    *extras: Any,
    params: EmployeeParams | None = None,
    activity_log: ActivityLog | None = None,
) -> Employee:
    """Create a Developer, Manager or QA Engineer.

    *employee_type* is case-insensitive: ``developer``, ``manager``, ``qa`` or
    ``qaengineer``.  Type-specific values are given either as a params model
    (``params=DeveloperParams(...)``) or positionally after *base_salary*::

        create_employee("developer", "DEV001", "Alice", "a@x.com", "Engineering",
                        75000, "Java", 3)

    Raises ``InvalidArgumentError`` for an unknown type and
    ``InvalidEmployeeParamsError`` when the extras don't match the type.
    """
    if activity_log is None:
        activity_log = ActivityLog.get()
    activity_log.log(f"Creating employee of type: {employee_type}")

    tag = employee_type.lower()
    params_model = _PARAMS_BY_TAG.get(tag)
    if params_model is None:
        msg = f"Unknown employee type: {employee_type}"
        raise InvalidArgumentError(msg)

    resolved = _resolve_params(tag, params_model, extras, params)
    common: dict[str, Any] = {
        "employee_id": employee_id,
        "name": name,
        "email": email,
        "department": department,
        "base_salary": base_salary,
    }
    if isinstance(resolved, DeveloperParams):
        employee: Employee = Developer(
            **common,
            programming_language=resolved.programming_language,
            experience_years=resolved.experience_years,
        )
    elif isinstance(resolved, ManagerParams):
        employee = Manager(**common, team_size=resolved.team_size)
    else:
        employee = QAEngineer(**common, testing_tools=resolved.testing_tools)

    logger.debug("Created %s %s", employee.employee_type, employee_id)
    return employee
