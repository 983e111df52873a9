"""Salary policies — interchangeable rules for turning a record into a total salary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from hris.errors import InvalidArgumentError

if TYPE_CHECKING:
    from hris.employees.models import Employee


@runtime_checkable
class SalaryPolicy(Protocol):
    """Protocol that all salary policies must satisfy."""

    @property
    def name(self) -> str:
        """Human-readable description, including parameters where relevant."""
        ...

    def calculate_total_salary(self, employee: Employee) -> float:
        """Return the total salary for *employee* under this policy."""
        ...


class StandardSalaryPolicy:
    """Base salary plus bonus."""

    @property
    def name(self) -> str:
        return "Standard Salary Calculation"

    def calculate_total_salary(self, employee: Employee) -> float:
        return employee.base_salary + employee.calculate_bonus()


class TaxDeductedSalaryPolicy:
    """Gross pay (base + bonus) minus a flat tax rate.

    *tax_rate* is a fraction, e.g. ``0.20`` for 20%.  It is not range-checked.
    """

    def __init__(self, tax_rate: float) -> None:
        self.tax_rate = tax_rate

    @property
    def name(self) -> str:
        return f"Tax Deducted Salary Calculation ({self.tax_rate * 100}% tax)"

    def calculate_total_salary(self, employee: Employee) -> float:
        gross = employee.base_salary + employee.calculate_bonus()
        return gross - gross * self.tax_rate


class BonusEnhancedSalaryPolicy:
    """Base salary plus the bonus scaled by *bonus_multiplier*.

    Zero or negative multipliers are accepted and simply lower the total.
    """

    def __init__(self, bonus_multiplier: float) -> None:
        self.bonus_multiplier = bonus_multiplier

    @property
    def name(self) -> str:
        return f"Bonus Enhanced Salary Calculation ({self.bonus_multiplier}x bonus)"

    def calculate_total_salary(self, employee: Employee) -> float:
        return employee.base_salary + employee.calculate_bonus() * self.bonus_multiplier


POLICY_KINDS = ("standard", "tax_deducted", "bonus_enhanced")


def build_policy(
    kind: str,
    *,
    tax_rate: float = 0.20,
    bonus_multiplier: float = 1.5,
) -> SalaryPolicy:
    """Build a policy from a configuration keyword.

    Raises ``InvalidArgumentError`` if *kind* is not one of ``POLICY_KINDS``.
    """
    normalized = kind.strip().lower().replace("-", "_")
    if normalized == "standard":
        return StandardSalaryPolicy()
    if normalized == "tax_deducted":
        return TaxDeductedSalaryPolicy(tax_rate)
    if normalized == "bonus_enhanced":
        return BonusEnhancedSalaryPolicy(bonus_multiplier)
    msg = f"Unknown salary policy: {kind} (expected one of {', '.join(POLICY_KINDS)})"
    raise InvalidArgumentError(msg)
