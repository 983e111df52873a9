"""Salary policy abstraction layer."""

from hris.salary.policies import (
    BonusEnhancedSalaryPolicy,
    SalaryPolicy,
    StandardSalaryPolicy,
    TaxDeductedSalaryPolicy,
    build_policy,
)

__all__ = [
    "BonusEnhancedSalaryPolicy",
    "SalaryPolicy",
    "StandardSalaryPolicy",
    "TaxDeductedSalaryPolicy",
    "build_policy",
]
