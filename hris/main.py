"""HRIS demo entry point — walks through a typical day of HR operations."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from hris.activity_log import ActivityLog
from hris.config import settings
from hris.database import DatabaseConnection
from hris.employees import Manager, QAEngineer, create_employee
from hris.errors import InvalidArgumentError
from hris.notifications import EmailChannel, NotificationHub, SMSChannel
from hris.registry import EmployeeRegistry
from hris.salary import BonusEnhancedSalaryPolicy, StandardSalaryPolicy, TaxDeductedSalaryPolicy

logger = logging.getLogger(__name__)

RULE_WIDTH = 80
SECTION_WIDTH = 50


def _section(title: str, out: TextIO) -> None:
    print(f"\n{title}", file=out)
    print("-" * SECTION_WIDTH, file=out)


def run_demo(registry: EmployeeRegistry, activity_log: ActivityLog, out: TextIO) -> None:
    """Run the scripted demo against *registry*, printing to *out*."""
    print("=" * RULE_WIDTH, file=out)
    print(f"WELCOME TO {settings.company_name.upper()} HRIS", file=out)
    print("=" * RULE_WIDTH, file=out)

    registry.start()
    registry.add_channel(EmailChannel(settings.hr_notification_email, stream=out))
    registry.add_channel(SMSChannel(settings.hr_notification_phone, stream=out))

    _section("1. CREATING EMPLOYEES:", out)
    try:
        dev1 = create_employee(
            "developer", "DEV001", "Alice Johnson", "alice@mehrasoftware.com",
            "Engineering", 75000, "Java", 3, activity_log=activity_log,
        )
        dev2 = create_employee(
            "developer", "DEV002", "Bob Smith", "bob@mehrasoftware.com",
            "Engineering", 85000, "Python", 5, activity_log=activity_log,
        )
        mgr1 = create_employee(
            "manager", "MGR001", "Carol Davis", "carol@mehrasoftware.com",
            "Engineering", 120000, 8, activity_log=activity_log,
        )
        qa1 = create_employee(
            "qa", "QA001", "David Wilson", "david@mehrasoftware.com",
            "Quality", 60000, "Selenium", activity_log=activity_log,
        )
        qa2 = create_employee(
            "qaengineer", "QA002", "Eva Brown", "eva@mehrasoftware.com",
            "Quality", 65000, "TestNG", activity_log=activity_log,
        )

        for employee in (dev1, dev2, mgr1, qa1, qa2):
            registry.add_employee(employee)

        if isinstance(mgr1, Manager):
            mgr1.add_project("Project Alpha")
            mgr1.add_project("Project Beta")
        if isinstance(qa1, QAEngineer):
            for _ in range(3):
                qa1.report_bug()
        if isinstance(qa2, QAEngineer):
            for _ in range(2):
                qa2.report_bug()
    except InvalidArgumentError as exc:
        print(f"Error creating employee: {exc}", file=out)

    _section("2. DISPLAYING ALL EMPLOYEES:", out)
    for employee in registry.list_employees():
        print(employee, file=out)
        print(f"   Bonus: ${employee.calculate_bonus():.2f}", file=out)

    _section("3. SALARY CALCULATION WITH DIFFERENT POLICIES:", out)
    test_id = "DEV001"
    test_employee = registry.get_employee(test_id)
    if test_employee is not None:
        print(f"Employee: {test_employee.name}", file=out)
        registry.set_salary_policy(StandardSalaryPolicy())
        print(f"Standard Salary: ${registry.calculate_salary(test_id):.2f}", file=out)
        registry.set_salary_policy(TaxDeductedSalaryPolicy(settings.tax_rate))
        print(
            f"After Tax ({settings.tax_rate:.0%}): ${registry.calculate_salary(test_id):.2f}",
            file=out,
        )
        registry.set_salary_policy(BonusEnhancedSalaryPolicy(settings.bonus_multiplier))
        print(
            f"Bonus Enhanced ({settings.bonus_multiplier}x): "
            f"${registry.calculate_salary(test_id):.2f}",
            file=out,
        )

    _section("4. DEPARTMENT-WISE REPORTS:", out)
    registry.set_salary_policy(StandardSalaryPolicy())
    registry.print_department_report("Engineering", file=out)
    registry.print_department_report("Quality", file=out)

    _section("5. EMPLOYEE SEARCH AND UPDATE:", out)
    found = registry.get_employee("DEV002")
    if found is not None:
        print(f"Found employee: {found.name}", file=out)
        print(f"Current salary: ${found.base_salary}", file=out)
        found.base_salary = 90000
        print(f"Updated salary: ${found.base_salary}", file=out)

    _section("6. REMOVING EMPLOYEE:", out)
    removed = registry.remove_employee("QA002")
    print(f"Employee removal {'successful' if removed else 'failed'}", file=out)

    _section("7. FINAL EMPLOYEE COUNT:", out)
    print(f"Total employees remaining: {len(registry)}", file=out)

    _section("8. SYSTEM LOGS:", out)
    print(f"Total log entries: {len(activity_log)}", file=out)
    print("Last 5 log entries:", file=out)
    for entry in activity_log.tail(5):
        print(f"  {entry}", file=out)

    registry.shutdown()

    print("\n" + "=" * RULE_WIDTH, file=out)
    print("HRIS DEMONSTRATION COMPLETED SUCCESSFULLY", file=out)
    print("=" * RULE_WIDTH, file=out)


def main() -> None:
    """Wire up the shared collaborators and run the demo on stdout."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level.upper()),
    )
    activity_log = ActivityLog.get()
    registry = EmployeeRegistry(
        activity_log=activity_log,
        database=DatabaseConnection(activity_log),
        hub=NotificationHub(activity_log),
    )
    logger.info("Starting HRIS demo for %s", settings.company_name)
    run_demo(registry, activity_log, sys.stdout)


if __name__ == "__main__":
    main()
