from collections import Counter
from typing import List
from exceptions.custom_errors import (
    InputMismatchError,
    InvalidScheduleRequestError,
    NoActiveRulesError,
    NoEligibleWorkforceError,
)
from schemas.schedule.generate import Employee
from schemas.schedule.rules import Rule

MIN_YEAR = 1583


def validate_period(month: int, year: int):
    """
    Validate the target month and year.

    Raises:
        InvalidScheduleRequestError: If month is outside 1-12 or the year
            precedes the Gregorian calendar.
    """
    errors = []
    if not 1 <= month <= 12:
        errors.append(f" • Month must be between 1 and 12 (got {month}).\n")
    if year < MIN_YEAR:
        errors.append(f" • Year must be {MIN_YEAR} or later (got {year}).\n")
    if errors:
        errors.insert(0, "Recheck your inputs:\n")
        raise InvalidScheduleRequestError("".join(errors))


def validate_roster(employees: List[Employee]) -> List[Employee]:
    """
    Keep the active employees, sorted by name then id.

    Raises:
        NoEligibleWorkforceError: If no employee is active.
        InputMismatchError: If an id appears more than once.
    """
    active = [e for e in employees if e.active]
    if not active:
        raise NoEligibleWorkforceError()

    duplicates = sorted(i for i, n in Counter(e.id for e in employees).items() if n > 1)
    if duplicates:
        msg = ["⚠️ Duplicate employee ids in roster:\n"]
        msg.append(f"     • {', '.join(duplicates)}\n")
        raise InputMismatchError("\n".join(msg))

    return sorted(active, key=lambda e: (e.name, e.id))


def validate_rules(rules: List[Rule]) -> List[Rule]:
    """
    Keep the active rules, in supplied order.

    Raises:
        NoActiveRulesError: If no rule is active.
    """
    active = [r for r in rules if r.active]
    if not active:
        raise NoActiveRulesError()
    return active
