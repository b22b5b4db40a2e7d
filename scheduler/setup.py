import logging
import math
from typing import Dict, Iterable, List, Set, Tuple
from ortools.sat.python import cp_model
from core.hard_rules import define_coverage_rules
from core.rotation import RotationState, build_rotation_arena
from core.state import DayInfo, ScheduleState
from schemas.holidays.holiday import Holiday
from schemas.schedule.generate import Employee
from schemas.schedule.report import InfeasibilityIssue
from schemas.schedule.rules import RuleSet
from utils.calendar_utils import is_sunday, month_days
from utils.constants import DAYS_PER_WEEK, FAIRNESS_GAP_PENALTY, PREF_DAY_OFF_PENALTY

logger = logging.getLogger(__name__)


def classify_days(year: int, month: int, holidays: Iterable[Holiday]) -> List[DayInfo]:
    """Classify each day of the month as holiday, sunday or weekday, in that precedence."""
    holiday_dates: Set = {h.date for h in holidays}
    days = []
    for idx, day in enumerate(month_days(year, month)):
        if day in holiday_dates:
            shift_type = "holiday"
        elif is_sunday(day):
            shift_type = "sunday"
        else:
            shift_type = "weekday"
        days.append(DayInfo(idx, day, shift_type))
    return days


def is_eligible(employee: Employee, day: DayInfo, rules: RuleSet) -> bool:
    """Whether an employee may be scheduled on a day at all, before rotation and rest."""
    if rules.quota(day.shift_type, employee.role) <= 0:
        return False
    if day.shift_type == "weekday":
        return True
    return employee.sunday_eligible


def weekly_rest_days(rules: RuleSet) -> int:
    """
    Rest days per complete week, derived from the contracted hours.

    A 44h contract over 7h20 working days (07:00-15:20 minus a one-hour lunch)
    needs six working days, leaving one rest day.
    """
    contract_minutes = rules.rest.weekly_contract_hours * 60
    working_days = math.ceil(contract_minutes / rules.working_minutes_per_day)
    return max(0, DAYS_PER_WEEK - min(DAYS_PER_WEEK, working_days))


def assign_rotation_days(
    days: List[DayInfo],
    employees: List[Employee],
    rules: RuleSet,
    arena: Dict[str, RotationState],
) -> Tuple[Dict[int, List[str]], List[InfeasibilityIssue]]:
    """
    Walk the Sunday/holiday occurrences in date order and pick who works each one.

    Only employees in a working block are available. Picks are made once per
    block: employees already picked for their current block keep working it,
    and the rest of the quota is filled from those whose block starts now
    (fewest occurrences so far first, then name order). An employee left out
    at the start of a block rests for the whole block. Every rotation counter
    advances once per occurrence, worked or not.
    """
    assignments: Dict[int, List[str]] = {}
    issues: List[InfeasibilityIssue] = []
    worked_count: Dict[str, int] = {e.id: 0 for e in employees}
    # employee id -> picked for the current working block
    block_picks: Dict[str, bool] = {}

    for day in days:
        if day.shift_type == "weekday":
            continue
        on_duty: List[str] = []
        for quota in rules.sunday.quotas:
            if quota.quantity <= 0:
                continue
            pool = [
                e
                for e in employees
                if e.role == quota.role
                and is_eligible(e, day, rules)
                and arena[e.id].working
            ]
            committed = [e for e in pool if block_picks.get(e.id)]
            fresh = [e for e in pool if e.id not in block_picks]
            available = len(committed) + len(fresh)
            if available < quota.quantity:
                issues.append(
                    InfeasibilityIssue(
                        date=day.date,
                        rule_id=rules.sunday.id,
                        reason=(
                            f"Unmet {quota.role} quota on {day.shift_type}: "
                            f"required {quota.quantity}, available {available}."
                        ),
                        role=quota.role,
                        required=quota.quantity,
                        available=available,
                    )
                )
                continue
            fresh.sort(key=lambda e: (worked_count[e.id], e.name, e.id))
            picked = fresh[: quota.quantity - len(committed)]
            picked_ids = {e.id for e in picked}
            for emp in fresh:
                block_picks[emp.id] = emp.id in picked_ids
            for emp in committed + picked:
                on_duty.append(emp.id)
                worked_count[emp.id] += 1
        assignments[day.index] = sorted(on_duty)
        for emp_id, state in arena.items():
            state.advance()
            if not state.working:
                block_picks.pop(emp_id, None)

    return assignments, issues


def check_weekday_pools(
    days: List[DayInfo], employees: List[Employee], rules: RuleSet
) -> List[InfeasibilityIssue]:
    """Report every weekday whose eligible pool is smaller than a role quota."""
    issues = []
    for day in days:
        if day.shift_type != "weekday":
            continue
        for quota in rules.weekday.quotas:
            available = sum(1 for e in employees if e.role == quota.role)
            if available < quota.quantity:
                issues.append(
                    InfeasibilityIssue(
                        date=day.date,
                        rule_id=rules.weekday.id,
                        reason=(
                            f"Unmet {quota.role} quota on weekday: "
                            f"required {quota.quantity}, available {available}."
                        ),
                        role=quota.role,
                        required=quota.quantity,
                        available=available,
                    )
                )
    return issues


def build_variables(model, employees: List[Employee], days: List[DayInfo]):
    """Builds the work[e,d] BoolVars for every employee/day of the month."""
    work = {
        (e.id, d.index): model.NewBoolVar(f"work_{e.id}_{d.index}")
        for e in employees
        for d in days
    }
    return work


def make_model():
    """Creates a new CP-SAT model instance."""
    model = cp_model.CpModel()
    return model


def setup_model(
    month: int,
    year: int,
    employees: List[Employee],
    holidays: Iterable[Holiday],
    rules: RuleSet,
) -> Tuple[cp_model.CpModel, ScheduleState]:
    """
    Sets up the scheduling model for one month.

    Classifies the days, runs the Sunday/holiday rotation over a fresh arena of
    counters, checks every day's pool against the quotas and creates one work
    variable per employee and day. Issues found here are stored on the state;
    the caller fails the run before solving when any exist.

    Args:
        month (int): Target month (1-12).
        year (int): Target year.
        employees (List[Employee]): Active employees, sorted by name.
        holidays (Iterable[Holiday]): Resolved holidays (any year; only dates matter).
        rules (RuleSet): Snapshot of the active rules.

    Returns:
        tuple: The CP-SAT model and the populated ScheduleState.
    """
    model = make_model()
    days = classify_days(year, month, holidays)
    logger.info(
        f"🗓️ {year}-{month:02d}: "
        f"{sum(d.shift_type == 'weekday' for d in days)} weekdays, "
        f"{sum(d.shift_type == 'sunday' for d in days)} Sundays, "
        f"{sum(d.shift_type == 'holiday' for d in days)} holidays"
    )

    arena = build_rotation_arena(employees)
    rotation_assignments, issues = assign_rotation_days(days, employees, rules, arena)
    issues.extend(check_weekday_pools(days, employees, rules))
    issues.sort(key=lambda i: (i.date, i.role or ""))

    work = build_variables(model, employees, days)
    state = ScheduleState(
        work=work,
        days=days,
        employees=employees,
        rules=rules,
        rotation_assignments=rotation_assignments,
        weekly_rest_days=weekly_rest_days(rules),
        pref_day_off_penalty=PREF_DAY_OFF_PENALTY,
        fairness_gap_penalty=FAIRNESS_GAP_PENALTY,
        issues=issues,
    )
    state.hard_rules = define_coverage_rules(model, state)
    return model, state
