from typing import Iterable, List
import logging
from utils.constants import SOLVER_SEED, SOLVER_TIMEOUT_SECONDS
from utils.validate import validate_period, validate_roster, validate_rules
from exceptions.custom_errors import ScheduleInfeasibleError
from scheduler.setup import setup_model
from scheduler.extractor import extract_work_days
from scheduler.timing import draft_shifts, enforce_rest, place_lunches
from core.constraint_manager import ConstraintManager
from scheduler.rules import *
from scheduler.runner import solve_schedule
from schemas.holidays.holiday import Holiday
from schemas.schedule.generate import Employee, ShiftAssignment
from schemas.schedule.rules import Rule, RuleSet

logger = logging.getLogger(__name__)


# == Generate Schedule ==
def generate_schedule(
    month: int,
    year: int,
    employees: List[Employee],
    holidays: Iterable[Holiday],
    rules: List[Rule],
    timeout: float = SOLVER_TIMEOUT_SECONDS,
    seed: int = SOLVER_SEED,
) -> List[ShiftAssignment]:
    """
    Builds one month of shifts satisfying quotas, rotation and rest rules.

    Returns the assignments sorted by date, then employee name, then id. The
    same inputs always give the same output. No partial schedule is ever
    returned: every problem found is collected and raised together.

    Raises:
        InvalidScheduleRequestError: Month or year out of range.
        NoEligibleWorkforceError: No active employee.
        InputMismatchError: Duplicate employee ids.
        NoActiveRulesError: No active rule.
        InvalidRuleSetError: Weekday or Sunday/holiday shift rule missing.
        ScheduleInfeasibleError: Any quota, rest or lunch issue.
        SolverTimeLimitError: Solver stopped at `timeout` before proving coverage.
    """
    # === Validate inputs ===
    validate_period(month, year)
    roster = validate_roster(employees)
    rule_set = RuleSet.from_rules(validate_rules(rules))
    holidays = list(holidays)

    # === Model setup ===
    logger.info(f"📋 Building schedule for {year}-{month:02d} ({len(roster)} employees)...")
    model, state = setup_model(month, year, roster, holidays, rule_set)
    if state.issues:
        logger.info(f"⚠️ {len(state.issues)} staffing issue(s) found before solving.")
        raise ScheduleInfeasibleError(state.issues)

    cm = ConstraintManager(model, state)
    # Fixed rules
    cm.add_rule(eligibility_rule)
    cm.add_rule(rotation_assignment_rule)

    # High priority rules
    cm.add_rule(headcount_rule)  # Exact quota per role on weekdays
    cm.add_rule(max_consecutive_days_rule)
    cm.add_rule(weekly_rest_rule, state.weekly_rest_days > 0)  # Rotating weekday day-off for stockers

    # Low priority rules
    cm.add_rule(preferred_day_off_rule, bool(rule_set.day_off.preferred_weekdays))
    cm.add_rule(workload_balance_rule)

    cm.apply_all()  # Apply all rules

    result = solve_schedule(model, state, timeout, seed)

    # === Shift hours, rest and lunch ===
    drafts = draft_shifts(extract_work_days(state, result), state.days, rule_set)
    issues = enforce_rest(drafts, rule_set)
    if issues:
        raise ScheduleInfeasibleError(issues)
    issues = place_lunches(drafts, rule_set)
    if issues:
        raise ScheduleInfeasibleError(issues)

    assignments = sorted((d.to_assignment() for d in drafts), key=lambda a: a.sort_key)
    logger.info(f"✅ Generated {len(assignments)} assignments for {year}-{month:02d}")
    return assignments
