from dataclasses import dataclass
from datetime import date, time
import logging
from typing import Dict, List, Optional
from core.state import DayInfo
from schemas.schedule.generate import Employee, ShiftAssignment, ShiftType
from schemas.schedule.report import InfeasibilityIssue
from schemas.schedule.rules import RuleSet
from utils.shift_utils import (
    add_minutes,
    breakpoints,
    on_floor_count,
    rest_hours,
    shift_duration_minutes,
)

"""
Turns the solved work days into timed shifts: picks the hours of each shift,
repairs rest gaps between consecutive shifts and places lunch breaks.
"""

logger = logging.getLogger(__name__)


@dataclass
class DraftShift:
    """A shift whose hours and lunch may still change before it is published."""

    day: DayInfo
    employee: Employee
    start: time
    end: time
    has_lunch: bool = False
    lunch_start: Optional[time] = None
    lunch_end: Optional[time] = None

    @property
    def date(self) -> date:
        return self.day.date

    @property
    def shift_type(self) -> ShiftType:
        return self.day.shift_type

    @property
    def movable(self) -> bool:
        """Only non-fixed weekday shifts may have their hours changed."""
        return self.shift_type == "weekday" and not self.employee.fixed_schedule

    def to_assignment(self) -> ShiftAssignment:
        return ShiftAssignment(
            date=self.date,
            employee_id=self.employee.id,
            employee_name=self.employee.name,
            start=self.start,
            end=self.end,
            shift_type=self.shift_type,
            has_lunch=self.has_lunch,
            lunch_start=self.lunch_start,
            lunch_end=self.lunch_end,
        )


def shift_hours(employee: Employee, day: DayInfo, rules: RuleSet):
    """Fixed hours for fixed employees on weekdays, else the day's rule window."""
    if day.shift_type == "weekday":
        if employee.fixed_schedule:
            return employee.fixed_start, employee.fixed_end
        return rules.weekday.start, rules.weekday.end
    return rules.sunday.start, rules.sunday.end


def draft_shifts(
    work_days: Dict[int, List[Employee]], days: List[DayInfo], rules: RuleSet
) -> List[DraftShift]:
    """Drafts one shift per worked (day, employee), in date then name order."""
    drafts = []
    for day in days:
        for emp in work_days.get(day.index, []):
            start, end = shift_hours(emp, day, rules)
            drafts.append(DraftShift(day, emp, start, end))
    return drafts


def _gap_ok(prev: DraftShift, nxt: DraftShift, prev_end: time, next_start: time, min_hours: float) -> bool:
    return rest_hours(prev.date, prev_end, nxt.date, next_start) >= min_hours


def _earlier_start(
    shift: DraftShift,
    before: Optional[DraftShift],
    after: DraftShift,
    rules: RuleSet,
) -> Optional[time]:
    """Latest allowed start that satisfies rest towards both neighbours, if any."""
    min_hours = rules.rest.min_rest_hours
    length = shift_duration_minutes(shift.start, shift.end)
    for start in sorted(rules.weekday.allowed_starts, reverse=True):
        end = add_minutes(start, length)
        if end is None or end <= start:
            continue
        if not _gap_ok(shift, after, end, after.start, min_hours):
            continue
        if before is not None and not _gap_ok(before, shift, before.end, start, min_hours):
            continue
        return start
    return None


def enforce_rest(drafts: List[DraftShift], rules: RuleSet) -> List[InfeasibilityIssue]:
    """
    Check the rest gap between every pair of consecutive shifts of an employee.

    A violating earlier shift that is movable is moved to the latest allowed
    start time, keeping its length, that satisfies both of its neighbours.
    Otherwise the violation is reported with both dates.

    Returns:
        List[InfeasibilityIssue]: Unrepairable violations, in date order.
    """
    min_hours = rules.rest.min_rest_hours
    issues: List[InfeasibilityIssue] = []
    by_employee: Dict[str, List[DraftShift]] = {}
    for draft in drafts:
        by_employee.setdefault(draft.employee.id, []).append(draft)

    for shifts in by_employee.values():
        shifts.sort(key=lambda s: s.date)
        for i in range(len(shifts) - 1):
            prev, nxt = shifts[i], shifts[i + 1]
            gap = rest_hours(prev.date, prev.end, nxt.date, nxt.start)
            if gap >= min_hours:
                continue

            new_start = None
            if prev.movable:
                before = shifts[i - 1] if i > 0 else None
                new_start = _earlier_start(prev, before, nxt, rules)

            if new_start is None:
                issues.append(
                    InfeasibilityIssue(
                        date=prev.date,
                        employee_id=prev.employee.id,
                        rule_id=rules.rest.id,
                        reason=(
                            f"{prev.employee.name} rests {gap:.1f}h between "
                            f"{prev.date.isoformat()} and {nxt.date.isoformat()} "
                            f"(minimum {rules.rest.min_rest_hours:g}h)."
                        ),
                        conflicting_date=nxt.date,
                    )
                )
                continue

            length = shift_duration_minutes(prev.start, prev.end)
            logger.info(
                f"🔁 Moved {prev.employee.name} on {prev.date.isoformat()} to "
                f"{new_start.strftime('%H:%M')} to keep {min_hours:g}h rest before "
                f"{nxt.date.isoformat()}"
            )
            prev.start = new_start
            prev.end = add_minutes(new_start, length)

    issues.sort(key=lambda i: (i.date, i.employee_id))
    return issues


def _fits(
    candidate: DraftShift, day_shifts: List[DraftShift], lunch_start: time, lunch_end: time, min_on_floor: int
) -> bool:
    if not (candidate.start <= lunch_start and lunch_end <= candidate.end):
        return False
    candidate.lunch_start, candidate.lunch_end = lunch_start, lunch_end
    try:
        return all(
            on_floor_count(day_shifts, t) >= min_on_floor
            for t in breakpoints(day_shifts, lunch_start, lunch_end)
        )
    finally:
        candidate.lunch_start = candidate.lunch_end = None


def place_lunches(drafts: List[DraftShift], rules: RuleSet) -> List[InfeasibilityIssue]:
    """
    Place a lunch break for every non-fixed weekday shift when the weekday rule has lunch.

    On each day, employees in name order take the lunch windows round-robin,
    the i-th starting at window i mod W and trying the next ones in order. A
    window is accepted when the lunch lies inside the shift and on-floor
    staffing stays at or above `min_on_floor` for its whole duration. The
    lunch starts at the window start and is clipped to the window end.

    Returns:
        List[InfeasibilityIssue]: One per shift that fits no window.
    """
    lunch = rules.lunch
    if not rules.weekday.has_lunch or not lunch.windows:
        return []

    issues: List[InfeasibilityIssue] = []
    by_day: Dict[int, List[DraftShift]] = {}
    for draft in drafts:
        by_day.setdefault(draft.day.index, []).append(draft)

    windows = lunch.windows
    for day_shifts in by_day.values():
        takers = sorted(
            (s for s in day_shifts if s.movable),
            key=lambda s: (s.employee.name, s.employee.id),
        )
        for i, shift in enumerate(takers):
            placed = False
            for k in range(len(windows)):
                window = windows[(i + k) % len(windows)]
                lunch_end = add_minutes(window.start, lunch.duration_minutes)
                if lunch_end is None or lunch_end > window.end:
                    lunch_end = window.end
                if _fits(shift, day_shifts, window.start, lunch_end, lunch.min_on_floor):
                    shift.has_lunch = True
                    shift.lunch_start, shift.lunch_end = window.start, lunch_end
                    placed = True
                    break
            if not placed:
                issues.append(
                    InfeasibilityIssue(
                        date=shift.date,
                        employee_id=shift.employee.id,
                        rule_id=lunch.id,
                        reason=(
                            f"No lunch window for {shift.employee.name} keeps at least "
                            f"{lunch.min_on_floor} employee(s) on the floor."
                        ),
                    )
                )

    if not issues:
        logger.info(f"🍽️ Lunch placed for {sum(1 for d in drafts if d.has_lunch)} shift(s)")
    return issues
