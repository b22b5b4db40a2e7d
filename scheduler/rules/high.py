from core.state import ScheduleState
from utils.calendar_utils import iso_weeks
from utils.constants import DAYS_PER_WEEK

"""
This module contains the hard rules for the monthly shift scheduling problem.
"""


def headcount_rule(model, state: ScheduleState):
    """
    Staff every weekday with exactly the quota of each role.

    Each (day, role) quota is guarded by its coverage flag so that phase 1 can
    tell which days are impossible instead of failing the whole model.
    """
    for (day_idx, role), hard_rule in state.hard_rules.items():
        quantity = state.rules.weekday.quota_for(role)
        model.Add(
            sum(state.work[e.id, day_idx] for e in state.by_role(role)) == quantity
        ).OnlyEnforceIf(hard_rule.flag)


def max_consecutive_days_rule(model, state: ScheduleState):
    """No employee works more than max_consecutive_days days in a row; Sundays and holidays count."""
    max_days = state.rules.rest.max_consecutive_days
    if max_days >= state.num_days:
        return
    for emp in state.employees:
        for start in range(state.num_days - max_days):
            window = range(start, start + max_days + 1)
            model.Add(sum(state.work[emp.id, d] for d in window) <= max_days)


def weekly_rest_rule(model, state: ScheduleState):
    """Give each stocker at least weekly_rest_days rest days in every complete Monday-Sunday week."""
    if state.weekly_rest_days <= 0:
        return
    max_worked = DAYS_PER_WEEK - state.weekly_rest_days
    weeks = iso_weeks([d.date for d in state.days])

    for emp in state.by_role("stocker"):
        for day_idxs in weeks.values():
            # Skip partial weeks at the month edges
            if len(day_idxs) < DAYS_PER_WEEK:
                continue
            model.Add(sum(state.work[emp.id, d] for d in day_idxs) <= max_worked)
