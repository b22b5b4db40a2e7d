from core.state import ScheduleState

"""
This module contains the low priority rules for the monthly shift scheduling problem.
"""


def preferred_day_off_rule(model, state: ScheduleState):
    """
    Prefer stockers' weekday rest on the day-off rule's preferred weekdays.

    A penalty is incurred for every stocker working on a preferred weekday, so
    the rest days left after headcount and rest rules land there first.
    """
    preferred = set(state.rules.day_off.preferred_weekdays)
    if not preferred:
        return
    for emp in state.by_role("stocker"):
        for day in state.days:
            if day.shift_type == "weekday" and day.date.weekday() in preferred:
                state.low_priority_penalty.append(
                    state.work[emp.id, day.index] * state.pref_day_off_penalty
                )


def workload_balance_rule(model, state: ScheduleState):
    """Penalise the gap between the busiest and the idlest stocker of the month."""
    stockers = state.by_role("stocker")
    if len(stockers) < 2 or not state.fairness_gap_penalty:
        return

    totals = []
    for emp in stockers:
        total = model.NewIntVar(0, state.num_days, f"total_worked_{emp.id}")
        model.Add(total == sum(state.work[emp.id, d.index] for d in state.days))
        totals.append(total)

    busiest = model.NewIntVar(0, state.num_days, "busiest_stocker")
    idlest = model.NewIntVar(0, state.num_days, "idlest_stocker")
    model.AddMaxEquality(busiest, totals)
    model.AddMinEquality(idlest, totals)

    state.gap = model.NewIntVar(0, state.num_days, "workload_gap")
    model.Add(state.gap == busiest - idlest)
    state.low_priority_penalty.append(state.gap * state.fairness_gap_penalty)
