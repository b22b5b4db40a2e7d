from core.state import ScheduleState
from scheduler.setup import is_eligible

"""
This module contains the rules that pin work variables before the solver runs:
days an employee can never work, and the Sunday/holiday picks of the rotation.
"""


def eligibility_rule(model, state: ScheduleState):
    """
    Block every day an employee is not eligible for.

    Leaders never work Sundays or holidays; stockers only when they work Sundays
    with a pattern other than 0x0; roles without a quota for the day's shift
    rule are not scheduled that day.
    """
    for emp in state.employees:
        for day in state.days:
            if not is_eligible(emp, day, state.rules):
                model.Add(state.work[emp.id, day.index] == 0)


def rotation_assignment_rule(model, state: ScheduleState):
    """Force each Sunday/holiday to exactly the employees the rotation put on duty."""
    for day in state.days:
        if day.shift_type == "weekday":
            continue
        on_duty = set(state.rotation_assignments.get(day.index, []))
        for emp in state.employees:
            model.Add(state.work[emp.id, day.index] == (1 if emp.id in on_duty else 0))
