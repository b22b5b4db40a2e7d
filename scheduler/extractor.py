import pandas as pd
from core.state import DayInfo, ScheduleState
from .solver import SolverResult
from typing import Dict, List
import logging
from schemas.schedule.generate import Employee, ShiftAssignment
from utils.shift_utils import shift_duration_minutes

logger = logging.getLogger(__name__)

REST_LABEL = "REST"


def extract_work_days(state: ScheduleState, result: SolverResult) -> Dict[int, List[Employee]]:
    """
    Read the solved work variables back as day index -> employees on duty.

    Employees keep the state's name order, so every downstream pass iterates
    deterministically.
    """
    work_days: Dict[int, List[Employee]] = {}
    for day in state.days:
        work_days[day.index] = [
            e for e in state.employees if result.cached_values.get((e.id, day.index), 0) > 0
        ]
    logger.info(f"👷 {sum(len(v) for v in work_days.values())} shifts over {state.num_days} days")
    return work_days


def _worked_hours(a: ShiftAssignment) -> float:
    minutes = shift_duration_minutes(a.start, a.end)
    if a.has_lunch and a.lunch_start is not None:
        minutes -= shift_duration_minutes(a.lunch_start, a.lunch_end)
    return minutes / 60


def build_schedule_frames(
    assignments: List[ShiftAssignment], days: List[DayInfo], employees: List[Employee]
):
    """
    Build a readable schedule grid and a per-employee summary.

    The grid has one row per employee and one column per day, each cell
    holding `HH:MM-HH:MM` or `REST`. The summary counts days worked per shift
    type and worked hours, lunch excluded.

    Returns:
        tuple: (schedule_df, summary_df)
    """
    headers = [d.date.strftime("%a %Y-%m-%d") for d in days]
    header_by_date = {d.date: h for d, h in zip(days, headers)}

    schedule = {e.id: [REST_LABEL] * len(days) for e in employees}
    col_index = {h: i for i, h in enumerate(headers)}
    summary = {
        e.id: {
            "Employee": e.name,
            "Role": e.role,
            "Weekday": 0,
            "Sunday": 0,
            "Holiday": 0,
            "REST": len(days),
            "Hours": 0.0,
        }
        for e in employees
    }

    for a in assignments:
        header = header_by_date.get(a.date)
        if header is None or a.employee_id not in schedule:
            continue
        schedule[a.employee_id][col_index[header]] = (
            f"{a.start.strftime('%H:%M')}-{a.end.strftime('%H:%M')}"
        )
        row = summary[a.employee_id]
        row[a.shift_type.capitalize()] += 1
        row["REST"] -= 1
        row["Hours"] += _worked_hours(a)

    order = [e.id for e in employees]
    schedule_df = pd.DataFrame.from_dict(schedule, orient="index", columns=headers).reindex(order)
    schedule_df.index = [e.name for e in employees]
    summary_df = pd.DataFrame(list(summary.values()))
    if not summary_df.empty:
        summary_df["Hours"] = summary_df["Hours"].round(2)
    return schedule_df, summary_df
