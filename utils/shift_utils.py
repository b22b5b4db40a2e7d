from datetime import date as dt_date, datetime, time, timedelta
from typing import Iterable, List, Optional

MINUTES_PER_DAY = 24 * 60


def time_to_minutes(t: time) -> int:
    """Minutes since midnight."""
    return t.hour * 60 + t.minute


def minutes_to_time(minutes: int) -> time:
    """Inverse of `time_to_minutes`; raises ValueError outside a single day."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"{minutes} minutes does not fit in one day.")
    return time(minutes // 60, minutes % 60)


def add_minutes(t: time, minutes: int) -> Optional[time]:
    """Shift a time of day by `minutes`, or None when the result leaves the day."""
    total = time_to_minutes(t) + minutes
    if not 0 <= total < MINUTES_PER_DAY:
        return None
    return minutes_to_time(total)


def shift_duration_minutes(start: time, end: time) -> int:
    """Returns shift duration in minutes."""
    today = datetime.today().date()
    dt_start = datetime.combine(today, start)
    dt_end = datetime.combine(today, end)
    if dt_end <= dt_start:
        dt_end += timedelta(days=1)
    return int((dt_end - dt_start).total_seconds() // 60)


def rest_hours(prev_date: dt_date, prev_end: time, next_date: dt_date, next_start: time) -> float:
    """Hours between the end of one shift and the start of the next."""
    gap = datetime.combine(next_date, next_start) - datetime.combine(prev_date, prev_end)
    return gap.total_seconds() / 3600


def is_on_floor(shift, moment: time) -> bool:
    """
    Whether `shift` has its employee working at `moment`.

    `shift` is anything with `start`, `end`, `lunch_start` and `lunch_end`
    attributes; the end and the lunch end are exclusive.
    """
    if not (shift.start <= moment < shift.end):
        return False
    if shift.lunch_start is not None and shift.lunch_start <= moment < shift.lunch_end:
        return False
    return True


def on_floor_count(shifts: Iterable, moment: time) -> int:
    return sum(1 for s in shifts if is_on_floor(s, moment))


def breakpoints(shifts: Iterable, start: time, end: time) -> List[time]:
    """
    Moments in [start, end) where on-floor staffing can change.

    Checking staffing at these points is enough to know its minimum over the
    whole interval.
    """
    points = {start}
    for s in shifts:
        for t in (s.start, s.end, s.lunch_start, s.lunch_end):
            if t is not None and start <= t < end:
                points.add(t)
    return sorted(points)
