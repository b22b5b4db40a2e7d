from typing import List
from schemas.holidays.holiday import Holiday
from utils.calendar_utils import movable_holidays, parse_date
from utils.constants import FIXED_NATIONAL_HOLIDAYS, FIXED_STATE_HOLIDAYS

"""
Static holiday lists used when every remote source fails.
"""


def _fixed(year: int, entries, scope: str) -> List[Holiday]:
    return [
        Holiday(date=parse_date(f"{year}-{month_day}"), name=name, scope=scope)
        for month_day, name in entries
    ]


def national_fallback(year: int) -> List[Holiday]:
    """The fixed-date national holidays plus those that move with Easter."""
    holidays = _fixed(year, FIXED_NATIONAL_HOLIDAYS, "national")
    holidays.extend(
        Holiday(date=day, name=name, scope="national", level=level)
        for day, name, level in movable_holidays(year)
    )
    return holidays


def state_fallback(year: int) -> List[Holiday]:
    return _fixed(year, FIXED_STATE_HOLIDAYS, "state")
