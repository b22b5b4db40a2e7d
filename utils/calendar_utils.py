import calendar
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple

"""
Civil-calendar helpers: Easter and the holidays that move with it, ISO date
formatting and month/week queries. Dates are plain calendar dates; no timezone
is modeled.
"""

SUNDAY = 6  # date.weekday()

GOOD_FRIDAY_OFFSET = -2
CARNIVAL_OFFSET = -47
CORPUS_CHRISTI_OFFSET = 60


def compute_movable_feast(year: int) -> date:
    """
    Return Easter Sunday of the Gregorian calendar for `year`.

    Anonymous Gregorian (Meeus/Jones/Butcher) algorithm, valid for any year
    from 1583 onwards. Pure integer arithmetic.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def good_friday(year: int) -> date:
    return compute_movable_feast(year) + timedelta(days=GOOD_FRIDAY_OFFSET)


def carnival(year: int) -> date:
    return compute_movable_feast(year) + timedelta(days=CARNIVAL_OFFSET)


def corpus_christi(year: int) -> date:
    return compute_movable_feast(year) + timedelta(days=CORPUS_CHRISTI_OFFSET)


def movable_holidays(year: int) -> List[Tuple[date, str, str]]:
    """Return (date, name, level) for the national holidays that follow Easter."""
    return [
        (good_friday(year), "Sexta-feira Santa", "mandatory"),
        (carnival(year), "Carnaval", "optional"),
        (corpus_christi(year), "Corpus Christi", "optional"),
    ]


def format_date(day: date) -> str:
    """Format as ISO `YYYY-MM-DD`."""
    return day.isoformat()


def parse_date(text: str) -> date:
    """Parse an ISO `YYYY-MM-DD` string; extra time components are rejected."""
    return date.fromisoformat(text.strip())


def parse_day_month(text: str, year: int) -> date:
    """Parse a `dd/mm` string into a date of `year`."""
    day_str, month_str = text.strip().split("/")[:2]
    return date(year, int(month_str), int(day_str))


def coerce_date(value, year: Optional[int] = None) -> Optional[date]:
    """
    Best-effort conversion of a raw source value into a date.

    Accepts `date`/`datetime` objects, ISO strings (optionally with a time
    suffix) and `dd/mm` strings when `year` is given. Returns None when the
    value cannot be resolved.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        if "-" in text:
            return parse_date(text[:10])
        if "/" in text and year is not None:
            return parse_day_month(text, year)
    except ValueError:
        return None
    return None


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_days(year: int, month: int) -> List[date]:
    """Every calendar day of the month, in order."""
    return [date(year, month, d) for d in range(1, days_in_month(year, month) + 1)]


def is_sunday(day: date) -> bool:
    return day.weekday() == SUNDAY


def iso_weeks(days: List[date]) -> Dict[Tuple[int, int], List[int]]:
    """Group day indices by ISO (year, week); each group runs Monday to Sunday."""
    weeks: Dict[Tuple[int, int], List[int]] = {}
    for idx, day in enumerate(days):
        iso = day.isocalendar()
        weeks.setdefault((iso[0], iso[1]), []).append(idx)
    return weeks
