import logging
from typing import Any, Callable, Dict, List, Optional, Sequence
from exceptions.custom_errors import HolidaySourceError
from schemas.holidays.holiday import Holiday
from utils.calendar_utils import coerce_date
from .fallback import national_fallback, state_fallback
from .sources import BrasilApiSource, HolidaySource, HolidaysRepoSource, state_endpoint

logger = logging.getLogger(__name__)

OPTIONAL_LEVELS = {"facultativo", "optional"}


def normalize_record(record: Dict[str, Any], year: int, scope: str) -> Optional[Holiday]:
    """
    Convert one raw source record into a Holiday of `year`, or None.

    The date comes from `variableDates[year]` when present, else `date`, in
    ISO or `dd/mm` form. The name comes from `name`, else `title`. A `type` of
    `facultativo`/`optional` makes the holiday optional; anything else is
    mandatory. Records without a usable date or name, or dated in another
    year, are dropped.
    """
    raw_date = (record.get("variableDates") or {}).get(str(year)) or record.get("date")
    day = coerce_date(raw_date, year)
    if day is None or day.year != year:
        logger.debug(f"Dropped holiday record with date {raw_date!r} for {year}")
        return None

    name = record.get("name") or record.get("title")
    if not name:
        logger.debug(f"Dropped unnamed holiday record on {day.isoformat()}")
        return None

    level = "optional" if str(record.get("type", "")).lower() in OPTIONAL_LEVELS else "mandatory"
    return Holiday(date=day, name=str(name).strip(), scope=scope, level=level)


class HolidayResolver:
    """
    Resolve a year's holidays from ranked sources.

    National and state holidays each run their own chain: sources are asked in
    rank order, and the next one only after the previous raised or returned
    nothing usable. When the whole chain fails, the static list is used.
    `resolve` never lets a source failure escape.
    """

    def __init__(
        self,
        national_sources: Sequence[HolidaySource],
        state_sources: Sequence[HolidaySource],
        national_static: Callable[[int], List[Holiday]] = national_fallback,
        state_static: Callable[[int], List[Holiday]] = state_fallback,
    ):
        self.national_sources = list(national_sources)
        self.state_sources = list(state_sources)
        self.national_static = national_static
        self.state_static = state_static

    def _resolve_chain(
        self,
        sources: List[HolidaySource],
        year: int,
        scope: str,
        static: Callable[[int], List[Holiday]],
    ) -> List[Holiday]:
        for source in sources:
            name = getattr(source, "name", type(source).__name__)
            try:
                records = source.fetch(year)
            except HolidaySourceError as e:
                logger.warning(f"⚠️ {name} failed for {year}: {e}")
                continue
            except Exception as e:
                logger.warning(f"⚠️ {name} failed unexpectedly for {year}: {type(e).__name__}: {e}")
                continue

            holidays = [h for h in (normalize_record(r, year, scope) for r in records) if h]
            if holidays:
                logger.info(f"📅 {len(holidays)} {scope} holiday(s) for {year} from {name}")
                return holidays
            logger.warning(f"⚠️ {name} returned no usable {scope} holiday for {year}")

        holidays = static(year)
        logger.info(f"📅 Using {len(holidays)} static {scope} holiday(s) for {year}")
        return holidays

    def resolve(self, year: int) -> List[Holiday]:
        """Return the year's holidays, one per (date, scope), sorted by date."""
        found = self._resolve_chain(self.national_sources, year, "national", self.national_static)
        found += self._resolve_chain(self.state_sources, year, "state", self.state_static)

        unique: Dict[tuple, Holiday] = {}
        for holiday in found:
            unique.setdefault(holiday.key, holiday)
        return sorted(unique.values(), key=lambda h: h.date)


def default_resolver() -> HolidayResolver:
    """BrasilAPI then the holidays repository for national holidays; the repository for the state."""
    return HolidayResolver(
        national_sources=[BrasilApiSource(), HolidaysRepoSource("national")],
        state_sources=[HolidaysRepoSource(state_endpoint())],
    )
