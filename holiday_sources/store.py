from typing import Dict, List, Protocol
from schemas.holidays.holiday import Holiday


class HolidayStore(Protocol):
    """Persistence contract used by holiday synchronization."""

    def replace_year(self, year: int) -> None:
        """Remove every stored holiday of `year`."""
        ...

    def add(self, holiday: Holiday) -> None:
        ...

    def list_year(self, year: int) -> List[Holiday]:
        ...


class InMemoryHolidayStore:
    """Process-local store keyed by year."""

    def __init__(self):
        self._by_year: Dict[int, List[Holiday]] = {}

    def replace_year(self, year: int) -> None:
        self._by_year[year] = []

    def add(self, holiday: Holiday) -> None:
        if any(h.key == holiday.key for h in self._by_year.get(holiday.date.year, [])):
            raise ValueError(
                f"{holiday.scope} holiday on {holiday.date.isoformat()} already stored."
            )
        self._by_year.setdefault(holiday.date.year, []).append(holiday)

    def years(self) -> List[int]:
        return sorted(y for y, holidays in self._by_year.items() if holidays)

    def list_year(self, year: int) -> List[Holiday]:
        return sorted(self._by_year.get(year, []), key=lambda h: h.date)
