from functools import lru_cache
from holiday_sources import HolidayResolver, InMemoryHolidayStore, default_resolver


# Shared instances; tests swap them through app.dependency_overrides
@lru_cache
def get_resolver() -> HolidayResolver:
    return default_resolver()


@lru_cache
def get_store() -> InMemoryHolidayStore:
    return InMemoryHolidayStore()
