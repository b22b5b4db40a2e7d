"""
holiday_sources
---------------

Holiday lookup for the scheduler:

- `sources`: Remote holiday APIs behind a common `fetch(year)` contract.
- `fallback`: Static national and state lists, movable feasts included.
- `resolver`: Ranked sources with fallback, normalization and deduplication.
- `store` & `sync`: Persisting a year's holidays with per-record error reporting.
"""
from .resolver import HolidayResolver, default_resolver
from .store import HolidayStore, InMemoryHolidayStore
from .sync import synchronize_holidays
