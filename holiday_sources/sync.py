import logging
from schemas.holidays.holiday import SyncResult
from .resolver import HolidayResolver
from .store import HolidayStore

logger = logging.getLogger(__name__)


def synchronize_holidays(year: int, store: HolidayStore, resolver: HolidayResolver) -> SyncResult:
    """
    Replace the stored holidays of `year` with freshly resolved ones.

    Each holiday is inserted on its own; a failed insert is recorded in
    `errors` and the batch continues. A failure to clear the year aborts with
    `success=False` and the general error recorded.
    """
    errors = []
    count = 0
    holidays = resolver.resolve(year)

    try:
        store.replace_year(year)
    except Exception as e:
        logger.warning(f"⚠️ Could not clear holidays of {year}: {e}")
        errors.append(f"General error: {e}")
        return SyncResult(success=False, inserted_count=count, errors=errors)

    for holiday in holidays:
        try:
            store.add(holiday)
            count += 1
        except Exception as e:
            errors.append(f"Error inserting holiday {holiday.name}: {e}")

    logger.info(f"🔄 Synchronized {count} holiday(s) for {year} ({len(errors)} error(s))")
    return SyncResult(success=True, inserted_count=count, errors=errors)
