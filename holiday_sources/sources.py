import logging
from typing import Any, Dict, List, Protocol
import requests
from exceptions.custom_errors import HolidaySourceError
from utils.constants import (
    BRASIL_API_URL,
    HOLIDAY_REQUEST_TIMEOUT,
    HOLIDAY_USER_AGENT,
    HOLIDAYS_REPO_URL,
    STATE_CODE,
)

logger = logging.getLogger(__name__)


class HolidaySource(Protocol):
    """A ranked provider of raw holiday records."""

    name: str

    def fetch(self, year: int) -> List[Dict[str, Any]]:
        """Return raw records for `year`; raise HolidaySourceError on failure."""
        ...


class HttpHolidaySource:
    """Base for JSON sources reached over HTTP."""

    name = "http"

    def __init__(self, timeout: float = HOLIDAY_REQUEST_TIMEOUT, session=None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, year: int) -> str:
        raise NotImplementedError

    def fetch(self, year: int) -> List[Dict[str, Any]]:
        url = self.url_for(year)
        try:
            resp = self.session.get(
                url,
                headers={"User-Agent": HOLIDAY_USER_AGENT},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.HTTPError as e:
            raise HolidaySourceError(
                f"{self.name} error: {e.response.status_code if e.response is not None else e}"
            ) from e
        except (requests.RequestException, ValueError) as e:
            raise HolidaySourceError(f"{self.name} error: {e}") from e

        if not isinstance(data, list):
            raise HolidaySourceError(f"{self.name} returned {type(data).__name__}, expected a list.")
        logger.debug(f"{self.name}: {len(data)} record(s) from {url}")
        return data


class BrasilApiSource(HttpHolidaySource):
    """National holidays from BrasilAPI: `[{date, name, type}]` per year."""

    name = "Brasil API"

    def url_for(self, year: int) -> str:
        return f"{BRASIL_API_URL}{year}"


class HolidaysRepoSource(HttpHolidaySource):
    """
    The public holidays JSON repository, national or per state.

    Records carry `date` as `dd/mm` (or ISO) and, for movable feasts, a
    `variableDates` map of year to date.
    """

    def __init__(self, endpoint: str = "national", **kwargs):
        super().__init__(**kwargs)
        self.endpoint = endpoint
        self.name = f"Holidays Repo ({endpoint})"

    def url_for(self, year: int) -> str:
        return f"{HOLIDAYS_REPO_URL}{self.endpoint}.json"


def state_endpoint(state_code: str = STATE_CODE) -> str:
    return f"state/{state_code}"
