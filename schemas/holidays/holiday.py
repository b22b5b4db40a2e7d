import datetime as dt
from typing import List, Literal
from pydantic import BaseModel, Field
from schemas.base import FrozenModel

HolidayScope = Literal["national", "state"]
HolidayLevel = Literal["mandatory", "optional"]


class Holiday(FrozenModel):
    date: dt.date
    name: str
    scope: HolidayScope = "national"
    level: HolidayLevel = "mandatory"

    @property
    def key(self) -> tuple:
        """Deduplication key: one holiday per (date, scope)."""
        return (self.date, self.scope)


class SyncRequest(BaseModel):
    year: int = Field(ge=1583)


class SyncResult(BaseModel):
    success: bool
    inserted_count: int = 0
    errors: List[str] = Field(default_factory=list)
