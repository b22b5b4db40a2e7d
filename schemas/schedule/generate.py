import datetime as dt
from typing import List, Literal, Optional
from pydantic import Field, model_validator
from schemas.base import FrozenModel, TimeOfDay
from schemas.holidays.holiday import Holiday
from schemas.schedule.rules import Role, Rule

SundayPattern = Literal["1x1", "2x2", "0x0"]
ShiftType = Literal["weekday", "sunday", "holiday"]


# Define data models
class Employee(FrozenModel):
    id: str
    name: str
    role: Role
    active: bool = True
    fixed_schedule: bool = False
    fixed_start: Optional[TimeOfDay] = None
    fixed_end: Optional[TimeOfDay] = None
    works_sunday: bool = False
    sunday_pattern: SundayPattern = "0x0"
    phone: Optional[str] = None
    email: Optional[str] = None

    @model_validator(mode="after")
    def check_fixed_hours(self) -> "Employee":
        """A fixed schedule needs both ends, in order."""
        if self.fixed_schedule:
            if self.fixed_start is None or self.fixed_end is None:
                raise ValueError(
                    f"Employee {self.name!r} has a fixed schedule but no fixed start/end."
                )
            if self.fixed_end <= self.fixed_start:
                raise ValueError(
                    f"Employee {self.name!r}: fixed end must be after fixed start."
                )
        return self

    @property
    def rotation_length(self) -> int:
        """N of an NxN Sunday pattern; 0 means never on Sundays/holidays."""
        return int(self.sunday_pattern.split("x")[0])

    @property
    def sunday_eligible(self) -> bool:
        return (
            self.role == "stocker"
            and self.works_sunday
            and self.rotation_length > 0
        )


class ShiftAssignment(FrozenModel):
    date: dt.date
    employee_id: str
    employee_name: str
    start: TimeOfDay
    end: TimeOfDay
    shift_type: ShiftType
    has_lunch: bool = False
    lunch_start: Optional[TimeOfDay] = None
    lunch_end: Optional[TimeOfDay] = None

    @property
    def sort_key(self) -> tuple:
        return (self.date, self.employee_name, self.employee_id)


class ScheduleRequest(FrozenModel):
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1583)
    employees: List[Employee]
    rules: List[Rule]
    # Resolved for the year when omitted
    holidays: Optional[List[Holiday]] = None
