from datetime import datetime, time
from typing import Annotated, Any, List, Literal, Optional, Union
from pydantic import Field, field_validator, model_validator
from schemas.base import FrozenModel, TimeOfDay
from utils.constants import *
from exceptions.custom_errors import InvalidRuleSetError

"""
Typed scheduling rules. Each rule is one named configuration record whose
`kind` selects its shape; a run receives them whole and never mutates them.
"""

Role = Literal["leader", "stocker"]


class RoleQuota(FrozenModel):
    role: Role
    quantity: int = Field(ge=0)


class LunchWindow(FrozenModel):
    start: TimeOfDay
    end: TimeOfDay

    @model_validator(mode="before")
    @classmethod
    def parse_range(cls, values: Any) -> Any:
        """Accept the compact "HH:MM-HH:MM" form used by the seeded rules."""
        if isinstance(values, str):
            start, end = values.split("-")
            return {"start": start.strip(), "end": end.strip()}
        return values

    @model_validator(mode="after")
    def check_order(self) -> "LunchWindow":
        if self.end <= self.start:
            raise ValueError(f"Lunch window {self.start}-{self.end} must end after it starts.")
        return self


class RuleBase(FrozenModel):
    id: str
    name: str
    active: bool = True


class ShiftWindowRule(RuleBase):
    start: TimeOfDay
    end: TimeOfDay
    quotas: List[RoleQuota] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_window(self) -> "ShiftWindowRule":
        if self.end <= self.start:
            raise ValueError(f"Rule {self.id!r}: shift must end after it starts.")
        roles = [q.role for q in self.quotas]
        if len(roles) != len(set(roles)):
            raise ValueError(f"Rule {self.id!r}: duplicate role quota.")
        return self

    def quota_for(self, role: str) -> int:
        for quota in self.quotas:
            if quota.role == role:
                return quota.quantity
        return 0

    @property
    def duration_minutes(self) -> int:
        return minutes_between(self.start, self.end)


class WeekdayShiftRule(ShiftWindowRule):
    kind: Literal["weekday_shift"] = "weekday_shift"
    has_lunch: bool = True
    allowed_starts: List[TimeOfDay] = Field(default_factory=list)


class SundayHolidayShiftRule(ShiftWindowRule):
    kind: Literal["sunday_holiday_shift"] = "sunday_holiday_shift"


class LunchRule(RuleBase):
    kind: Literal["lunch"] = "lunch"
    duration_minutes: int = Field(default=DEFAULT_LUNCH_MINUTES, gt=0)
    min_on_floor: int = Field(default=DEFAULT_MIN_ON_FLOOR, ge=0)
    windows: List[LunchWindow] = Field(default_factory=list)


class RestRule(RuleBase):
    kind: Literal["rest"] = "rest"
    min_rest_hours: float = Field(default=DEFAULT_MIN_REST_HOURS, ge=0)
    max_consecutive_days: int = Field(default=DEFAULT_MAX_CONSECUTIVE_DAYS, ge=1)
    weekly_contract_hours: float = Field(default=DEFAULT_WEEKLY_CONTRACT_HOURS, gt=0)


class DayOffRule(RuleBase):
    kind: Literal["day_off"] = "day_off"
    preferred_weekdays: List[int] = Field(default_factory=list)

    @field_validator("preferred_weekdays")
    @classmethod
    def check_weekdays(cls, value: List[int]) -> List[int]:
        for weekday in value:
            if not 0 <= weekday <= 5:
                raise ValueError(
                    f"Preferred day off {weekday} must be a weekday number 0 (Monday) to 5 (Saturday)."
                )
        return value


Rule = Annotated[
    Union[
        WeekdayShiftRule,
        SundayHolidayShiftRule,
        LunchRule,
        RestRule,
        DayOffRule,
    ],
    Field(discriminator="kind"),
]


def minutes_between(start: time, end: time) -> int:
    """Minutes from start to end on the same day."""
    anchor = datetime(2000, 1, 1)
    return int(
        (datetime.combine(anchor, end) - datetime.combine(anchor, start)).total_seconds()
        // 60
    )


def default_lunch_rule() -> LunchRule:
    return LunchRule(
        id="default-lunch",
        name="Intervalo Almoço",
        windows=[LunchWindow.model_validate(w) for w in DEFAULT_LUNCH_WINDOWS],
    )


def default_rest_rule() -> RestRule:
    return RestRule(id="default-rest", name="Descanso Entre Jornadas")


def default_day_off_rule() -> DayOffRule:
    return DayOffRule(
        id="default-day-off",
        name="Folga Semanal",
        preferred_weekdays=list(DEFAULT_PREFERRED_DAYS_OFF),
    )


class RuleSet(FrozenModel):
    """
    Frozen snapshot of the active rules for one generation run.

    The first active rule of each kind wins, in supplied order. Lunch, rest and
    day-off rules fall back to the configured defaults when absent.
    """

    weekday: WeekdayShiftRule
    sunday: SundayHolidayShiftRule
    lunch: LunchRule
    rest: RestRule
    day_off: DayOffRule

    @classmethod
    def from_rules(cls, rules: List[Rule]) -> "RuleSet":
        picked = {}
        for rule in rules:
            if rule.active and rule.kind not in picked:
                picked[rule.kind] = rule
        missing = [
            kind for kind in ("weekday_shift", "sunday_holiday_shift") if kind not in picked
        ]
        if missing:
            raise InvalidRuleSetError(
                f"Active rules are missing required kind(s): {', '.join(missing)}."
            )
        return cls(
            weekday=picked["weekday_shift"],
            sunday=picked["sunday_holiday_shift"],
            lunch=picked.get("lunch") or default_lunch_rule(),
            rest=picked.get("rest") or default_rest_rule(),
            day_off=picked.get("day_off") or default_day_off_rule(),
        )

    def quota(self, shift_type: str, role: str) -> int:
        rule = self.weekday if shift_type == "weekday" else self.sunday
        return rule.quota_for(role)

    @property
    def working_minutes_per_day(self) -> int:
        """Weekday working minutes, lunch excluded."""
        minutes = self.weekday.duration_minutes
        if self.weekday.has_lunch:
            minutes -= self.lunch.duration_minutes
        return max(minutes, 1)
