from dataclasses import dataclass, field
from ortools.sat.python import cp_model
from typing import Any, Dict, List, Optional, Tuple
from datetime import date
from core.hard_rules import HardRule
from schemas.schedule.generate import Employee, ShiftType
from schemas.schedule.report import InfeasibilityIssue
from schemas.schedule.rules import RuleSet


@dataclass(frozen=True)
class DayInfo:
    index: int
    """Position of the day in the month (0-based)."""
    date: date
    shift_type: ShiftType
    """`holiday`, `sunday` or `weekday`; holidays take precedence."""


@dataclass
class ScheduleState:
    """
    A dataclass to hold all the state relevant to creating and solving one
    month of shift scheduling.
    """

    # model inputs
    work: Dict[Tuple[str, int], cp_model.IntVar]
    """A dictionary with keys `(employee_id, day_index)` and values a boolean
    variable indicating if the employee works that day.
    """
    days: List[DayInfo]
    """Every day of the month, classified."""
    employees: List[Employee]
    """Active employees, sorted by name then id."""
    rules: RuleSet
    """Snapshot of the active rules for this run."""
    rotation_assignments: Dict[int, List[str]]
    """Sunday/holiday day index -> ids of the employees the rotation puts on duty."""

    # model params
    weekly_rest_days: int
    """Rest days each stocker gets in every complete Monday-Sunday week."""
    pref_day_off_penalty: int
    """The penalty for working on a preferred day off."""
    fairness_gap_penalty: int
    """The penalty per day of gap between the busiest and idlest stocker."""

    # collections to fill
    hard_rules: Dict[Tuple[int, str], HardRule] = field(default_factory=dict)
    """Coverage flags keyed by `(day_index, role)`."""
    issues: List[InfeasibilityIssue] = field(default_factory=list)
    """Infeasibility found before solving (pool smaller than quota)."""
    low_priority_penalty: List[Any] = field(default_factory=list)
    """A list of low priority penalty terms."""
    gap: Optional[cp_model.IntVar] = None
    """Workload gap between stockers, set by the balance rule."""

    @property
    def num_days(self) -> int:
        return len(self.days)

    def by_role(self, role: str) -> List[Employee]:
        return [e for e in self.employees if e.role == role]
