import datetime as dt
from typing import Optional
from schemas.base import FrozenModel


class InfeasibilityIssue(FrozenModel):
    """One constraint that could not be satisfied, and where."""

    date: Optional[dt.date] = None
    employee_id: Optional[str] = None
    rule_id: Optional[str] = None
    reason: str
    role: Optional[str] = None
    required: Optional[int] = None
    available: Optional[int] = None
    conflicting_date: Optional[dt.date] = None

    def describe(self) -> str:
        parts = []
        if self.date is not None:
            parts.append(self.date.isoformat())
        if self.employee_id is not None:
            parts.append(f"employee {self.employee_id}")
        if self.rule_id is not None:
            parts.append(f"rule {self.rule_id}")
        where = f"[{', '.join(parts)}] " if parts else ""
        return f"{where}{self.reason}"
