from datetime import date
from typing import Iterable, List, Optional

from schemas.schedule.report import InfeasibilityIssue


class ScheduleInfeasibleError(Exception):
    """Raised when no schedule satisfies quotas, rotation and rest rules. Carries every issue found."""

    def __init__(self, issues: Iterable[InfeasibilityIssue]):
        self.issues: List[InfeasibilityIssue] = list(issues)
        lines = ["❌ No feasible schedule. Identified issues:"]
        lines.extend(f"    • {issue.describe()}" for issue in self.issues)
        super().__init__("\n".join(lines))

    @classmethod
    def single(
        cls,
        reason: str,
        day: Optional[date] = None,
        employee_id: Optional[str] = None,
        rule_id: Optional[str] = None,
    ):
        return cls(
            [
                InfeasibilityIssue(
                    date=day, employee_id=employee_id, rule_id=rule_id, reason=reason
                )
            ]
        )


class NoEligibleWorkforceError(ScheduleInfeasibleError):
    """Raised when the roster has no active employee."""

    def __init__(self):
        super().__init__(
            [InfeasibilityIssue(reason="No eligible workforce: no active employees.")]
        )


class NoActiveRulesError(ScheduleInfeasibleError):
    """Raised when the rule set has no active rule."""

    def __init__(self):
        super().__init__([InfeasibilityIssue(reason="No active rules.")])


class InvalidRuleSetError(Exception):
    """Raised when the active rules miss a required kind or are inconsistent."""

    pass


class InputMismatchError(Exception):
    """Raised when the roster contains duplicate or inconsistent employee records."""

    pass


class InvalidScheduleRequestError(Exception):
    """Raised when the target month or year is out of range."""

    pass


class SolverTimeLimitError(Exception):
    """Raised when the solver stops at its time limit before proving every quota can be met."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(
            f"⏱ Solver time limit of {timeout:g}s reached before every weekday quota "
            "could be confirmed. Retry with a longer timeout."
        )


class HolidaySourceError(Exception):
    """Raised by a holiday source when its request fails or returns a non-2xx status."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    ScheduleInfeasibleError: 422,
    NoEligibleWorkforceError: 422,
    NoActiveRulesError: 422,
    InvalidRuleSetError: 400,
    InputMismatchError: 400,
    InvalidScheduleRequestError: 400,
    SolverTimeLimitError: 503,
    HolidaySourceError: 502,
}
