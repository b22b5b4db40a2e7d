from dataclasses import dataclass
from ortools.sat.python import cp_model
from typing import Any, Dict, Tuple
from schemas.schedule.report import InfeasibilityIssue


@dataclass
class HardRule:
    flag: Any
    message: str
    issue: InfeasibilityIssue


def define_coverage_rules(model: cp_model.CpModel, state) -> Dict[Tuple[int, str], HardRule]:
    """One assumption flag per weekday and staffed role; a dropped flag is an unmet quota."""
    rule = state.rules.weekday
    hard_rules = {}
    for day in state.days:
        if day.shift_type != "weekday":
            continue
        for quota in rule.quotas:
            if quota.quantity <= 0:
                continue
            message = (
                f"Could not staff {quota.quantity} {quota.role}(s) without breaking "
                f"rest rules (max {state.rules.rest.max_consecutive_days} consecutive days, "
                f"{state.weekly_rest_days} rest day(s) per week)."
            )
            hard_rules[(day.index, quota.role)] = HardRule(
                model.NewBoolVar(f"assume_cover_{day.index}_{quota.role}"),
                message,
                InfeasibilityIssue(
                    date=day.date,
                    rule_id=rule.id,
                    reason=message,
                    role=quota.role,
                    required=quota.quantity,
                ),
            )
    return hard_rules
