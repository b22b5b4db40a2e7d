import logging
from typing import Callable, List
from ortools.sat.python import cp_model
from core.state import ScheduleState

logger = logging.getLogger(__name__)

Rule = Callable[[cp_model.CpModel, ScheduleState], None]


class ConstraintManager:
    """Collects constraint rules and applies them to one model, in registration order."""

    def __init__(self, model: cp_model.CpModel, state: ScheduleState):
        self.model = model
        self.state = state
        self.rules: List[Rule] = []

    def add_rule(self, rule_func: Rule, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self) -> List[str]:
        """Apply all registered rules in order and return their names."""
        applied = []
        for rule in self.rules:
            logger.debug(f"Applying {rule.__name__}")
            rule(self.model, self.state)
            applied.append(rule.__name__)
        logger.info(f"🧩 Applied {len(applied)} rule(s): {', '.join(applied)}")
        return applied
