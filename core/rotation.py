from dataclasses import dataclass
from typing import Dict, List
from schemas.schedule.generate import Employee


@dataclass
class RotationState:
    """
    Counter for an NxN Sunday/holiday pattern.

    The employee works `block_length` consecutive Sunday/holiday occurrences,
    then rests the same number, repeating. `remaining` counts the occurrences
    left in the current block, including the next one.
    """

    block_length: int
    working: bool
    remaining: int

    @classmethod
    def from_phase(cls, block_length: int, phase: int) -> "RotationState":
        """Start `phase` occurrences into the 2N cycle (phase 0 = first working occurrence)."""
        phase %= 2 * block_length
        if phase < block_length:
            return cls(block_length, True, block_length - phase)
        return cls(block_length, False, 2 * block_length - phase)

    def advance(self) -> None:
        self.remaining -= 1
        if self.remaining == 0:
            self.working = not self.working
            self.remaining = self.block_length


def build_rotation_arena(employees: List[Employee]) -> Dict[str, RotationState]:
    """
    One rotation state per Sunday-eligible employee, keyed by id.

    Employees sharing a pattern are staggered by whole blocks in name order:
    even positions start in a working block, odd positions in a resting one.
    Two 2x2 stockers then cover alternate pairs of occurrences and a 1x1 pair
    alternates.
    """
    arena: Dict[str, RotationState] = {}
    position_by_pattern: Dict[str, int] = {}
    for emp in sorted(employees, key=lambda e: (e.name, e.id)):
        if not emp.sunday_eligible:
            continue
        position = position_by_pattern.get(emp.sunday_pattern, 0)
        position_by_pattern[emp.sunday_pattern] = position + 1
        block = emp.rotation_length
        arena[emp.id] = RotationState.from_phase(block, (position % 2) * block)
    return arena
