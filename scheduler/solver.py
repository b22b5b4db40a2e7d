from dataclasses import dataclass
from ortools.sat.python import cp_model
import logging
from typing import Any, Dict, List, Optional, Tuple
from core.state import ScheduleState
from exceptions.custom_errors import ScheduleInfeasibleError, SolverTimeLimitError
from schemas.schedule.report import InfeasibilityIssue
from utils.constants import SOLVER_SEED, SOLVER_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


@dataclass
class SolverResult:
    """Outcome of one solver phase."""

    solver: cp_model.CpSolver
    status: Any
    cached_values: Dict[Tuple[str, int], int]
    """Values of the work variables, keyed by `(employee_id, day_index)`."""
    low_penalty: float
    workload_gap: Optional[int]


def configure_solver(
    timeout: float = SOLVER_TIMEOUT_SECONDS, seed: int = SOLVER_SEED
) -> cp_model.CpSolver:
    """
    Configure a single-worker, fixed-seed solver so identical inputs give identical schedules.

    The limit is on deterministic time, so a run that stops early still stops
    at the same point.
    """
    solver = cp_model.CpSolver()
    solver.parameters.max_deterministic_time = timeout
    solver.parameters.random_seed = seed
    solver.parameters.num_workers = 1
    solver.parameters.randomize_search = False
    solver.parameters.log_search_progress = False
    return solver


def get_model_size(model: cp_model.CpModel) -> Tuple[int, int]:
    """Get the number of constraints and boolean variables in the model."""
    proto = model.Proto()
    num_constraints = len(proto.constraints)
    num_bool_vars = len(proto.variables)
    return num_constraints, num_bool_vars


def _cache_values(solver: cp_model.CpSolver, state: ScheduleState) -> Dict[Tuple[str, int], int]:
    return {key: solver.Value(var) for key, var in state.work.items()}


def run_phase1(
    model, state: ScheduleState, timeout: float = SOLVER_TIMEOUT_SECONDS, seed: int = SOLVER_SEED
) -> SolverResult:
    """
    Phase 1: check feasibility by maximizing the number of satisfied coverage flags.

    Every weekday/role quota has a flag; a flag the solver has to drop is a day
    that rest rules leave understaffed. All dropped flags are reported together.
    Dropped flags only count as infeasibility once the solver has proven its
    solution optimal; stopping at the time limit is reported as such.

    Raises:
        ScheduleInfeasibleError: If any coverage flag is dropped, or if the fixed
            Sunday/holiday picks already contradict the rest rules.
        SolverTimeLimitError: If the time limit is reached first.
    """
    logger.info("🚀 Phase 1: checking feasibility...")
    flags = [r.flag for r in state.hard_rules.values()]
    if flags:
        model.Maximize(sum(flags))

    num_constraints, num_bool_vars = get_model_size(model)
    logger.info(f"→ #constraints_p1 = {num_constraints},  #bool_vars = {num_bool_vars}")

    solver = configure_solver(timeout, seed)
    status = solver.Solve(model)
    logger.info(f"⏱ Solve time: {solver.WallTime():.2f} seconds")

    if status == cp_model.UNKNOWN:
        logger.info("⚠️ Phase 1 reached the time limit without a solution.")
        raise SolverTimeLimitError(timeout)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        logger.info(f"⚠️ Phase 1 status: {solver.StatusName(status)}")
        raise ScheduleInfeasibleError.single(
            "Sunday/holiday rotation cannot be combined with the rest rules "
            f"(max {state.rules.rest.max_consecutive_days} consecutive days, "
            f"{state.weekly_rest_days} rest day(s) per week).",
            rule_id=state.rules.rest.id,
        )

    dropped: List[InfeasibilityIssue] = [
        r.issue for r in state.hard_rules.values() if solver.Value(r.flag) == 0
    ]
    logger.info(f"Satisfied coverage flags: {len(flags) - len(dropped)}/{len(flags)}")
    if dropped:
        if status != cp_model.OPTIMAL:
            logger.info("⚠️ Phase 1 stopped at the time limit with coverage flags unproven.")
            raise SolverTimeLimitError(timeout)
        logger.info("⚠️ No feasible schedule found with the current roster and rules.")
        raise ScheduleInfeasibleError(sorted(dropped, key=lambda i: (i.date, i.role)))

    logger.info("✅ Feasible schedule found.")
    low_penalty = solver.Value(sum(state.low_priority_penalty)) if state.low_priority_penalty else 0
    gap = solver.Value(state.gap) if state.gap is not None else None
    return SolverResult(solver, status, _cache_values(solver, state), low_penalty, gap)


def run_phase2(
    model,
    state: ScheduleState,
    p1: SolverResult,
    timeout: float = SOLVER_TIMEOUT_SECONDS,
    seed: int = SOLVER_SEED,
) -> SolverResult:
    """
    Phase 2: minimize low-priority penalties (preferred days off, workload gap)
    while keeping every coverage flag satisfied.
    """
    logger.info("🚀 Phase 2: optimizing days off and workload balance...")

    flags = [r.flag for r in state.hard_rules.values()]
    if flags:
        model.Add(sum(flags) == len(flags))

    model.Minimize(sum(state.low_priority_penalty))

    num_constraints, num_bool_vars = get_model_size(model)
    logger.info(f"→ #constraints_p2 = {num_constraints},  #bool_vars = {num_bool_vars}")

    # Re-solve with Phase 1 solution as a hint
    for key, val in p1.cached_values.items():
        model.AddHint(state.work[key], val)

    solver = configure_solver(timeout, seed)
    status = solver.Solve(model)
    logger.info(f"⏱ Solve time: {solver.WallTime():.2f} s")

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        return SolverResult(solver, status, {}, 0, None)

    low_penalty = solver.ObjectiveValue()
    gap = solver.Value(state.gap) if state.gap is not None else None
    logger.info(f"Low Priority Penalty Phase 2: {low_penalty}")
    return SolverResult(solver, status, _cache_values(solver, state), low_penalty, gap)
