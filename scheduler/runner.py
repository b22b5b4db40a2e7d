from ortools.sat.python import cp_model
from core.state import ScheduleState
from utils.constants import SOLVER_SEED, SOLVER_TIMEOUT_SECONDS
from .solver import SolverResult, run_phase1, run_phase2
import logging

logger = logging.getLogger(__name__)


def solve_schedule(
    model: cp_model.CpModel,
    state: ScheduleState,
    timeout: float = SOLVER_TIMEOUT_SECONDS,
    seed: int = SOLVER_SEED,
) -> SolverResult:
    """
    Solve the weekday staffing problem in two phases.

    Phase 1 checks that every weekday quota can be met under the rest rules.
    Phase 2 places rest days on preferred weekdays and balances workload, with
    all quotas held. Phase 1's solution is kept if Phase 2 fails.

    Args:
        model (cp_model.CpModel): The CP model.
        state (ScheduleState): The state of the scheduling problem.
        timeout (float): Time limit per phase, in seconds.
        seed (int): Solver random seed.

    Returns:
        SolverResult: The best result found.

    Raises:
        ScheduleInfeasibleError: From phase 1, when some weekday cannot be staffed.
        SolverTimeLimitError: From phase 1, when the time limit is reached first.
    """
    # Run Phase 1
    p1 = run_phase1(model, state, timeout, seed)
    best_result = p1

    # Only run phase 2 if a low priority penalty exists
    if state.low_priority_penalty:
        p2 = run_phase2(model, state, p1, timeout, seed)

        if p2.status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
            logger.info("⚠️ Phase 2 failed: using fallback Phase 1 solution.")
            logger.info(f"Solver Phase 2 status: {p2.solver.StatusName(p2.status)}")
        else:
            logger.info("▶️ Phase 2 complete")
            best_result = p2

    else:
        logger.info("⏭️ Skipping Phase 2: no day-off preferences or balance to optimise.")

    if best_result.workload_gap is not None:
        logger.info(f"📈 Workload gap (busiest - idlest stocker) = {best_result.workload_gap} day(s)")
    return best_result
