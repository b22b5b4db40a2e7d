import pytest
from ortools.sat.python import cp_model
from exceptions.custom_errors import ScheduleInfeasibleError, SolverTimeLimitError
from scheduler import solver as solver_module
from scheduler.setup import setup_model
from scheduler.solver import run_phase1
from schemas.schedule.rules import RuleSet
from tests.factories import make_employee, rest_rule, sunday_rule, sunday_stocker, weekday_rule


class StoppedSolver:
    """Stands in for CpSolver: returns a fixed status with every variable at 0."""

    def __init__(self, status):
        self.status = status

    def Solve(self, model):
        return self.status

    def WallTime(self):
        return 0.0

    def StatusName(self, status=None):
        return "stopped"

    def Value(self, var):
        return 0


@pytest.fixture
def small_month():
    team = [
        make_employee("l1", "Eduardo", role="leader"),
        sunday_stocker("s1", "Ana", pattern="1x1"),
        sunday_stocker("s2", "Bruno", pattern="1x1"),
    ]
    rules = RuleSet.from_rules(
        [weekday_rule(leaders=1, stockers=1, has_lunch=False), sunday_rule(stockers=1), rest_rule()]
    )
    model, state = setup_model(2, 2026, team, [], rules)
    assert state.issues == []
    return model, state


def stop_with(monkeypatch, status):
    monkeypatch.setattr(solver_module, "configure_solver", lambda timeout, seed: StoppedSolver(status))


def test_dropped_flags_at_time_limit_are_not_reported_as_infeasible(monkeypatch, small_month):
    stop_with(monkeypatch, cp_model.FEASIBLE)
    model, state = small_month

    with pytest.raises(SolverTimeLimitError) as exc:
        run_phase1(model, state, timeout=5)
    assert "5s" in str(exc.value)


def test_time_limit_without_any_solution(monkeypatch, small_month):
    stop_with(monkeypatch, cp_model.UNKNOWN)
    model, state = small_month

    with pytest.raises(SolverTimeLimitError):
        run_phase1(model, state, timeout=5)


def test_dropped_flags_of_a_proven_optimum_are_unmet_quotas(monkeypatch, small_month):
    stop_with(monkeypatch, cp_model.OPTIMAL)
    model, state = small_month

    with pytest.raises(ScheduleInfeasibleError) as exc:
        run_phase1(model, state, timeout=5)
    assert len(exc.value.issues) == len(state.hard_rules)
    assert {i.role for i in exc.value.issues} == {"leader", "stocker"}


def test_solved_month_returns_cached_values(small_month):
    model, state = small_month
    result = run_phase1(model, state)

    assert result.status == cp_model.OPTIMAL
    assert set(result.cached_values) == set(state.work)
