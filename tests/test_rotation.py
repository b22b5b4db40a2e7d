import pytest
from core.rotation import RotationState, build_rotation_arena
from scheduler.setup import assign_rotation_days, classify_days
from schemas.schedule.rules import RuleSet
from tests.factories import make_employee, sunday_rule, sunday_stocker, weekday_rule

NAMES = ["Ana", "Bruno", "Carla", "Diego", "Elisa", "Flavia"]


def occurrences(state: RotationState, count: int):
    worked = []
    for _ in range(count):
        worked.append(state.working)
        state.advance()
    return worked


def stockers(count, pattern="2x2"):
    return [sunday_stocker(f"s{i + 1}", NAMES[i], pattern=pattern) for i in range(count)]


def rotation_series(team, quota, months=((1, 2026), (3, 2026))):
    """Worked flag per Sunday/holiday occurrence for each stocker, over a fresh arena per month."""
    rules = RuleSet.from_rules([weekday_rule(leaders=0), sunday_rule(stockers=quota)])
    series = {e.id: [] for e in team}
    all_issues = []
    for month, year in months:
        days = classify_days(year, month, [])
        assignments, issues = assign_rotation_days(days, team, rules, build_rotation_arena(team))
        all_issues.extend(issues)
        for day in days:
            if day.shift_type == "weekday":
                continue
            for e in team:
                series[e.id].append(e.id in assignments[day.index])
    return series, all_issues


def worked_blocks(worked):
    """Lengths of the runs of consecutive worked occurrences."""
    runs, run = [], 0
    for w in worked:
        if w:
            run += 1
        elif run:
            runs.append(run)
            run = 0
    if run:
        runs.append(run)
    return runs


def test_two_by_two_alternates_blocks_of_two():
    assert occurrences(RotationState.from_phase(2, 0), 8) == [True, True, False, False] * 2


def test_one_by_one_alternates():
    assert occurrences(RotationState.from_phase(1, 1), 4) == [False, True, False, True]


def test_phase_wraps_around_cycle():
    a = RotationState.from_phase(2, 1)
    b = RotationState.from_phase(2, 5)
    assert (a.working, a.remaining) == (b.working, b.remaining)


def test_arena_staggers_same_pattern_by_whole_blocks():
    team = [
        sunday_stocker("s4", "Diego"),
        sunday_stocker("s1", "Ana"),
        sunday_stocker("s3", "Carla"),
        sunday_stocker("s2", "Bruno"),
        sunday_stocker("s5", "Elisa", pattern="1x1"),
        make_employee("l1", "Leo", role="leader", works_sunday=True, sunday_pattern="2x2"),
        make_employee("s6", "Gabi", works_sunday=False, sunday_pattern="2x2"),
    ]
    arena = build_rotation_arena(team)

    assert set(arena) == {"s1", "s2", "s3", "s4", "s5"}
    series = {emp_id: occurrences(state, 8) for emp_id, state in arena.items()}
    for i in range(8):
        assert sum(series[e][i] for e in ("s1", "s2", "s3", "s4")) == 2
    assert series["s1"] == series["s3"] == [True, True, False, False] * 2
    assert series["s2"] == series["s4"] == [False, False, True, True] * 2
    assert series["s5"][:2] == [True, False]


def test_two_by_two_pair_covers_alternate_blocks():
    arena = build_rotation_arena(stockers(2))
    assert occurrences(arena["s1"], 4) == [True, True, False, False]
    assert occurrences(arena["s2"], 4) == [False, False, True, True]


def test_one_by_one_pair_alternates():
    arena = build_rotation_arena(stockers(2, pattern="1x1"))
    assert occurrences(arena["s1"], 4) == [True, False, True, False]
    assert occurrences(arena["s2"], 4) == [False, True, False, True]


@pytest.mark.parametrize(
    "count, pattern, quota",
    [
        (2, "2x2", 1),
        (4, "2x2", 2),
        (6, "2x2", 3),
        (2, "1x1", 1),
        (4, "1x1", 2),
    ],
)
def test_balanced_groups_meet_quota_in_contiguous_blocks(count, pattern, quota):
    block = int(pattern[0])
    series, issues = rotation_series(stockers(count, pattern), quota)

    assert issues == []
    length = len(next(iter(series.values())))
    for i in range(length):
        assert sum(worked[i] for worked in series.values()) == quota
    for worked in series.values():
        for start in range(length - 2 * block + 1):
            window = worked[start : start + 2 * block]
            assert sum(window) == block
        assert all(run == block for run in worked_blocks(worked)[1:-1])


@pytest.mark.parametrize("count, quota", [(3, 1), (5, 2), (5, 1)])
def test_surplus_stockers_sit_out_whole_blocks(count, quota):
    series, issues = rotation_series(stockers(count), quota)

    assert issues == []
    length = len(next(iter(series.values())))
    for i in range(length):
        assert sum(worked[i] for worked in series.values()) == quota
    for worked in series.values():
        runs = worked_blocks(worked)
        assert all(run <= 2 for run in runs)
        assert all(run == 2 for run in runs[1:-1])


def test_fifth_stocker_rests_through_both_blocks():
    series, _ = rotation_series(stockers(5), 2, months=((2, 2026),))

    assert series == {
        "s1": [True, True, False, False],
        "s2": [False, False, True, True],
        "s3": [True, True, False, False],
        "s4": [False, False, True, True],
        "s5": [False, False, False, False],
    }


def test_too_few_stockers_report_every_short_occurrence():
    _, issues = rotation_series(stockers(3), 2, months=((2, 2026),))

    assert [(i.date.day, i.available) for i in issues] == [(15, 1), (22, 1)]
    assert all(i.role == "stocker" and i.required == 2 for i in issues)
