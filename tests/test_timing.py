from datetime import date, time
from core.state import DayInfo
from scheduler.extractor import build_schedule_frames
from scheduler.timing import DraftShift, enforce_rest, place_lunches
from schemas.schedule.rules import LunchRule, RuleSet
from tests.factories import make_employee, rest_rule, sunday_rule, weekday_rule

MONDAY = DayInfo(0, date(2026, 1, 5), "weekday")
TUESDAY = DayInfo(1, date(2026, 1, 6), "weekday")


def rule_set(min_on_floor=2, windows=("11:00-13:00", "12:00-14:00")):
    return RuleSet.from_rules(
        [
            weekday_rule(),
            sunday_rule(),
            LunchRule(id="lunch", name="Almoço", min_on_floor=min_on_floor, windows=list(windows)),
            rest_rule(),
        ]
    )


def drafts_for(day, *names, start=time(7, 0), end=time(15, 20)):
    return [DraftShift(day, make_employee(f"e{i}", n), start, end) for i, n in enumerate(names)]


def test_lunch_windows_rotate_in_name_order():
    drafts = drafts_for(MONDAY, "Carla", "Ana", "Bruno", "Diego")
    assert place_lunches(drafts, rule_set()) == []

    lunches = {d.employee.name: (d.lunch_start, d.lunch_end) for d in drafts}
    assert lunches["Ana"] == (time(11, 0), time(12, 0))
    assert lunches["Bruno"] == (time(12, 0), time(13, 0))
    assert lunches["Carla"] == (time(11, 0), time(12, 0))
    assert lunches["Diego"] == (time(12, 0), time(13, 0))


def test_lunch_is_clipped_to_the_window():
    drafts = drafts_for(MONDAY, "Ana", "Bruno", "Carla")
    assert place_lunches(drafts, rule_set(min_on_floor=0, windows=("11:00-11:30",))) == []
    assert all(d.lunch_end == time(11, 30) for d in drafts)


def test_lunch_that_empties_the_floor_is_reported():
    drafts = drafts_for(MONDAY, "Ana", "Bruno")
    issues = place_lunches(drafts, rule_set(min_on_floor=2))

    assert {i.employee_id for i in issues} == {"e0", "e1"}
    assert all(i.rule_id == "lunch" and i.date == MONDAY.date for i in issues)


def test_lunch_must_fit_inside_the_shift():
    drafts = drafts_for(MONDAY, "Ana", "Bruno", "Carla", start=time(14, 0), end=time(22, 20))
    issues = place_lunches(drafts, rule_set(min_on_floor=0))
    assert len(issues) == 3


def test_rest_violation_without_allowed_starts_is_reported():
    rules = RuleSet.from_rules(
        [weekday_rule(start="13:00", end="21:20", allowed_starts=[]), sunday_rule(), rest_rule()]
    )
    emp = make_employee("e1", "Ana")
    drafts = [
        DraftShift(MONDAY, emp, time(13, 0), time(21, 20)),
        DraftShift(TUESDAY, emp, time(7, 0), time(15, 20)),
    ]
    issues = enforce_rest(drafts, rules)

    assert len(issues) == 1
    assert issues[0].employee_id == "e1"
    assert issues[0].date == MONDAY.date
    assert issues[0].conflicting_date == TUESDAY.date


def test_schedule_frames():
    emp = make_employee("e1", "Ana")
    other = make_employee("e2", "Bruno")
    drafts = [DraftShift(MONDAY, emp, time(7, 0), time(15, 20))]
    place_lunches(drafts, rule_set(min_on_floor=0))

    schedule_df, summary_df = build_schedule_frames(
        [d.to_assignment() for d in drafts], [MONDAY, TUESDAY], [emp, other]
    )

    assert list(schedule_df.index) == ["Ana", "Bruno"]
    assert schedule_df.loc["Ana", "Mon 2026-01-05"] == "07:00-15:20"
    assert schedule_df.loc["Ana", "Tue 2026-01-06"] == "REST"
    ana = summary_df.set_index("Employee").loc["Ana"]
    assert ana["Weekday"] == 1
    assert ana["REST"] == 1
    assert ana["Hours"] == round(440 / 60, 2)
