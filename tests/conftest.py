from datetime import date
import pytest
from schemas.holidays.holiday import Holiday
from tests.factories import (
    day_off_rule,
    lunch_rule,
    make_employee,
    rest_rule,
    sunday_rule,
    sunday_stocker,
    weekday_rule,
)


@pytest.fixture
def store_rules():
    """The store's standard rule set: 07:00-15:20 weekdays, 07:00-13:00 Sundays/holidays."""
    return [weekday_rule(), sunday_rule(), lunch_rule(), rest_rule(), day_off_rule()]


@pytest.fixture
def january_holidays():
    return [Holiday(date=date(2026, 1, 1), name="Confraternização Universal")]


@pytest.fixture
def store_team():
    """Two leaders (one on fixed hours) and four 2x2 stockers."""
    return [
        make_employee("l1", "Eduardo", role="leader"),
        make_employee(
            "l2",
            "Fernanda",
            role="leader",
            fixed_schedule=True,
            fixed_start="10:00",
            fixed_end="19:20",
        ),
        sunday_stocker("s1", "Ana"),
        sunday_stocker("s2", "Bruno"),
        sunday_stocker("s3", "Carla"),
        sunday_stocker("s4", "Diego"),
    ]
