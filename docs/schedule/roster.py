schedule_roster_description = """
Generate one month of shifts for the store team, respecting holidays, the Sunday/holiday rotation and rest rules

### Request Body

- `month`: Target month (1-12)
- `year`: Target year (1583 or later)

- `employees`: List of `Employee` objects, which contain the following information:
    - `id`: Primary key of the employee

    - `name`: Name of the employee
    - `role`: `leader` or `stocker`
    - `active`: Whether the employee is scheduled at all (default `true`)
    - `fixedSchedule`: Whether the employee always works the same weekday hours
    - `fixedStart` / `fixedEnd`: Weekday hours (`HH:MM`) when `fixedSchedule` is `true`
    - `worksSunday`: Whether the employee may work Sundays and holidays
    - `sundayPattern`: `1x1`, `2x2` or `0x0` (works N Sunday/holiday occurrences, then rests N)

- `rules`: List of rules, each selected by its `kind`. The first active rule of each kind is used:
    - `weekday_shift`: `start`, `end`, `quotas` (`[{role, quantity}]`), `hasLunch`, `allowedStarts`
    - `sunday_holiday_shift`: `start`, `end`, `quotas`
    - `lunch`: `durationMinutes`, `minOnFloor`, `windows` (`"HH:MM-HH:MM"` or `{start, end}`)
    - `rest`: `minRestHours`, `maxConsecutiveDays`, `weeklyContractHours`
    - `day_off`: `preferredWeekdays` (0 = Monday ... 5 = Saturday)

    A `weekday_shift` and a `sunday_holiday_shift` rule are required. Lunch, rest and day-off rules fall back to defaults.

- `holidays`: List of `Holiday` objects (`date`, `name`, `scope`, `level`). (Optional)
    When omitted, the holidays of `year` are resolved from the holiday sources.

The API endpoint returns a JSON object with the following keys:

- `assignments`: Shifts sorted by date, then employee name:
    - `date`, `employeeId`, `employeeName`

    - `start` / `end`: Shift hours (`HH:MM`)
    - `shiftType`: `weekday`, `sunday` or `holiday`
    - `hasLunch`, `lunchStart`, `lunchEnd`
- `schedule`: One row per employee with `id`, `name` and one column per day (`HH:MM-HH:MM` or `REST`).
- `summary`: One row per employee with days worked per shift type, rest days and worked hours.

The API endpoint returns a status code of 400 if the input is invalid (including a malformed body, such as an unknown rule `kind` or a time that is not `HH:MM`), a status code of 503 if the solver time limit is reached before coverage is confirmed, and a status code of 422 with `{message, issues}` if no feasible schedule exists. Each issue names the date, employee, rule and reason where known.
"""
