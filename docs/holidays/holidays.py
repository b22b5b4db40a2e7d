list_holidays_description = """
List the national and state holidays of a year, sorted by date

### Parameters

- `year`: Year to resolve (1583 or later)
- `month`: Only holidays of this month (Optional)
- `stored`: Read the synchronized holidays instead of resolving them (default `false`)

Each holiday has `date`, `name`, `scope` (`national` or `state`) and `level` (`mandatory` or `optional`). When every remote source fails, the static list is returned: fixed-date holidays plus Good Friday, Carnival and Corpus Christi.
"""

sync_holidays_description = """
Replace the stored holidays of a year with freshly resolved ones

### Request Body

- `year`: Year to synchronize (1583 or later)

Returns `{message, count, errors}`. A holiday that cannot be stored is listed in `errors` without stopping the others. Returns a status code of 500 with `{message, errors}` when the year cannot be cleared.
"""
