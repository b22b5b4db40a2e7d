"""
scheduler.rules
---------------

Exposes all scheduling constraints by importing from:

- `fixed`: Days an employee may never work, and the Sunday/holiday picks made by the rotation.
- `high`: Hard constraints (weekday headcount quotas, max consecutive days, weekly rest days).
- `low`: Low priority constraints (preferred days off, workload balance between stockers).

Allows unified access to all rule and constraint definitions via wildcard imports.
"""
from .fixed import *
from .high import *
from .low import *
