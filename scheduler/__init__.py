"""
scheduler
---------

Main scheduling module. Initializes key components:

- `setup`: Day classification, Sunday/holiday rotation and model construction.
- `runner`: Two-phase solving of weekday staffing.
- `timing`: Shift hours, rest between shifts and lunch placement.
- `builder`: The `generate_schedule` entry point tying them together.

Provides high-level access to core scheduling functionality.
"""
from . import builder, runner
from .builder import generate_schedule
