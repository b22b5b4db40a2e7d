"""
core
----

Core scheduling engine components:

- HardRule & define_coverage_rules:
  One relaxable coverage flag per (day, role) headcount quota, so an infeasible
  month can report exactly which days and roles could not be staffed.

- ConstraintManager:
  Register and apply constraint functions in a controlled sequence.

- RotationState & build_rotation_arena:
  Per-employee Sunday/holiday rotation counters, kept outside the employee
  records and discarded at the end of a run.

- ScheduleState:
  Encapsulate all inputs, parameters, and intermediate collections needed to build
  and solve the monthly shift scheduling problem.
"""
