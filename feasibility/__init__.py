"""Feasibility tests for fixed-priority periodic task sets.

This package decides whether every task of a single-processor, periodic,
priority-ordered task set always meets its deadline, using the
Liu & Layland bound, the exact completion-time and scheduling-point tests,
the 100% utilization test for dynamic priorities, and a sufficient
deadline-monotonic bound.
"""

from feasibility.errors import ConfigError, EmptyTaskSetError, FeasibilityError, InvalidTaskError
from feasibility.models import PriorityKey, Task, TaskSet
from feasibility.analysis import completion_time_test, compute_response_time, response_times
from feasibility.scheduling_point import scheduling_point_test, scheduling_points
from feasibility.utilization import rm_least_upper_bound, utilization_100_test, utilization_bound_test
from feasibility.deadline_monotonic import dm_quick_ratios, dm_quick_test
from feasibility.battery import FEASIBILITY_TESTS, run_battery

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "EmptyTaskSetError",
    "FeasibilityError",
    "InvalidTaskError",
    "PriorityKey",
    "Task",
    "TaskSet",
    "completion_time_test",
    "compute_response_time",
    "response_times",
    "scheduling_point_test",
    "scheduling_points",
    "rm_least_upper_bound",
    "utilization_100_test",
    "utilization_bound_test",
    "dm_quick_ratios",
    "dm_quick_test",
    "FEASIBILITY_TESTS",
    "run_battery",
]
