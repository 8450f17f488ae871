"""Scheduling-point feasibility test (Lehoczky, Sha & Ding).

Under a critical instant every task is released at time zero. Task i
meets its deadline iff the processor can supply its cumulative demand at
some scheduling point t inside its window W_i:

    exists t in S_i:  sum_{j <= i} C_j * ceil(t / T_j) <= t

    S_i = { l * T_k : k <= i, l = 1 .. floor(W_i / T_k) }  U  { W_i }

The window is the task's period for the classical rate-monotonic check and
its deadline for deadline-monotonic ordering. The window end belongs to
S_i so that a task whose window is shorter than every relevant period
still has a point to test.

A point with demand <= t passes. A task fails only after every point in
its window has been tried without success.
"""

from typing import List

from feasibility.analysis import ceil_ratio, floor_ratio
from feasibility.log import get_logger
from feasibility.models import PriorityKey, TaskSet

LOGGER = get_logger("scheduling_point")


def cumulative_demand(taskset: TaskSet, index: int, t: float) -> float:
    """Processor demand at time ``t`` of the tasks at positions ``0..index``."""
    return sum(
        task.wcet * ceil_ratio(t, task.period)
        for task in taskset.tasks[:index + 1]
    )


def scheduling_points(
    taskset: TaskSet,
    index: int,
    key: PriorityKey = PriorityKey.DEADLINE,
) -> List[float]:
    """Return the sorted scheduling points of the task at ``index``."""
    window = key.of(taskset[index])
    points = {window}
    for task in taskset.tasks[:index + 1]:
        for l in range(1, floor_ratio(window, task.period) + 1):
            points.add(l * task.period)
    return sorted(points)


def _task_feasible(taskset: TaskSet, index: int, key: PriorityKey) -> bool:
    for t in scheduling_points(taskset, index, key):
        demand = cumulative_demand(taskset, index, t)
        if demand <= t:
            LOGGER.debug("task %d: demand %s fits at t=%s", index, demand, t)
            return True
    LOGGER.debug("task %d: demand exceeds supply at every scheduling point", index)
    return False


def scheduling_point_test(
    taskset: TaskSet,
    key: PriorityKey = PriorityKey.DEADLINE,
) -> bool:
    """Exact scheduling-point feasibility test.

    Args:
        taskset: The priority-ordered task set.
        key: Which task attribute bounds each task's search window;
            ``PriorityKey.PERIOD`` for rate-monotonic analysis with
            implicit deadlines, ``PriorityKey.DEADLINE`` otherwise.

    Returns:
        True if every task has a passing scheduling point. An empty task
        set is trivially feasible.
    """
    rc = True
    for i in range(len(taskset)):
        if not _task_feasible(taskset, i, key):
            rc = False
    return rc
