"""Completion-time (response-time) analysis for fixed-priority scheduling.

This module implements the exact completion-time test of Joseph & Pandya
for fixed-priority preemptive scheduling on a single processor.

Recurrence for task i (index 0 = highest priority):
    R_i^(0)   = sum_{j <= i} C_j
    R_i^(k+1) = C_i + sum_{j < i} ceil(R_i^(k) / T_j) * C_j

where:
    - R_i^(k) is the response time estimate at iteration k
    - C_j is the worst-case execution time of task j
    - T_j is the period of task j

The iteration continues until either:
    1. Convergence: R_i^(k+1) = R_i^(k)
    2. Deadline miss: R_i^(k+1) > D_i

The sequence is non-decreasing, so the deadline check also bounds the
number of iterations when the higher-priority load is 100% or more.

Only the position of each task and its own deadline are consulted. The
same functions give rate-monotonic results for a set sorted by period and
deadline-monotonic results for a set sorted by deadline.
"""

from typing import Dict, Optional
import math

from feasibility.log import get_logger
from feasibility.models import TaskSet

LOGGER = get_logger("analysis")

# Relative tolerance for snapping a quotient to an integer. It absorbs the
# rounding error of one multiplication and one division, nothing more.
RATIO_REL_TOL = 1e-12


def _snapped_ratio(a: float, b: float):
    q = a / b
    nearest = round(q)
    if math.isclose(q, nearest, rel_tol=RATIO_REL_TOL):
        return nearest
    return q


def ceil_ratio(a: float, b: float) -> int:
    """Number of releases of a task with period ``b`` within an interval ``a``.

    A quotient that differs from an integer only by floating-point noise
    counts as that integer, so ``(l * T) / T`` is not rounded up.
    """
    return math.ceil(_snapped_ratio(a, b))


def floor_ratio(a: float, b: float) -> int:
    """Number of whole periods ``b`` that fit in ``a``, snapped like :func:`ceil_ratio`."""
    return math.floor(_snapped_ratio(a, b))


def compute_response_time(taskset: TaskSet, index: int) -> Optional[float]:
    """Compute the worst-case response time of the task at ``index``.

    Args:
        taskset: The priority-ordered task set.
        index: Position of the task to analyze.

    Returns:
        The converged worst-case response time if it is <= D,
        None if the task is unschedulable (an iterate exceeds D).
    """
    task = taskset[index]
    hp_tasks = taskset.higher_priority(index)

    # Initial estimate: every task of equal or higher priority runs once
    R_prev = task.wcet + math.fsum(hp.wcet for hp in hp_tasks)
    if R_prev > task.deadline:
        LOGGER.debug("task %d: initial demand %s exceeds deadline %s",
                     index, R_prev, task.deadline)
        return None

    while True:
        # Interference from every release of a higher-priority task within R_prev
        interference = 0.0
        for hp_task in hp_tasks:
            num_preemptions = ceil_ratio(R_prev, hp_task.period)
            interference += num_preemptions * hp_task.wcet

        R_new = task.wcet + interference
        LOGGER.debug("task %d: R=%s -> %s", index, R_prev, R_new)

        if R_new > task.deadline:
            LOGGER.debug("task %d: response time %s exceeds deadline %s",
                         index, R_new, task.deadline)
            return None

        # Same release counts give the same sum, so the fixed point is exact
        if R_new <= R_prev:
            return R_new

        R_prev = R_new


def response_times(taskset: TaskSet) -> Dict[str, Optional[float]]:
    """Return the worst-case response time of every task, keyed by task name.

    Unschedulable tasks map to None.
    """
    return {
        taskset.task_name(i): compute_response_time(taskset, i)
        for i in range(len(taskset))
    }


def completion_time_test(taskset: TaskSet) -> bool:
    """Exact completion-time feasibility test.

    A task set is feasible if every task's response time converges at or
    before its deadline. An empty task set is trivially feasible.
    """
    set_feasible = True
    for i in range(len(taskset)):
        if compute_response_time(taskset, i) is None:
            set_feasible = False
    return set_feasible
