"""Sufficient feasibility bound for deadline-monotonic priorities.

For each task i, with tasks sorted by ascending deadline, the demand of
higher-priority releases inside the task's own deadline window is charged
against that window:

    I_i   = sum_{j < i} ceil(D_i / T_j) * C_j
    lhs_i = (C_i + I_i) / D_i

The set passes when lhs_i <= 1 for every task. Passing proves feasibility
under DM; failing proves nothing.
"""

from typing import List

from feasibility.analysis import ceil_ratio
from feasibility.log import get_logger
from feasibility.models import TaskSet

LOGGER = get_logger("deadline_monotonic")


def dm_quick_ratios(taskset: TaskSet) -> List[float]:
    """Return the normalized demand lhs_i of every task, in priority order."""
    ratios = []
    for i, task in enumerate(taskset):
        interference = sum(
            ceil_ratio(task.deadline, hp.period) * hp.wcet
            for hp in taskset.higher_priority(i)
        )
        ratios.append((task.wcet + interference) / task.deadline)
    return ratios


def dm_quick_test(taskset: TaskSet) -> bool:
    """Deadline-monotonic quick test (sufficient only).

    The task set must already be in ascending-deadline order. An empty
    task set is trivially feasible.
    """
    for i, lhs in enumerate(dm_quick_ratios(taskset)):
        if lhs > 1.0:
            LOGGER.debug("task %d: normalized demand %f exceeds 1.0", i, lhs)
            return False
    return True
