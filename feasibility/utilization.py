"""Utilization-based feasibility tests.

Two tests share the same utilization sum U = sum_i C_i / T_i:

    - Liu & Layland least upper bound (sufficient, fixed priority):
          U <= n * (2^(1/n) - 1)
    - 100% bound (necessary and sufficient, dynamic priority EDF/LLF):
          U <= 1

The LLUB is only sufficient. A set that fails it may still be schedulable
under rate-monotonic priorities; only the exact tests in
:mod:`feasibility.analysis` and :mod:`feasibility.scheduling_point` can
show infeasibility.
"""

from feasibility.errors import EmptyTaskSetError
from feasibility.log import get_logger
from feasibility.models import TaskSet

LOGGER = get_logger("utilization")


def rm_least_upper_bound(n: int) -> float:
    """Return the Liu & Layland utilization bound for ``n`` tasks.

    LUB(1) = 1.0, LUB(2) ~ 0.8284, LUB(3) ~ 0.7798, decreasing towards ln 2.

    Raises:
        EmptyTaskSetError: If ``n`` is zero.
        ValueError: If ``n`` is negative.
    """
    if n == 0:
        raise EmptyTaskSetError("The utilization bound is undefined for zero tasks")
    if n < 0:
        raise ValueError(f"Number of tasks must be positive, got {n}")
    return n * (2.0 ** (1.0 / n) - 1.0)


def utilization_bound_test(taskset: TaskSet) -> bool:
    """Rate-monotonic least upper bound test (sufficient only).

    An empty task set is trivially feasible.
    """
    if len(taskset) == 0:
        return True

    for idx, task in enumerate(taskset):
        LOGGER.debug("task %d: wcet=%s, period=%s, utilization=%f",
                     idx, task.wcet, task.period, task.utilization)
    utility_sum = taskset.total_utilization

    lub = rm_least_upper_bound(len(taskset))
    LOGGER.debug("utility_sum=%f, LUB(%d)=%f", utility_sum, len(taskset), lub)
    return utility_sum <= lub


def utilization_100_test(taskset: TaskSet) -> bool:
    """Total utilization at most 100%.

    Necessary and sufficient for EDF or LLF scheduling; for fixed-priority
    scheduling it is only a necessary condition.
    """
    utility_sum = taskset.total_utilization
    LOGGER.debug("utility_sum=%f against 1.0", utility_sum)
    return utility_sum <= 1.0
