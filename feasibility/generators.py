"""Random task set generators for tests and experiments."""

import math
import random
from typing import List, Optional

from feasibility.models import PriorityKey, Task, TaskSet


def uunifast(
    n: int,
    u_total: float,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[float]:
    """Split a total utilization into ``n`` task utilizations (UUniFast).

    The split is uniform over the simplex of shares summing to ``u_total``.

    Reference:
    Bini, E., & Buttazzo, G. C. (2005). Measuring the performance of schedulability tests.
    Real-Time Systems, 30(1-2), 129-154.

    Args:
        n: Number of tasks.
        u_total: Total utilization to split. Values above 1 give overloaded
            sets; values above ``n`` are rejected.
        seed: Seed for a private random stream; ignored when ``rng`` is given.
        rng: Random stream to draw from, shared with the caller.

    Raises:
        ValueError: If n <= 0, u_total < 0 or u_total > n.
    """
    if n <= 0:
        raise ValueError("Number of tasks must be positive")
    if u_total < 0:
        raise ValueError("Target utilization must be non-negative")
    if u_total > n:
        raise ValueError(f"Target utilization {u_total} exceeds {n} fully loaded tasks")
    if rng is None:
        rng = random.Random(seed)

    shares = []
    remaining = u_total
    for still_to_split in range(n - 1, 0, -1):
        rest = remaining * rng.random() ** (1.0 / still_to_split)
        shares.append(remaining - rest)
        remaining = rest
    shares.append(remaining)
    return shares


def generate_taskset(
    n: int,
    target_utilization: float,
    period_min: float = 10.0,
    period_max: float = 1000.0,
    deadline_factor_min: float = 1.0,
    deadline_factor_max: float = 1.0,
    integral: bool = False,
    key: PriorityKey = PriorityKey.PERIOD,
    seed: Optional[int] = None,
) -> TaskSet:
    """Generate a random priority-ordered task set.

    Periods are log-uniform in [period_min, period_max]; execution times
    follow the UUniFast utilizations. The result is sorted by ``key``, so it
    is ready for rate-monotonic (PERIOD) or deadline-monotonic (DEADLINE)
    analysis.

    Args:
        n: Number of tasks to generate.
        target_utilization: Target total utilization.
        period_min: Minimum task period.
        period_max: Maximum task period.
        deadline_factor_min: Minimum ratio D/T (1.0 means D=T).
        deadline_factor_max: Maximum ratio D/T (1.0 means D=T).
        integral: Round periods, execution times and deadlines to integers
            (execution times to at least 1), which makes every test's
            arithmetic exact.
        key: Priority order of the returned set.
        seed: Random seed for reproducibility.

    Returns:
        A TaskSet with n tasks.

    Raises:
        ValueError: If parameters are invalid.
    """
    if period_min <= 0 or period_max <= 0 or period_min > period_max:
        raise ValueError("Invalid period range")
    if deadline_factor_min <= 0 or deadline_factor_max < deadline_factor_min:
        raise ValueError("Invalid deadline factor range")

    rng = random.Random(seed)
    utilizations = uunifast(n, target_utilization, rng=rng)

    log_min = math.log(period_min)
    log_max = math.log(period_max)

    tasks = []
    for i, u in enumerate(utilizations):
        T = math.exp(rng.uniform(log_min, log_max))
        if integral:
            T = max(1, round(T))

        C = u * T
        if integral:
            C = max(1, round(C))
        elif C <= 0:
            # UUniFast can hand out an (almost) zero share
            C = 1e-6 * T

        if deadline_factor_min == deadline_factor_max:
            deadline_factor = deadline_factor_min
        else:
            deadline_factor = rng.uniform(deadline_factor_min, deadline_factor_max)
        D = T * deadline_factor
        if integral:
            D = max(1, round(D))

        tasks.append(Task(period=T, wcet=C, deadline=D, name=f"tau{i + 1}"))

    return TaskSet.ordered_by(tasks, key)
