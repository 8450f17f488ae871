"""Built-in example task sets.

Implicit-deadline sets are listed in rate-monotonic order. ``ex6`` is the
deadline-monotonic example and is listed in ascending-deadline order.
"""

from typing import Dict

from feasibility.models import PriorityKey, TaskSet

EXAMPLES: Dict[str, TaskSet] = {
    # U=0.7333
    "ex0": TaskSet.from_sequences(periods=[2, 10, 15], wcets=[1, 1, 2]),
    # U=0.9857
    "ex1": TaskSet.from_sequences(periods=[2, 5, 7], wcets=[1, 1, 2]),
    # U=0.9967
    "ex2": TaskSet.from_sequences(periods=[2, 5, 7, 13], wcets=[1, 1, 1, 2]),
    # U=0.93
    "ex3": TaskSet.from_sequences(periods=[3, 5, 15], wcets=[1, 2, 3]),
    # U=1.0, harmonic
    "ex4": TaskSet.from_sequences(periods=[2, 4, 16], wcets=[1, 1, 4]),
    # U=1.0
    "ex5": TaskSet.from_sequences(periods=[2, 5, 10], wcets=[1, 2, 1]),
    # U=0.9967, D != T
    "ex6": TaskSet.from_sequences(
        periods=[2, 5, 7, 13], wcets=[1, 1, 1, 2], deadlines=[2, 3, 7, 15]
    ),
    # U=1.0
    "ex7": TaskSet.from_sequences(periods=[3, 5, 15], wcets=[1, 2, 4]),
    # U=0.9967
    "ex8": TaskSet.from_sequences(periods=[2, 5, 7, 13], wcets=[1, 1, 1, 2]),
    # U=1.0
    "ex9": TaskSet.from_sequences(periods=[6, 8, 12, 24], wcets=[1, 2, 4, 6]),
}

# Sorting key each example was ordered by
EXAMPLE_POLICIES: Dict[str, PriorityKey] = {
    name: PriorityKey.DEADLINE if name == "ex6" else PriorityKey.PERIOD
    for name in EXAMPLES
}


def example_utilization_percent(taskset: TaskSet) -> float:
    """Total utilization as a percentage."""
    return taskset.total_utilization * 100.0


def describe_taskset(taskset: TaskSet) -> str:
    """One-line parameter summary, e.g. ``C1=1, C2=2; T1=3, T2=5; T=D``."""
    if len(taskset) == 0:
        return "no tasks"
    wcets = ", ".join(f"C{i + 1}={t.wcet:g}" for i, t in enumerate(taskset))
    periods = ", ".join(f"T{i + 1}={t.period:g}" for i, t in enumerate(taskset))
    if all(t.deadline == t.period for t in taskset):
        return f"{wcets}; {periods}; T=D"
    deadlines = ", ".join(f"D{i + 1}={t.deadline:g}" for i, t in enumerate(taskset))
    return f"{wcets}; {periods}; {deadlines}"
