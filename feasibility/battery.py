"""Named registry of the feasibility tests.

Every entry takes ``(taskset, key)`` where ``key`` is the priority key the
set was sorted by. Only the scheduling-point test uses it, to choose its
search window.
"""

from collections import OrderedDict
from typing import Callable, Dict, Iterable, Optional

from feasibility.analysis import completion_time_test
from feasibility.deadline_monotonic import dm_quick_test
from feasibility.models import PriorityKey, TaskSet
from feasibility.scheduling_point import scheduling_point_test
from feasibility.utilization import utilization_100_test, utilization_bound_test

FeasibilityTest = Callable[[TaskSet, PriorityKey], bool]

FEASIBILITY_TESTS: "OrderedDict[str, FeasibilityTest]" = OrderedDict([
    ("lub", lambda taskset, key: utilization_bound_test(taskset)),
    ("completion", lambda taskset, key: completion_time_test(taskset)),
    ("scheduling-point", scheduling_point_test),
    ("utilization-100", lambda taskset, key: utilization_100_test(taskset)),
    ("dm-quick", lambda taskset, key: dm_quick_test(taskset)),
])

TEST_LABELS: Dict[str, str] = {
    "lub": "RM LUB",
    "completion": "CT test",
    "scheduling-point": "SP test",
    "utilization-100": "EDF/LLF 100% test",
    "dm-quick": "DM quick test",
}


def run_battery(
    taskset: TaskSet,
    key: PriorityKey = PriorityKey.PERIOD,
    names: Optional[Iterable[str]] = None,
) -> Dict[str, bool]:
    """Run the named tests (all by default) and return their verdicts in order."""
    if names is None:
        names = FEASIBILITY_TESTS.keys()
    verdicts = {}
    for name in names:
        if name not in FEASIBILITY_TESTS:
            raise KeyError(f"Unknown feasibility test {name!r}")
        verdicts[name] = FEASIBILITY_TESTS[name](taskset, key)
    return verdicts
