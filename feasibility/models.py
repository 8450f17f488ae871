"""Data models for tasks and task sets."""

import enum
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from feasibility.errors import InvalidTaskError


def _check_positive(task_name: str, label: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidTaskError(
            f"Task {task_name}: {label} must be a real number, got {value!r}"
        )
    if not math.isfinite(value) or value <= 0:
        raise InvalidTaskError(
            f"Task {task_name}: {label} must be positive and finite, got {value}"
        )


@dataclass(frozen=True)
class Task:
    """Represents a periodic task.

    Attributes:
        period: Release interval.
        wcet: Worst-case execution time per release.
        deadline: Relative deadline (defaults to period if not specified).
        name: Optional task identifier.
    """
    period: float
    wcet: float
    deadline: Optional[float] = None
    name: str = ""

    def __post_init__(self) -> None:
        """Validate task parameters."""
        _check_positive(self.name, "period", self.period)
        _check_positive(self.name, "wcet", self.wcet)

        # Set default deadline to period if not specified
        if self.deadline is None:
            object.__setattr__(self, 'deadline', self.period)
        else:
            _check_positive(self.name, "deadline", self.deadline)

    @property
    def utilization(self) -> float:
        """Return the utilization of this task (wcet/period)."""
        return self.wcet / self.period

    def __str__(self) -> str:
        name_str = f"{self.name}: " if self.name else ""
        return f"Task({name_str}T={self.period}, C={self.wcet}, D={self.deadline})"


class PriorityKey(enum.Enum):
    """Task attribute that orders a fixed-priority policy.

    ``PERIOD`` gives rate-monotonic order, ``DEADLINE`` deadline-monotonic.
    """
    PERIOD = "period"
    DEADLINE = "deadline"

    def of(self, task: Task) -> float:
        return getattr(task, self.value)

    @classmethod
    def for_policy(cls, policy: str) -> "PriorityKey":
        """Map a policy abbreviation (``rm`` or ``dm``) to its key."""
        policies = {"rm": cls.PERIOD, "dm": cls.DEADLINE}
        try:
            return policies[policy.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown policy {policy!r}, expected 'rm' or 'dm'") from None


@dataclass(frozen=True)
class TaskSet:
    """An immutable, priority-ordered sequence of tasks.

    Position encodes priority: index 0 is the highest priority task. The
    order is taken as given; use :meth:`ordered_by` to sort by a policy
    key before analysis.
    """
    tasks: Tuple[Task, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        tasks = tuple(self.tasks)
        for task in tasks:
            if not isinstance(task, Task):
                raise InvalidTaskError(f"Expected a Task, got {task!r}")
        object.__setattr__(self, 'tasks', tasks)

        # Results are reported per name, so names must identify tasks
        seen = set()
        for i in range(len(tasks)):
            name = self.task_name(i)
            if name in seen:
                raise InvalidTaskError(f"Duplicate task name {name!r}")
            seen.add(name)

    @classmethod
    def from_sequences(
        cls,
        periods: Sequence[float],
        wcets: Sequence[float],
        deadlines: Optional[Sequence[float]] = None,
    ) -> "TaskSet":
        """Build a task set from parallel period/wcet/deadline sequences.

        Tasks keep the order of the sequences and are named ``tau1``,
        ``tau2``, ... When ``deadlines`` is omitted every deadline equals
        its period.
        """
        if len(periods) != len(wcets):
            raise InvalidTaskError(
                f"Got {len(periods)} periods but {len(wcets)} execution times"
            )
        if deadlines is None:
            deadlines = periods
        elif len(deadlines) != len(periods):
            raise InvalidTaskError(
                f"Got {len(periods)} periods but {len(deadlines)} deadlines"
            )

        return cls(tuple(
            Task(period=T, wcet=C, deadline=D, name=f"tau{i + 1}")
            for i, (T, C, D) in enumerate(zip(periods, wcets, deadlines))
        ))

    @classmethod
    def ordered_by(cls, tasks: Iterable[Task], key: PriorityKey) -> "TaskSet":
        """Return a task set sorted by ``key`` (ties keep their input order)."""
        return cls(tuple(sorted(tasks, key=key.of)))

    def is_sorted_by(self, key: PriorityKey) -> bool:
        """Whether the priority order agrees with ``key``."""
        values = [key.of(t) for t in self.tasks]
        return all(a <= b for a, b in zip(values, values[1:]))

    def higher_priority(self, index: int) -> Tuple[Task, ...]:
        """Return all tasks with higher priority than the task at ``index``."""
        return self.tasks[:index]

    def task_name(self, index: int) -> str:
        name = self.tasks[index].name
        return name if name else f"tau{index + 1}"

    @property
    def periods(self) -> List[float]:
        return [t.period for t in self.tasks]

    @property
    def wcets(self) -> List[float]:
        return [t.wcet for t in self.tasks]

    @property
    def deadlines(self) -> List[float]:
        return [t.deadline for t in self.tasks]

    @property
    def total_utilization(self) -> float:
        """Return the total utilization of all tasks."""
        return math.fsum(t.utilization for t in self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]
