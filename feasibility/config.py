"""Load task sets from YAML configuration.

Document layout::

    tasksets:
      sensors:
        policy: rm            # rm (sort by period) or dm (sort by deadline)
        tasks:
          - {period: 2, wcet: 1}
          - {period: 10, wcet: 1, name: logger}
          - {period: 15, wcet: 2, deadline: 12}

Each task set is sorted by its policy's key before it is returned.
"""

from typing import Any, Dict, Mapping, Tuple

import yaml

from feasibility.errors import ConfigError, EmptyTaskSetError, InvalidTaskError
from feasibility.log import get_logger
from feasibility.models import PriorityKey, Task, TaskSet

LOGGER = get_logger("config")

TASK_FIELDS = ("period", "wcet", "deadline", "name")


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML configuration document."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"{path}: {e.strerror or e}") from e
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(document, Mapping):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return document


def _parse_task(set_name: str, position: int, entry: Any) -> Task:
    if not isinstance(entry, Mapping):
        raise ConfigError(f"{set_name}: task #{position + 1} must be a mapping")
    unknown = set(entry) - set(TASK_FIELDS)
    if unknown:
        raise ConfigError(
            f"{set_name}: task #{position + 1} has unknown keys {sorted(unknown)}"
        )
    for required in ("period", "wcet"):
        if required not in entry:
            raise InvalidTaskError(
                f"{set_name}: task #{position + 1} is missing '{required}'"
            )
    return Task(
        period=entry["period"],
        wcet=entry["wcet"],
        deadline=entry.get("deadline"),
        name=str(entry.get("name", f"tau{position + 1}")),
    )


def parse_taskset(name: str, definition: Any) -> Tuple[TaskSet, PriorityKey]:
    """Build one task set from its configuration entry.

    Returns:
        The task set, sorted by its policy, and the policy key used.
    """
    if not isinstance(definition, Mapping):
        raise ConfigError(f"{name}: task set entry must be a mapping")
    if "tasks" not in definition:
        raise EmptyTaskSetError(f"{name}: no 'tasks' given")

    try:
        key = PriorityKey.for_policy(definition.get("policy", "rm"))
    except ValueError as e:
        raise ConfigError(f"{name}: {e}") from e

    entries = definition["tasks"] or []
    if not isinstance(entries, list):
        raise ConfigError(f"{name}: 'tasks' must be a list")

    tasks = [_parse_task(name, i, entry) for i, entry in enumerate(entries)]
    return TaskSet.ordered_by(tasks, key), key


def load_tasksets(path: str) -> Dict[str, Tuple[TaskSet, PriorityKey]]:
    """Load every task set defined in a configuration file.

    Raises:
        ConfigError: If the document is malformed.
        EmptyTaskSetError: If no task sets are defined.
        InvalidTaskError: If a task has invalid parameters.
    """
    document = load_config(path)
    tasksets = document.get("tasksets")
    if not tasksets:
        raise EmptyTaskSetError(f"{path}: no task sets defined")
    if not isinstance(tasksets, Mapping):
        raise ConfigError(f"{path}: 'tasksets' must be a mapping")

    result = {str(name): parse_taskset(str(name), definition) for name, definition in tasksets.items()}
    LOGGER.debug("Loaded %d task sets from %s", len(result), path)
    return result
