"""Command-line driver: run the feasibility tests over example task sets.

Usage::

    python -m feasibility                        # every built-in example, every test
    python -m feasibility --example ex4 --test completion --test lub
    python -m feasibility --config tasksets.yaml -v
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional, Tuple

from feasibility.battery import FEASIBILITY_TESTS, TEST_LABELS, run_battery
from feasibility.config import load_tasksets
from feasibility.errors import FeasibilityError
from feasibility.examples import EXAMPLE_POLICIES, EXAMPLES, describe_taskset, example_utilization_percent
from feasibility.log import configure_logger
from feasibility.models import PriorityKey, TaskSet


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rt-feasibility",
        description="Feasibility tests for fixed-priority periodic task sets.",
    )
    parser.add_argument("--config", help="YAML file with task sets (default: built-in examples)")
    parser.add_argument(
        "--test", dest="tests", action="append", choices=list(FEASIBILITY_TESTS),
        help="test to run; repeat for several (default: all)",
    )
    parser.add_argument(
        "--example", dest="examples", action="append",
        help="built-in example to run; repeat for several (default: all)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log intermediate sums")
    return parser.parse_args(argv)


def select_tasksets(args: argparse.Namespace) -> Dict[str, Tuple[TaskSet, PriorityKey]]:
    if args.config:
        return load_tasksets(args.config)

    names = args.examples or list(EXAMPLES)
    unknown = [name for name in names if name not in EXAMPLES]
    if unknown:
        raise FeasibilityError(f"Unknown example(s): {', '.join(unknown)}")
    return {name: (EXAMPLES[name], EXAMPLE_POLICIES[name]) for name in names}


def format_report(name: str, taskset: TaskSet, verdicts: Dict[str, bool]) -> str:
    """Render a heading with the utilization, then one verdict line per test."""
    lines = [
        f"{name} U={example_utilization_percent(taskset):4.2f}% ({describe_taskset(taskset)}):"
    ]
    for test_name, feasible in verdicts.items():
        lines.append(f"{TEST_LABELS[test_name]} {'FEASIBLE' if feasible else 'INFEASIBLE'}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        tasksets = select_tasksets(args)
    except FeasibilityError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for name, (taskset, key) in tasksets.items():
        verdicts = run_battery(taskset, key, args.tests)
        print(format_report(name, taskset, verdicts))
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
