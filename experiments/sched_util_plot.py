"""Acceptance ratio vs utilisation experiment.

Generates random task sets at various utilisation levels using UUniFast,
runs every feasibility test on each, and plots the fraction of task sets
each test accepts as a function of utilisation. The gap between the LUB
curve and the exact tests shows how pessimistic the sufficient bound is.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional

try:
    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False

from feasibility.battery import FEASIBILITY_TESTS, TEST_LABELS, run_battery
from feasibility.generators import generate_taskset
from feasibility.models import PriorityKey


def run_schedulability_experiment(
    utilisation_points: list,
    num_task_sets_per_point: int = 100,
    num_tasks: int = 5,
    min_period: float = 10.0,
    max_period: float = 1000.0,
    tests: Optional[Iterable[str]] = None,
    seed: int = 42,
) -> Dict[str, Dict[float, float]]:
    """Run the acceptance experiment across utilisation levels.

    Args:
        utilisation_points: List of utilisation values to test (e.g. [0.1, 0.2, ..., 0.9]).
        num_task_sets_per_point: Number of random task sets to generate per utilisation.
        num_tasks: Number of tasks per task set.
        min_period: Minimum task period.
        max_period: Maximum task period.
        tests: Names of the tests to run (default: all).
        seed: Base random seed (will be varied per task set).

    Returns:
        Dictionary mapping test name -> {utilisation -> acceptance ratio}.
    """
    names = list(tests) if tests is not None else list(FEASIBILITY_TESTS)
    results = {name: {} for name in names}

    for u_total in utilisation_points:
        accepted = {name: 0 for name in names}

        for i in range(num_task_sets_per_point):
            task_set_seed = seed + int(u_total * 1000) + i

            taskset = generate_taskset(
                n=num_tasks,
                target_utilization=u_total,
                period_min=min_period,
                period_max=max_period,
                key=PriorityKey.PERIOD,
                seed=task_set_seed,
            )

            for name, feasible in run_battery(taskset, PriorityKey.PERIOD, names).items():
                if feasible:
                    accepted[name] += 1

        for name in names:
            results[name][u_total] = accepted[name] / num_task_sets_per_point

    return results


def plot_schedulability_vs_utilisation(
    results: Dict[str, Dict[float, float]],
    output_path: str = "results/acceptance_vs_utilisation.png",
) -> None:
    """Plot one acceptance-ratio curve per test.

    Args:
        results: Output of :func:`run_schedulability_experiment`.
        output_path: Path to save the plot.
    """
    if not MATPLOTLIB_AVAILABLE:
        raise ImportError("matplotlib is required for plotting")

    output_dir = Path(output_path).parent
    output_dir.mkdir(parents=True, exist_ok=True)

    plt.figure(figsize=(10, 6))
    for name, curve in results.items():
        utilisations = sorted(curve.keys())
        plt.plot(utilisations, [curve[u] for u in utilisations], 'o-',
                 linewidth=2, markersize=6, label=TEST_LABELS.get(name, name))
    plt.xlabel('Total Utilisation', fontsize=12)
    plt.ylabel('Acceptance Ratio', fontsize=12)
    plt.title('Acceptance Ratio vs Utilisation', fontsize=14)
    plt.grid(True, alpha=0.3)
    plt.legend()
    plt.xlim(0, 1.05)
    plt.ylim(0, 1.05)

    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()

    print(f"Plot saved to {output_path}")


def main():
    """Run the full acceptance ratio vs utilisation experiment."""
    print("Running acceptance ratio vs utilisation experiment...")

    utilisation_points = [u / 20.0 for u in range(10, 21)]  # 0.50, 0.55, ..., 1.00

    results = run_schedulability_experiment(
        utilisation_points=utilisation_points,
        num_task_sets_per_point=150,
        num_tasks=5,
        min_period=10.0,
        max_period=1000.0,
        seed=42,
    )

    print("\nResults:")
    for name, curve in results.items():
        print(f"  {TEST_LABELS.get(name, name)}:")
        for u, ratio in sorted(curve.items()):
            print(f"    U = {u:.2f}: {ratio:.3f} accepted")

    plot_schedulability_vs_utilisation(results)

    print("\nExperiment complete!")


if __name__ == "__main__":
    main()
