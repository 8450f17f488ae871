"""Tests for the command-line driver."""

import contextlib
import io
import os
import tempfile
import unittest

from feasibility.driver import format_report, main
from feasibility.examples import EXAMPLES, describe_taskset, example_utilization_percent


def run_main(argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        status = main(argv)
    return status, out.getvalue(), err.getvalue()


class TestReport(unittest.TestCase):

    def test_describe_implicit_deadlines(self):
        self.assertEqual(
            describe_taskset(EXAMPLES["ex0"]),
            "C1=1, C2=1, C3=2; T1=2, T2=10, T3=15; T=D",
        )

    def test_describe_explicit_deadlines(self):
        self.assertEqual(
            describe_taskset(EXAMPLES["ex6"]),
            "C1=1, C2=1, C3=1, C4=2; T1=2, T2=5, T3=7, T4=13; D1=2, D2=3, D3=7, D4=15",
        )

    def test_utilization_percent(self):
        self.assertAlmostEqual(example_utilization_percent(EXAMPLES["ex0"]), 73.33, places=2)

    def test_format_report(self):
        report = format_report("ex4", EXAMPLES["ex4"], {"completion": True, "lub": False})
        self.assertEqual(report.splitlines(), [
            "ex4 U=100.00% (C1=1, C2=1, C3=4; T1=2, T2=4, T3=16; T=D):",
            "CT test FEASIBLE",
            "RM LUB INFEASIBLE",
        ])


class TestMain(unittest.TestCase):

    def test_all_examples(self):
        status, out, _ = run_main([])
        self.assertEqual(status, 0)
        for name in EXAMPLES:
            self.assertIn(f"{name} U=", out)

    def test_selected_example_and_tests(self):
        status, out, _ = run_main(["--example", "ex3", "--test", "completion", "--test", "lub"])
        self.assertEqual(status, 0)
        self.assertIn("CT test FEASIBLE", out)
        self.assertIn("RM LUB INFEASIBLE", out)
        self.assertNotIn("SP test", out)

    def test_deadline_monotonic_example(self):
        status, out, _ = run_main(["--example", "ex6"])
        self.assertEqual(status, 0)
        self.assertIn("CT test FEASIBLE", out)
        self.assertIn("SP test INFEASIBLE", out)
        self.assertIn("DM quick test INFEASIBLE", out)

    def test_unknown_example(self):
        status, _, err = run_main(["--example", "ex42"])
        self.assertEqual(status, 2)
        self.assertIn("ex42", err)

    def test_config_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "sets.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("tasksets:\n  pair:\n    tasks:\n      - {period: 4, wcet: 1}\n      - {period: 6, wcet: 2}\n")
            status, out, _ = run_main(["--config", path, "--test", "scheduling-point"])
        self.assertEqual(status, 0)
        self.assertIn("pair U=58.33%", out)
        self.assertIn("SP test FEASIBLE", out)

    def test_missing_config_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "absent.yaml")
            status, out, err = run_main(["--config", path])
        self.assertEqual(status, 2)
        self.assertEqual(out, "")
        self.assertIn("absent.yaml", err)
        self.assertIn("No such file", err)

    def test_invalid_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "sets.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("tasksets:\n  bad:\n    tasks:\n      - {period: -1, wcet: 1}\n")
            status, _, err = run_main(["--config", path])
        self.assertEqual(status, 2)
        self.assertIn("period", err)


if __name__ == "__main__":
    unittest.main()
