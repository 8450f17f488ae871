"""Tests for loading task sets from YAML configuration."""

import os
import tempfile
import textwrap
import unittest

from feasibility.analysis import completion_time_test
from feasibility.config import load_tasksets, parse_taskset
from feasibility.errors import ConfigError, EmptyTaskSetError, InvalidTaskError
from feasibility.models import PriorityKey


class TestLoadTasksets(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, text: str) -> str:
        path = os.path.join(self.tmpdir.name, "tasksets.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(textwrap.dedent(text))
        return path

    def test_load_and_sort(self):
        path = self.write("""
            tasksets:
              rm_set:
                tasks:
                  - {period: 15, wcet: 2}
                  - {period: 2, wcet: 1, name: fast}
                  - {period: 10, wcet: 1}
              dm_set:
                policy: dm
                tasks:
                  - {period: 13, wcet: 2, deadline: 15}
                  - {period: 5, wcet: 1, deadline: 3}
        """)
        tasksets = load_tasksets(path)
        self.assertEqual(list(tasksets), ["rm_set", "dm_set"])

        rm_set, rm_key = tasksets["rm_set"]
        self.assertIs(rm_key, PriorityKey.PERIOD)
        self.assertEqual(rm_set.periods, [2, 10, 15])
        self.assertEqual([t.name for t in rm_set], ["fast", "tau3", "tau1"])
        self.assertTrue(completion_time_test(rm_set))

        dm_set, dm_key = tasksets["dm_set"]
        self.assertIs(dm_key, PriorityKey.DEADLINE)
        self.assertEqual(dm_set.deadlines, [3, 15])

    def test_no_tasksets(self):
        path = self.write("tasksets: {}\n")
        with self.assertRaises(EmptyTaskSetError):
            load_tasksets(path)

    def test_missing_tasks_key(self):
        with self.assertRaises(EmptyTaskSetError):
            parse_taskset("empty", {"policy": "rm"})

    def test_empty_task_list_is_allowed(self):
        taskset, _ = parse_taskset("none", {"tasks": []})
        self.assertEqual(len(taskset), 0)

    def test_invalid_task(self):
        path = self.write("""
            tasksets:
              bad:
                tasks:
                  - {period: 0, wcet: 1}
        """)
        with self.assertRaises(InvalidTaskError):
            load_tasksets(path)

    def test_duplicate_names(self):
        path = self.write("""
            tasksets:
              clash:
                tasks:
                  - {period: 4, wcet: 1, name: control}
                  - {period: 8, wcet: 1, name: control}
        """)
        with self.assertRaises(InvalidTaskError):
            load_tasksets(path)

    def test_missing_wcet(self):
        with self.assertRaises(InvalidTaskError):
            parse_taskset("bad", {"tasks": [{"period": 4}]})

    def test_malformed_documents(self):
        for text in ("- just\n- a list\n", "tasksets: [1, 2]\n", "tasksets: {a: {tasks: 3}}\n",
                     "tasksets: {a: {policy: edf, tasks: []}}\n", "key: [unclosed\n"):
            with self.subTest(text=text):
                path = self.write(text)
                with self.assertRaises(ConfigError):
                    load_tasksets(path)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_tasksets(os.path.join(self.tmpdir.name, "absent.yaml"))

    def test_unknown_task_key(self):
        with self.assertRaises(ConfigError):
            parse_taskset("bad", {"tasks": [{"period": 4, "wcet": 1, "jitter": 1}]})


if __name__ == "__main__":
    unittest.main()
