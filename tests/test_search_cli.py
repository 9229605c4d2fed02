import contextlib
import io
import os
import sys
import tempfile
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import search
from pathsearch.util import GraphReader

PROBLEM = """Nodes:
1: (0,0)
2: (1,0)
3: (0,1)
4: (1,1)
5: (9,9)
Edges:
(1,2): 1
(1,3): 1
(2,4): 1
(3,4): 1
Origin:
1
Destinations:
4
"""


class TestSearchCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "problem.txt")
        with open(self.path, "w") as f:
            f.write(PROBLEM)

    def tearDown(self):
        self.tmp.cleanup()

    def run_main(self, *args):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = search.main(*args)
        return code, out.getvalue(), err.getvalue()

    def test_prints_every_optimal_path(self):
        for method in ("AS", "cus1"):
            with self.subTest(method=method):
                code, out, _err = self.run_main(self.path, method)
                self.assertEqual(code, 0)
                lines = out.splitlines()
                self.assertEqual(lines[0], f"{self.path} {method.upper()}")
                self.assertEqual(sorted(lines[1:3]), ["1 -> 2 -> 4", "1 -> 3 -> 4"])
                self.assertIn("Number of optimal paths:2", lines)
                self.assertIn("Total path cost:2", lines)

    def test_metrics_on_stderr(self):
        code, out, err = self.run_main(self.path, "AS", "stderr")
        self.assertEqual(code, 0)
        self.assertNotIn("Metrics:", out)
        self.assertIn("Metrics: method=AS paths=2", err)

    def test_unreachable_destination(self):
        graph = GraphReader(self.path).read_problem()
        graph.destinations = {5}
        self.assertIsNone(search.run_all_paths(graph, lambda n: 0))

    def test_unknown_method(self):
        code, out, _err = self.run_main(self.path, "BOGUS")
        self.assertEqual(code, 1)
        self.assertIn("Unknown method: BOGUS", out)

    def test_missing_file(self):
        code, out, _err = self.run_main(os.path.join(self.tmp.name, "missing.txt"), "AS")
        self.assertEqual(code, 1)
        self.assertIn("Error: File not found", out)


class TestParseArgs(unittest.TestCase):

    def test_defaults_to_no_metrics(self):
        self.assertEqual(search.parse_args(["p.txt", "AS"]), ("p.txt", "AS", "none"))

    def test_metrics_flags(self):
        self.assertEqual(search.parse_args(["p.txt", "AS", "--metrics"])[2], "stderr")
        self.assertEqual(search.parse_args(["p.txt", "AS", "-M"])[2], "stderr")
        self.assertEqual(search.parse_args(["p.txt", "AS", "--metrics-stdout"])[2], "stdout")

    def test_unknown_flag_disables_metrics(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            args = search.parse_args(["p.txt", "AS", "--verbose"])
        self.assertEqual(args, ("p.txt", "AS", "none"))
        self.assertIn("unknown flag '--verbose'", err.getvalue())

    def test_wrong_argument_count(self):
        self.assertIsNone(search.parse_args([]))
        self.assertIsNone(search.parse_args(["p.txt"]))
        self.assertIsNone(search.parse_args(["p.txt", "AS", "--metrics", "extra"]))


if __name__ == '__main__':
    unittest.main()
