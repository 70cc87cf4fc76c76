import io
import sys
import unittest
from unittest import mock

from geosum_benchmark.comparison import FlowState, compare, run_comparison
from geosum_benchmark.config import BenchmarkSettings
from geosum_benchmark.io import TokenReader
from geosum_benchmark.types import GeometricSequence

FAST = BenchmarkSettings(num_runs=2, warm_up_runs=1, iterations=3)


class TestCompare(unittest.TestCase):
    def test_sums_and_runs(self):
        result = compare(GeometricSequence(first_term=1.0, ratio=2.0, terms=5), FAST)
        self.assertEqual(result.iterative_sum, 31.0)
        self.assertEqual(result.recursive_sum, 31.0)
        self.assertAlmostEqual(result.formula_sum, 31.0)
        self.assertEqual(len(result.iterative_runs_ns), 2)
        self.assertEqual(len(result.recursive_runs_ns), 2)
        self.assertAlmostEqual(result.iterative_avg_ns, sum(result.iterative_runs_ns) / 2)
        self.assertTrue(result.results_agree)

    def test_recursion_limit_raised_once_per_batch_not_per_call(self):
        settings = BenchmarkSettings(num_runs=2, warm_up_runs=1, iterations=5)
        terms = sys.getrecursionlimit() + 100
        before = sys.getrecursionlimit()
        with mock.patch("sys.setrecursionlimit", wraps=sys.setrecursionlimit) as setlimit:
            result = compare(GeometricSequence(first_term=1.0, ratio=0.5, terms=terms), settings)
        # One raise before the recursive runs, one restore after them.
        self.assertEqual(setlimit.call_count, 2)
        self.assertEqual(sys.getrecursionlimit(), before)
        self.assertAlmostEqual(result.recursive_sum, 2.0, places=9)

    def test_unit_ratio(self):
        result = compare(GeometricSequence(first_term=2.0, ratio=1.0, terms=4), FAST)
        self.assertEqual((result.iterative_sum, result.recursive_sum, result.formula_sum), (8.0, 8.0, 8.0))


class TestRunComparison(unittest.TestCase):
    def test_valid_flow_reports_and_visits_every_state(self):
        states = []
        out = io.StringIO()
        result = run_comparison(TokenReader(io.StringIO("1 2 5\n")), FAST, out=out, stage_cb=states.append)
        self.assertIsNotNone(result)
        self.assertEqual(
            states,
            [FlowState.AWAITING_INPUT, FlowState.COMPUTING, FlowState.REPORTING, FlowState.DONE],
        )
        text = out.getvalue()
        self.assertIn("=== Method Comparison ===", text)
        self.assertIn("Iterative: 31.000", text)
        self.assertIn("Recursive: 31.000", text)
        self.assertIn("Formula: 31.00", text)

    def test_invalid_input_goes_straight_to_done(self):
        states = []
        out = io.StringIO()
        result = run_comparison(TokenReader(io.StringIO("0 2 5\n")), FAST, out=out, stage_cb=states.append)
        self.assertIsNone(result)
        self.assertEqual(states, [FlowState.AWAITING_INPUT, FlowState.DONE])
        self.assertTrue(out.getvalue().endswith("First term (a): Error: please enter a value a > 0\n"))
        self.assertNotIn("Comparison Results", out.getvalue())

    def test_non_numeric_input(self):
        out = io.StringIO()
        self.assertIsNone(run_comparison(TokenReader(io.StringIO("1 two 5\n")), FAST, out=out))
        self.assertIn("Error: please enter a value r > 0", out.getvalue())


if __name__ == "__main__":
    unittest.main()
