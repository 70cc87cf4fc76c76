import math
import sys
import unittest
from unittest import mock

from geosum_benchmark.calculator import GeometricCalculator, recursion_headroom, results_agree
from geosum_benchmark.types import GeometricSequence


def _calc(a, r, n, **kwargs):
    return GeometricCalculator(GeometricSequence(first_term=a, ratio=r, terms=n), **kwargs)


class TestGeometricSums(unittest.TestCase):
    def test_powers_of_two(self):
        calc = _calc(1.0, 2.0, 5)
        self.assertEqual(calc.sum_iterative(), 31.0)
        self.assertEqual(calc.sum_recursive(), 31.0)
        self.assertAlmostEqual(calc.sum_formula(), 31.0, places=9)

    def test_unit_ratio_uses_a_times_n(self):
        calc = _calc(2.0, 1.0, 4)
        self.assertEqual(calc.sum_iterative(), 8.0)
        self.assertEqual(calc.sum_recursive(), 8.0)
        self.assertEqual(calc.sum_formula(), 8.0)

    def test_ratio_within_epsilon_of_one_is_exact(self):
        calc = _calc(3.5, 1.0 + 1e-12, 7)
        self.assertEqual(calc.sum_formula(), 3.5 * 7)

    def test_ratio_outside_custom_epsilon_uses_closed_form(self):
        calc = _calc(1.0, 1.001, 10, epsilon=1e-6)
        expected = (1 - 1.001**10) / (1 - 1.001)
        self.assertAlmostEqual(calc.sum_formula(), expected, places=9)

    def test_single_term_returns_first_term(self):
        for a, r in ((1.0, 2.0), (7.25, 0.5), (0.001, 1.0)):
            calc = _calc(a, r, 1)
            self.assertAlmostEqual(calc.sum_iterative(), a)
            self.assertAlmostEqual(calc.sum_recursive(), a)
            self.assertAlmostEqual(calc.sum_formula(), a)

    def test_three_methods_agree(self):
        cases = [(1.0, 0.5, 30), (2.5, 1.1, 50), (0.3, 3.0, 12), (10.0, 0.999, 500), (1.0, 1.0000001, 100)]
        for a, r, n in cases:
            calc = _calc(a, r, n)
            values = [calc.sum_iterative(), calc.sum_recursive(), calc.sum_formula()]
            self.assertTrue(results_agree(values, 1e-6), (a, r, n, values))

    def test_overflow_gives_infinity_everywhere(self):
        calc = _calc(1.0, 10.0, 400)
        self.assertEqual(calc.sum_iterative(), math.inf)
        self.assertEqual(calc.sum_formula(), math.inf)

    def test_overflow_in_formula_only_when_first_term_is_tiny(self):
        calc = _calc(1e-300, 1e200, 2)
        self.assertAlmostEqual(calc.sum_iterative(), 1e-100, delta=1e-110)
        self.assertAlmostEqual(calc.sum_recursive(), 1e-100, delta=1e-110)
        self.assertEqual(calc.sum_formula(), math.inf)


class TestRecursiveSum(unittest.TestCase):
    def test_deep_recursion_inside_headroom_restores_limit(self):
        before = sys.getrecursionlimit()
        calc = _calc(1.0, 0.5, before + 500)
        with recursion_headroom(calc.sequence.terms):
            self.assertAlmostEqual(calc.sum_recursive(), 2.0, places=9)
        self.assertEqual(sys.getrecursionlimit(), before)

    def test_headroom_counts_frames_already_on_stack(self):
        limit = sys.getrecursionlimit()
        calc = _calc(1.0, 0.5, limit - 150)

        def nested(depth):
            if depth:
                return nested(depth - 1)
            with recursion_headroom(calc.sequence.terms):
                return calc.sum_recursive()

        self.assertAlmostEqual(nested(250), 2.0, places=9)
        self.assertEqual(sys.getrecursionlimit(), limit)

    def test_sum_recursive_leaves_recursion_limit_alone(self):
        with mock.patch("sys.setrecursionlimit") as setlimit:
            self.assertEqual(_calc(1.0, 2.0, 5).sum_recursive(), 31.0)
        setlimit.assert_not_called()

    def test_memo_is_not_shared_between_calls(self):
        # A cache keyed only by the remaining term count would leak between these.
        self.assertEqual(_calc(1.0, 2.0, 5).sum_recursive(), 31.0)
        self.assertEqual(_calc(1.0, 3.0, 5).sum_recursive(), 121.0)
        calc = _calc(2.0, 2.0, 5)
        self.assertEqual(calc.sum_recursive(), 62.0)
        self.assertEqual(calc.sum_recursive(), 62.0)


class TestResultsAgree(unittest.TestCase):
    def test_within_tolerance(self):
        self.assertTrue(results_agree([100.0, 100.00001, 99.99999], 1e-6))

    def test_outside_tolerance(self):
        self.assertFalse(results_agree([100.0, 100.1], 1e-6))

    def test_infinities_agree(self):
        self.assertTrue(results_agree([math.inf, math.inf], 1e-6))

    def test_empty(self):
        self.assertTrue(results_agree([], 1e-6))


if __name__ == "__main__":
    unittest.main()
