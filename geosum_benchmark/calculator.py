"""
Geometric sum, computed three ways.

Plain-language overview

A geometric sequence starts at a first term `a` and multiplies by a ratio `r` at each
step. Its sum over `n` terms can be computed:

1) Iteratively: add each term while multiplying by `r` (O(n) time, O(1) space).
2) Recursively: `a + sum(a*r, r, n-1)`, one stack frame per term. A memo keyed by the
   remaining term count is created for every top-level call; each key is visited once,
   so the memo never hits. Deep sums need `recursion_headroom()` around the calls.
3) With the closed form `a * (1 - r**n) / (1 - r)`, or `a * n` when `r` is within
   `epsilon` of 1.

All three should agree up to floating-point rounding.
"""

from __future__ import annotations

import contextlib
import math
import sys
from typing import Dict, Iterator, Sequence

import numpy as np

from .constants import EPSILON
from .types import GeometricSequence

# Extra frames allowed on top of the caller's stack and the recursion itself
# (the timing harness and the memo lookups add a few).
_RECURSION_MARGIN = 50


def _stack_depth() -> int:
    depth = 0
    frame = sys._getframe(1)
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@contextlib.contextmanager
def recursion_headroom(depth: int) -> Iterator[None]:
    """
    Temporarily raise the interpreter recursion limit so `depth` more nested calls fit.

    Enter this once around a batch of `sum_recursive()` calls (e.g. a whole benchmark
    run), not inside the timed call.
    """
    previous = sys.getrecursionlimit()
    needed = _stack_depth() + depth + _RECURSION_MARGIN
    if needed <= previous:
        yield
        return
    sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class GeometricCalculator:
    """Sum a `GeometricSequence` iteratively, recursively, or with the closed form."""

    def __init__(self, sequence: GeometricSequence, *, epsilon: float = EPSILON) -> None:
        self.sequence = sequence
        self.epsilon = epsilon

    def sum_iterative(self) -> float:
        total = 0.0
        term = float(self.sequence.first_term)
        for _ in range(self.sequence.terms):
            total += term
            term *= self.sequence.ratio
        return total

    def sum_recursive(self) -> float:
        memo: Dict[int, float] = {}
        ratio = float(self.sequence.ratio)

        def recurse(a: float, k: int) -> float:
            if k == 0:
                return 0.0
            if k in memo:
                return memo[k]
            memo[k] = a + recurse(a * ratio, k - 1)
            return memo[k]

        return recurse(float(self.sequence.first_term), self.sequence.terms)

    def sum_formula(self) -> float:
        a = float(self.sequence.first_term)
        r = float(self.sequence.ratio)
        n = self.sequence.terms
        if abs(r - 1.0) < self.epsilon:
            return a * n
        try:
            power = math.pow(r, n)
        except OverflowError:
            # Only reachable for r > 1, where a * (1 - inf) / (1 - r) is +inf. The loop-based
            # sums can stay finite here when `a` is tiny (a=1e-300, r=1e200, n=2).
            return math.inf
        return a * (1 - power) / (1 - r)


def results_agree(values: Sequence[float], tolerance: float) -> bool:
    """Return True when every value matches the first within `tolerance` (relative)."""
    if not values:
        return True
    arr = np.asarray(values, dtype=float)
    return bool(np.all(np.isclose(arr, arr[0], rtol=tolerance, atol=0.0)))
