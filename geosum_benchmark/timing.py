"""
Timed-repetition benchmark harness.

Plain-language overview

- `measure_execution_time()` calls a function a number of times without timing it
  (warm-up), then times each of the following calls and returns the mean duration in
  nanoseconds.
- `benchmark_runs()` repeats that measurement several times for one function, and
  `mean_duration()` averages the per-run results into the single number we report.

This is deliberately simple: no outlier rejection, no variance, just means.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Sequence

import numpy as np

from .config import BenchmarkSettings
from .constants import ITERATIONS, WARM_UP_RUNS

LOGGER = logging.getLogger(__name__)


def measure_execution_time(
    func: Callable[[], object],
    *,
    warm_up_runs: int = WARM_UP_RUNS,
    iterations: int = ITERATIONS,
) -> float:
    """Return the mean wall-clock duration of one call to `func`, in nanoseconds."""
    if warm_up_runs < 0:
        raise ValueError("warm_up_runs must be >= 0")
    if iterations < 1:
        raise ValueError("iterations must be >= 1")

    for _ in range(warm_up_runs):
        func()

    clock = time.perf_counter_ns
    total_ns = 0
    for _ in range(iterations):
        start = clock()
        func()
        total_ns += clock() - start
    return total_ns / iterations


def benchmark_runs(func: Callable[[], object], settings: BenchmarkSettings, *, label: str = "") -> List[float]:
    """Run the harness `settings.num_runs` times and return each run's mean duration."""
    averages: List[float] = []
    for run in range(1, settings.num_runs + 1):
        avg = measure_execution_time(func, warm_up_runs=settings.warm_up_runs, iterations=settings.iterations)
        LOGGER.debug("%s run %d/%d: %.3f ns", label or "benchmark", run, settings.num_runs, avg)
        averages.append(avg)
    return averages


def mean_duration(values: Sequence[float]) -> float:
    if not values:
        raise ValueError("at least one duration is required")
    return float(np.mean(values))
