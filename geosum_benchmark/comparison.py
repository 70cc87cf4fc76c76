"""
The “compare iterative and recursive” flow.

Plain-language overview

One comparison goes through four states:

1) AWAITING_INPUT: prompt for `a`, `r` and `n`.
2) COMPUTING: time the iterative and recursive sums (several runs each) and compute the
   closed-form sum once, untimed.
3) REPORTING: print the sums, the mean times and which method was faster.
4) DONE: always reached, also straight from input validation when input is invalid.

`stage_cb` is a hook that receives each state as it is entered; the menu does not need
it, but it makes the flow easy to observe from tests.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Callable, TextIO

from .calculator import GeometricCalculator, recursion_headroom
from .config import BenchmarkSettings
from .errors import InvalidInput
from .inputs import read_sequence
from .io import TokenReader
from .report import ComparisonResult, format_report
from .timing import benchmark_runs, mean_duration
from .types import GeometricSequence

LOGGER = logging.getLogger(__name__)


class FlowState(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    COMPUTING = "computing"
    REPORTING = "reporting"
    DONE = "done"


def compare(sequence: GeometricSequence, settings: BenchmarkSettings) -> ComparisonResult:
    """
    Benchmark both timed methods for `sequence` and compute all three sums.

    The reported iterative and recursive sums are the values returned by the last timed
    call of each method.
    """
    calc = GeometricCalculator(sequence, epsilon=settings.epsilon)
    last = {"iterative": 0.0, "recursive": 0.0}

    def run_iterative() -> None:
        last["iterative"] = calc.sum_iterative()

    def run_recursive() -> None:
        last["recursive"] = calc.sum_recursive()

    LOGGER.info(
        "Benchmarking a=%g r=%g n=%d (%d runs, %d warm-up, %d iterations)",
        sequence.first_term,
        sequence.ratio,
        sequence.terms,
        settings.num_runs,
        settings.warm_up_runs,
        settings.iterations,
    )
    iterative_runs = benchmark_runs(run_iterative, settings, label="iterative")
    with recursion_headroom(sequence.terms):
        recursive_runs = benchmark_runs(run_recursive, settings, label="recursive")

    return ComparisonResult(
        sequence=sequence,
        iterative_sum=last["iterative"],
        recursive_sum=last["recursive"],
        formula_sum=calc.sum_formula(),
        iterative_runs_ns=iterative_runs,
        recursive_runs_ns=recursive_runs,
        iterative_avg_ns=mean_duration(iterative_runs),
        recursive_avg_ns=mean_duration(recursive_runs),
        tolerance=settings.tolerance,
    )


def run_comparison(
    reader: TokenReader,
    settings: BenchmarkSettings,
    *,
    out: TextIO | None = None,
    stage_cb: Callable[[FlowState], None] | None = None,
) -> ComparisonResult | None:
    """
    Run one interactive comparison.

    Returns the result, or None when the input was invalid (the error has already been
    printed). Never raises `InvalidInput`.
    """
    out = out if out is not None else sys.stdout

    def enter(state: FlowState) -> None:
        LOGGER.debug("Comparison state: %s", state.value)
        if stage_cb is not None:
            stage_cb(state)

    enter(FlowState.AWAITING_INPUT)
    print("\n=== Method Comparison ===", file=out)
    try:
        sequence = read_sequence(reader, out, max_terms=settings.max_terms)
    except InvalidInput as exc:
        print(f"Error: {exc}", file=out)
        enter(FlowState.DONE)
        return None

    enter(FlowState.COMPUTING)
    result = compare(sequence, settings)
    if not result.results_agree:
        LOGGER.warning(
            "Sums disagree beyond rtol=%g: iterative=%r recursive=%r formula=%r",
            settings.tolerance,
            result.iterative_sum,
            result.recursive_sum,
            result.formula_sum,
        )

    enter(FlowState.REPORTING)
    for line in format_report(result):
        print(line, file=out)

    enter(FlowState.DONE)
    return result
