"""
Comparison results and how they are shown.

- `ComparisonResult` holds the three sums and the timing runs for one comparison.
- `format_report()` turns it into the lines printed after a comparison.
- `result_row()` turns it into one CSV row (see `RESULT_FIELDNAMES`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .calculator import results_agree
from .constants import TOLERANCE
from .types import GeometricSequence

NA = "NA"

RESULT_FIELDNAMES = [
    "first_term",
    "ratio",
    "terms",
    "iterative_sum",
    "recursive_sum",
    "formula_sum",
    "iterative_avg_ns",
    "recursive_avg_ns",
    "time_ratio",
    "faster_method",
    "percent_difference",
    "results_agree",
]


@dataclass(frozen=True)
class ComparisonResult:
    sequence: GeometricSequence
    iterative_sum: float
    recursive_sum: float
    formula_sum: float
    iterative_runs_ns: List[float]
    recursive_runs_ns: List[float]
    iterative_avg_ns: float
    recursive_avg_ns: float
    tolerance: float = TOLERANCE

    @property
    def ratio(self) -> float | None:
        """Recursive / iterative mean time, or None when the iterative mean is not positive."""
        if self.iterative_avg_ns <= 0:
            return None
        return self.recursive_avg_ns / self.iterative_avg_ns

    @property
    def faster_method(self) -> str | None:
        ratio = self.ratio
        if ratio is None:
            return None
        return "iterative" if ratio > 1 else "recursive"

    @property
    def percent_difference(self) -> float | None:
        ratio = self.ratio
        if ratio is None:
            return None
        return (ratio - 1) * 100 if ratio > 1 else (1 - ratio) * 100

    @property
    def results_agree(self) -> bool:
        return results_agree([self.iterative_sum, self.recursive_sum, self.formula_sum], self.tolerance)


def format_report(result: ComparisonResult) -> List[str]:
    lines = [
        "",
        "=== Comparison Results ===",
        f"Iterative: {result.iterative_sum:.3f} (time: {result.iterative_avg_ns:.3f} ns)",
        f"Recursive: {result.recursive_sum:.3f} (time: {result.recursive_avg_ns:.3f} ns)",
        f"Formula: {result.formula_sum:.2f}",
    ]
    ratio = result.ratio
    if ratio is not None:
        lines.append("")
        lines.append(f"Time ratio (recursive/iterative): {ratio:.2f}x")
        lines.append(f"{result.faster_method.capitalize()} method is faster by {result.percent_difference:.2f}%")
    agree = "yes" if result.results_agree else "no"
    lines.append(f"Results agree (rtol={result.tolerance:g}): {agree}")
    return lines


def result_row(result: ComparisonResult) -> Dict[str, object]:
    ratio = result.ratio
    return {
        "first_term": result.sequence.first_term,
        "ratio": result.sequence.ratio,
        "terms": result.sequence.terms,
        "iterative_sum": result.iterative_sum,
        "recursive_sum": result.recursive_sum,
        "formula_sum": result.formula_sum,
        "iterative_avg_ns": result.iterative_avg_ns,
        "recursive_avg_ns": result.recursive_avg_ns,
        "time_ratio": NA if ratio is None else ratio,
        "faster_method": result.faster_method or NA,
        "percent_difference": NA if ratio is None else result.percent_difference,
        "results_agree": result.results_agree,
    }
