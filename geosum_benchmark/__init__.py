"""Geometric sum benchmark library."""

from .calculator import GeometricCalculator
from .comparison import compare, run_comparison
from .config import BenchmarkSettings, load_settings
from .errors import InvalidInput
from .types import GeometricSequence

__all__ = [
    "BenchmarkSettings",
    "GeometricCalculator",
    "GeometricSequence",
    "InvalidInput",
    "compare",
    "load_settings",
    "run_comparison",
]
