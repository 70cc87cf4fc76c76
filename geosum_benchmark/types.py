from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeometricSequence:
    first_term: float
    ratio: float
    terms: int
