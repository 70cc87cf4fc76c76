"""
Prompt for and validate the three sequence parameters.

The first invalid value aborts the whole collection: nothing is retried and no
partial sequence is returned.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Callable, Dict, TextIO

from .constants import MAX_TERMS
from .errors import InvalidInput
from .io import TokenReader
from .types import GeometricSequence

LOGGER = logging.getLogger(__name__)

PROMPTS = {
    "a": "First term (a): ",
    "r": "Ratio (r): ",
    "n": "Number of terms (n): ",
}


def _parse_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {token!r}")
    return value


PARSERS: Dict[str, Callable[[str], float | int]] = {
    "a": _parse_float,
    "r": _parse_float,
    "n": int,
}


def parse_positive(step: str, token: str | None) -> float | int:
    """Parse the value for `step` (`a`, `r` or `n`); raise `InvalidInput` unless it is > 0."""
    value = None
    if token is not None:
        try:
            value = PARSERS[step](token.strip())
        except ValueError as exc:
            LOGGER.info("Rejected %s: %s", step, exc)
    if value is None or value <= 0:
        raise InvalidInput(step, f"please enter a value {step} > 0")
    return value


def _check_terms(n: int, max_terms: int) -> None:
    if n > max_terms:
        raise InvalidInput("n", f"please enter a value n <= {max_terms}")


def parse_sequence(a: str, r: str, n: str, *, max_terms: int = MAX_TERMS) -> GeometricSequence:
    """Validate already-collected strings (e.g. command-line flags) into a sequence."""
    first_term = parse_positive("a", a)
    ratio = parse_positive("r", r)
    terms = parse_positive("n", n)
    _check_terms(terms, max_terms)
    return GeometricSequence(first_term=first_term, ratio=ratio, terms=terms)


def read_sequence(
    reader: TokenReader,
    out: TextIO | None = None,
    *,
    max_terms: int = MAX_TERMS,
) -> GeometricSequence:
    """
    Prompt for `a`, `r` and `n` and return them as a `GeometricSequence`.

    Raises `InvalidInput` naming the first parameter that failed to parse, is not
    strictly positive, or (for `n`) exceeds `max_terms`. Tokens still pending on the
    current line are dropped when that happens.
    """
    out = out if out is not None else sys.stdout
    values: Dict[str, float | int] = {}
    try:
        for step in ("a", "r", "n"):
            out.write(PROMPTS[step])
            out.flush()
            try:
                token = reader.next_token()
            except EOFError:
                token = None
            values[step] = parse_positive(step, token)
        _check_terms(int(values["n"]), max_terms)
    except InvalidInput:
        reader.discard_pending()
        raise
    return GeometricSequence(first_term=values["a"], ratio=values["r"], terms=int(values["n"]))
