from __future__ import annotations


class InvalidInput(ValueError):
    """
    Raised when a prompted value cannot be parsed or is not strictly positive.

    `step` names the parameter that failed (`a`, `r` or `n`), so callers can report
    exactly which prompt the user needs to fix.
    """

    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step
