"""
Interactive text menu.

Plain-language overview

- Shows a small menu in the terminal: run a comparison, or exit.
- After each comparison (or an invalid choice) it waits for Enter before showing the
  menu again.
- Reads through a `TokenReader` and writes to a text stream, so the whole loop can be
  driven from `io.StringIO` in tests.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .comparison import run_comparison
from .config import BenchmarkSettings
from .io import TokenReader

LOGGER = logging.getLogger(__name__)

BANNER = [
    "========================================================",
    "     COMPARING ITERATIVE AND RECURSIVE ALGORITHMS",
    "          FOR THE SUM OF A GEOMETRIC SEQUENCE",
    "========================================================",
]

CHOICE_COMPARE = 1
CHOICE_EXIT = 2


class ComparisonMenu:
    """The main menu loop."""

    def __init__(
        self,
        settings: BenchmarkSettings,
        reader: TokenReader | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.settings = settings
        self.reader = reader if reader is not None else TokenReader()
        self.out = out if out is not None else sys.stdout

    def run(self) -> int:
        """Loop until the user exits (or input ends) and return a shell exit code."""
        while True:
            self._render_menu()
            try:
                choice = self._read_choice()
            except EOFError:
                LOGGER.info("Input closed at menu prompt; exiting.")
                self._print("")
                return 0

            if choice == CHOICE_COMPARE:
                run_comparison(self.reader, self.settings, out=self.out)
            elif choice == CHOICE_EXIT:
                self._print("Thank you for using this program. Goodbye!")
                return 0
            else:
                self._print("Invalid choice! Please choose 1 or 2.")

            self._print("\nPress Enter to return to the main menu...")
            try:
                self.reader.read_line()
            except EOFError:
                LOGGER.info("Input closed while waiting for Enter; exiting.")
                return 0

    def _render_menu(self) -> None:
        for line in BANNER:
            self._print(line)
        self._print("\nChoose a program mode:")
        self._print(f"{CHOICE_COMPARE}. Compare iterative and recursive methods")
        self._print(f"{CHOICE_EXIT}. Exit")
        self.out.write("\nEnter your choice (1/2): ")
        self.out.flush()

    def _read_choice(self) -> int | None:
        """Return the typed menu number, or None when the line is not an integer."""
        raw = self.reader.read_line().strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def _print(self, text: str) -> None:
        print(text, file=self.out)
