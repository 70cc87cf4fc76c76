"""
Console and file I/O helpers.

Plain-language overview

- The menu and the comparison flow read from standard input in two ways: whole lines
  (menu choice, “press Enter”) and whitespace-separated tokens (the three sequence
  parameters, which may be typed on one line or on separate lines).
- `TokenReader` supports both on top of any text stream, which keeps the interactive
  code testable with `io.StringIO`.
- This module also finds the project root (for `config.yaml`) and writes result CSVs.
"""

from __future__ import annotations

import csv
import sys
from collections import deque
from pathlib import Path
from typing import Deque, Dict, Sequence, TextIO


class TokenReader:
    """
    Read whitespace-separated tokens and whole lines from a text stream.

    Tokens left over on a partially consumed line are kept until `discard_pending()`
    or `read_line()` drops them. End of input raises `EOFError`.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._pending: Deque[str] = deque()

    def next_token(self) -> str:
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_line(self) -> str:
        """Drop pending tokens and return the next full line without its newline."""
        self._pending.clear()
        line = self.stream.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def discard_pending(self) -> None:
        self._pending.clear()


def find_project_root(start: Path | None = None) -> Path:
    """
    Return the project root directory.

    How it works:
    - Start from `start` (or the current working directory if omitted).
    - Walk up parent directories until we find `config.yaml`.
    """
    here = (start or Path.cwd()).resolve()
    for candidate in (here, *here.parents):
        if (candidate / "config.yaml").is_file():
            return candidate
    raise RuntimeError(f"Could not find config.yaml in {here} or any parent directory.")


def write_csv(path: Path, rows: Sequence[Dict[str, object]], fieldnames: Sequence[str]) -> None:
    """
    Write a CSV file (creating parent folders if needed).

    `rows` is a list of dictionaries. `fieldnames` defines the column order.
    Any missing key in a row is written as an empty string.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(fieldnames), lineterminator="\n")
        writer.writeheader()
        for row in rows:
            writer.writerow({k: row.get(k, "") for k in fieldnames})
