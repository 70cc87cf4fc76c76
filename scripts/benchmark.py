#!/usr/bin/env python3
"""
Run the geometric sum benchmark.

Plain-language overview

- This script is a small “launcher” for the actual code in `geosum_benchmark/`.
- By default it opens the interactive menu, which asks for a first term, a ratio and a
  number of terms, then times the iterative and recursive sums.

Most users should run:

`python scripts/benchmark.py`

For a single comparison without the menu:

`python scripts/benchmark.py --first-term 1 --ratio 2 --terms 20`

If you want to see all options (e.g., fewer timed iterations or a different config):

`python scripts/benchmark.py --help`
"""

from __future__ import annotations

import sys
from pathlib import Path

# Make sure Python can import the local package without requiring installation.
# (This adds the repository root to the import search path.)
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


def _run() -> int:
    from geosum_benchmark.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(_run())
