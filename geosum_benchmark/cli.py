"""
Command-line entry point for the geometric sum benchmark.

Plain-language overview

- With no sequence flags, starts the interactive menu (`menu.py`).
- With `--first-term`, `--ratio` and `--terms`, runs one comparison without prompting,
  prints the report and optionally writes it as a one-row CSV (`--out`).
- Benchmark settings come from `config.yaml` (if present) and may be overridden here.

If you are a user, you typically run this via `python scripts/benchmark.py`.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .comparison import compare
from .config import BenchmarkSettings, load_settings
from .errors import InvalidInput
from .inputs import parse_sequence
from .io import write_csv
from .menu import ComparisonMenu
from .report import RESULT_FIELDNAMES, format_report, result_row

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line argument parser.

    The “knobs” a user can change without editing code:
    - which config file to read, and per-run overrides of its benchmark settings
    - a one-shot comparison instead of the interactive menu
    - how chatty the log output is
    """
    p = argparse.ArgumentParser(description="Compare iterative and recursive geometric sums.")
    p.add_argument("--config", help="Config YAML (default: config.yaml in the project root, if any).")
    p.add_argument("--runs", type=int, help="Harness runs per method (default: config, else 5).")
    p.add_argument("--warm-up-runs", type=int, help="Untimed calls per run (default: config, else 1000).")
    p.add_argument("--iterations", type=int, help="Timed calls per run (default: config, else 100000).")
    p.add_argument("--first-term", help="First term a (> 0). Runs one comparison without the menu.")
    p.add_argument("--ratio", help="Ratio r (> 0). Requires --first-term and --terms.")
    p.add_argument("--terms", help="Number of terms n (> 0). Requires --first-term and --ratio.")
    p.add_argument("--out", help="Write the one-shot result to this CSV file.")
    p.add_argument("--quiet", action="store_true", default=True, help="Only log warnings.")
    p.add_argument("--no-quiet", action="store_false", dest="quiet", help="Log progress information.")
    p.add_argument("--verbose", action="store_true", help="Log per-run timings (debug output).")
    return p


def _resolve_settings(parser: argparse.ArgumentParser, args: argparse.Namespace) -> BenchmarkSettings:
    settings = BenchmarkSettings()
    try:
        settings = load_settings(args.config).with_overrides(
            num_runs=args.runs,
            warm_up_runs=args.warm_up_runs,
            iterations=args.iterations,
        )
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    return settings


def _run_once(args: argparse.Namespace, settings: BenchmarkSettings) -> int:
    try:
        sequence = parse_sequence(args.first_term, args.ratio, args.terms, max_terms=settings.max_terms)
    except InvalidInput as exc:
        print(f"Error: {exc}")
        return 2

    result = compare(sequence, settings)
    for line in format_report(result):
        print(line)

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        write_csv(out_path, [result_row(result)], RESULT_FIELDNAMES)
        LOGGER.info("Wrote %s", out_path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Run the benchmark from the command line.

    What happens, at a high level:

    1) Parse flags and configure logging.
    2) Load settings from `config.yaml` and apply flag overrides.
    3) Run one comparison if the sequence was given as flags, else start the menu.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    one_shot = [args.first_term, args.ratio, args.terms]
    if any(v is not None for v in one_shot) and not all(v is not None for v in one_shot):
        parser.error("--first-term, --ratio and --terms must be given together")
    if args.out and args.first_term is None:
        parser.error("--out requires --first-term, --ratio and --terms")

    settings = _resolve_settings(parser, args)
    LOGGER.info("Settings: %s", settings)

    if args.first_term is not None:
        return _run_once(args, settings)
    return ComparisonMenu(settings).run()
