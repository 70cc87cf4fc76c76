"""
Benchmark settings.

Plain-language overview

- The comparison uses a handful of numbers: how many runs per method, how many warm-up
  and timed calls per run, and the tolerances used by the calculator.
- Defaults live in `constants.py`. A `config.yaml` at the project root may override
  them under a `benchmark:` section, and the command line may override them again.
- Everything ends up in one immutable `BenchmarkSettings` value that is passed
  explicitly to the harness, the calculator and the comparison flow.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import yaml  # type: ignore
except ImportError as exc:  # pragma: no cover - helps with friendly error messaging
    raise RuntimeError(
        "PyYAML is required to load the project configuration. "
        "Install it with `pip install pyyaml`."
    ) from exc

from . import constants
from .io import find_project_root


@dataclass(frozen=True)
class BenchmarkSettings:
    """Numeric settings for one comparison session."""

    num_runs: int = constants.NUM_RUNS
    warm_up_runs: int = constants.WARM_UP_RUNS
    iterations: int = constants.ITERATIONS
    epsilon: float = constants.EPSILON
    tolerance: float = constants.TOLERANCE
    max_terms: int = constants.MAX_TERMS

    def __post_init__(self) -> None:
        if self.num_runs < 1:
            raise ValueError("num_runs must be >= 1")
        if self.warm_up_runs < 0:
            raise ValueError("warm_up_runs must be >= 0")
        if self.iterations < 1:
            raise ValueError("iterations must be >= 1")
        if not self.epsilon > 0:
            raise ValueError("epsilon must be > 0")
        if not self.tolerance > 0:
            raise ValueError("tolerance must be > 0")
        if self.max_terms < 1:
            raise ValueError("max_terms must be >= 1")

    def with_overrides(self, **overrides: Any) -> "BenchmarkSettings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


_INT_KEYS = ("num_runs", "warm_up_runs", "iterations", "max_terms")
_FLOAT_KEYS = ("epsilon", "tolerance")


def _settings_from_mapping(section: Dict[str, Any], source: Path) -> BenchmarkSettings:
    values: Dict[str, Any] = {}
    for key in _INT_KEYS:
        if section.get(key) is not None:
            try:
                values[key] = int(section[key])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{source}: benchmark.{key} must be an integer") from exc
    for key in _FLOAT_KEYS:
        if section.get(key) is not None:
            try:
                values[key] = float(section[key])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{source}: benchmark.{key} must be a number") from exc
    return BenchmarkSettings(**values)


def default_config_path(start: Path | None = None) -> Optional[Path]:
    """
    Return the `config.yaml` of the enclosing project, or None when there is none.

    Running without a config file is normal: the defaults in `constants.py` apply.
    """
    try:
        return find_project_root(start) / "config.yaml"
    except RuntimeError:
        return None


def load_settings(path: Optional[str | os.PathLike[str]] = None) -> BenchmarkSettings:
    """Load benchmark settings from YAML, falling back to defaults for anything missing."""
    cfg_path = Path(path).expanduser().resolve() if path else default_config_path()
    if cfg_path is None or not cfg_path.exists():
        if path:
            raise FileNotFoundError(f"Config file does not exist: {cfg_path}")
        return BenchmarkSettings()

    data = yaml.safe_load(cfg_path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{cfg_path}: top level must be a mapping")
    section = data.get("benchmark", {}) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{cfg_path}: `benchmark` must be a mapping")
    return _settings_from_mapping(section, cfg_path)
