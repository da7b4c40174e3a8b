"""Choose the report's statistic and formalization from TOML configuration.

Settings come from ``[tool.climreport]`` in ``pyproject.toml`` and are then
overridden by a top-level table in ``.climreport.toml``.  Both keys must
name entries in climreport.registry; the check happens at load time so a
typo is reported before any measurement is read.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Iterator, Optional, Tuple

from .errors import ConfigError, UnknownStrategyError
from .formalizations.base import Formalization
from .registry import (
    available_formalizations,
    available_statistics,
    get_formalization,
    get_statistic,
)
from .statistics.base import Statistic


@dataclass
class ReportConfig:
    """Which registered strategies the CLI combines."""

    # Registry key of the statistic, see available_statistics().
    statistic: str = "mean_and_std"
    # Registry key of the markup dialect, see available_formalizations().
    formalization: str = "markdown"

    def build(self) -> Tuple[Statistic, Formalization]:
        """Instantiate the configured statistic and formalization."""
        return get_statistic(self.statistic), get_formalization(self.formalization)


def _load_table(path: Path) -> dict:
    """Parse *path*; a missing file is an empty table, a broken one an error."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(path.name, f"invalid TOML: {exc}") from None


def _layers(project_root: Path) -> Iterator[Tuple[str, dict]]:
    """Yield (origin, settings) pairs, lowest precedence first."""
    pyproject = _load_table(project_root / "pyproject.toml")
    section = pyproject.get("tool", {}).get("climreport", {})
    if not isinstance(section, dict):
        raise ConfigError("pyproject.toml", "[tool.climreport] must be a table")
    yield "pyproject.toml [tool.climreport]", section
    yield ".climreport.toml", _load_table(project_root / ".climreport.toml")


def _apply(cfg: ReportConfig, origin: str, settings: dict) -> None:
    """Overlay *settings* onto *cfg*; every option must be a known string."""
    names = sorted(f.name for f in fields(cfg))
    for key, val in settings.items():
        if key not in names:
            raise ConfigError(
                origin, f"unknown option {key!r} (valid: {', '.join(names)})"
            )
        if not isinstance(val, str):
            raise ConfigError(origin, f"{key} must be a string, got {val!r}")
        setattr(cfg, key, val)


def _check_registered(cfg: ReportConfig) -> None:
    if cfg.statistic not in available_statistics():
        raise UnknownStrategyError("statistic", cfg.statistic, available_statistics())
    if cfg.formalization not in available_formalizations():
        raise UnknownStrategyError(
            "formalization", cfg.formalization, available_formalizations()
        )


def load_config(project_root: Optional[Path] = None) -> ReportConfig:
    """Load and validate configuration for *project_root* (default: cwd)."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = ReportConfig()
    for origin, settings in _layers(project_root):
        _apply(cfg, origin, settings)
    _check_registered(cfg)
    return cfg
