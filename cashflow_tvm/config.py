# cashflow_tvm/config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional
import io
import os

import yaml

from .finance.irr import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE

ENV_TOLERANCE = "IRR_TOLERANCE"
ENV_MAX_ITERATIONS = "IRR_MAX_ITERATIONS"


@dataclass(frozen=True)
class SolverConfig:
    """IRR solver settings: residual tolerance and Newton step budget."""

    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {self.tolerance}")
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {self.max_iterations}")

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "SolverConfig":
        """Copy with any known keys from `overrides` applied."""
        if not overrides:
            return self
        changes: Dict[str, Any] = {}
        if overrides.get("tolerance") is not None:
            changes["tolerance"] = float(overrides["tolerance"])
        if overrides.get("max_iterations") is not None:
            changes["max_iterations"] = int(overrides["max_iterations"])
        return replace(self, **changes) if changes else self


def _flatten_grouped(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten shallow groups like {'solver': {...}} into one level.
    Prefers top-level keys if collisions occur.
    """
    flat: Dict[str, Any] = dict(cfg)
    for k, v in list(cfg.items()):
        if isinstance(v, dict):
            for sk, sv in v.items():
                flat.setdefault(sk, sv)
    return flat


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    tol = environ.get(ENV_TOLERANCE)
    if tol:
        out["tolerance"] = float(tol)
    its = environ.get(ENV_MAX_ITERATIONS)
    if its:
        out["max_iterations"] = int(its)
    return out


def load_solver_config(
    source: str | os.PathLike | io.StringIO | None = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> SolverConfig:
    """
    Load solver settings from YAML (a path or text stream), then apply
    IRR_TOLERANCE / IRR_MAX_ITERATIONS from the environment. With no source,
    start from the defaults.
    """
    cfg: Dict[str, Any] = {}
    if source is not None:
        if hasattr(source, "read"):
            text = str(source.read())
        else:
            with open(os.fspath(source), "r", encoding="utf-8") as f:
                text = f.read()
        try:
            loaded = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"invalid solver config: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError("solver config must be a mapping")
        cfg = _flatten_grouped(loaded)

    env = os.environ if environ is None else environ
    return SolverConfig().merged(cfg).merged(_env_overrides(env))


__all__ = ["SolverConfig", "load_solver_config", "ENV_TOLERANCE", "ENV_MAX_ITERATIONS"]
