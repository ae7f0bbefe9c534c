# cashflow_tvm/validate.py
from __future__ import annotations
import json
import math
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

KNOWN_KEYS = {"cashflows", "times", "arrears", "rate", "inflation", "expenditure", "solver"}
SOLVER_KEYS = {"tolerance", "max_iterations"}


def mode_from_env_or_flag(flag: str | None = None) -> str:
    if flag in ("strict", "relaxed"):
        return flag
    env = (os.environ.get("VALIDATION_MODE") or "").lower()
    return env if env in ("strict", "relaxed") else "relaxed"


def _numbers(value: Any, key: str, where: str) -> List[float]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{where}: {key} must be a list of numbers")
    out: List[float] = []
    for idx, v in enumerate(value):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"{where}: {key}[{idx}] is not a number: {v!r}")
        if not math.isfinite(float(v)):
            raise ValueError(f"{where}: {key}[{idx}] must be finite: {v!r}")
        out.append(float(v))
    return out


def validate_schedule_dict(
    data: Dict[str, Any], *, mode: str = "relaxed", where: str = "<mem>"
) -> Dict[str, Any]:
    """
    Check a cash-flow schedule and return it normalized (floats, bool flags).
      - relaxed: require `cashflows`; ignore unknown keys; `times` may differ
                 in length (the longer side is truncated at evaluation)
      - strict : additionally reject unknown keys and require len(times) ==
                 len(cashflows)
    """
    if not isinstance(data, dict):
        raise ValueError(f"{where}: schedule must be a mapping")
    if "cashflows" not in data:
        raise ValueError(f"{where}: missing required keys: ['cashflows']")

    if mode == "strict":
        unknown = sorted(k for k in data if k not in KNOWN_KEYS)
        if unknown:
            raise ValueError(f"{where}: unknown keys (strict mode): {unknown}")

    out: Dict[str, Any] = {"cashflows": _numbers(data["cashflows"], "cashflows", where)}

    if data.get("times") is not None:
        times = _numbers(data["times"], "times", where)
        if mode == "strict" and len(times) != len(out["cashflows"]):
            raise ValueError(
                f"{where}: times has {len(times)} entries, cashflows has {len(out['cashflows'])}"
            )
        out["times"] = times

    arrears = data.get("arrears", False)
    if not isinstance(arrears, bool):
        raise ValueError(f"{where}: arrears must be true or false, got {arrears!r}")
    out["arrears"] = arrears

    for key in ("rate", "inflation"):
        if data.get(key) is None:
            continue
        v = float(data[key])
        if v <= -1.0:
            raise ValueError(f"{where}: {key} outside allowed range (-1, inf): {v}")
        out[key] = v

    if data.get("expenditure") is not None:
        out["expenditure"] = float(data["expenditure"])

    solver = data.get("solver")
    if solver is not None:
        if not isinstance(solver, dict):
            raise ValueError(f"{where}: solver must be a mapping")
        if mode == "strict":
            unknown = sorted(k for k in solver if k not in SOLVER_KEYS)
            if unknown:
                raise ValueError(f"{where}: unknown solver keys (strict mode): {unknown}")
        out["solver"] = {k: solver[k] for k in SOLVER_KEYS if k in solver}

    return out


def load_schedule_from_file(path: str | os.PathLike) -> Dict[str, Any]:
    p = Path(path)
    if p.is_dir():
        # scenario_runner handles directories; keep this function file-only
        raise ValueError(f"{p} is a directory (expected a file)")
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text) or {}
    return json.loads(text or "{}")


def iter_schedule_files(p: Path) -> Iterable[Path]:
    if p.is_file():
        yield p
    elif p.is_dir():
        for ext in ("*.yaml", "*.yml", "*.json"):
            yield from sorted(p.glob(ext))


__all__ = [
    "mode_from_env_or_flag",
    "validate_schedule_dict",
    "load_schedule_from_file",
    "iter_schedule_files",
]
