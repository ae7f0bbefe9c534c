# cashflow_tvm/scenario_runner.py
"""
Evaluate cash-flow schedules (mappings or YAML/JSON files) into flat summary
rows: IRR with its solver status, NPV when a rate is given, payback period
when an expenditure is given.
"""
from __future__ import annotations

import math
import warnings
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .config import SolverConfig, load_solver_config
from .finance.irr import solve_irr
from .finance.npv import npv, npv_schedule
from .finance.payback import payback_period
from .validate import (
    iter_schedule_files,
    load_schedule_from_file,
    mode_from_env_or_flag,
    validate_schedule_dict,
)


def evaluate_schedule(
    data: Dict[str, Any],
    config: Optional[SolverConfig] = None,
    *,
    mode: Optional[str] = None,
    where: str = "<mem>",
) -> Dict[str, Any]:
    """Validate one schedule and compute its metrics."""
    sched = validate_schedule_dict(data, mode=mode_from_env_or_flag(mode), where=where)
    cfg = (config or load_solver_config()).merged(sched.get("solver"))

    cashflows = sched["cashflows"]
    times = sched.get("times")
    periods = times if times is not None else sched["arrears"]

    result = solve_irr(cashflows, periods, cfg.tolerance, cfg.max_iterations)
    summary: Dict[str, Any] = {
        "irr": result.rate,
        "irr_status": result.status.value,
        "irr_iterations": result.iterations,
        "irr_residual": result.residual,
    }

    if "rate" in sched:
        inflation = sched.get("inflation", 0.0)
        if times is not None:
            summary["npv"] = npv_schedule(cashflows, times, sched["rate"], inflation)
        else:
            summary["npv"] = npv(cashflows, sched["rate"], inflation, sched["arrears"])

    if "expenditure" in sched:
        summary["payback_period"] = payback_period(cashflows, sched["expenditure"])

    return summary


def run_dir(
    path: str | Path,
    config: Optional[SolverConfig] = None,
    *,
    mode: Optional[str] = None,
) -> pd.DataFrame:
    """
    Evaluate a schedule file, or every YAML/JSON schedule in a directory.
    Failing schedules are skipped with a warning. Summary statistics go in
    DataFrame.attrs.
    """
    target = Path(path)
    files = [f for f in iter_schedule_files(target) if f.is_file()]
    if not files:
        raise ValueError(f"{target}: no schedule files found")

    cfg = config or load_solver_config()
    rows: List[Dict[str, Any]] = []
    failed_count = 0
    for f in files:
        try:
            data = load_schedule_from_file(f)
            row = evaluate_schedule(data, cfg, mode=mode, where=str(f))
        except Exception as e:
            failed_count += 1
            warnings.warn(f"Schedule {f.name} failed: {e}")
            continue
        rows.append({"schedule": f.stem, **row})

    if failed_count > 0:
        warnings.warn(f"run_dir: {failed_count}/{len(files)} schedules failed")

    df = pd.DataFrame(rows)
    if len(df) > 0:
        converged = df["irr_status"] == "converged"
        df.attrs["converged_share"] = float(converged.mean())
        df.attrs["mean_irr"] = (
            float(df.loc[converged, "irr"].mean()) if converged.any() else math.nan
        )
    df.attrs["success_rate"] = len(df) / len(files)
    return df


__all__ = ["evaluate_schedule", "run_dir"]
