"""
cashflow_tvm: time-value-of-money calculations over cash-flow series.

IRR (Newton-Raphson), NPV in sequence/explicit-time/annuity forms, future
value, and non-discounted payback period.
"""
from .finance.metrics import (
    ConvergenceError,
    ConvergenceWarning,
    DegenerateInputError,
    FinanceError,
    IRRResult,
    IRRStatus,
    NegativeResultError,
    Periods,
    fv,
    irr,
    npv,
    npv_annuity,
    npv_schedule,
    payback_period,
    solve_irr,
)

__version__ = "0.1.0"

__all__ = [
    "Periods",
    "irr",
    "solve_irr",
    "IRRResult",
    "IRRStatus",
    "npv",
    "npv_schedule",
    "npv_annuity",
    "fv",
    "payback_period",
    "FinanceError",
    "ConvergenceError",
    "DegenerateInputError",
    "NegativeResultError",
    "ConvergenceWarning",
]
