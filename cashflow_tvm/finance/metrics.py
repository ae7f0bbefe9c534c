"""
Finance metrics facade.

Design:
- IRR lives only in cashflow_tvm.finance.irr; NPV/FV only in
  cashflow_tvm.finance.npv (singletons, see tests/architecture).
- This module must not *define* irr/npv; it only re-exports.
"""
from .discount import Derivative, Evaluator, present_value, present_value_derivative
from .errors import (
    ConvergenceError,
    ConvergenceWarning,
    DegenerateInputError,
    FinanceError,
    NegativeResultError,
)
from .irr import IRRResult, IRRStatus, irr as irr, solve_irr
from .npv import fv, npv as npv, npv_annuity, npv_schedule
from .payback import payback_period
from .periods import Periods

__all__ = [
    "Periods",
    "Evaluator",
    "Derivative",
    "present_value",
    "present_value_derivative",
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
