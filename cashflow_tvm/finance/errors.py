# cashflow_tvm/finance/errors.py
"""
Opt-in error channel. The numeric functions stay permissive (non-finite
results, no exceptions); callers that want a hard failure go through
IRRResult.raise_for_status() or catch NegativeResultError from payback.
"""
from __future__ import annotations


class FinanceError(ValueError):
    """Base class for reported calculation failures."""


class ConvergenceError(FinanceError):
    """The IRR iteration budget ran out before the residual met tolerance."""


class DegenerateInputError(FinanceError):
    """A Newton step produced a non-finite rate (zero or non-finite derivative)."""


class NegativeResultError(FinanceError):
    """A payback period came out negative."""


class ConvergenceWarning(RuntimeWarning):
    pass


__all__ = [
    "FinanceError",
    "ConvergenceError",
    "DegenerateInputError",
    "NegativeResultError",
    "ConvergenceWarning",
]
