# cashflow_tvm/finance/irr.py
"""
Internal rate of return by Newton-Raphson.

    NPV(i)  = sum_t CF[t] / (1+i)^t
    i_{k+1} = i_k - NPV(i_k) / NPV'(i_k),   i_0 = 0.0

Stops when |NPV(i)| <= tolerance or after `max_iterations` Newton steps.
Periods are either explicit (any iterable of reals) or synthesized from an
arrears flag. No convergence guarantee for series with zero or several sign
changes: the result is wherever Newton's method lands.
"""
from __future__ import annotations

import enum
import math
import warnings
from dataclasses import dataclass
from typing import Iterable, Union

from .discount import Derivative, Evaluator, align
from .errors import ConvergenceError, ConvergenceWarning, DegenerateInputError
from .periods import Periods

DEFAULT_TOLERANCE = 0.01
DEFAULT_MAX_ITERATIONS = 1000

PeriodsArg = Union[bool, Iterable[float]]


class IRRStatus(str, enum.Enum):
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"
    DEGENERATE = "degenerate"


@dataclass(frozen=True)
class IRRResult:
    rate: float
    status: IRRStatus
    iterations: int
    residual: float

    @property
    def converged(self) -> bool:
        return self.status is IRRStatus.CONVERGED

    def raise_for_status(self) -> "IRRResult":
        """Return self when converged, else raise the matching FinanceError."""
        if self.status is IRRStatus.EXHAUSTED:
            raise ConvergenceError(
                f"IRR did not converge in {self.iterations} iterations "
                f"(rate={self.rate}, residual={self.residual})"
            )
        if self.status is IRRStatus.DEGENERATE:
            raise DegenerateInputError(
                f"IRR Newton step became non-finite after {self.iterations} iterations"
            )
        return self


def _resolve_periods(periods: PeriodsArg) -> Iterable[float]:
    # bool first: a bare True/False means "synthesize 0,1,2,... / 1,2,3,..."
    if isinstance(periods, bool):
        return Periods(arrears=periods)
    return periods


# ---------- IRR ----------
def solve_irr(
    cashflows: Iterable[float],
    periods: PeriodsArg = False,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> IRRResult:
    """
    Newton-Raphson IRR with an explicit outcome.

    `periods` is either the arrears flag (payments one period apart, starting
    at 1 in arrears or 0 in advance) or the payment times. When cash flows and
    times differ in length, the longer one is cut to the shorter.
    """
    tol = float(tolerance)
    budget = int(max_iterations)
    if tol < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")
    if budget < 0:
        raise ValueError(f"max_iterations must be >= 0, got {max_iterations}")

    payments, times = align(cashflows, _resolve_periods(periods))

    i = 0.0
    steps = 0
    while True:
        val = Evaluator(i).total(payments, times)
        if abs(val) <= tol:
            return IRRResult(i, IRRStatus.CONVERGED, steps, val)
        if steps >= budget:
            return IRRResult(i, IRRStatus.EXHAUSTED, steps, val)

        deriv = Derivative(i).total(payments, times)
        i = _newton_step(i, val, deriv)
        steps += 1
        if not math.isfinite(i):
            return IRRResult(i, IRRStatus.DEGENERATE, steps, val)


def _newton_step(i: float, val: float, deriv: float) -> float:
    if deriv == 0.0:
        # val is non-zero here; mirror float division semantics without raising
        return i - math.copysign(math.inf, val) * math.copysign(1.0, deriv)
    return i - val / deriv


def irr(
    cashflows: Iterable[float],
    periods: PeriodsArg = False,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> float:
    """
    Periodic or explicit-time IRR as a decimal rate (0.18 = 18%).

    Never raises on non-convergence: the last estimate is returned (possibly
    inf/nan) and a ConvergenceWarning is emitted. Use solve_irr() to tell a
    converged rate apart from an exhausted or degenerate one.
    """
    result = solve_irr(cashflows, periods, tolerance, max_iterations)
    if not result.converged:
        warnings.warn(
            f"IRR {result.status.value} after {result.iterations} iterations "
            f"(rate={result.rate}, residual={result.residual})",
            ConvergenceWarning,
            stacklevel=2,
        )
    return result.rate


__all__ = [
    "DEFAULT_TOLERANCE",
    "DEFAULT_MAX_ITERATIONS",
    "IRRStatus",
    "IRRResult",
    "solve_irr",
    "irr",
]
