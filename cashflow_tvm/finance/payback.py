# cashflow_tvm/finance/payback.py
"""
Non-discounted payback period with linear interpolation inside the period
where the running total first exceeds the expenditure.
"""
from __future__ import annotations

import math
from typing import Iterable

from .errors import NegativeResultError


def payback_period(cashflows: Iterable[float], expenditure: float) -> float:
    """
    Fractional number of periods (0-based) until cumulative cash flow exceeds
    `expenditure`.

      - expenditure <= 0          -> 0.0
      - never exceeded            -> inf
      - otherwise                 -> k + (expenditure - cum_before_k) / CF[k]

    Raises NegativeResultError if the interpolated result is negative or nan.
    """
    target = float(expenditure)
    if target <= 0.0:
        return 0.0

    total = 0.0
    for k, raw in enumerate(cashflows):
        cf = float(raw)
        before = total
        total += cf
        if total > target:
            result = k + (target - before) / cf
            if not result >= 0.0:
                raise NegativeResultError(
                    f"payback period came out negative: {result} "
                    f"(period {k}, payment {cf}, cumulative before {before})"
                )
            return result
    return math.inf


__all__ = ["payback_period"]
