# cashflow_tvm/finance/discount.py
"""
Per-payment discounting at a fixed trial rate:

    Evaluator(i)(p, t)  =  p / (1+i)^t
    Derivative(i)(p, t) = -p * t / (1+i)^(t+1)     (d/di of the above)

Both accept scalars or numpy arrays. Degenerate rates (i <= -1) are not
rejected; they come back as inf/nan.
"""
from __future__ import annotations

from itertools import islice
from typing import Iterable, Tuple

import numpy as np


def align(
    cashflows: Iterable[float], periods: Iterable[float]
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Pair payments with periods as two float arrays of equal length.
    The longer input is truncated; `periods` may be infinite.
    """
    payments = [float(cf) for cf in cashflows]
    times = [float(t) for t in islice(periods, len(payments))]
    n = len(times)
    return np.asarray(payments[:n], dtype=float), np.asarray(times, dtype=float)


class Evaluator:
    """Present value of a payment at `rate`."""

    def __init__(self, rate: float = 0.0) -> None:
        self.rate = float(rate)

    def __call__(self, payment, period):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return payment / np.power(1.0 + self.rate, period)

    def total(self, payments: np.ndarray, periods: np.ndarray) -> float:
        if payments.size == 0:
            return 0.0
        with np.errstate(invalid="ignore", over="ignore"):
            return float(np.sum(self(payments, periods)))


class Derivative:
    """Derivative w.r.t. `rate` of the present value of a payment."""

    def __init__(self, rate: float = 0.0) -> None:
        self.rate = float(rate)

    def __call__(self, payment, period):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return -payment * period / np.power(1.0 + self.rate, np.add(period, 1.0))

    def total(self, payments: np.ndarray, periods: np.ndarray) -> float:
        if payments.size == 0:
            return 0.0
        with np.errstate(invalid="ignore", over="ignore"):
            return float(np.sum(self(payments, periods)))


def present_value(rate: float, payment: float, period: float) -> float:
    return float(Evaluator(rate)(float(payment), float(period)))


def present_value_derivative(rate: float, payment: float, period: float) -> float:
    return float(Derivative(rate)(float(payment), float(period)))


__all__ = [
    "align",
    "Evaluator",
    "Derivative",
    "present_value",
    "present_value_derivative",
]
