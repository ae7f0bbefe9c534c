# cashflow_tvm/finance/npv.py
"""
Closed-form and single-pass present/future values with inflation.

    growth factor     g = (1 + inflation) / (1 + rate)
    npv               = sum_t CF[t] * g^t
    annuity npv       = P * (g^n - 1) / (g - 1)        (x g when in arrears)
    annuity fv        = P * (h^n - 1) / (h - 1),  h = (1 + rate) / (1 + inflation)
                                                     (x h when in advance)

No validation: a combined factor of exactly 1 (rate == inflation) or
rate <= -1 gives inf/nan rather than an exception.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from .discount import align
from .periods import Periods


def _ratio(grow: float, discount: float) -> float:
    """(1 + grow) / (1 + discount); inf/nan instead of ZeroDivisionError."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(1.0 + grow) / np.float64(1.0 + discount))


def _geometric_sum(payment: float, factor: float, n_payments: int) -> float:
    f = np.float64(factor)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(payment * (f ** int(n_payments) - 1.0) / (f - 1.0))


# ---------- NPV ----------
def npv(
    cashflows: Iterable[float],
    rate: float,
    inflation: float = 0.0,
    arrears: bool = False,
) -> float:
    """
    NPV of a regular series, one payment per period, starting at t=1 in
    arrears and t=0 in advance.
    """
    payments, times = align(cashflows, Periods(arrears=arrears))
    return _discounted_sum(payments, times, _ratio(inflation, rate))


def npv_schedule(
    payments: Iterable[float],
    times: Iterable[float],
    i: float,
    r: float,
    arrears: bool = False,
) -> float:
    """
    NPV at explicit payment times, interest `i` and inflation `r`.

    `arrears` is accepted for signature parity with the other forms and has no
    effect: the times already fix where each payment sits.
    """
    p, t = align(payments, times)
    return _discounted_sum(p, t, _ratio(r, i))


def npv_annuity(
    payment: float,
    n_payments: int,
    i: float,
    r: float,
    arrears: bool = False,
) -> float:
    """NPV of `n_payments` equal payments at interest `i` and inflation `r`."""
    g = _ratio(r, i)
    res = _geometric_sum(payment, g, n_payments)
    return res * g if arrears else res


# ---------- FV ----------
def fv(
    payment: float,
    n_payments: int,
    i: float,
    r: float,
    arrears: bool = False,
) -> float:
    """
    Future value of `n_payments` equal payments. Payments in advance earn one
    extra period of growth, so the in-advance result is the in-arrears result
    times (1+i)/(1+r).
    """
    h = _ratio(i, r)
    res = _geometric_sum(payment, h, n_payments)
    return res if arrears else res * h


def _discounted_sum(payments: np.ndarray, times: np.ndarray, factor: float) -> float:
    if payments.size == 0:
        return 0.0
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.sum(payments * np.power(factor, times)))


__all__ = ["npv", "npv_schedule", "npv_annuity", "fv"]
