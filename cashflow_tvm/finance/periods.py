# cashflow_tvm/finance/periods.py
"""
Synthetic period indices for equally spaced payments.

    in advance : 0, 1, 2, ...
    in arrears : 1, 2, 3, ...

The sequence never ends; pair it with a finite cash-flow series and let the
cash flows decide the length.
"""
from __future__ import annotations

import itertools
from typing import Iterator


class Periods:
    """Restartable, infinite iterable of float period indices."""

    def __init__(self, arrears: bool = False) -> None:
        self.arrears = bool(arrears)

    @property
    def start(self) -> float:
        return 1.0 if self.arrears else 0.0

    def __iter__(self) -> Iterator[float]:
        # a fresh counter per iter() so the same object can be reused
        return itertools.count(self.start, 1.0)

    def __repr__(self) -> str:
        return f"Periods(arrears={self.arrears})"


__all__ = ["Periods"]
