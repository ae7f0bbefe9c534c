import math

import pytest

from cashflow_tvm.finance.payback import payback_period

RETURNS = [5.0] * 9


def test_interpolates_inside_crossing_period():
    # cumulative 25 after five periods, the sixth (index 5) covers the rest
    assert payback_period(RETURNS, 26.34) == pytest.approx(5.268)


def test_zero_or_negative_expenditure_is_immediate():
    assert payback_period(RETURNS, 0.0) == 0.0
    assert payback_period(RETURNS, -3.0) == 0.0
    assert payback_period([], 0.0) == 0.0


def test_never_paid_back_is_infinite():
    assert payback_period(RETURNS, 45.01) == math.inf
    assert payback_period([], 1.0) == math.inf


def test_reaching_total_exactly_is_not_enough():
    assert payback_period(RETURNS, sum(RETURNS)) == math.inf


def test_monotone_in_expenditure():
    flows = [3.0, 0.0, 7.5, 2.0, 10.0]
    values = [payback_period(flows, e / 4.0) for e in range(0, 100)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_dip_before_crossing():
    # running total 10, 4, 14 -> crosses 12 inside index 2
    assert payback_period([10.0, -6.0, 10.0], 12.0) == pytest.approx(2.0 + (12.0 - 4.0) / 10.0)


def test_accepts_generators():
    assert payback_period((x for x in [2.0, 2.0, 2.0]), 3.0) == pytest.approx(1.5)
