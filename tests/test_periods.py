from itertools import islice

from cashflow_tvm.finance.periods import Periods


def test_in_advance_starts_at_zero():
    assert list(islice(Periods(), 4)) == [0.0, 1.0, 2.0, 3.0]


def test_in_arrears_starts_at_one():
    assert list(islice(Periods(arrears=True), 3)) == [1.0, 2.0, 3.0]


def test_restartable():
    p = Periods()
    first = list(islice(p, 5))
    second = list(islice(p, 2))
    assert first[:2] == second == [0.0, 1.0]


def test_values_are_floats():
    assert all(isinstance(t, float) for t in islice(Periods(True), 3))
