import pytest
from hypothesis import given, strategies as st

from kappa.errors import KappaDivisionByZero, KappaTypeError
from kappa.evaluation.arithmetic import BinOp, compare, compute, truncating_div
from kappa.types.lisp_list import LispList
from kappa.types.numbers import BigInt, INT_MAX, INT_MIN
from kappa.types.symbol import Symbol


def test_lookup_by_operator_name():
    assert BinOp("<=") is BinOp.LE
    assert BinOp("+") is BinOp.ADD
    with pytest.raises(ValueError):
        BinOp("foo")


def test_is_comparison():
    assert BinOp.LT.is_comparison
    assert not BinOp.DIV.is_comparison
    assert str(BinOp.GE) == ">="


@pytest.mark.parametrize(
    "op,left,right,expected",
    [
        (BinOp.ADD, 3, 4, 7),
        (BinOp.SUB, 3, 4, -1),
        (BinOp.MUL, 6, 7, 42),
        (BinOp.DIV, 7, 2, 3),
        (BinOp.DIV, -7, 2, -3),
        (BinOp.DIV, 7, -2, -3),
        (BinOp.DIV, -7, -2, 3),
        (BinOp.DIV, 0, 5, 0),
    ]
)
def test_fixed_width_results(op, left, right, expected):
    result = compute(op, left, right)
    assert result == expected
    assert type(result) is int


@pytest.mark.parametrize(
    "op,left,right,expected",
    [
        (BinOp.ADD, INT_MAX, 1, INT_MAX + 1),
        (BinOp.SUB, INT_MIN, 1, INT_MIN - 1),
        (BinOp.MUL, INT_MAX, 2, INT_MAX * 2),
        (BinOp.DIV, INT_MIN, -1, INT_MAX + 1),
    ]
)
def test_overflow_widens(op, left, right, expected):
    result = compute(op, left, right)
    assert type(result) is BigInt
    assert result == expected


def test_bigint_results_are_never_narrowed():
    result = compute(BinOp.SUB, BigInt(INT_MAX + 1), 1)
    assert result == INT_MAX
    assert type(result) is BigInt


def test_mixed_operands_give_bigint():
    assert type(compute(BinOp.ADD, BigInt(1), 2)) is BigInt
    assert type(compute(BinOp.ADD, 2, BigInt(1))) is BigInt
    assert compute(BinOp.DIV, BigInt(-7), 2) == -3


@pytest.mark.parametrize("left", [1, 0, BigInt(INT_MAX + 1)])
@pytest.mark.parametrize("right", [0, BigInt(0)])
def test_division_by_zero(left, right):
    with pytest.raises(KappaDivisionByZero):
        compute(BinOp.DIV, left, right)


def test_truncating_div_message():
    with pytest.raises(KappaDivisionByZero, match="division by zero: 5 / 0"):
        truncating_div(5, 0)


@pytest.mark.parametrize(
    "op,left,right,expected",
    [
        (BinOp.LT, 1, 2, True),
        (BinOp.LE, 2, 2, True),
        (BinOp.GT, 1, 2, False),
        (BinOp.GE, 2, 3, False),
        (BinOp.LT, BigInt(INT_MAX + 1), INT_MAX, False),
        (BinOp.GT, BigInt(INT_MAX + 1), INT_MAX, True),
    ]
)
def test_compare(op, left, right, expected):
    assert compare(op, left, right) is expected


@pytest.mark.parametrize("bad", [True, False, "3", Symbol("x"), LispList.of(1)])
def test_non_integer_operands(bad):
    with pytest.raises(KappaTypeError):
        compute(BinOp.ADD, bad, 1)
    with pytest.raises(KappaTypeError):
        compare(BinOp.LT, 1, bad)


# -------------------------------
# Hypothesis tests
# -------------------------------
fixed = st.integers(min_value=INT_MIN, max_value=INT_MAX)


@given(fixed, fixed)
def test_addition_is_exact(a, b):
    result = compute(BinOp.ADD, a, b)
    assert result == a + b
    if INT_MIN <= a + b <= INT_MAX:
        assert type(result) is int
    else:
        assert type(result) is BigInt


@given(fixed, fixed)
def test_multiplication_is_exact(a, b):
    assert compute(BinOp.MUL, a, b) == a * b


@given(st.integers(), st.integers().filter(lambda n: n != 0))
def test_division_truncates_toward_zero(a, b):
    q = truncating_div(a, b)
    assert abs(q) == abs(a) // abs(b)
    assert q == 0 or (q < 0) == ((a < 0) != (b < 0))
