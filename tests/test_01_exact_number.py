"""Exact rational number arithmetic."""
import pickle
from fractions import Fraction
from itertools import product

import pytest
from sympy import Rational

from exactalgebra import (ExactNumber, InvalidFractionError, DivisionByZeroError, IrrationalResultError,
                          LinearAlgebraError)

PAIRS = [(0, 1), (1, 2), (-3, 4), (7, -5), (10**30, 3), (-2, 1)]


class TestConstruction:

    def test_lowest_terms_positive_denominator(self):
        x = ExactNumber(6, -4)
        assert (x.numerator, x.denominator) == (-3, 2)

    def test_integer(self):
        x = ExactNumber(7)
        assert (x.numerator, x.denominator) == (7, 1)
        assert x.is_integer()

    def test_copy_pair_fraction_and_sympy(self):
        ref = ExactNumber(3, 4)
        assert ExactNumber(ref) == ref
        assert ExactNumber((3, 4)) == ref
        assert ExactNumber(Fraction(3, 4)) == ref
        assert ExactNumber(Rational(3, 4)) == ref

    def test_zero_denominator(self):
        with pytest.raises(InvalidFractionError):
            ExactNumber(1, 0)
        with pytest.raises(InvalidFractionError):
            ExactNumber((0, 0))

    def test_invalid_fraction_is_value_error(self):
        with pytest.raises(ValueError):
            ExactNumber(5, 0)

    def test_rejects_bool_and_float(self):
        with pytest.raises(TypeError):
            ExactNumber(True)
        with pytest.raises(TypeError):
            ExactNumber(0.5)

    def test_immutable(self):
        x = ExactNumber(1, 2)
        with pytest.raises(AttributeError):
            x._fraction = Fraction(1)

    def test_pickle(self):
        x = ExactNumber(-5, 9)
        assert pickle.loads(pickle.dumps(x)) == x


class TestValueOf:

    @pytest.mark.parametrize("text,expected", [
        ("3/4", (3, 4)),
        ("-2", (-2, 1)),
        (" 1.25 ", (5, 4)),
        ("6/-4", None),
        ("-6/4", (-3, 2)),
    ])
    def test_strings(self, text, expected):
        if expected is None:
            with pytest.raises(InvalidFractionError):
                ExactNumber.value_of(text)
        else:
            assert ExactNumber.value_of(text) == ExactNumber(*expected)

    @pytest.mark.parametrize("text", ["abc", "1/0", "", "1//2"])
    def test_bad_strings(self, text):
        with pytest.raises(InvalidFractionError):
            ExactNumber.value_of(text)

    def test_floats(self):
        assert ExactNumber.value_of(0.1) == ExactNumber(1, 10)
        assert ExactNumber.value_of(-2.5) == ExactNumber(-5, 2)
        assert ExactNumber.value_of(1e-10) == 0
        assert ExactNumber.value_of(1e-10, exact=True) == ExactNumber(Fraction(1e-10))
        assert ExactNumber.value_of(0.1, exact=True) == ExactNumber(Fraction(0.1))
        with pytest.raises(InvalidFractionError):
            ExactNumber.value_of(float('nan'))


class TestArithmetic:

    @pytest.mark.parametrize("a,b", list(product(PAIRS, PAIRS)))
    def test_add_subtract_is_exact(self, a, b):
        x, y = ExactNumber(*a), ExactNumber(*b)
        assert x.add(y).subtract(y).equals(x)

    def test_basic_operations(self):
        x, y = ExactNumber(1, 3), ExactNumber(1, 6)
        assert x.add(y) == ExactNumber(1, 2)
        assert x.subtract(y) == ExactNumber(1, 6)
        assert x.multiply(y) == ExactNumber(1, 18)
        assert x.divide(y) == ExactNumber(2)
        assert x.negate() == ExactNumber(-1, 3)
        assert ExactNumber(-2, 7).abs() == ExactNumber(2, 7)
        assert ExactNumber(-2, 7).invert() == ExactNumber(-7, 2)

    def test_operators_accept_ints(self):
        half = ExactNumber(1, 2)
        assert 1 + half == ExactNumber(3, 2)
        assert half * 2 == 1
        assert 1 - half == half
        assert 1 / half == 2
        assert -half == ExactNumber(-1, 2)
        assert half ** 2 == ExactNumber(1, 4)

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            ExactNumber(3).divide(ExactNumber.ZERO)
        with pytest.raises(DivisionByZeroError):
            ExactNumber.ZERO.invert()
        with pytest.raises(ZeroDivisionError):
            ExactNumber(1) / 0

    def test_errors_share_base_class(self):
        with pytest.raises(LinearAlgebraError):
            ExactNumber.ZERO.invert()


class TestPower:

    def test_integer_powers(self):
        assert ExactNumber(2, 3).pow(3) == ExactNumber(8, 27)
        assert ExactNumber(2, 3).pow(-2) == ExactNumber(9, 4)
        assert ExactNumber(5).pow(0) == 1

    def test_zero_to_negative_power(self):
        with pytest.raises(DivisionByZeroError):
            ExactNumber.ZERO.pow(-1)

    def test_square_roots(self):
        assert ExactNumber(4, 9).pow((1, 2)) == ExactNumber(2, 3)
        assert ExactNumber(4, 9).sqrt() == ExactNumber(2, 3)
        assert ExactNumber(0).sqrt() == 0
        assert ExactNumber(10**40).sqrt() == ExactNumber(10**20)

    @pytest.mark.parametrize("value", [(2, 1), (1, 3), (-4, 1), (10**40 + 1, 1)])
    def test_irrational_roots(self, value):
        with pytest.raises(IrrationalResultError):
            ExactNumber(*value).sqrt()

    def test_higher_roots(self):
        assert ExactNumber(-8, 27).pow(Fraction(1, 3)) == ExactNumber(-2, 3)
        assert ExactNumber(27, 8).pow((2, 3)) == ExactNumber(9, 4)
        assert ExactNumber(3**30).pow((1, 5)) == ExactNumber(3**6)
        assert ExactNumber(4).pow((-1, 2)) == ExactNumber(1, 2)
        with pytest.raises(IrrationalResultError):
            ExactNumber(16).pow((1, 3))


class TestComparison:

    def test_compare(self):
        a, b = ExactNumber(1, 3), ExactNumber(1, 2)
        assert a.compare_to(b) == -1
        assert b.compare_to(a) == 1
        assert a.compare_to(ExactNumber(2, 6)) == 0
        assert a < b <= b and b > a >= a
        assert sorted([b, ExactNumber(-1), a]) == [ExactNumber(-1), a, b]

    def test_predicates(self):
        assert ExactNumber(0, 5).is_zero()
        assert ExactNumber(3, 3).is_one()
        assert ExactNumber(-2, 3).signum() == -1
        assert ExactNumber.ZERO.signum() == 0
        assert not ExactNumber(1, 2).is_integer()

    def test_equality_and_hash(self):
        assert ExactNumber(2, 4) == ExactNumber(1, 2)
        assert ExactNumber(4, 2) == 2
        assert hash(ExactNumber(4, 2)) == hash(2)
        assert hash(ExactNumber(1, 2)) == hash(Fraction(1, 2))
        assert ExactNumber(1, 2) != "1/2"

    def test_no_tolerance(self):
        big = ExactNumber(10**50 + 1, 10**50)
        assert big != 1
        assert big > 1


class TestRepresentation:

    def test_str(self):
        assert str(ExactNumber(3, 4)) == "3/4"
        assert str(ExactNumber(-2)) == "-2"
        assert str(ExactNumber(6, -9)) == "-2/3"

    def test_repr(self):
        assert repr(ExactNumber(-3, 4)) == "ExactNumber(-3, 4)"

    def test_conversions(self):
        x = ExactNumber(3, 4)
        assert x.to_fraction() == Fraction(3, 4)
        assert x.to_sympy() == Rational(3, 4)
        assert float(x) == 0.75
