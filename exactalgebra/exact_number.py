#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exact rational numbers

:class:`ExactNumber` is a thin immutable wrapper around :class:`fractions.Fraction`.
Python's integers have arbitrary precision and ``Fraction`` keeps every value
in lowest terms with a positive denominator, so the wrapper only has to add
the error taxonomy of the package, exact roots and a method-style API that the
vector and matrix classes build upon.
"""

import math
from fractions import Fraction
from numbers import Integral
from typing import Optional, Tuple, Union

from sympy import Rational

from .exceptions import DivisionByZeroError, InvalidFractionError, IrrationalResultError

Numeric = Union[int, Fraction, Rational, 'ExactNumber', Tuple[int, int]]


def _integer_root(value: int, degree: int) -> Optional[int]:
    """Return the exact ``degree``-th root of the non-negative integer ``value``.

    Returns None when ``value`` is not a perfect power.
    """
    if value < 2:
        return value
    if degree == 2:
        root = math.isqrt(value)
    else:
        # integer Newton iteration, starting above the true root
        root = 1 << -(-value.bit_length() // degree)
        while True:
            nxt = ((degree - 1) * root + value // root**(degree - 1)) // degree
            if nxt >= root:
                break
            root = nxt
    return root if root**degree == value else None


def _to_fraction(value) -> Fraction:
    if isinstance(value, ExactNumber):
        return value._fraction
    if isinstance(value, bool):
        raise TypeError("Booleans are not accepted as exact numbers")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, Integral):
        return Fraction(int(value))
    if isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    if isinstance(value, tuple) and len(value) == 2:
        return _make_fraction(value[0], value[1])
    raise TypeError(f"Cannot convert {type(value).__name__} to an exact number")


def _make_fraction(numerator, denominator) -> Fraction:
    num = _to_fraction(numerator)
    den = _to_fraction(denominator)
    if den == 0:
        raise InvalidFractionError(f"Zero denominator in {numerator}/{denominator}")
    return num / den


class ExactNumber:
    """
    Arbitrary-precision rational value ``n/d`` held in lowest terms with ``d > 0``.

    Instances are immutable; every arithmetic method returns a new value.
    Operands of the arithmetic methods may be ExactNumbers, ints, Fractions,
    sympy Rationals or ``(numerator, denominator)`` pairs.

    Examples:
        >>> ExactNumber(6, -4)
        ExactNumber(-3, 2)
        >>> str(ExactNumber(1, 3).add(ExactNumber(1, 6)))
        '1/2'
    """

    __slots__ = ('_fraction',)

    def __init__(self, numerator: Numeric = 0, denominator: Optional[Numeric] = None):
        """
        Args:
            numerator: An int, ExactNumber, Fraction, sympy Rational or
                ``(numerator, denominator)`` pair
            denominator: Optional denominator; must not be zero

        Raises:
            InvalidFractionError: If the denominator is zero
            TypeError: If an argument is not an exact rational type
        """
        if denominator is None:
            fraction = _to_fraction(numerator)
        else:
            fraction = _make_fraction(numerator, denominator)
        object.__setattr__(self, '_fraction', fraction)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (ExactNumber, (self.numerator, self.denominator))

    @staticmethod
    def value_of(value: Union[Numeric, str, float], exact: bool = False) -> 'ExactNumber':
        """
        Factory accepting everything the constructor does, plus strings and floats.

        Strings may be integers (``"-2"``), fractions (``"3/4"``) or decimals
        (``"1.25"``). Floats are converted to the closest fraction with a
        denominator of at most one million, so ``0.1`` becomes ``1/10`` and any
        magnitude below about 5e-7 collapses to zero. With ``exact=True`` a
        float is converted to the exact value of its binary representation.

        Args:
            value: Value to convert
            exact: Keep the full binary value of floats instead of simplifying

        Raises:
            InvalidFractionError: If a string cannot be read as a rational number
        """
        if isinstance(value, ExactNumber):
            return value
        if isinstance(value, str):
            try:
                return ExactNumber(Fraction(value.strip()))
            except ZeroDivisionError:
                raise InvalidFractionError(f"Zero denominator in {value!r}") from None
            except ValueError:
                raise InvalidFractionError(f"Invalid fraction format: {value!r}") from None
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidFractionError(f"Cannot represent {value} exactly")
            if exact:
                return ExactNumber(Fraction(value))
            return ExactNumber(Fraction(value).limit_denominator())
        return ExactNumber(value)

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    def to_fraction(self) -> Fraction:
        return self._fraction

    def to_sympy(self) -> Rational:
        return Rational(self.numerator, self.denominator)

    # Arithmetic

    def add(self, other: Numeric) -> 'ExactNumber':
        return ExactNumber(self._fraction + _to_fraction(other))

    def subtract(self, other: Numeric) -> 'ExactNumber':
        return ExactNumber(self._fraction - _to_fraction(other))

    def multiply(self, other: Numeric) -> 'ExactNumber':
        return ExactNumber(self._fraction * _to_fraction(other))

    def divide(self, other: Numeric) -> 'ExactNumber':
        """
        Divide by ``other``.

        Raises:
            DivisionByZeroError: If ``other`` is zero
        """
        divisor = _to_fraction(other)
        if divisor == 0:
            raise DivisionByZeroError(f"Division of {self} by zero")
        return ExactNumber(self._fraction / divisor)

    def negate(self) -> 'ExactNumber':
        return ExactNumber(-self._fraction)

    def abs(self) -> 'ExactNumber':
        return ExactNumber(abs(self._fraction))

    def invert(self) -> 'ExactNumber':
        """
        Return the multiplicative inverse ``1/self``.

        Raises:
            DivisionByZeroError: If this value is zero
        """
        if self._fraction == 0:
            raise DivisionByZeroError("Zero has no multiplicative inverse")
        return ExactNumber(1 / self._fraction)

    def pow(self, exponent: Numeric) -> 'ExactNumber':
        """
        Return ``self ** exponent`` for an integer or rational exponent.

        A rational exponent ``p/q`` is only accepted when the ``q``-th root of
        this value is itself rational, e.g. ``ExactNumber(4, 9).pow((1, 2))``
        gives ``2/3``.

        Args:
            exponent: Integer or rational exponent

        Returns:
            The exact power

        Raises:
            DivisionByZeroError: If zero is raised to a negative power
            IrrationalResultError: If the result has no exact rational value
        """
        exp = _to_fraction(exponent)
        if self._fraction == 0 and exp < 0:
            raise DivisionByZeroError(f"Zero cannot be raised to the negative power {exp}")
        if exp.denominator == 1:
            return ExactNumber(self._fraction**exp.numerator)
        return self._root(exp.denominator).pow(exp.numerator)

    def sqrt(self) -> 'ExactNumber':
        """Exact square root; raises IrrationalResultError for non-squares."""
        return self.pow(Fraction(1, 2))

    def _root(self, degree: int) -> 'ExactNumber':
        negative = self._fraction < 0
        if negative and degree % 2 == 0:
            raise IrrationalResultError(f"{self} has no real root of degree {degree}")
        num = _integer_root(abs(self.numerator), degree)
        den = _integer_root(self.denominator, degree)
        if num is None or den is None:
            raise IrrationalResultError(f"Root of degree {degree} of {self} is not rational")
        return ExactNumber(-num if negative else num, den)

    # Comparison

    def equals(self, other: Numeric) -> bool:
        return self._fraction == _to_fraction(other)

    def compare_to(self, other: Numeric) -> int:
        """Compare to another value: -1 if less, 0 if equal, 1 if greater"""
        rhs = _to_fraction(other)
        if self._fraction < rhs:
            return -1
        elif self._fraction > rhs:
            return 1
        return 0

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        return self.compare_to(0)

    def is_zero(self) -> bool:
        return self._fraction == 0

    def is_one(self) -> bool:
        return self._fraction == 1

    def is_integer(self) -> bool:
        return self._fraction.denominator == 1

    # Python protocol

    def __eq__(self, other) -> bool:
        try:
            return self._fraction == _to_fraction(other)
        except TypeError:
            return NotImplemented

    def __lt__(self, other) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other) -> bool:
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __bool__(self) -> bool:
        return self._fraction != 0

    def __float__(self) -> float:
        """Explicit floating-point approximation."""
        return float(self._fraction)

    def __str__(self) -> str:
        if self._fraction.denominator == 1:
            return str(self._fraction.numerator)
        return f"{self._fraction.numerator}/{self._fraction.denominator}"

    def __repr__(self) -> str:
        return f"ExactNumber({self.numerator}, {self.denominator})"

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return ExactNumber(other).add(self)

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return ExactNumber(other).subtract(self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return ExactNumber(other).multiply(self)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return ExactNumber(other).divide(self)

    def __pow__(self, exponent):
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()


ExactNumber.ZERO = ExactNumber(0)
ExactNumber.ONE = ExactNumber(1)
ExactNumber.MINUS_ONE = ExactNumber(-1)
