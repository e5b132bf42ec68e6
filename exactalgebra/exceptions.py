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
"""Exceptions raised by the exact linear algebra routines

Every error derives from :class:`LinearAlgebraError` and, in addition, from the
builtin exception that describes the failure best, so ``except ValueError`` or
``except ZeroDivisionError`` in calling code keeps working.
"""


class LinearAlgebraError(Exception):
    """Base class of all errors raised by exactalgebra."""


class InvalidFractionError(LinearAlgebraError, ValueError):
    """A rational number was constructed with a zero denominator or from malformed input."""


class DivisionByZeroError(LinearAlgebraError, ZeroDivisionError):
    """Division by, or inversion of, the zero value."""


class IrrationalResultError(LinearAlgebraError, ArithmeticError):
    """A requested root has no exact rational value."""


class DimensionMismatchError(LinearAlgebraError, ValueError):
    """Vectors or matrices with incompatible sizes were combined or constructed."""


class IndexOutOfBoundsError(LinearAlgebraError, IndexError):
    """A 1-based row, column or component index lies outside the valid range."""


class NotSquareError(LinearAlgebraError, ValueError):
    """A determinant or inverse was requested for a non-square matrix."""

    def __init__(self, m: int, n: int, operation: str = 'operation'):
        self.m = m
        self.n = n
        super().__init__(f"Matrix must be square for {operation}: {m}x{n}")


class SingularMatrixError(LinearAlgebraError, ArithmeticError):
    """An inverse was requested for a matrix of less than full rank."""

    def __init__(self, rank: int, size: int):
        self.rank = rank
        self.size = size
        super().__init__(f"Matrix is singular (rank {rank} < {size})")
