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
"""Immutable matrices of exact rational numbers

Entries are stored as a flat row-major tuple of ExactNumber values and are
addressed from the outside with 1-based (row, column) indices. Every
transformation, including the elementary row operations, returns a new
Matrix; no method modifies an existing instance.
"""

from numbers import Integral
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy import sparse

from .exact_number import ExactNumber
from .exceptions import DimensionMismatchError, IndexOutOfBoundsError
from .row_operation import Replace, RowOperation, Scale, Swap
from .vector import Vector


class Matrix:
    """
    Rectangular ``m x n`` grid of ExactNumber values.

    For example ``Matrix([1, 2, 3, 4, 5, 6], 2, 3)`` is the matrix::

        [ 1, 2, 3;
          4, 5, 6 ]
    """

    __slots__ = ('_comps', '_m', '_n')

    def __init__(self, comps: Iterable, m: int, n: int):
        """
        Args:
            comps: Entries in row-major order, any values accepted by ExactNumber.value_of
            m: Number of rows
            n: Number of columns

        Raises:
            DimensionMismatchError: If a dimension is not a positive integer or
                the number of entries differs from ``m * n``
        """
        for dim in (m, n):
            if isinstance(dim, bool) or not isinstance(dim, Integral):
                raise DimensionMismatchError(f"Matrix dimensions must be integers, got {m!r} x {n!r}")
        if m < 1 or n < 1:
            raise DimensionMismatchError(f"Matrix must have at least one row and column, got {m}x{n}")
        values = tuple(ExactNumber.value_of(c) for c in comps)
        if len(values) != m * n:
            raise DimensionMismatchError(f"Expected {m * n} entries for a {m}x{n} matrix, but found {len(values)}")
        object.__setattr__(self, '_comps', values)
        object.__setattr__(self, '_m', int(m))
        object.__setattr__(self, '_n', int(n))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Matrix, (self._comps, self._m, self._n))

    # Factories

    @classmethod
    def from_rows(cls, rows: Iterable[Union[Vector, Sequence]]) -> 'Matrix':
        """
        Build a matrix from row vectors or raw row sequences.

        Raises:
            DimensionMismatchError: If no rows are given or the rows differ in length
        """
        rows = [r if isinstance(r, Vector) else Vector(r) for r in rows]
        if not rows:
            raise DimensionMismatchError("Too few row vectors passed in")
        width = rows[0].size()
        for i, row in enumerate(rows, 1):
            if row.size() != width:
                raise DimensionMismatchError(f"Row {i} has {row.size()} entries, expected {width}")
        return cls([c for row in rows for c in row], len(rows), width)

    @classmethod
    def from_cols(cls, cols: Iterable[Union[Vector, Sequence]]) -> 'Matrix':
        """Build a matrix from column vectors or raw column sequences."""
        return cls.from_rows(cols).transpose()

    @classmethod
    def identity(cls, size: int) -> 'Matrix':
        return cls([1 if i == j else 0 for i in range(size) for j in range(size)], size, size)

    @classmethod
    def zeros(cls, m: int, n: int) -> 'Matrix':
        return cls([0] * (m * n), m, n)

    @classmethod
    def from_numpy(cls, array: np.ndarray, exact: bool = False) -> 'Matrix':
        """
        Create a Matrix from a two-dimensional numpy array.

        Integer and object (Fraction) arrays convert exactly. Float entries are
        converted with ExactNumber.value_of, so magnitudes below about 5e-7
        become zero unless ``exact=True`` keeps their full binary value.
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise DimensionMismatchError(f"Expected a two-dimensional array, got shape {array.shape}")
        rows, cols = array.shape
        return cls([ExactNumber.value_of(v, exact) for row in array.tolist() for v in row], rows, cols)

    @classmethod
    def from_sparse(cls, sparse_matrix: sparse.spmatrix) -> 'Matrix':
        """
        Create a Matrix from a scipy sparse matrix.

        Repeated coordinates of a COO matrix are summed, as scipy does.
        """
        rows, cols = sparse_matrix.shape
        comps: List[ExactNumber] = [ExactNumber.ZERO] * (rows * cols)
        coo = sparse.coo_matrix(sparse_matrix)
        for i, j, v in zip(coo.row, coo.col, coo.data):
            k = int(i) * cols + int(j)
            comps[k] = comps[k].add(ExactNumber.value_of(v.item() if hasattr(v, 'item') else v))
        return cls(comps, rows, cols)

    # Accessors

    @property
    def m(self) -> int:
        return self._m

    @property
    def n(self) -> int:
        return self._n

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._m, self._n)

    @property
    def components(self) -> Tuple[ExactNumber, ...]:
        return self._comps

    def _check_row(self, i: int):
        if isinstance(i, bool) or not isinstance(i, Integral) or i < 1 or i > self._m:
            raise IndexOutOfBoundsError(f"Invalid row index {i} for a {self._m}x{self._n} matrix")

    def _check_col(self, j: int):
        if isinstance(j, bool) or not isinstance(j, Integral) or j < 1 or j > self._n:
            raise IndexOutOfBoundsError(f"Invalid column index {j} for a {self._m}x{self._n} matrix")

    def get(self, row: int, col: int) -> ExactNumber:
        self._check_row(row)
        self._check_col(col)
        return self._comps[(row - 1) * self._n + (col - 1)]

    def get_row(self, i: int) -> Vector:
        """Return the ``i``-th row (1-based) as a Vector."""
        self._check_row(i)
        start = (i - 1) * self._n
        return Vector(self._comps[start:start + self._n])

    def get_col(self, j: int) -> Vector:
        """Return the ``j``-th column (1-based) as a Vector."""
        self._check_col(j)
        return Vector(self._comps[j - 1::self._n])

    def get_rows(self) -> Tuple[Vector, ...]:
        return tuple(self.get_row(i) for i in range(1, self._m + 1))

    def get_cols(self) -> Tuple[Vector, ...]:
        return tuple(self.get_col(j) for j in range(1, self._n + 1))

    def is_square(self) -> bool:
        return self._m == self._n

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self._comps)

    # Transforms

    def set_row(self, i: int, vector: Vector) -> 'Matrix':
        """
        Return a copy with row ``i`` replaced by ``vector``.

        Raises:
            IndexOutOfBoundsError: If ``i`` is not a valid row index
            DimensionMismatchError: If the vector length differs from the column count
        """
        self._check_row(i)
        if vector.size() != self._n:
            raise DimensionMismatchError(f"Row vector of size {vector.size()} does not fit {self._n} columns")
        rows = list(self.get_rows())
        rows[i - 1] = vector
        return Matrix.from_rows(rows)

    def set_col(self, j: int, vector: Vector) -> 'Matrix':
        """
        Return a copy with column ``j`` replaced by ``vector``.

        Raises:
            IndexOutOfBoundsError: If ``j`` is not a valid column index
            DimensionMismatchError: If the vector length differs from the row count
        """
        self._check_col(j)
        if vector.size() != self._m:
            raise DimensionMismatchError(f"Column vector of size {vector.size()} does not fit {self._m} rows")
        cols = list(self.get_cols())
        cols[j - 1] = vector
        return Matrix.from_cols(cols)

    def transpose(self) -> 'Matrix':
        return Matrix([self._comps[i * self._n + j] for j in range(self._n) for i in range(self._m)], self._n, self._m)

    def _check_same_shape(self, other: 'Matrix', operation: str):
        if self.shape != other.shape:
            raise DimensionMismatchError(f"Cannot {operation} a {self._m}x{self._n} and a "
                                         f"{other.m}x{other.n} matrix")

    def add(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other, 'add')
        return Matrix([a.add(b) for a, b in zip(self._comps, other._comps)], self._m, self._n)

    def subtract(self, other: 'Matrix') -> 'Matrix':
        self._check_same_shape(other, 'subtract')
        return Matrix([a.subtract(b) for a, b in zip(self._comps, other._comps)], self._m, self._n)

    def scale(self, scalar) -> 'Matrix':
        factor = ExactNumber.value_of(scalar)
        return Matrix([c.multiply(factor) for c in self._comps], self._m, self._n)

    def multiply(self, other: Union['Matrix', Vector]) -> Union['Matrix', Vector]:
        """
        Matrix product ``self * other``.

        A Vector operand is treated as a single-column matrix and the result is
        returned as a Vector.

        Args:
            other: Matrix with ``m == self.n`` rows, or Vector of size ``self.n``

        Returns:
            The product Matrix, or a Vector for a Vector operand

        Raises:
            DimensionMismatchError: If the inner dimensions differ
        """
        if isinstance(other, Vector):
            return self.multiply(Matrix.from_cols([other])).get_col(1)
        if self._n != other.m:
            raise DimensionMismatchError(f"Cannot multiply a {self._m}x{self._n} by a {other.m}x{other.n} matrix")
        rows = self.get_rows()
        cols = other.get_cols()
        return Matrix([row.dot(col) for row in rows for col in cols], self._m, other.n)

    def minor(self, row: int, col: int) -> 'Matrix':
        """
        Return the submatrix with ``row`` and ``col`` removed.

        Raises:
            IndexOutOfBoundsError: For invalid indices
            DimensionMismatchError: If removing them would leave an empty matrix
        """
        self._check_row(row)
        self._check_col(col)
        if self._m == 1 or self._n == 1:
            raise DimensionMismatchError(f"A {self._m}x{self._n} matrix has no minors")
        comps = [
            self._comps[i * self._n + j]
            for i in range(self._m) if i != row - 1
            for j in range(self._n) if j != col - 1
        ]
        return Matrix(comps, self._m - 1, self._n - 1)

    def augment(self, other: 'Matrix') -> 'Matrix':
        """Return ``[self | other]``; both matrices must have the same row count."""
        if self._m != other.m:
            raise DimensionMismatchError(f"Cannot augment a {self._m}-row matrix with a {other.m}-row matrix")
        return Matrix.from_rows(
            list(a) + list(b) for a, b in zip(self.get_rows(), other.get_rows()))

    def submatrix(self, rows: Tuple[int, int], cols: Tuple[int, int]) -> 'Matrix':
        """
        Return the block between the inclusive 1-based ranges ``rows`` and ``cols``.

        For example ``a.submatrix((1, 2), (3, 4))`` is the upper-right 2x2 block
        of a 2x4 matrix.
        """
        (r1, r2), (c1, c2) = rows, cols
        for i in (r1, r2):
            self._check_row(i)
        for j in (c1, c2):
            self._check_col(j)
        if r1 > r2 or c1 > c2:
            raise DimensionMismatchError(f"Empty block rows {rows}, cols {cols}")
        return Matrix([self.get(i, j) for i in range(r1, r2 + 1) for j in range(c1, c2 + 1)],
                      r2 - r1 + 1, c2 - c1 + 1)

    # Elementary row operations

    def scale_row(self, row: int, scalar, steps: Optional[List[RowOperation]] = None) -> 'Matrix':
        """
        ``R_row <- R_row * scalar``

        Args:
            row: 1-based row index
            scalar: Non-zero factor
            steps: Optional list the Scale record is appended to

        Returns:
            The new matrix
        """
        self._check_row(row)
        factor = ExactNumber.value_of(scalar)
        if factor.is_zero():
            raise ValueError("Scaling a row by zero is not an elementary row operation")
        comps = list(self._comps)
        start = (row - 1) * self._n
        for k in range(start, start + self._n):
            comps[k] = comps[k].multiply(factor)
        result = Matrix(comps, self._m, self._n)
        if steps is not None:
            steps.append(Scale(row, factor, result))
        return result

    def replace_row(self, target: int, source: int, scalar,
                    steps: Optional[List[RowOperation]] = None) -> 'Matrix':
        """
        ``R_target <- R_target + scalar * R_source``

        Args:
            target: 1-based index of the row that is changed
            source: 1-based index of the row that is added
            scalar: Factor applied to the source row
            steps: Optional list the Replace record is appended to

        Returns:
            The new matrix
        """
        self._check_row(target)
        self._check_row(source)
        factor = ExactNumber.value_of(scalar)
        comps = list(self._comps)
        t0 = (target - 1) * self._n
        s0 = (source - 1) * self._n
        for k in range(self._n):
            comps[t0 + k] = comps[t0 + k].add(factor.multiply(self._comps[s0 + k]))
        result = Matrix(comps, self._m, self._n)
        if steps is not None:
            steps.append(Replace(target, source, factor, result))
        return result

    def swap_rows(self, a: int, b: int, steps: Optional[List[RowOperation]] = None) -> 'Matrix':
        """
        ``R_a <-> R_b``

        Args:
            a: 1-based row index
            b: 1-based row index
            steps: Optional list the Swap record is appended to

        Returns:
            The new matrix
        """
        self._check_row(a)
        self._check_row(b)
        comps = list(self._comps)
        a0 = (a - 1) * self._n
        b0 = (b - 1) * self._n
        comps[a0:a0 + self._n], comps[b0:b0 + self._n] = \
            self._comps[b0:b0 + self._n], self._comps[a0:a0 + self._n]
        result = Matrix(comps, self._m, self._n)
        if steps is not None:
            steps.append(Swap(a, b, result))
        return result

    # Conversion and comparison

    def to_numpy(self, dtype=object) -> np.ndarray:
        """
        Return the entries as a two-dimensional numpy array.

        With the default ``dtype=object`` the entries are exact Fractions;
        ``dtype=float`` gives a floating-point approximation.
        """
        if dtype is object:
            values = [c.to_fraction() for c in self._comps]
        else:
            values = [float(c) for c in self._comps]
        return np.array(values, dtype=dtype).reshape(self._m, self._n)

    def to_sparse(self) -> sparse.csr_matrix:
        """Floating-point approximation as a scipy CSR matrix."""
        return sparse.csr_matrix(self.to_numpy(dtype=float))

    def equals(self, other: 'Matrix') -> bool:
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return all(a.equals(b) for a, b in zip(self._comps, other._comps))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._m, self._n, self._comps))

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __matmul__(self, other):
        return self.multiply(other)

    def __str__(self) -> str:
        return '\n'.join(str(row) for row in self.get_rows())

    def __repr__(self) -> str:
        rows = ', '.join('[' + ', '.join(repr(str(c)) for c in row) + ']' for row in self.get_rows())
        return f"Matrix.from_rows([{rows}])"
