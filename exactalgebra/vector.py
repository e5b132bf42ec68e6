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
"""Immutable vectors of exact rational numbers"""

from functools import reduce
from numbers import Integral
from typing import Iterable, Iterator, Tuple

import numpy as np

from .exact_number import ExactNumber
from .exceptions import DimensionMismatchError, IndexOutOfBoundsError


class Vector:
    """
    Fixed-length ordered sequence of ExactNumber values.

    Components are addressed with 1-based indices. Vectors are value objects:
    ``add``, ``scale`` and the other transforms return new instances.
    """

    __slots__ = ('_comps',)

    def __init__(self, comps: Iterable):
        """
        Args:
            comps: Non-empty iterable of values accepted by ExactNumber.value_of

        Raises:
            DimensionMismatchError: If no components are given
            TypeError: If ``comps`` is a single string
        """
        if isinstance(comps, str):
            raise TypeError("Vector components must be given as a sequence, not a string")
        values = tuple(ExactNumber.value_of(c) for c in comps)
        if not values:
            raise DimensionMismatchError("Vectors must contain at least one component")
        object.__setattr__(self, '_comps', values)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Vector, (self._comps,))

    @classmethod
    def zeros(cls, size: int) -> 'Vector':
        return cls([0] * size)

    @classmethod
    def basis(cls, size: int, index: int) -> 'Vector':
        """Return the standard basis vector ``e_index`` of length ``size``."""
        if index < 1 or index > size:
            raise IndexOutOfBoundsError(f"Invalid basis index {index} for size {size}")
        return cls(1 if i == index else 0 for i in range(1, size + 1))

    @classmethod
    def from_numpy(cls, array: np.ndarray, exact: bool = False) -> 'Vector':
        """Create a vector from a one-dimensional numpy array; see Matrix.from_numpy for ``exact``."""
        array = np.asarray(array)
        if array.ndim != 1:
            raise DimensionMismatchError(f"Expected a one-dimensional array, got shape {array.shape}")
        return cls(ExactNumber.value_of(v, exact) for v in array.tolist())

    @property
    def components(self) -> Tuple[ExactNumber, ...]:
        return self._comps

    def size(self) -> int:
        return len(self._comps)

    def get(self, index: int) -> ExactNumber:
        """Return the component at the 1-based ``index``."""
        if isinstance(index, bool) or not isinstance(index, Integral) or index < 1 or index > len(self._comps):
            raise IndexOutOfBoundsError(f"Invalid component index {index} for vector of size {self.size()}")
        return self._comps[index - 1]

    def _check_size(self, other: 'Vector', operation: str):
        if self.size() != other.size():
            raise DimensionMismatchError(f"Cannot {operation} vectors of sizes {self.size()} and {other.size()}")

    def add(self, other: 'Vector') -> 'Vector':
        self._check_size(other, 'add')
        return Vector(a.add(b) for a, b in zip(self._comps, other._comps))

    def subtract(self, other: 'Vector') -> 'Vector':
        self._check_size(other, 'subtract')
        return Vector(a.subtract(b) for a, b in zip(self._comps, other._comps))

    def scale(self, scalar) -> 'Vector':
        factor = ExactNumber.value_of(scalar)
        return Vector(c.multiply(factor) for c in self._comps)

    def negate(self) -> 'Vector':
        return self.scale(ExactNumber.MINUS_ONE)

    def dot(self, other: 'Vector') -> ExactNumber:
        """
        Return the dot product of two vectors of equal size.

        Raises:
            DimensionMismatchError: If the sizes differ
        """
        self._check_size(other, 'take the dot product of')
        return reduce(ExactNumber.add, (a.multiply(b) for a, b in zip(self._comps, other._comps)))

    def length_squared(self) -> ExactNumber:
        return self.dot(self)

    def length(self) -> ExactNumber:
        """
        Exact Euclidean length.

        Raises:
            IrrationalResultError: If the squared length is not a perfect square
        """
        return self.length_squared().sqrt()

    def unit(self) -> 'Vector':
        """
        Return the vector scaled to length one.

        Raises:
            DivisionByZeroError: For the zero vector
            IrrationalResultError: If the length is irrational
        """
        return self.scale(self.length().invert())

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self._comps)

    def equals(self, other: 'Vector') -> bool:
        if not isinstance(other, Vector) or self.size() != other.size():
            return False
        return all(a.equals(b) for a, b in zip(self._comps, other._comps))

    def to_numpy(self, dtype=object) -> np.ndarray:
        """
        Return the components as a numpy array.

        With the default ``dtype=object`` the entries are exact Fractions;
        ``dtype=float`` gives a floating-point approximation.
        """
        if dtype is object:
            return np.array([c.to_fraction() for c in self._comps], dtype=object)
        return np.array([float(c) for c in self._comps], dtype=dtype)

    def __len__(self) -> int:
        return len(self._comps)

    def __iter__(self) -> Iterator[ExactNumber]:
        return iter(self._comps)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._comps)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __str__(self) -> str:
        return '[' + ', '.join(str(c) for c in self._comps) + ']'

    def __repr__(self) -> str:
        return f"Vector([{', '.join(repr(str(c)) for c in self._comps)}])"
