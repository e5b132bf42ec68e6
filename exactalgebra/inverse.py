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
"""Matrix inversion by reducing ``[A | I]``"""

import logging
from typing import List, NamedTuple, Optional

from .exceptions import NotSquareError, SingularMatrixError
from .matrix import Matrix
from .row_operation import RowOperation
from .row_reduction import RowReductionEngine


class InverseResult(NamedTuple):
    """Inverse matrix and the reduction trace of the augmented matrix."""
    matrix: Matrix
    steps: List[RowOperation]


class InverseEngine:
    """
    Computes exact inverses.

    The square matrix ``A`` is augmented with the identity and reduced to
    RREF. If the left block of the result is the identity, the right block is
    the inverse. Otherwise some column lacks a pivot, the rank is below the
    size of the matrix and no inverse exists.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.reducer = RowReductionEngine(self.logger)

    def inverse(self, matrix: Matrix) -> Matrix:
        """
        Return the inverse of ``matrix``.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the matrix has rank below its size
        """
        return self.inverse_with_steps(matrix).matrix

    def inverse_with_steps(self, matrix: Matrix) -> InverseResult:
        """Like :meth:`inverse`, but also return the row operations applied to ``[A | I]``."""
        if not matrix.is_square():
            raise NotSquareError(matrix.m, matrix.n, 'inversion')
        size = matrix.n
        augmented = matrix.augment(Matrix.identity(size))
        reduced, steps = self.reducer.reduce(augmented)
        left = reduced.submatrix((1, size), (1, size))
        if left != Matrix.identity(size):
            rank = sum(1 for row in left.get_rows() if not row.is_zero())
            self.logger.debug(f"Matrix is singular, left block has rank {rank}.")
            raise SingularMatrixError(rank, size)
        return InverseResult(reduced.submatrix((1, size), (size + 1, 2 * size)), steps)


def inverse(matrix: Matrix) -> Matrix:
    """Inverse of ``matrix``; see :class:`InverseEngine`."""
    return InverseEngine().inverse(matrix)
