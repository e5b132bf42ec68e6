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
"""Determinants of square matrices

The default method is Laplace expansion along the first row. It never
divides, so every intermediate value is an integer combination of the
entries, but its cost grows factorially with the matrix size. The
``elimination`` method multiplies the pivots of the row-echelon form instead
and flips the sign once per row swap; it runs in polynomial time.
"""

import logging
from typing import Optional

from .exact_number import ExactNumber
from .exceptions import NotSquareError
from .matrix import Matrix
from .names import COFACTOR, DETERMINANT_METHODS, ELIMINATION, SWAP
from .row_reduction import RowReductionEngine


class DeterminantEngine:
    """Computes exact determinants."""

    def __init__(self, method: str = COFACTOR, logger: Optional[logging.Logger] = None):
        """
        Args:
            method: ``'cofactor'`` (default) or ``'elimination'``
            logger: Optional logger, defaults to the module logger
        """
        if method not in DETERMINANT_METHODS:
            raise ValueError(f"Unknown determinant method '{method}'. Use one of {DETERMINANT_METHODS}.")
        self.method = method
        self.logger = logger or logging.getLogger(__name__)

    def determinant(self, matrix: Matrix) -> ExactNumber:
        """
        Return the determinant of a square matrix.

        Raises:
            NotSquareError: If the matrix is not square
        """
        if not matrix.is_square():
            raise NotSquareError(matrix.m, matrix.n, 'determinant')
        if self.method == ELIMINATION:
            det = self._by_elimination(matrix)
        else:
            det = self._by_cofactors(matrix)
        self.logger.debug(f"Determinant of {matrix.m}x{matrix.n} matrix by {self.method}: {det}")
        return det

    def _by_cofactors(self, matrix: Matrix) -> ExactNumber:
        if matrix.m == 1:
            return matrix.get(1, 1)
        det = ExactNumber.ZERO
        for col in range(1, matrix.n + 1):
            entry = matrix.get(1, col)
            if entry.is_zero():
                continue
            term = entry.multiply(self._by_cofactors(matrix.minor(1, col)))
            # sign (-1)^(1+col)
            det = det.add(term) if col % 2 == 1 else det.subtract(term)
        return det

    def _by_elimination(self, matrix: Matrix) -> ExactNumber:
        echelon, steps = RowReductionEngine(self.logger).forward_eliminate(matrix)
        det = ExactNumber.ONE
        for i in range(1, echelon.m + 1):
            det = det.multiply(echelon.get(i, i))
        swaps = sum(1 for step in steps if step.kind == SWAP)
        return det.negate() if swaps % 2 else det


def determinant(matrix: Matrix, method: str = COFACTOR) -> ExactNumber:
    """Determinant of ``matrix``; see :class:`DeterminantEngine`."""
    return DeterminantEngine(method).determinant(matrix)
