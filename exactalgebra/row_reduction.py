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
"""Reduction to reduced row-echelon form with an operation trace

The reduction runs in two passes. The forward pass walks the rows from top
to bottom, picks for each row the first column right of the previous pivot
that is not zero in the remaining rows, swaps a non-zero entry into place if
necessary and clears every entry below the pivot. The backward pass walks
the rows from bottom to top, scales each pivot to one and clears every entry
above it. Pivot choice only depends on which entries are zero, so the same
input always yields the same trace.
"""

import logging
from typing import List, NamedTuple, Optional

from .matrix import Matrix
from .row_operation import RowOperation


class ReductionResult(NamedTuple):
    """Reduced matrix together with every row operation applied, in order."""
    matrix: Matrix
    steps: List[RowOperation]


def _first_nonzero_column(matrix: Matrix, start_row: int, start_col: int) -> Optional[int]:
    """First column >= start_col with a non-zero entry in rows start_row..m"""
    for col in range(start_col, matrix.n + 1):
        for row in range(start_row, matrix.m + 1):
            if not matrix.get(row, col).is_zero():
                return col
    return None


def _leading_column(matrix: Matrix, row: int) -> Optional[int]:
    return next((j for j, c in enumerate(matrix.get_row(row), 1) if not c.is_zero()), None)


class RowReductionEngine:
    """
    Drives matrices to reduced row-echelon form.

    The engine is stateless apart from its logger; ``reduce`` works on its own
    copies and never changes the matrix passed in.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def reduce(self, matrix: Matrix) -> ReductionResult:
        """
        Compute the reduced row-echelon form of ``matrix``.

        Args:
            matrix: Input matrix of any shape

        Returns:
            ReductionResult with the RREF and the list of applied operations.
            An all-zero matrix or a matrix already in RREF yields no steps.
        """
        forward = self.forward_eliminate(matrix)
        steps = forward.steps
        current = self._backward_eliminate(forward.matrix, steps)
        self.logger.debug(f"Reduced {matrix.m}x{matrix.n} matrix in {len(steps)} steps.")
        return ReductionResult(current, steps)

    def forward_eliminate(self, matrix: Matrix) -> ReductionResult:
        """
        Bring ``matrix`` to (unnormalised) row-echelon form.

        Only swaps and replacements are used, so the determinant of a square
        input changes sign once per swap and is otherwise preserved.
        """
        steps: List[RowOperation] = []
        current = matrix
        col = 1
        for row in range(1, current.m + 1):
            pivot_col = _first_nonzero_column(current, row, col)
            if pivot_col is None:
                # remaining rows are zero in the remaining columns
                break
            if current.get(row, pivot_col).is_zero():
                for below in range(row + 1, current.m + 1):
                    if not current.get(below, pivot_col).is_zero():
                        current = current.swap_rows(row, below, steps)
                        self.logger.debug(f"  {steps[-1]}")
                        break
            pivot = current.get(row, pivot_col)
            self.logger.debug(f"Pivot {pivot} at ({row}, {pivot_col}).")
            for below in range(row + 1, current.m + 1):
                value = current.get(below, pivot_col)
                if not value.is_zero():
                    current = current.replace_row(below, row, value.divide(pivot).negate(), steps)
                    self.logger.debug(f"  {steps[-1]}")
            col = pivot_col + 1
            if col > current.n:
                break
        return ReductionResult(current, steps)

    def _backward_eliminate(self, matrix: Matrix, steps: List[RowOperation]) -> Matrix:
        current = matrix
        for row in range(current.m, 0, -1):
            pivot_col = _leading_column(current, row)
            if pivot_col is None:
                continue
            pivot = current.get(row, pivot_col)
            if not pivot.is_one():
                current = current.scale_row(row, pivot.invert(), steps)
                self.logger.debug(f"  {steps[-1]}")
            for above in range(1, row):
                value = current.get(above, pivot_col)
                if not value.is_zero():
                    current = current.replace_row(above, row, value.negate(), steps)
                    self.logger.debug(f"  {steps[-1]}")
        return current

    def rank(self, matrix: Matrix) -> int:
        """Number of non-zero rows in the row-echelon form."""
        echelon = self.forward_eliminate(matrix).matrix
        return sum(1 for row in echelon.get_rows() if not row.is_zero())

    @staticmethod
    def is_rref(matrix: Matrix) -> bool:
        """
        Check whether ``matrix`` is in reduced row-echelon form.

        Every non-zero row must lead with a one strictly right of the leading
        entry of the row above, that column must be zero elsewhere, and zero
        rows must come last.
        """
        last_pivot = 0
        seen_zero_row = False
        for i, row in enumerate(matrix.get_rows(), 1):
            lead = _leading_column(matrix, i)
            if lead is None:
                seen_zero_row = True
                continue
            if seen_zero_row or lead <= last_pivot or not row.get(lead).is_one():
                return False
            if any(not matrix.get(k, lead).is_zero() for k in range(1, matrix.m + 1) if k != i):
                return False
            last_pivot = lead
        return True


_default_engine = RowReductionEngine()


def reduce(matrix: Matrix) -> ReductionResult:
    """Reduce ``matrix`` to RREF with the shared default engine."""
    return _default_engine.reduce(matrix)


def rank(matrix: Matrix) -> int:
    return _default_engine.rank(matrix)


def is_rref(matrix: Matrix) -> bool:
    return RowReductionEngine.is_rref(matrix)
