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
"""Trace records of elementary row operations

Each record describes one operation and carries a snapshot of the matrix
directly after the operation was applied, so a step-by-step view can be
produced without re-running the reduction. ``apply`` re-executes the
operation on any matrix with enough rows.
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import TYPE_CHECKING, ClassVar, Iterable

from .exact_number import ExactNumber
from .names import REPLACE, SCALE, SWAP

if TYPE_CHECKING:
    from .matrix import Matrix


class RowOperation:
    """Common base of the Replace, Swap and Scale records."""

    kind: ClassVar[str] = ''
    matrix: 'Matrix'

    def apply(self, matrix: 'Matrix') -> 'Matrix':
        raise NotImplementedError


@dataclass(frozen=True)
class Replace(RowOperation):
    """``R_target <- R_target + scalar * R_source``"""

    target_row: int
    source_row: int
    scalar: ExactNumber
    matrix: 'Matrix' = field(repr=False)
    kind: ClassVar[str] = REPLACE

    def apply(self, matrix: 'Matrix') -> 'Matrix':
        return matrix.replace_row(self.target_row, self.source_row, self.scalar)

    def __str__(self) -> str:
        return f"R{self.target_row} <- R{self.target_row} + R{self.source_row} * {self.scalar}"


@dataclass(frozen=True)
class Swap(RowOperation):
    """``R_a <-> R_b``"""

    row_a: int
    row_b: int
    matrix: 'Matrix' = field(repr=False)
    kind: ClassVar[str] = SWAP

    def apply(self, matrix: 'Matrix') -> 'Matrix':
        return matrix.swap_rows(self.row_a, self.row_b)

    def __str__(self) -> str:
        return f"R{self.row_a} <-> R{self.row_b}"


@dataclass(frozen=True)
class Scale(RowOperation):
    """``R_row <- R_row * scalar``"""

    row: int
    scalar: ExactNumber
    matrix: 'Matrix' = field(repr=False)
    kind: ClassVar[str] = SCALE

    def apply(self, matrix: 'Matrix') -> 'Matrix':
        return matrix.scale_row(self.row, self.scalar)

    def __str__(self) -> str:
        return f"R{self.row} <- R{self.row} * {self.scalar}"


def replay(matrix: 'Matrix', steps: Iterable[RowOperation]) -> 'Matrix':
    """
    Apply a recorded sequence of row operations to ``matrix``.

    Replaying the trace of a reduction on its input reproduces the reduced
    matrix, and every intermediate result equals the recorded snapshot.

    Args:
        matrix: Starting matrix
        steps: Row operations in application order

    Returns:
        The matrix after the last operation
    """
    return reduce(lambda current, step: step.apply(current), steps, matrix)
