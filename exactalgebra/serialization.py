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
"""Fraction-string representation of vectors, matrices and traces

Matrices are written as a nested list of strings, one inner list per row,
each entry an exact fraction such as ``"3/4"`` or ``"-2"``. Vectors are a
flat list of such strings. ``dumps``/``loads`` wrap either form in a small
JSON document tagged with its type.
"""

import json
from typing import Dict, Iterable, List, Sequence, Union

from .matrix import Matrix
from .names import DATA, MATRIX, REPLACE, SCALE, SWAP, TYPE, VECTOR
from .row_operation import Replace, RowOperation, Scale, Swap
from .vector import Vector


def vector_to_strings(vector: Vector) -> List[str]:
    return [str(c) for c in vector]


def vector_from_strings(items: Sequence[str]) -> Vector:
    return Vector(items)


def matrix_to_strings(matrix: Matrix) -> List[List[str]]:
    return [vector_to_strings(row) for row in matrix.get_rows()]


def matrix_from_strings(rows: Sequence[Sequence[str]]) -> Matrix:
    """
    Rebuild a matrix from its nested fraction-string form.

    Raises:
        InvalidFractionError: If an entry is not an exact fraction
        DimensionMismatchError: If there are no rows or the rows differ in length
    """
    return Matrix.from_rows([vector_from_strings(row) for row in rows])


def steps_to_list(steps: Iterable[RowOperation]) -> List[Dict]:
    """
    Export a reduction trace as plain dictionaries.

    Every entry names the operation kind, its row indices and scalar, and
    holds the matrix snapshot in fraction-string form.
    """
    exported = []
    for step in steps:
        if isinstance(step, Replace):
            record = {TYPE: REPLACE, 'target_row': step.target_row, 'source_row': step.source_row,
                      'scalar': str(step.scalar)}
        elif isinstance(step, Swap):
            record = {TYPE: SWAP, 'row_a': step.row_a, 'row_b': step.row_b}
        elif isinstance(step, Scale):
            record = {TYPE: SCALE, 'row': step.row, 'scalar': str(step.scalar)}
        else:
            raise TypeError(f"Unknown row operation {step!r}")
        record[MATRIX] = matrix_to_strings(step.matrix)
        exported.append(record)
    return exported


def dumps(obj: Union[Matrix, Vector]) -> str:
    """Serialize a Matrix or Vector to a JSON string."""
    if isinstance(obj, Matrix):
        return json.dumps({TYPE: MATRIX, DATA: matrix_to_strings(obj)})
    if isinstance(obj, Vector):
        return json.dumps({TYPE: VECTOR, DATA: vector_to_strings(obj)})
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def loads(text: str) -> Union[Matrix, Vector]:
    """
    Inverse of :func:`dumps`.

    Raises:
        ValueError: If the document is not a tagged matrix or vector
    """
    doc = json.loads(text)
    if not isinstance(doc, dict) or DATA not in doc:
        raise ValueError("Expected a JSON object with 'type' and 'data' entries")
    if doc.get(TYPE) == MATRIX:
        return matrix_from_strings(doc[DATA])
    if doc.get(TYPE) == VECTOR:
        return vector_from_strings(doc[DATA])
    raise ValueError(f"Unknown serialized type {doc.get(TYPE)!r}")
