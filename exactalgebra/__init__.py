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
"""exactalgebra: exact rational linear algebra with replayable row-reduction traces"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .exceptions import *
from .exact_number import ExactNumber
from .vector import Vector
from .matrix import Matrix
from .row_operation import RowOperation, Replace, Swap, Scale, replay
from .row_reduction import RowReductionEngine, ReductionResult, reduce, rank, is_rref
from .determinant import DeterminantEngine, determinant
from .inverse import InverseEngine, InverseResult, inverse
from .serialization import (vector_to_strings, vector_from_strings, matrix_to_strings, matrix_from_strings,
                            steps_to_list, dumps, loads)
