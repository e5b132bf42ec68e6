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
"""Static strings used in the exactalgebra package

    Row operations

        REPLACE = 'replace'

        SWAP = 'swap'

        SCALE = 'scale'

    Determinant methods

        COFACTOR = 'cofactor'

        ELIMINATION = 'elimination'

    Serialization

        MATRIX = 'matrix'

        VECTOR = 'vector'

        TYPE = 'type'

        DATA = 'data'

"""

REPLACE = 'replace'
SWAP = 'swap'
SCALE = 'scale'
ROW_OPERATIONS = (REPLACE, SWAP, SCALE)

COFACTOR = 'cofactor'
ELIMINATION = 'elimination'
DETERMINANT_METHODS = (COFACTOR, ELIMINATION)

MATRIX = 'matrix'
VECTOR = 'vector'
TYPE = 'type'
DATA = 'data'
