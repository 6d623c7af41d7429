################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
3x3 matrix arithmetic on packed column-major matrices

The stored vectors of a matrix are its columns. Rows are not contiguous, so
every row used in a product is gathered from one component of each column
before it is dotted with the other operand.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from oasis_linalg.linalg_types.matrix3x3 import Matrix3x3
from oasis_linalg.linalg_types.vector3 import Vector3
from oasis_linalg.math_utils.layout import DIM
from oasis_linalg.math_utils.layout import FLOAT_DTYPE
from oasis_linalg.math_utils.layout import flat_index
from oasis_linalg.math_utils.vector_ops import dot


# Off-diagonal (row, col) positions above the diagonal, swapped by transpose
_UPPER_TRIANGLE: tuple[tuple[int, int], ...] = ((0, 1), (0, 2), (1, 2))


def _validate_matrix(value: Matrix3x3, name: str) -> None:
    if not isinstance(value, Matrix3x3):
        raise ValueError(f"{name} must be a Matrix3x3")


def multiply_matrix_matrix(
    A: Matrix3x3, B: Matrix3x3, out: Optional[Matrix3x3] = None
) -> Matrix3x3:
    """Multiply two 3x3 matrices.

    Element (i, j) of the result is the dot product of row i of A with
    column j of B.

    Args:
        A: Left matrix
        B: Right matrix
        out: Optional target, may alias A or B

    Returns:
        The product, written to ``out`` when given
    """
    _validate_matrix(A, "A")
    _validate_matrix(B, "B")
    if out is not None:
        _validate_matrix(out, "out")

    # Gather everything before writing so that out may alias an operand
    rows: list[Vector3] = [A.row(i) for i in range(DIM)]
    columns: list[Vector3] = [B.column(j).copy() for j in range(DIM)]

    target: Matrix3x3 = out if out is not None else Matrix3x3()
    for i in range(DIM):
        for j in range(DIM):
            target.set(i, j, dot(rows[i], columns[j]))
    return target


def multiply_matrix_vector(
    A: Matrix3x3, V: Vector3, out: Optional[Vector3] = None
) -> Vector3:
    """Multiply a 3x3 matrix with a vector.

    Component i of the result is the dot product of V with row i of A. All
    rows and V are gathered before anything is written, so ``out`` may alias
    V or a column of A.

    Args:
        A: Matrix
        V: Vector
        out: Optional target, may alias V or a column view of A

    Returns:
        The product, written to ``out`` when given
    """
    _validate_matrix(A, "A")
    if not isinstance(V, Vector3):
        raise ValueError("V must be a Vector3")
    if out is not None and not isinstance(out, Vector3):
        raise ValueError("out must be a Vector3")

    # Gather everything before writing so that out may alias an operand
    vector: Vector3 = V.copy()
    rows: list[Vector3] = [A.row(i) for i in range(DIM)]

    target: Vector3 = out if out is not None else Vector3()
    for i in range(DIM):
        target[i] = dot(vector, rows[i])
    return target


def transpose(A: Matrix3x3) -> Matrix3x3:
    """Transpose a matrix in place.

    Each element above the diagonal is swapped with its mirror below; the
    diagonal stays put.

    Args:
        A: Matrix to be transposed, modified in place

    Returns:
        A, for chaining
    """
    _validate_matrix(A, "A")
    data: np.ndarray = A.data
    for row, col in _UPPER_TRIANGLE:
        upper: int = flat_index(row, col)
        lower: int = flat_index(col, row)
        data[upper], data[lower] = data[lower], data[upper]
    return A


def det(A: Matrix3x3) -> float:
    """Return the determinant of a matrix using Sarrus' rule.

    The three forward diagonals start at each element of the first row and
    step down-right, wrapping around the grid; the backward diagonals step
    down-left.
    """
    _validate_matrix(A, "A")
    total: np.float32 = FLOAT_DTYPE.type(0.0)
    with np.errstate(over="ignore", invalid="ignore"):
        for start in range(DIM):
            total += _diagonal_product(A, start, 1)
        for start in range(DIM):
            total -= _diagonal_product(A, start, -1)
    return float(total)


def _diagonal_product(A: Matrix3x3, start_col: int, step: int) -> np.float32:
    product: np.float32 = FLOAT_DTYPE.type(1.0)
    for row in range(DIM):
        col: int = (start_col + step * row) % DIM
        product *= A.data[flat_index(row, col)]
    return product
