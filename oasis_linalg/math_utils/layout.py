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
Memory layout of packed 3D vectors and 3x3 matrices

Vectors are three contiguous single-precision floats ``x, y, z``. A matrix is
three contiguous vectors ``v1, v2, v3`` interpreted as its columns, giving nine
floats in column-major order. Element (row, col) is stored at flat index
``3 * col + row``:

    | 0 3 6 |
    | 1 4 7 |
    | 2 5 8 |

Walking the grid row by row ("horizontally") therefore visits the flat indices
0, 3, 6, 1, 4, 7, 2, 5, 8. Buffers exchanged with firmware use this layout
bit-for-bit, little-endian.
"""

from __future__ import annotations

import numpy as np


# Scalar type of every stored component
FLOAT_DTYPE: np.dtype = np.dtype("<f4")

# Number of floats in a packed vector
VECTOR3_SIZE: int = 3

# Number of floats in a packed 3x3 matrix
MATRIX3X3_SIZE: int = 9

# Grid dimension
DIM: int = 3

# Size in bytes of a packed vector
VECTOR3_NBYTES: int = VECTOR3_SIZE * FLOAT_DTYPE.itemsize

# Size in bytes of a packed matrix
MATRIX3X3_NBYTES: int = MATRIX3X3_SIZE * FLOAT_DTYPE.itemsize


def _validate_grid_index(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an int")
    if value < 0 or value >= DIM:
        raise ValueError(f"{name} must be in [0, {DIM - 1}]")


def flat_index(row: int, col: int) -> int:
    """Return the flat storage index of a grid element.

    Args:
        row: Row index in [0, 2]
        col: Column index in [0, 2]

    Returns:
        Index into the nine packed floats

    Raises:
        ValueError: If row or col is out of range
    """
    _validate_grid_index(row, "row")
    _validate_grid_index(col, "col")
    return DIM * int(col) + int(row)


def grid_position(index: int) -> tuple[int, int]:
    """Return the (row, col) grid position of a flat storage index.

    Args:
        index: Index into the nine packed floats

    Returns:
        Tuple of row and column indices

    Raises:
        ValueError: If index is out of range
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValueError("index must be an int")
    if index < 0 or index >= MATRIX3X3_SIZE:
        raise ValueError(f"index must be in [0, {MATRIX3X3_SIZE - 1}]")
    col: int
    row: int
    col, row = divmod(int(index), DIM)
    return row, col


def next_horizontal(index: int) -> int:
    """Return the flat index that follows ``index`` in a row-by-row walk.

    The last element (flat index 8) wraps back to the first.
    """
    row: int
    col: int
    row, col = grid_position(index)
    if col < DIM - 1:
        return flat_index(row, col + 1)
    return flat_index((row + 1) % DIM, 0)


def _horizontal_order() -> tuple[int, ...]:
    order: list[int] = [0]
    while len(order) < MATRIX3X3_SIZE:
        order.append(next_horizontal(order[-1]))
    return tuple(order)


# Flat indices in row-major (display) order
HORIZONTAL_ORDER: tuple[int, ...] = _horizontal_order()
