################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Packed single-precision 3x3 matrix type stored as three column vectors."""

from __future__ import annotations

from typing import Any
from typing import Optional

import numpy as np

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.linalg_types.vector3 import X
from oasis_linalg.linalg_types.vector3 import Y
from oasis_linalg.linalg_types.vector3 import Z
from oasis_linalg.linalg_types.vector3 import Vector3
from oasis_linalg.math_utils.layout import DIM
from oasis_linalg.math_utils.layout import FLOAT_DTYPE
from oasis_linalg.math_utils.layout import MATRIX3X3_NBYTES
from oasis_linalg.math_utils.layout import MATRIX3X3_SIZE
from oasis_linalg.math_utils.layout import VECTOR3_SIZE
from oasis_linalg.math_utils.layout import flat_index


class Matrix3x3:
    """3x3 matrix made of three packed Vector3 columns ``v1, v2, v3``.

    Storage is nine contiguous float32 values in column-major order. The
    column accessors return views, so in-place vector operations applied to
    ``A.v1`` modify ``A``. Rows are not contiguous and are always returned as
    copies gathered from the three columns.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        v1: Optional[Vector3] = None,
        v2: Optional[Vector3] = None,
        v3: Optional[Vector3] = None,
    ) -> None:
        self._data: np.ndarray = np.zeros(MATRIX3X3_SIZE, dtype=FLOAT_DTYPE)
        for index, column in enumerate((v1, v2, v3)):
            if column is not None:
                self.column(index).assign(column)

    @classmethod
    def from_columns(cls, c1: Vector3, c2: Vector3, c3: Vector3) -> Matrix3x3:
        """Construct a matrix from its three columns."""
        return cls(c1, c2, c3)

    @classmethod
    def from_rows(cls, r1: Vector3, r2: Vector3, r3: Vector3) -> Matrix3x3:
        """Construct a matrix from its three rows."""
        matrix: Matrix3x3 = cls()
        for row, vector in enumerate((r1, r2, r3)):
            for col in range(DIM):
                matrix.set(row, col, vector[col])
        return matrix

    @classmethod
    def identity(cls) -> Matrix3x3:
        """Return a new identity matrix with columns X, Y and Z."""
        return cls(X, Y, Z)

    @classmethod
    def from_flat(cls, values: Any) -> Matrix3x3:
        """Construct a matrix by copying nine finite column-major values."""
        array: np.ndarray = np.asarray(values, dtype=np.float64)
        if array.shape != (MATRIX3X3_SIZE,):
            raise ValueError(f"values must have shape ({MATRIX3X3_SIZE},)")
        if not np.all(np.isfinite(array)):
            raise ValueError("values must contain finite values")
        return cls.from_buffer(array.astype(FLOAT_DTYPE))

    @classmethod
    def from_buffer(cls, data: np.ndarray) -> Matrix3x3:
        """Wrap an existing float32 array of shape (9,) without copying."""
        if not isinstance(data, np.ndarray):
            raise ValueError("data must be a numpy array")
        if data.dtype != FLOAT_DTYPE:
            raise ValueError(f"data must have dtype {FLOAT_DTYPE}")
        if data.shape != (MATRIX3X3_SIZE,):
            raise ValueError(f"data must have shape ({MATRIX3X3_SIZE},)")
        matrix: Matrix3x3 = cls.__new__(cls)
        matrix._data = data
        return matrix

    @classmethod
    def from_bytes(cls, raw: bytes) -> Matrix3x3:
        """Parse a packed little-endian float32 matrix."""
        if len(raw) != MATRIX3X3_NBYTES:
            raise ValueError(f"raw must be {MATRIX3X3_NBYTES} bytes")
        data: np.ndarray = np.frombuffer(raw, dtype=FLOAT_DTYPE).copy()
        return cls.from_buffer(data)

    @property
    def data(self) -> np.ndarray:
        """Underlying column-major float32 storage (not a copy)."""
        return self._data

    @property
    def v1(self) -> Vector3:
        return self.column(0)

    @v1.setter
    def v1(self, value: Vector3) -> None:
        self.column(0).assign(value)

    @property
    def v2(self) -> Vector3:
        return self.column(1)

    @v2.setter
    def v2(self, value: Vector3) -> None:
        self.column(1).assign(value)

    @property
    def v3(self) -> Vector3:
        return self.column(2)

    @v3.setter
    def v3(self, value: Vector3) -> None:
        self.column(2).assign(value)

    def column(self, col: int) -> Vector3:
        """Return a view of column ``col``."""
        start: int = flat_index(0, col)
        return Vector3.from_buffer(self._data[start : start + VECTOR3_SIZE])

    def row(self, row: int) -> Vector3:
        """Return a copy of row ``row``, one component from each column."""
        start: int = flat_index(row, 0)
        return Vector3.from_buffer(self._data[start::DIM].copy())

    def get(self, row: int, col: int) -> float:
        """Return element (row, col)."""
        return float(self._data[flat_index(row, col)])

    def set(self, row: int, col: int, value: float) -> None:
        """Set element (row, col)."""
        self._data[flat_index(row, col)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix3x3(v1={self.v1!r}, v2={self.v2!r}, v3={self.v3!r})"

    def allclose(
        self,
        other: Matrix3x3,
        atol: Optional[float] = None,
        params: Optional[LinalgParams] = None,
    ) -> bool:
        """Return True when all elements agree within an absolute tolerance.

        An explicit ``atol`` takes precedence over ``params.tolerance.atol``.
        """
        if not isinstance(other, Matrix3x3):
            raise ValueError("other must be a Matrix3x3")
        if atol is None:
            if params is None:
                params = LinalgParams.defaults()
            params.validate()
            atol = params.tolerance.atol
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    def is_finite(self) -> bool:
        """Return True when no element is NaN or infinite."""
        return bool(np.all(np.isfinite(self._data)))

    def as_flat(self) -> np.ndarray:
        """Return a float32 copy of the nine column-major values."""
        return self._data.copy()

    def as_grid(self) -> np.ndarray:
        """Return a float32 copy indexed as ``grid[row, col]``."""
        return self._data.reshape((DIM, DIM)).T.copy()

    def to_bytes(self) -> bytes:
        """Return the packed little-endian representation."""
        return self._data.tobytes()

    def copy(self) -> Matrix3x3:
        """Return an owning copy."""
        return Matrix3x3.from_buffer(self._data.copy())

    def assign(self, other: Matrix3x3) -> None:
        """Overwrite all nine elements with those of ``other``."""
        if not isinstance(other, Matrix3x3):
            raise ValueError("other must be a Matrix3x3")
        self._data[:] = other._data
