################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Packed single-precision 3D vector type and the standard basis."""

from __future__ import annotations

from typing import Any
from typing import Iterator
from typing import Optional

import numpy as np

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.math_utils.layout import FLOAT_DTYPE
from oasis_linalg.math_utils.layout import VECTOR3_NBYTES
from oasis_linalg.math_utils.layout import VECTOR3_SIZE


class Vector3:
    """Three contiguous float32 components ``x, y, z``.

    A vector either owns its storage or is a view onto three consecutive
    floats of a larger buffer, such as one column of a Matrix3x3. Writes to a
    view land in the underlying buffer.

    The zero vector is a valid value but is degenerate input for
    normalization and angle computations.

    The constructor does not check its components: NaN and infinity are
    stored as given and propagate through later arithmetic. Use from_array
    to reject non-finite input.
    """

    __slots__ = ("_data",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._data: np.ndarray = np.array([x, y, z], dtype=FLOAT_DTYPE)

    @classmethod
    def from_array(cls, values: Any) -> Vector3:
        """Construct a vector by copying three finite values."""
        array: np.ndarray = _as_finite_array(values, "values")
        return cls(float(array[0]), float(array[1]), float(array[2]))

    @classmethod
    def from_buffer(cls, data: np.ndarray) -> Vector3:
        """Wrap an existing float32 array of shape (3,) without copying."""
        if not isinstance(data, np.ndarray):
            raise ValueError("data must be a numpy array")
        if data.dtype != FLOAT_DTYPE:
            raise ValueError(f"data must have dtype {FLOAT_DTYPE}")
        if data.shape != (VECTOR3_SIZE,):
            raise ValueError(f"data must have shape ({VECTOR3_SIZE},)")
        vector: Vector3 = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def from_bytes(cls, raw: bytes) -> Vector3:
        """Parse a packed little-endian float32 vector."""
        if len(raw) != VECTOR3_NBYTES:
            raise ValueError(f"raw must be {VECTOR3_NBYTES} bytes")
        data: np.ndarray = np.frombuffer(raw, dtype=FLOAT_DTYPE).copy()
        return cls.from_buffer(data)

    @property
    def data(self) -> np.ndarray:
        """Underlying float32 storage (not a copy)."""
        return self._data

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = value

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return VECTOR3_SIZE

    def __iter__(self) -> Iterator[float]:
        for value in self._data:
            yield float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector3(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def allclose(
        self,
        other: Vector3,
        atol: Optional[float] = None,
        params: Optional[LinalgParams] = None,
    ) -> bool:
        """Return True when all components agree within an absolute tolerance.

        An explicit ``atol`` takes precedence over ``params.tolerance.atol``.
        """
        if not isinstance(other, Vector3):
            raise ValueError("other must be a Vector3")
        if atol is None:
            atol = _tolerance(params)
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    def is_finite(self) -> bool:
        """Return True when no component is NaN or infinite."""
        return bool(np.all(np.isfinite(self._data)))

    def as_array(self) -> np.ndarray:
        """Return a float32 copy of the components."""
        return self._data.copy()

    def to_bytes(self) -> bytes:
        """Return the packed little-endian representation."""
        return self._data.tobytes()

    def copy(self) -> Vector3:
        """Return an owning copy, detached from any matrix buffer."""
        return Vector3.from_buffer(self._data.copy())

    def assign(self, other: Vector3) -> None:
        """Overwrite this vector's components with those of ``other``."""
        if not isinstance(other, Vector3):
            raise ValueError("other must be a Vector3")
        self._data[:] = other._data


def _tolerance(params: Optional[LinalgParams]) -> float:
    if params is None:
        params = LinalgParams.defaults()
    params.validate()
    return params.tolerance.atol


def _as_finite_array(value: Any, name: str) -> np.ndarray:
    """Coerce a value to a finite float64 array of shape (3,)."""
    array: np.ndarray = np.asarray(value, dtype=np.float64)
    if array.shape != (VECTOR3_SIZE,):
        raise ValueError(f"{name} must have shape ({VECTOR3_SIZE},)")
    if not np.all(np.isfinite(array)):
        raise ValueError(f"{name} must contain finite values")
    return array


def _basis(x: float, y: float, z: float) -> Vector3:
    data: np.ndarray = np.array([x, y, z], dtype=FLOAT_DTYPE)
    data.flags.writeable = False
    return Vector3.from_buffer(data)


# Standard basis, read-only
X: Vector3 = _basis(1.0, 0.0, 0.0)
Y: Vector3 = _basis(0.0, 1.0, 0.0)
Z: Vector3 = _basis(0.0, 0.0, 1.0)
