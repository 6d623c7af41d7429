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
Vector arithmetic on packed single-precision 3D vectors

All arithmetic is carried out in float32. Operations that can hit an invalid
numeric input (zero length, inverse cosine outside [-1, 1]) do not raise or
warn: the NaN or infinity propagates to the caller, who is responsible for
the precondition.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from oasis_linalg.linalg_types.vector3 import Vector3
from oasis_linalg.math_utils.layout import FLOAT_DTYPE


def _validate_vector(value: Vector3, name: str) -> None:
    if not isinstance(value, Vector3):
        raise ValueError(f"{name} must be a Vector3")


def _resolve_out(out: Optional[Vector3]) -> Vector3:
    if out is None:
        return Vector3()
    _validate_vector(out, "out")
    return out


def dot(U: Vector3, V: Vector3) -> float:
    """Return the dot product of two vectors.

    Args:
        U: First vector
        V: Second vector

    Returns:
        Sum of the componentwise products
    """
    _validate_vector(U, "U")
    _validate_vector(V, "V")
    with np.errstate(over="ignore", invalid="ignore"):
        products: np.ndarray = U.data * V.data
        result: np.float32 = products[0] + products[1] + products[2]
    return float(result)


def vector_sum(U: Vector3, V: Vector3, out: Optional[Vector3] = None) -> Vector3:
    """Add two vectors componentwise.

    Args:
        U: First vector
        V: Second vector
        out: Optional target, may alias U or V

    Returns:
        The sum, written to ``out`` when given
    """
    _validate_vector(U, "U")
    _validate_vector(V, "V")
    target: Vector3 = _resolve_out(out)
    with np.errstate(over="ignore", invalid="ignore"):
        np.add(U.data, V.data, out=target.data)
    return target


def scale(U: Vector3, s: float, out: Optional[Vector3] = None) -> Vector3:
    """Multiply a vector by a scalar.

    Args:
        U: Vector to be multiplied
        s: Scalar factor
        out: Optional target, may alias U

    Returns:
        The scaled vector, written to ``out`` when given
    """
    _validate_vector(U, "U")
    target: Vector3 = _resolve_out(out)
    with np.errstate(over="ignore", invalid="ignore"):
        np.multiply(U.data, FLOAT_DTYPE.type(s), out=target.data)
    return target


def length(U: Vector3) -> float:
    """Return the Euclidean length of a vector."""
    return float(np.sqrt(FLOAT_DTYPE.type(dot(U, U))))


def normalize(U: Vector3) -> Vector3:
    """Scale a vector to unit length in place.

    The vector must have non-zero length. A zero vector silently becomes NaN
    in every component.

    Args:
        U: Vector to be normalized, modified in place

    Returns:
        U, for chaining
    """
    _validate_vector(U, "U")
    norm: np.float32 = FLOAT_DTYPE.type(length(U))
    with np.errstate(divide="ignore", invalid="ignore"):
        inverse: np.float32 = FLOAT_DTYPE.type(1.0) / norm
    return scale(U, float(inverse), out=U)


def enclosed_angle(U: Vector3, V: Vector3, clamp: bool = False) -> float:
    """Return the angle between two vectors in radians.

    Rounding can push the cosine ratio slightly outside [-1, 1], in which case
    the result is NaN unless ``clamp`` is set. Zero-length input always yields
    NaN.

    Args:
        U: First vector
        V: Second vector
        clamp: Clamp the cosine ratio into [-1, 1] before the inverse cosine

    Returns:
        Angle in [0, pi], or NaN for invalid input
    """
    numerator: np.float32 = FLOAT_DTYPE.type(dot(U, V))
    denominator: np.float32 = FLOAT_DTYPE.type(length(U)) * FLOAT_DTYPE.type(
        length(V)
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio: np.float32 = numerator / denominator
        if clamp and not np.isnan(ratio):
            ratio = np.clip(ratio, FLOAT_DTYPE.type(-1.0), FLOAT_DTYPE.type(1.0))
        return float(np.arccos(ratio))
