################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Gram-Schmidt orthonormalization of a 3x3 column basis."""

from __future__ import annotations

import logging

from oasis_linalg.linalg_types.matrix3x3 import Matrix3x3
from oasis_linalg.linalg_types.vector3 import Vector3
from oasis_linalg.math_utils.vector_ops import dot
from oasis_linalg.math_utils.vector_ops import normalize
from oasis_linalg.math_utils.vector_ops import scale
from oasis_linalg.math_utils.vector_ops import vector_sum


_LOG: logging.Logger = logging.getLogger(__name__)


def orthonormalize(A: Matrix3x3) -> Matrix3x3:
    """Make the columns of a matrix orthonormal in place.

    Classical Gram-Schmidt: column 1 is normalized, column 2 loses its
    projection on column 1 and is normalized, column 3 loses its projections
    on columns 1 and 2 (both taken from the original column 3) and is
    normalized.

    The columns must be linearly independent. The caller is responsible for
    this; dependent or zero columns leave NaN or infinite values in A.

    Args:
        A: Matrix whose columns form the input basis, modified in place

    Returns:
        A, for chaining
    """
    if not isinstance(A, Matrix3x3):
        raise ValueError("A must be a Matrix3x3")

    v1: Vector3 = A.v1
    v2: Vector3 = A.v2
    v3: Vector3 = A.v3

    # Step 1
    normalize(v1)

    # Step 2
    projection: Vector3 = scale(v1, -dot(v1, v2))
    vector_sum(v2, projection, out=v2)
    normalize(v2)

    # Step 3
    projection_2: Vector3 = scale(v2, -dot(v2, v3))
    projection_1: Vector3 = scale(v1, -dot(v1, v3))
    vector_sum(v3, projection_1, out=v3)
    vector_sum(v3, projection_2, out=v3)
    normalize(v3)

    if not A.is_finite():
        _LOG.debug("Orthonormalization produced non-finite values, %r", A)

    return A
