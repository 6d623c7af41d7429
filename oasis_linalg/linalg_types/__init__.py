################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Value types for packed 3D vectors and 3x3 matrices."""

from __future__ import annotations

from oasis_linalg.linalg_types.matrix3x3 import Matrix3x3
from oasis_linalg.linalg_types.vector3 import X
from oasis_linalg.linalg_types.vector3 import Y
from oasis_linalg.linalg_types.vector3 import Z
from oasis_linalg.linalg_types.vector3 import Vector3


__all__ = [
    "Matrix3x3",
    "Vector3",
    "X",
    "Y",
    "Z",
]
