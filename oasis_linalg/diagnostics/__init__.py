################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Diagnostics helpers for the linear algebra primitives."""

from oasis_linalg.diagnostics.matrix_format import format_matrix
from oasis_linalg.diagnostics.matrix_format import print_matrix


__all__ = ["format_matrix", "print_matrix"]
