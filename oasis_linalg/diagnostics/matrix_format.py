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
Fixed-point text rendering of 3x3 matrices for diagnostics

Entries are printed row by row. Each entry is a sign column ('-' or a space),
the truncated integer part in a fixed-width field, a point, and a fixed number
of truncated fractional digits, followed by a space:

      1.000   0.000   0.000
      0.000   1.000   0.000
    - 0.500   0.000   1.000

The fraction is derived with integer arithmetic on float32 values instead of
float formatting so that the output matches the firmware's console format
digit for digit. This is not an interchange format and has no parser.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional
from typing import TextIO

import numpy as np

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.linalg_types.matrix3x3 import Matrix3x3
from oasis_linalg.math_utils.layout import DIM
from oasis_linalg.math_utils.layout import FLOAT_DTYPE
from oasis_linalg.math_utils.layout import HORIZONTAL_ORDER


_LOG: logging.Logger = logging.getLogger(__name__)


def format_matrix(A: Matrix3x3, params: Optional[LinalgParams] = None) -> str:
    """Render a matrix as three lines of fixed-point entries.

    Args:
        A: Matrix to render
        params: Optional parameters providing the entry format

    Returns:
        Text with a newline after every third entry
    """
    if not isinstance(A, Matrix3x3):
        raise ValueError("A must be a Matrix3x3")
    if params is None:
        params = LinalgParams.defaults()
    params.validate()

    int_width: int = params.format.int_width
    decimal_places: int = params.format.decimal_places

    lines: list[str] = []
    entries: list[str] = []
    for index in HORIZONTAL_ORDER:
        value: np.float32 = A.data[index]
        entries.append(_format_entry(value, int_width, decimal_places) + " ")
        if len(entries) == DIM:
            lines.append("".join(entries) + "\n")
            entries = []

    return "".join(lines)


def print_matrix(
    A: Matrix3x3,
    stream: Optional[TextIO] = None,
    params: Optional[LinalgParams] = None,
) -> None:
    """Write the rendered matrix to a text stream, stdout by default."""
    target: TextIO = stream if stream is not None else sys.stdout
    target.write(format_matrix(A, params))


def _format_entry(value: np.float32, int_width: int, decimal_places: int) -> str:
    entry_width: int = 1 + int_width + (1 + decimal_places if decimal_places else 0)
    if not np.isfinite(value):
        _LOG.debug("Formatting non-finite matrix entry %s", value)
        return f"{float(value)!s:>{entry_width}}"

    sign: str = "-" if value < 0 else " "
    integer: int = int(value)
    text: str = f"{sign}{abs(integer):{int_width}d}"
    if decimal_places == 0:
        return text

    fraction: np.float32 = value - FLOAT_DTYPE.type(integer)
    digits: int = abs(int(fraction * FLOAT_DTYPE.type(10**decimal_places)))
    return f"{text}.{digits:0{decimal_places}d}"
