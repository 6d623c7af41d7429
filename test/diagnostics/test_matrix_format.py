################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for diagnostic matrix rendering."""

from __future__ import annotations

import io

import pytest

from oasis_linalg.config.linalg_params import FormatParams
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError
from oasis_linalg.diagnostics.matrix_format import format_matrix
from oasis_linalg.diagnostics.matrix_format import print_matrix
from oasis_linalg.linalg_types.matrix3x3 import Matrix3x3
from oasis_linalg.linalg_types.vector3 import Vector3


IDENTITY_TEXT: str = (
    "  1.000   0.000   0.000 \n"
    "  0.000   1.000   0.000 \n"
    "  0.000   0.000   1.000 \n"
)


def _mixed_matrix() -> Matrix3x3:
    return Matrix3x3.from_rows(
        Vector3(1.5, -2.25, 0.125),
        Vector3(10.0, -0.5, 3.75),
        Vector3(12.0, 0.0, -7.0),
    )


def test_identity() -> None:
    """Checks the rendering of the identity."""
    assert format_matrix(Matrix3x3.identity()) == IDENTITY_TEXT


def test_rows_follow_grid_not_storage() -> None:
    """Checks that each line shows a row gathered across the columns."""
    mat: Matrix3x3 = Matrix3x3.from_flat(range(1, 10))

    assert format_matrix(mat) == (
        "  1.000   4.000   7.000 \n"
        "  2.000   5.000   8.000 \n"
        "  3.000   6.000   9.000 \n"
    )


def test_signs_and_fractions() -> None:
    """Checks sign column, integer field and truncated fraction."""
    assert format_matrix(_mixed_matrix()) == (
        "  1.500 - 2.250   0.125 \n"
        " 10.000 - 0.500   3.750 \n"
        " 12.000   0.000 - 7.000 \n"
    )


def test_negative_zero_has_no_sign() -> None:
    """Checks that negative zero renders like zero."""
    mat: Matrix3x3 = Matrix3x3.identity()
    mat.set(0, 1, -0.0)

    assert format_matrix(mat) == IDENTITY_TEXT


def test_fraction_is_truncated() -> None:
    """Checks that fractional digits are truncated rather than rounded."""
    mat: Matrix3x3 = Matrix3x3()
    mat.set(0, 0, 0.9999)

    assert format_matrix(mat).startswith("  0.999 ")


def test_non_finite_entries_keep_alignment() -> None:
    """Checks that NaN and infinities render in the entry width."""
    mat: Matrix3x3 = Matrix3x3.identity()
    mat.set(0, 0, float("nan"))
    mat.set(2, 2, float("-inf"))

    assert format_matrix(mat) == (
        "    nan   0.000   0.000 \n"
        "  0.000   1.000   0.000 \n"
        "  0.000   0.000    -inf \n"
    )


def test_custom_format_params() -> None:
    """Checks that entry width and precision follow the parameters."""
    params: LinalgParams = LinalgParams.defaults().replace(
        format=FormatParams(int_width=3, decimal_places=1)
    )

    assert format_matrix(_mixed_matrix(), params).splitlines()[1] == (
        "  10.0 -  0.5    3.7 "
    )


def test_zero_decimal_places() -> None:
    """Checks rendering without a fractional part."""
    params: LinalgParams = LinalgParams.defaults().replace(
        format=FormatParams(decimal_places=0)
    )

    assert format_matrix(Matrix3x3.identity(), params) == (
        "  1   0   0 \n  0   1   0 \n  0   0   1 \n"
    )


def test_invalid_params_rejected() -> None:
    """Checks that invalid parameters are rejected before rendering."""
    params: LinalgParams = LinalgParams.defaults().replace(
        format=FormatParams(int_width=0)
    )
    with pytest.raises(LinalgParamsError):
        format_matrix(Matrix3x3.identity(), params)


def test_print_to_stream() -> None:
    """Checks writing to an explicit stream."""
    stream: io.StringIO = io.StringIO()
    print_matrix(Matrix3x3.identity(), stream)

    assert stream.getvalue() == IDENTITY_TEXT


def test_print_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Checks writing to standard output by default."""
    print_matrix(Matrix3x3.identity())

    assert capsys.readouterr().out == IDENTITY_TEXT
