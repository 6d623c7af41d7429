################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the linear algebra parameter schema."""

from __future__ import annotations

from typing import Any

import pytest

from oasis_linalg.config.linalg_params import FORMAT_DECIMAL_PLACES
from oasis_linalg.config.linalg_params import FORMAT_INT_WIDTH
from oasis_linalg.config.linalg_params import TOLERANCE_ATOL
from oasis_linalg.config.linalg_params import FormatParams
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError
from oasis_linalg.config.linalg_params import ToleranceParams


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: LinalgParams = LinalgParams.defaults()
    params.validate()

    assert params.tolerance.atol == TOLERANCE_ATOL
    assert params.format.int_width == FORMAT_INT_WIDTH
    assert params.format.decimal_places == FORMAT_DECIMAL_PLACES


def test_as_nested_dict() -> None:
    """Nested dict output should mirror the dataclass tree."""
    nested: dict[str, Any] = LinalgParams.defaults().as_nested_dict()

    assert nested == {
        "tolerance": {"atol": TOLERANCE_ATOL},
        "format": {"int_width": 2, "decimal_places": 3},
    }


def test_from_dict_round_trip() -> None:
    """from_dict should accept the output of as_nested_dict."""
    params: LinalgParams = LinalgParams.defaults().replace(
        tolerance=ToleranceParams(atol=1e-3),
        format=FormatParams(int_width=4, decimal_places=2),
    )

    assert LinalgParams.from_dict(params.as_nested_dict()) == params


def test_from_dict_fills_defaults() -> None:
    """Missing groups and fields should take their defaults."""
    params: LinalgParams = LinalgParams.from_dict({"format": {"decimal_places": 5}})

    assert params.format.decimal_places == 5
    assert params.format.int_width == FORMAT_INT_WIDTH
    assert params.tolerance == ToleranceParams()


def test_from_dict_rejects_unknown_keys() -> None:
    """Unknown groups and fields should raise."""
    with pytest.raises(LinalgParamsError):
        LinalgParams.from_dict({"solver": {}})
    with pytest.raises(LinalgParamsError):
        LinalgParams.from_dict({"format": {"width": 3}})


@pytest.mark.parametrize(
    "format_params",
    [
        FormatParams(int_width=0),
        FormatParams(int_width=-1),
        FormatParams(decimal_places=-1),
        FormatParams(decimal_places=7),
        FormatParams(decimal_places=True),
    ],
)
def test_invalid_format_rejected(format_params: FormatParams) -> None:
    """Invalid format parameters should raise."""
    params: LinalgParams = LinalgParams.defaults().replace(format=format_params)
    with pytest.raises(LinalgParamsError):
        params.validate()


def test_negative_tolerance_rejected() -> None:
    """Negative tolerances should raise."""
    params: LinalgParams = LinalgParams.defaults().replace(
        tolerance=ToleranceParams(atol=-1.0)
    )
    with pytest.raises(LinalgParamsError):
        params.validate()
