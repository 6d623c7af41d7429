################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the 3D linear algebra primitives."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Absolute tolerance for approximate vector and matrix comparison
TOLERANCE_ATOL: float = 1e-6

# Width of the integer field in formatted matrix entries
FORMAT_INT_WIDTH: int = 2
# Number of fractional digits in formatted matrix entries
FORMAT_DECIMAL_PLACES: int = 3

# Largest supported number of fractional digits. float32 carries about seven
# significant digits.
FORMAT_DECIMAL_PLACES_MAX: int = 6


class LinalgParamsError(Exception):
    """Raised when linear algebra parameter validation fails."""


def _require_positive_int(value: int, name: str) -> None:
    """Require a positive integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LinalgParamsError(f"{name} must be an int")
    if value <= 0:
        raise LinalgParamsError(f"{name} must be positive")


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    if value < 0.0:
        raise LinalgParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class ToleranceParams:
    """Tolerances used for approximate comparison."""

    # Absolute tolerance for allclose checks
    atol: float = TOLERANCE_ATOL


@dataclass(frozen=True)
class FormatParams:
    """Fixed-point rendering of matrix entries for diagnostics."""

    # Width of the integer field
    int_width: int = FORMAT_INT_WIDTH
    # Number of fractional digits
    decimal_places: int = FORMAT_DECIMAL_PLACES


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree for the linear algebra primitives."""

    tolerance: ToleranceParams
    format: FormatParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(
            tolerance=ToleranceParams(),
            format=FormatParams(),
        )

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> LinalgParams:
        """Construct parameters from a nested mapping, filling in defaults."""
        if not isinstance(values, Mapping):
            raise LinalgParamsError("values must be a mapping")
        unknown: set[str] = set(values) - {"tolerance", "format"}
        if unknown:
            raise LinalgParamsError(f"Unknown parameter groups: {sorted(unknown)}")

        try:
            tolerance: ToleranceParams = ToleranceParams(
                **dict(values.get("tolerance", {}))
            )
            format_params: FormatParams = FormatParams(**dict(values.get("format", {})))
        except TypeError as exc:
            raise LinalgParamsError(str(exc)) from exc

        params: LinalgParams = cls(tolerance=tolerance, format=format_params)
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_non_negative(self.tolerance.atol, "tolerance.atol")

        _require_positive_int(self.format.int_width, "format.int_width")
        if isinstance(self.format.decimal_places, bool) or not isinstance(
            self.format.decimal_places, int
        ):
            raise LinalgParamsError("format.decimal_places must be an int")
        if not 0 <= self.format.decimal_places <= FORMAT_DECIMAL_PLACES_MAX:
            raise LinalgParamsError(
                "format.decimal_places must be in "
                f"[0, {FORMAT_DECIMAL_PLACES_MAX}]"
            )

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
