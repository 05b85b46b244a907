"""Exception hierarchy for pymvcalc."""

from __future__ import annotations


class MVCalcError(Exception):
    """Base exception for pymvcalc."""


class DimensionError(MVCalcError, ValueError):
    """Invalid matrix dimension (negative, or inconsistent with the operation)."""


class ShapeMismatchError(MVCalcError, ValueError):
    """Array or output buffer does not have the required shape."""
