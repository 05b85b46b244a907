"""Utility functions."""

from pymvcalc.utils._validation import (
    check_2d,
    check_dim,
    check_shape,
    check_square,
    resolve_dims,
)

__all__ = [
    "check_2d",
    "check_square",
    "check_dim",
    "check_shape",
    "resolve_dims",
]
