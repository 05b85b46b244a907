"""Input validation utilities."""

from __future__ import annotations

import operator
from typing import Any

from pymvcalc.backend._array_api import array_namespace
from pymvcalc.exceptions import DimensionError, ShapeMismatchError


def check_2d(A: Any, name: str = "A") -> None:
    """Raise ShapeMismatchError if A is not 2-dimensional."""
    if A.ndim != 2:
        raise ShapeMismatchError(
            f"{name} must be 2-dimensional, got shape {tuple(A.shape)}"
        )


def check_square(A: Any, name: str = "A") -> None:
    """Raise ShapeMismatchError if A is not square."""
    check_2d(A, name)
    if A.shape[0] != A.shape[1]:
        raise ShapeMismatchError(f"{name} must be square, got shape {tuple(A.shape)}")


def check_dim(d: Any, name: str = "n") -> int:
    """Return ``d`` as a Python int, raising DimensionError if it is negative.

    Non-integer values raise ``TypeError``.
    """
    d = operator.index(d)
    if d < 0:
        raise DimensionError(f"invalid array dimension {name}={d}")
    return d


def check_shape(A: Any, shape: tuple[int, ...], name: str = "g") -> None:
    """Raise ShapeMismatchError unless ``A.shape`` is exactly ``shape``."""
    if tuple(A.shape) != tuple(shape):
        raise ShapeMismatchError(
            f"{name} must have shape {tuple(shape)}, got {tuple(A.shape)}"
        )


def resolve_dims(m: Any, n: Any = None) -> tuple[int, int, Any]:
    """Resolve the ``(m[, n])``-or-matrix argument convention.

    Parameters
    ----------
    m : int or matrix
        Row count, or a matrix whose shape supplies ``(m, n)``.
    n : int, optional
        Column count. Defaults to ``m``. Must be omitted when ``m`` is
        a matrix.

    Returns
    -------
    m, n : int
        Validated, non-negative dimensions.
    dtype : numpy dtype or None
        Element type of the matrix argument, None for integer arguments.
    """
    if hasattr(m, "shape"):
        if n is not None:
            raise TypeError("n must be omitted when a matrix is given")
        if len(m.shape) != 2:
            raise ShapeMismatchError(
                f"expected a 2-dimensional matrix, got shape {tuple(m.shape)}"
            )
        dtype = array_namespace(m).to_numpy(m).dtype
        return int(m.shape[0]), int(m.shape[1]), dtype
    m = check_dim(m, "m")
    n = m if n is None else check_dim(n, "n")
    return m, n, None
