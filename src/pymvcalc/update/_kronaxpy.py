"""Blockwise Kronecker accumulation ``Y += A ⊗ X``."""

from __future__ import annotations

from typing import Any

from pymvcalc.backend._array_api import array_namespace
from pymvcalc.exceptions import ShapeMismatchError


def _as_grid(a: Any) -> tuple[int, int]:
    # vectors act as single columns
    if a.ndim == 1:
        return a.shape[0], 1
    if a.ndim == 2:
        return a.shape[0], a.shape[1]
    raise ShapeMismatchError(f"expected a vector or matrix, got shape {tuple(a.shape)}")


def kronaxpy(A: Any, X: Any, Y: Any, *, xp=None) -> Any:
    """Overwrite ``Y`` with ``A ⊗ X + Y``.

    Same as ``Y += kron(A, X)`` without forming the Kronecker product:
    for every ``(i, j)`` of ``A`` (column-major order), ``A[i, j] * X`` is
    added into the ``(i, j)`` block of ``Y``. Every element of ``Y`` is
    updated by exactly one block, so the result is identical to the
    explicit product.

    Parameters
    ----------
    A : ndarray, shape (m, n) or (m,)
    X : ndarray, shape (p, q) or (p,)
    Y : ndarray, shape (m*p, n*q)
        Updated in place. May be 1-D of length ``m*p`` when both ``A`` and
        ``X`` are vectors.
    xp : backend, optional

    Returns
    -------
    Y : ndarray
        The array passed in.

    Examples
    --------
    >>> Y = np.zeros((2, 2))
    >>> kronaxpy(np.eye(2), np.array([[3.0]]), Y)
    array([[3., 0.],
           [0., 3.]])
    """
    if xp is None:
        xp = array_namespace(A, X, Y)
    A = xp.array(A)
    X = xp.array(X)
    m, n = _as_grid(A)
    p, q = _as_grid(X)

    if Y.ndim == 1 and A.ndim == 1 and X.ndim == 1:
        if tuple(Y.shape) != (m * p,):
            raise ShapeMismatchError(f"Y must have shape ({m * p},), got {tuple(Y.shape)}")
        for i in range(m):
            Y[i * p:(i + 1) * p] += A[i] * X
        return Y

    if tuple(Y.shape) != (m * p, n * q):
        raise ShapeMismatchError(
            f"Y must have shape ({m * p}, {n * q}), got {tuple(Y.shape)}"
        )
    A2 = xp.reshape(A, (m, n))
    X2 = xp.reshape(X, (p, q))
    for j in range(n):
        for i in range(m):
            Y[i * p:(i + 1) * p, j * q:(j + 1) * q] += A2[i, j] * X2
    return Y
