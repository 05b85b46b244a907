"""Column-major vectorization of matrices.

``vec`` stacks the columns of a matrix; ``vech`` stacks only the
on-and-below-diagonal part of each column. Both follow the column-major
convention used by the commutation and duplication matrices, so that
``duplication(n) @ vech(A) == vec(A)`` for symmetric ``A``.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymvcalc.backend._array_api import array_namespace
from pymvcalc.exceptions import DimensionError, ShapeMismatchError
from pymvcalc.utils._validation import check_dim
from pymvcalc.vecup._triangular import symmetric_index_map, trilind


def vec(a: Any, *, xp=None) -> NDArray:
    """Stack the columns of a matrix into a vector.

    Parameters
    ----------
    a : ndarray, shape (m, n)
        Matrix. Scalars and 1-D inputs are copied unchanged.
    xp : backend, optional

    Returns
    -------
    v : ndarray, shape (m*n,)

    Examples
    --------
    >>> vec(np.array([[1.0, 2.0], [3.0, 4.0]]))
    array([1., 3., 2., 4.])
    """
    if xp is None:
        xp = array_namespace(a)
    a = xp.array(a)
    if a.ndim < 2:
        return xp.reshape(xp.copy(a), (-1,))
    return xp.copy(xp.reshape(xp.transpose(a), (-1,)))


def unvec(v: Any, m: int, n: int | None = None, *, xp=None) -> NDArray:
    """Reshape a column-major vector back into an ``m x n`` matrix.

    Inverse of :func:`vec`. ``n`` defaults to ``len(v) // m``.
    """
    if xp is None:
        xp = array_namespace(v)
    v = xp.array(v)
    if v.ndim != 1:
        raise ShapeMismatchError(f"v must be 1-dimensional, got shape {tuple(v.shape)}")
    m = check_dim(m, "m")
    length = v.shape[0]
    if n is None:
        n = length // m if m > 0 else 0
    n = check_dim(n, "n")
    if m * n != length:
        raise ShapeMismatchError(f"cannot reshape vector of length {length} into ({m}, {n})")
    return xp.copy(xp.transpose(xp.reshape(v, (n, m))))


def vech(a: Any, *, xp=None) -> NDArray:
    """Vectorize the lower triangular part of a matrix, column by column.

    For each column ``j`` the entries from row ``j`` down to the last row
    are taken, so an ``m x n`` matrix (``n <= m``) yields
    ``(2m - n + 1) * n / 2`` values.

    Parameters
    ----------
    a : scalar or ndarray, shape (m,) or (m, n)
        Scalars and 1-D inputs are returned as a copy.
    xp : backend, optional

    Returns
    -------
    w : ndarray, shape ((2m - n + 1) * n // 2,)

    Raises
    ------
    DimensionError
        If ``a`` has more columns than rows.

    Examples
    --------
    >>> vech(np.array([[1.0, 2.0, 3.0], [2.0, 4.0, 5.0], [3.0, 5.0, 6.0]]))
    array([1., 2., 3., 4., 5., 6.])
    """
    if xp is None:
        xp = array_namespace(a)
    a = xp.array(a)
    if a.ndim < 2:
        return xp.reshape(xp.copy(a), (-1,))
    m, n = a.shape
    if n > m:
        raise DimensionError(f"vech requires at least as many rows as columns, got shape ({m}, {n})")
    return xp.take(vec(a, xp=xp), trilind(m, n))


def unvech(v: Any, *, xp=None) -> NDArray:
    """Rebuild the symmetric matrix whose :func:`vech` is ``v``.

    Equivalent to ``unvec(duplication(n) @ v, n)``.

    Examples
    --------
    >>> unvech(np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0]))
    array([[1., 2., 3.],
           [2., 4., 5.],
           [3., 5., 6.]])
    """
    if xp is None:
        xp = array_namespace(v)
    v = xp.array(v)
    if v.ndim != 1:
        raise ShapeMismatchError(f"v must be 1-dimensional, got shape {tuple(v.shape)}")
    K = v.shape[0]
    # Solve n*(n+1)/2 = K for n
    n = int(round((-1.0 + np.sqrt(1.0 + 8.0 * K)) / 2.0))
    if n * (n + 1) // 2 != K:
        raise ShapeMismatchError(f"input length {K} is not a triangular number")
    full = xp.take(v, symmetric_index_map(n).ravel(order="F"))
    return unvec(full, n, n, xp=xp)
