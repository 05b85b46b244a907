"""Linear indices of triangular regions of a matrix.

Indices are 0-based positions in the column-major (Fortran order)
flattening of an ``m x n`` grid, so entry ``(i, j)`` has linear index
``i + j*m``. They index ``vec(A)`` directly:

>>> A = np.arange(9.0).reshape(3, 3)
>>> A.ravel(order="F")[trilind(A)]
array([0., 3., 6., 4., 7., 8.])
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymvcalc.utils._validation import check_dim, resolve_dims


def _grid_args(m: Any, n: Any, k: int) -> tuple[int, int, int]:
    # trilind(M, k) passes the offset in the second positional slot
    if hasattr(m, "shape"):
        if n is not None:
            if k != 0:
                raise TypeError("diagonal offset given both positionally and as k")
            k = n
        rows, cols, _ = resolve_dims(m)
    else:
        rows, cols, _ = resolve_dims(m, n)
    return rows, cols, operator.index(k)


def trilind(m: Any, n: Any = None, k: int = 0) -> NDArray:
    """Linear indices of the lower triangular part of an ``m x n`` array.

    Parameters
    ----------
    m : int or ndarray
        Number of rows, or a matrix whose shape gives ``(m, n)``.
    n : int, optional
        Number of columns. Defaults to ``m``. When ``m`` is a matrix this
        slot is read as the diagonal offset ``k``, and passing ``k`` as
        well raises ``TypeError``.
    k : int
        Diagonal offset: positions with ``j - i <= k`` are selected.

    Returns
    -------
    idx : ndarray of int64
        Strictly increasing column-major linear indices.

    Examples
    --------
    >>> trilind(3)
    array([0, 1, 2, 4, 5, 8])
    """
    rows, cols, k = _grid_args(m, n, k)
    mask = np.tril(np.ones((rows, cols), dtype=bool), k)
    return np.flatnonzero(mask.ravel(order="F")).astype(np.int64)


def triuind(m: Any, n: Any = None, k: int = 0) -> NDArray:
    """Linear indices of the upper triangular part of an ``m x n`` array.

    Same conventions as :func:`trilind`; positions with ``j - i >= k``
    are selected.

    Examples
    --------
    >>> triuind(3)
    array([0, 3, 4, 6, 7, 8])
    """
    rows, cols, k = _grid_args(m, n, k)
    mask = np.triu(np.ones((rows, cols), dtype=bool), k)
    return np.flatnonzero(mask.ravel(order="F")).astype(np.int64)


def symmetric_index_map(n: int) -> NDArray:
    """Position of each entry of a symmetric ``n x n`` matrix within its vech.

    ``0..n(n+1)/2 - 1`` are placed into the lower triangle in column-major
    order, and the strictly-lower part is mirrored onto the strictly-upper
    part, so ``imatrix[i, j] == imatrix[j, i]``.

    Examples
    --------
    >>> symmetric_index_map(3)
    array([[0, 1, 2],
           [1, 3, 4],
           [2, 4, 5]])
    """
    n = check_dim(n, "n")
    flat = np.zeros(n * n, dtype=np.int64)
    flat[trilind(n, n)] = np.arange(n * (n + 1) // 2, dtype=np.int64)
    imatrix = flat.reshape((n, n), order="F")
    return imatrix + np.tril(imatrix, -1).T
