"""Duplication and elimination matrices.

For an ``n x n`` matrix ``A``:

* the duplication matrix ``D_n`` (``n^2 x n(n+1)/2``) satisfies
  ``D_n @ vech(A) == vec(A)`` whenever ``A`` is symmetric;
* the elimination matrix ``L_n`` (``n(n+1)/2 x n^2``) satisfies
  ``L_n @ vec(A) == vech(A)`` for any ``A``.

Both have exactly one unit entry per row, so the sparse forms are built
directly from index arrays and the dense forms are their realizations.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from pymvcalc.structmat._common import resolve_dtype
from pymvcalc.utils._validation import resolve_dims
from pymvcalc.vecup._triangular import symmetric_index_map, trilind

logger = logging.getLogger(__name__)


def _order(n: Any) -> tuple[int, np.dtype | None]:
    # a matrix argument supplies n through its row count
    rows, _, matrix_dtype = resolve_dims(n)
    return rows, matrix_dtype


def spduplication(n: Any, *, dtype: Any = None) -> sp.csc_matrix:
    """Create the sparse ``n^2 x n(n+1)/2`` duplication matrix.

    Row ``r`` (a position in ``vec(A)``) has its single 1 in column
    ``imatrix.ravel(order="F")[r]``, where ``imatrix`` is
    :func:`~pymvcalc.vecup.symmetric_index_map`.

    Parameters
    ----------
    n : int or ndarray
        Matrix order, or a matrix whose row count and element type are used.
    dtype : dtype, optional
        Element type. Defaults to float64.

    Returns
    -------
    D : scipy.sparse.csc_matrix, shape (n*n, n*(n+1)//2)

    Raises
    ------
    DimensionError
        If ``n`` is negative.
    """
    n, matrix_dtype = _order(n)
    dtype = resolve_dtype(dtype, matrix_dtype)
    nsq, nvech = n * n, n * (n + 1) // 2
    cols = symmetric_index_map(n).ravel(order="F")
    D = sp.csc_matrix(
        (np.ones(nsq, dtype=dtype), (np.arange(nsq, dtype=np.int64), cols)),
        shape=(nsq, nvech),
    )
    logger.debug("Built sparse duplication matrix D(%d), shape %s", n, D.shape)
    return D


def duplication(n: Any, *, dtype: Any = None) -> NDArray:
    """Create the dense ``n^2 x n(n+1)/2`` duplication matrix.

    Dense realization of :func:`spduplication`.

    Examples
    --------
    >>> duplication(2)
    array([[1., 0., 0.],
           [0., 1., 0.],
           [0., 1., 0.],
           [0., 0., 1.]])
    """
    return spduplication(n, dtype=dtype).toarray()


def spelimination(n: Any, *, dtype: Any = None) -> sp.csc_matrix:
    """Create the sparse ``n(n+1)/2 x n^2`` elimination matrix.

    Row ``r`` has its single 1 in column ``trilind(n)[r]``, so that
    ``L @ vec(A)`` picks out ``vech(A)``.
    """
    n, matrix_dtype = _order(n)
    dtype = resolve_dtype(dtype, matrix_dtype)
    nsq, nvech = n * n, n * (n + 1) // 2
    L = sp.csc_matrix(
        (np.ones(nvech, dtype=dtype), (np.arange(nvech, dtype=np.int64), trilind(n, n))),
        shape=(nvech, nsq),
    )
    logger.debug("Built sparse elimination matrix L(%d), shape %s", n, L.shape)
    return L


def elimination(n: Any, *, dtype: Any = None) -> NDArray:
    """Create the dense ``n(n+1)/2 x n^2`` elimination matrix."""
    return spelimination(n, dtype=dtype).toarray()
