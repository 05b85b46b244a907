"""Commutation matrices.

The commutation matrix ``K_{m,n}`` is the ``mn x mn`` permutation matrix
defined by ``K @ vec(A) == vec(A.T)`` for every ``m x n`` matrix ``A``,
where ``vec`` stacks columns (Fortran order).
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from pymvcalc.structmat._common import resolve_dtype
from pymvcalc.utils._validation import resolve_dims

logger = logging.getLogger(__name__)


def commutation(m: Any, n: int | None = None, *, dtype: Any = None) -> NDArray:
    """Create the dense ``mn x mn`` commutation matrix ``K``.

    Built as ``reshape(kron(vec(I_m), I_n), (mn, mn))`` in column-major
    order.

    Parameters
    ----------
    m : int or ndarray
        Number of rows of ``A``, or a matrix whose shape gives ``(m, n)``
        and whose element type is used when ``dtype`` is omitted.
    n : int, optional
        Number of columns of ``A``. Defaults to ``m``.
    dtype : dtype, optional
        Element type. Defaults to float64.

    Returns
    -------
    K : ndarray, shape (m*n, m*n)

    Raises
    ------
    DimensionError
        If ``m`` or ``n`` is negative.

    Examples
    --------
    >>> A = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    >>> commutation(2, 3) @ A.ravel(order="F")
    array([1., 2., 3., 4., 5., 6.])
    """
    m, n, matrix_dtype = resolve_dims(m, n)
    dtype = resolve_dtype(dtype, matrix_dtype)
    mn = m * n
    vec_im = np.eye(m, dtype=dtype).reshape((-1, 1), order="F")
    K = np.kron(vec_im, np.eye(n, dtype=dtype)).reshape((mn, mn), order="F")
    logger.debug("Built dense commutation matrix K(%d, %d), shape %s", m, n, K.shape)
    return K


def spcommutation(m: Any, n: int | None = None, *, dtype: Any = None) -> sp.csc_matrix:
    """Create the sparse ``mn x mn`` commutation matrix ``K``.

    Same arguments as :func:`commutation`. Only the ``mn`` unit entries
    are stored: entry ``(i, j)`` of ``A`` moves from position ``i + j*m``
    of ``vec(A)`` to position ``j + i*n`` of ``vec(A.T)``.

    Returns
    -------
    K : scipy.sparse.csc_matrix, shape (m*n, m*n)
    """
    m, n, matrix_dtype = resolve_dims(m, n)
    dtype = resolve_dtype(dtype, matrix_dtype)
    mn = m * n
    i = np.repeat(np.arange(m, dtype=np.int64), n)
    j = np.tile(np.arange(n, dtype=np.int64), m)
    K = sp.csc_matrix(
        (np.ones(mn, dtype=dtype), (j + i * n, i + j * m)),
        shape=(mn, mn),
    )
    logger.debug("Built sparse commutation matrix K(%d, %d), nnz=%d", m, n, K.nnz)
    return K
