"""Gradient propagation through a Kronecker product.

For ``M = X ⊗ Y`` with ``X`` of shape ``(n, q)`` and ``Y`` of shape
``(p, r)``,

    vec(M) = (I_q ⊗ K_{r,n} ⊗ I_p) (vec(X) ⊗ vec(Y)),

so a derivative ``dM = d f / d vec(M)`` is pulled back to ``vec(X)`` by

    g = (I_{nq} ⊗ vec(Y)ᵀ) · (I_q ⊗ K_{n,r} ⊗ I_p) · dM.

Both factors are assembled as sparse Kronecker-structured operators, so
no dense ``npqr x npqr`` intermediate is formed.
"""

from __future__ import annotations

import logging
from typing import Any

import scipy.sparse as sp
from numpy.typing import NDArray

from pymvcalc.backend._array_api import array_namespace
from pymvcalc.exceptions import ShapeMismatchError
from pymvcalc.structmat._commutation import spcommutation
from pymvcalc.utils._validation import check_2d, check_dim, check_shape

logger = logging.getLogger(__name__)


def _kron_operators(Y: NDArray, n: int, q: int) -> tuple[sp.csr_matrix, sp.csr_matrix]:
    p, r = Y.shape
    vec_y = sp.csr_matrix(Y.ravel(order="F").reshape(1, -1))
    left = sp.kron(sp.identity(n * q, format="csr"), vec_y, format="csr")
    middle = sp.kron(
        sp.kron(sp.identity(q, format="csr"), spcommutation(n, r)),
        sp.identity(p, format="csr"),
        format="csr",
    )
    return left, middle


def kron_gradient_inplace(g: Any, dM: Any, Y: Any, n: int, q: int, *, xp=None) -> Any:
    """Compute ``d f / d vec(X)`` for ``M = X ⊗ Y`` into ``g``.

    Parameters
    ----------
    g : ndarray, shape (n*q,) or (n*q, k)
        Output buffer, overwritten. Must match the column count of ``dM``.
    dM : ndarray, shape (n*p*q*r,) or (n*p*q*r, k)
        Derivatives with respect to ``vec(M)``, one column per objective.
    Y : ndarray, shape (p, r)
        Right Kronecker factor.
    n, q : int
        Shape of the left Kronecker factor ``X``.
    xp : backend, optional

    Returns
    -------
    g : ndarray
        The buffer passed in.

    Raises
    ------
    ShapeMismatchError
        If ``dM`` or ``g`` is inconsistent with ``(n, q)`` and ``Y.shape``.
    """
    if xp is None:
        xp = array_namespace(g, dM, Y)
    n = check_dim(n, "n")
    q = check_dim(q, "q")
    Y_np = xp.to_numpy(Y)
    check_2d(Y_np, "Y")
    p, r = Y_np.shape
    dM_np = xp.to_numpy(dM)
    if dM_np.ndim not in (1, 2) or dM_np.shape[0] != n * p * q * r:
        raise ShapeMismatchError(
            f"dM must have {n * p * q * r} rows for X ({n}, {q}) and Y ({p}, {r}), "
            f"got shape {dM_np.shape}"
        )
    check_shape(g, (n * q,) + dM_np.shape[1:], "g")

    left, middle = _kron_operators(Y_np, n, q)
    logger.debug(
        "kron_gradient: X (%d, %d), Y (%d, %d), %d objective(s)",
        n, q, p, r, 1 if dM_np.ndim == 1 else dM_np.shape[1],
    )
    return xp.assign(g, left @ (middle @ dM_np))


def kron_gradient(dM: Any, Y: Any, n: int, q: int, *, xp=None) -> Any:
    """Compute ``d f / d vec(X)`` for ``M = X ⊗ Y``.

    Allocates a zero buffer of shape ``(n*q,)`` or ``(n*q, k)`` and
    delegates to :func:`kron_gradient_inplace`.

    Examples
    --------
    >>> Y = np.array([[1.0, 2.0]])
    >>> kron_gradient(np.ones(4), Y, 2, 1)
    array([3., 3.])
    """
    if xp is None:
        xp = array_namespace(dM, Y)
    dM = xp.array(dM)
    shape = (check_dim(n, "n") * check_dim(q, "q"),) + tuple(dM.shape[1:])
    g = xp.zeros(shape, dtype=xp.float_dtype(dM))
    return kron_gradient_inplace(g, dM, Y, n, q, xp=xp)
