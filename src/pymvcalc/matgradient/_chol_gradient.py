"""Gradient propagation through a Cholesky parameterization ``M = L Lᵀ``.

With ``dM = d f / d vec(M)``, the derivative with respect to every entry
of ``L`` is

    G = (Lᵀ ⊗ I_n) · (dM + K_n · dM),

where the commutation term accounts for ``L`` entering ``L Lᵀ`` on both
sides. ``G`` is then reduced to ``n(n+1)/2`` values indexed like
``vech(L)``:

* by ``D_nᵀ``, the transposed duplication matrix (default), giving
  ``g = D_nᵀ · (Lᵀ ⊗ I_n) · (dM + K_n · dM)``. The upper triangle of ``G``
  is folded into the strictly-lower slots, which is the exact derivative
  when the factor is the symmetric matrix ``unvech(θ)``.
* by the elimination matrix ``L_n`` (``triangular=True``), which keeps only
  the entries of ``G`` on and below the diagonal. This is the exact
  derivative with respect to the free entries of a lower triangular factor.
"""

from __future__ import annotations

import logging
from typing import Any

import scipy.sparse as sp

from pymvcalc.backend._array_api import array_namespace
from pymvcalc.exceptions import ShapeMismatchError
from pymvcalc.structmat._commutation import spcommutation
from pymvcalc.structmat._duplication import spduplication, spelimination
from pymvcalc.utils._validation import check_shape, check_square

logger = logging.getLogger(__name__)


def chol_gradient_inplace(
    g: Any, dM: Any, L: Any, *, triangular: bool = False, xp=None
) -> Any:
    """Compute the gradient with respect to ``vech(L)`` for ``M = L Lᵀ`` into ``g``.

    Parameters
    ----------
    g : ndarray, shape (n*(n+1)//2,) or (n*(n+1)//2, k)
        Output buffer, overwritten. Must match the column count of ``dM``.
    dM : ndarray, shape (n*n,) or (n*n, k)
        Derivatives with respect to ``vec(M)``, one column per objective.
    L : ndarray, shape (n, n)
        Cholesky factor.
    triangular : bool
        Reduce with the elimination matrix instead of the transposed
        duplication matrix.
    xp : backend, optional

    Returns
    -------
    g : ndarray
        The buffer passed in.
    """
    if xp is None:
        xp = array_namespace(g, dM, L)
    L_np = xp.to_numpy(L)
    check_square(L_np, "L")
    n = L_np.shape[0]
    dM_np = xp.to_numpy(dM)
    if dM_np.ndim not in (1, 2) or dM_np.shape[0] != n * n:
        raise ShapeMismatchError(
            f"dM must have {n * n} rows for L ({n}, {n}), got shape {dM_np.shape}"
        )
    check_shape(g, (n * (n + 1) // 2,) + dM_np.shape[1:], "g")

    sym = dM_np + spcommutation(n) @ dM_np
    full = sp.kron(sp.csr_matrix(L_np.T), sp.identity(n, format="csr"), format="csr") @ sym
    reducer = spelimination(n) if triangular else spduplication(n).T
    logger.debug("chol_gradient: n=%d, triangular=%s", n, triangular)
    return xp.assign(g, reducer @ full)


def chol_gradient(dM: Any, L: Any, *, triangular: bool = False, xp=None) -> Any:
    """Compute the gradient with respect to ``vech(L)`` for ``M = L Lᵀ``.

    Allocates a zero buffer and delegates to :func:`chol_gradient_inplace`.
    """
    if xp is None:
        xp = array_namespace(dM, L)
    dM = xp.array(dM)
    L = xp.array(L)
    n = L.shape[0]
    g = xp.zeros((n * (n + 1) // 2,) + tuple(dM.shape[1:]), dtype=xp.float_dtype(dM))
    return chol_gradient_inplace(g, dM, L, triangular=triangular, xp=xp)
