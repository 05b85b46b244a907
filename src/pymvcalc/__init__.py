"""Matrix-calculus primitives for variance-component models.

Vectorization (``vec``, ``vech``), commutation / duplication / elimination
matrices, gradient propagation through Kronecker products and Cholesky
factors, and in-place diagonal helpers.
"""

import logging

from pymvcalc.backend import array_namespace, get_backend, set_backend
from pymvcalc.exceptions import DimensionError, MVCalcError, ShapeMismatchError
from pymvcalc.matgradient import (
    chol_gradient,
    chol_gradient_inplace,
    kron_gradient,
    kron_gradient_inplace,
)
from pymvcalc.structmat import (
    commutation,
    duplication,
    elimination,
    spcommutation,
    spduplication,
    spelimination,
)
from pymvcalc.update import bump_diagonal, clamp_diagonal, kronaxpy
from pymvcalc.vecup import trilind, triuind, unvec, unvech, vec, vech

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "get_backend",
    "set_backend",
    "array_namespace",
    "MVCalcError",
    "DimensionError",
    "ShapeMismatchError",
    "trilind",
    "triuind",
    "vec",
    "unvec",
    "vech",
    "unvech",
    "commutation",
    "spcommutation",
    "duplication",
    "spduplication",
    "elimination",
    "spelimination",
    "kron_gradient",
    "kron_gradient_inplace",
    "chol_gradient",
    "chol_gradient_inplace",
    "kronaxpy",
    "bump_diagonal",
    "clamp_diagonal",
]
