"""Gradient propagation through Kronecker and Cholesky parameterizations."""

from pymvcalc.matgradient._chol_gradient import chol_gradient, chol_gradient_inplace
from pymvcalc.matgradient._kron_gradient import kron_gradient, kron_gradient_inplace

__all__ = [
    "kron_gradient",
    "kron_gradient_inplace",
    "chol_gradient",
    "chol_gradient_inplace",
]
