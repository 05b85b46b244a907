"""Shared test fixtures for pymvcalc."""

from __future__ import annotations

import numpy as np
import pytest

from pymvcalc.backend import get_backend, set_backend


@pytest.fixture(autouse=True)
def _reset_backend(monkeypatch):
    """Keep backend configuration from leaking between tests."""
    monkeypatch.delenv("PYMVCALC_BACKEND", raising=False)
    set_backend(None)
    yield
    set_backend(None)


@pytest.fixture
def xp_numpy():
    """NumPy backend fixture."""
    return get_backend("numpy")


@pytest.fixture
def xp_torch():
    """PyTorch backend fixture (skips if torch not installed)."""
    pytest.importorskip("torch")
    return get_backend("torch")


@pytest.fixture
def rng():
    return np.random.default_rng(20241019)


@pytest.fixture
def sym_3x3():
    """3x3 symmetric test matrix."""
    return np.array([[1.0, 2.0, 3.0],
                     [2.0, 4.0, 5.0],
                     [3.0, 5.0, 6.0]])


@pytest.fixture
def pd_3x3():
    """3x3 positive-definite symmetric matrix."""
    return np.array([[4.0, 2.0, 1.0],
                     [2.0, 5.0, 3.0],
                     [1.0, 3.0, 6.0]])


@pytest.fixture
def chol_3x3(pd_3x3):
    """Lower Cholesky factor of ``pd_3x3``."""
    return np.linalg.cholesky(pd_3x3)


def numerical_gradient(f, x, eps=1e-7):
    """Compute numerical gradient via central finite differences.

    Parameters
    ----------
    f : callable
        Scalar-valued function f(x).
    x : ndarray
        Point at which to evaluate the gradient.
    eps : float
        Perturbation size.

    Returns
    -------
    grad : ndarray
        Numerical gradient, same shape as x.
    """
    x = np.asarray(x, dtype=np.float64)
    grad = np.zeros_like(x)
    x_flat = x.ravel()
    for i in range(len(x_flat)):
        x_plus = x_flat.copy()
        x_minus = x_flat.copy()
        x_plus[i] += eps
        x_minus[i] -= eps
        grad.ravel()[i] = (f(x_plus.reshape(x.shape)) - f(x_minus.reshape(x.shape))) / (2 * eps)
    return grad


@pytest.fixture
def numgrad():
    """Central finite-difference gradient of a scalar function."""
    return numerical_gradient
