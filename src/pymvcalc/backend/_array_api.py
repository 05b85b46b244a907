"""Backend abstraction: select NumPy or PyTorch array operations.

The default backend is resolved in this order (first match wins):
    1. Programmatic override via :func:`set_backend`.
    2. The ``PYMVCALC_BACKEND`` environment variable.
    3. ``"numpy"``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Literal

import numpy as np

BackendName = Literal["numpy", "torch"]

ENV_VAR = "PYMVCALC_BACKEND"

_VALID_BACKENDS = ("numpy", "torch")

logger = logging.getLogger(__name__)

# None means "no programmatic override has been set".
_backend_override: BackendName | None = None

# Cached backend instances
_backends: dict[str, Any] = {}


def _check_name(name: str) -> str:
    name = name.strip().lower()
    if name not in _VALID_BACKENDS:
        raise ValueError(f"Unknown backend: {name!r}. Use 'numpy' or 'torch'.")
    return name


def default_backend_name() -> str:
    """Return the name of the backend used when none is requested."""
    if _backend_override is not None:
        return _backend_override
    env = os.environ.get(ENV_VAR)
    if env:
        return _check_name(env)
    return "numpy"


def get_backend(name: BackendName | None = None) -> Any:
    """Return a backend namespace providing array operations.

    Parameters
    ----------
    name : {"numpy", "torch"} or None
        Backend name. If None, returns the current default backend.

    Returns
    -------
    backend : NumpyBackend or TorchBackend
        Object exposing array creation/manipulation functions.
    """
    if name is None:
        name = default_backend_name()
    name = _check_name(name)

    if name not in _backends:
        if name == "numpy":
            from pymvcalc.backend._numpy_backend import NumpyBackend
            _backends[name] = NumpyBackend()
        else:
            from pymvcalc.backend._torch_backend import TorchBackend
            _backends[name] = TorchBackend()
        logger.debug("Initialized %s backend", name)

    return _backends[name]


def set_backend(name: BackendName | None) -> None:
    """Set the default backend globally.

    Parameters
    ----------
    name : {"numpy", "torch"} or None
        Backend to use by default when ``xp`` is not provided. ``None``
        clears the override so the environment variable applies again.
    """
    global _backend_override
    if name is None:
        _backend_override = None
        return
    _backend_override = _check_name(name)


def array_namespace(*arrays: Any) -> Any:
    """Infer the backend from the input arrays.

    If any array is a PyTorch tensor, returns the torch backend.
    Otherwise returns the numpy backend for NumPy inputs, and the
    default backend when nothing can be inferred.

    Parameters
    ----------
    *arrays : array-like
        Input arrays to inspect.

    Returns
    -------
    backend : NumpyBackend or TorchBackend
    """
    for arr in arrays:
        if arr is None:
            continue
        cls_name = type(arr).__module__
        if cls_name.startswith("torch"):
            return get_backend("torch")
        if isinstance(arr, np.ndarray):
            return get_backend("numpy")

    return get_backend()
