"""NumPy backend implementation."""

from __future__ import annotations

import numpy as np


class NumpyBackend:
    """Backend wrapping NumPy for array operations."""

    name = "numpy"
    float64 = np.float64
    float32 = np.float32
    int64 = np.int64

    # --- Array creation ---
    @staticmethod
    def array(data, dtype=None):
        return np.asarray(data, dtype=dtype)

    @staticmethod
    def zeros(shape, dtype=np.float64):
        return np.zeros(shape, dtype=dtype)

    # --- Array manipulation ---
    @staticmethod
    def reshape(a, shape):
        return np.reshape(a, shape)

    @staticmethod
    def transpose(a):
        return a.T

    @staticmethod
    def take(a, indices):
        """Gather ``a[indices]`` from a 1-D array."""
        return np.take(a, np.asarray(indices, dtype=np.int64))

    @staticmethod
    def copy(a):
        return np.copy(a)

    @staticmethod
    def assign(dst, src):
        """Overwrite the contents of ``dst`` with ``src`` in place."""
        dst[...] = src
        return dst

    # --- Type checking ---
    @staticmethod
    def float_dtype(a):
        """Floating element type for results derived from ``a``."""
        if np.issubdtype(a.dtype, np.floating):
            return a.dtype
        return np.float64

    @staticmethod
    def to_numpy(x):
        return np.asarray(x)
