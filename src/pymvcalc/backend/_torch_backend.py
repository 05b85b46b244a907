"""PyTorch backend implementation (optional dependency)."""

from __future__ import annotations

from typing import Any

import numpy as np


def _import_torch():
    """Lazy import of torch."""
    try:
        import torch
        return torch
    except ImportError as e:
        raise ImportError(
            "PyTorch is required for the torch backend. "
            "Install it with: pip install pymvcalc[torch]"
        ) from e


class TorchBackend:
    """Backend wrapping PyTorch for array operations with GPU support."""

    name = "torch"

    def __init__(self, device: str = "cpu", dtype: Any = None):
        self._torch = _import_torch()
        self.device = device
        self.float64 = self._torch.float64
        self.float32 = self._torch.float32
        self.int64 = self._torch.int64
        self._default_dtype = dtype or self._torch.float64

    # --- Array creation ---
    def array(self, data, dtype=None):
        if isinstance(data, self._torch.Tensor):
            if dtype is None:
                return data
            return data.to(dtype=dtype)
        dtype = dtype or self._default_dtype
        return self._torch.tensor(data, dtype=dtype, device=self.device)

    def zeros(self, shape, dtype=None):
        dtype = dtype or self._default_dtype
        return self._torch.zeros(shape, dtype=dtype, device=self.device)

    # --- Array manipulation ---
    def reshape(self, a, shape):
        return a.reshape(shape)

    def transpose(self, a):
        if a.dim() < 2:
            return a
        return a.T

    def take(self, a, indices):
        """Gather ``a[indices]`` from a 1-D tensor."""
        idx = self._torch.as_tensor(
            np.asarray(indices, dtype=np.int64), device=a.device
        )
        return a[idx]

    def copy(self, a):
        return a.clone()

    def assign(self, dst, src):
        """Overwrite the contents of ``dst`` with ``src`` in place."""
        src = self._torch.as_tensor(src, dtype=dst.dtype, device=dst.device)
        with self._torch.no_grad():
            dst.copy_(src)
        return dst

    # --- Type checking ---
    def float_dtype(self, a):
        """Floating element type for results derived from ``a``."""
        if a.is_floating_point():
            return a.dtype
        return self._default_dtype

    def to_numpy(self, x):
        if isinstance(x, self._torch.Tensor):
            return x.detach().cpu().numpy()
        return np.asarray(x)
