"""Shared helpers for structural matrix construction."""

from __future__ import annotations

from typing import Any

import numpy as np


def resolve_dtype(dtype: Any, matrix_dtype: Any) -> np.dtype:
    """Pick the element type: explicit ``dtype``, else the matrix's, else float64."""
    if dtype is not None:
        return np.dtype(dtype)
    if matrix_dtype is not None:
        return np.dtype(matrix_dtype)
    return np.dtype(np.float64)
