"""In-place adjustments of a matrix diagonal."""

from __future__ import annotations

from typing import Any

from pymvcalc.utils._validation import check_2d


def bump_diagonal(A: Any, eps: float) -> Any:
    """Add ``eps`` to the diagonal entries of matrix ``A`` in place.

    Used to regularize a matrix before factorization. Returns ``A``.
    """
    check_2d(A, "A")
    for i in range(min(A.shape)):
        A[i, i] += eps
    return A


def clamp_diagonal(A: Any, lo: float, hi: float) -> Any:
    """Clamp the diagonal entries of matrix ``A`` to ``[lo, hi]`` in place.

    The bounds are not checked against each other: with ``lo > hi`` every
    diagonal entry becomes ``hi``. Returns ``A``.
    """
    check_2d(A, "A")
    for i in range(min(A.shape)):
        A[i, i] = min(max(A[i, i], lo), hi)
    return A
