"""In-place numeric helpers used inside optimization loops."""

from pymvcalc.update._diagonal import bump_diagonal, clamp_diagonal
from pymvcalc.update._kronaxpy import kronaxpy

__all__ = ["kronaxpy", "bump_diagonal", "clamp_diagonal"]
