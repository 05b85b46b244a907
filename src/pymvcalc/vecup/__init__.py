"""Index sets and vectorization of matrices."""

from pymvcalc.vecup._triangular import symmetric_index_map, trilind, triuind
from pymvcalc.vecup._vec_ops import unvec, unvech, vec, vech

__all__ = [
    "trilind",
    "triuind",
    "symmetric_index_map",
    "vec",
    "unvec",
    "vech",
    "unvech",
]
